"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and that the
application settings load in testing mode.
"""

import os
import sys
from pathlib import Path

os.environ.setdefault("ENVIRONMENT", "testing")

# Add project root to sys.path so we can import adapters, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
