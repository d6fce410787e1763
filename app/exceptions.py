from typing import Any, Mapping, Optional


class ServiceValidationError(Exception):
    """Raised when input data is invalid or a precondition for a service call is not met.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers (400)
    """

    http_status = 400
    default_code = "SERVICE_VALIDATION_ERROR"

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class InvalidCanteenIdentifierError(ServiceValidationError):
    """Raised when a canteen identifier is empty or malformed.

    Always raised before the upstream source is contacted.
    """

    default_code = "INVALID_CANTEEN_ID"

    def __init__(self, canteen_id: Any, reason: str = "must be non-empty text"):
        super().__init__(
            f"Invalid canteen identifier: {reason}",
            details={"canteen_id": canteen_id},
        )
        self.canteen_id = canteen_id


class UpstreamUnavailableError(Exception):
    """Raised when the upstream menu source cannot be reached or times out.

    Attributes are similar to ServiceValidationError. http_status is 503.
    """

    http_status = 503
    default_code = "UPSTREAM_UNAVAILABLE"

    def __init__(self, message: str = "Upstream menu source unavailable", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class MalformedUpstreamDataError(UpstreamUnavailableError):
    """Raised when an upstream payload does not have the expected shape.

    Callers see the same response as for UpstreamUnavailableError; the
    distinct code is for logs.
    """

    default_code = "MALFORMED_UPSTREAM_DATA"

    def __init__(self, message: str = "Malformed upstream menu data", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details=details, code=code)
