from ..models.gc_string_enum import GcStringEnum


class ApiErrorType(GcStringEnum):
    UNKNOWN = "unknown"
    AUTHENTICATION_FAILED = "authentication_failed"
    GOCARDLESS = "gocardless"
    INVALID_API_USAGE = "invalid_api_usage"
    INVALID_STATE = "invalid_state"
    VALIDATION_FAILED = "validation_failed"
    INSUFFICIENT_PERMISSIONS = "insufficient_permissions"
    RATE_LIMIT_REACHED = "rate_limit_reached"
