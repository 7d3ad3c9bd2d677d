"""Contains shared errors types that can be raised from API functions"""

import logging
from typing import TYPE_CHECKING, Optional

import httpx

if TYPE_CHECKING:
    from .models.api_error_response import ApiErrorResponse
    from .models.api_error_response_error_errors_item import ApiErrorResponseErrorErrorsItem
    from .models.api_error_type import ApiErrorType

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong with this request. Please check the response content."


class GoCardlessError(Exception):
    """Base class for every error this package raises on purpose"""


class UnexpectedStatus(GoCardlessError):
    """Raised by api functions when the response status is an undocumented status and Client.raise_on_unexpected_status is True"""

    def __init__(self, status_code: int, content: bytes):
        self.status_code = status_code
        self.content = content

        super().__init__(
            f"Unexpected status code: {status_code}\n\nResponse content:\n{content.decode(errors='ignore')}"
        )


class MetadataError(GoCardlessError, ValueError):
    """A metadata mutation was rejected; the store is left as it was"""


class InvalidKey(MetadataError):
    pass


class InvalidValue(MetadataError):
    pass


class CapacityExceeded(MetadataError):
    pass


class InvalidEnumValue(GoCardlessError, ValueError):
    """Raised when a value with no wire representation is encoded"""


class GoCardlessApiError(GoCardlessError):
    """An error response returned by the GoCardless API.

    Attributes:
        status_code (int): HTTP status of the response.
        content (bytes): Raw response body.
        error_response (ApiErrorResponse): The parsed error envelope. For bodies that
            are not a GoCardless error document this is synthesised with type
            ``gocardless`` and the HTTP status as ``code``.
    """

    def __init__(self, status_code: int, content: bytes, error_response: "ApiErrorResponse"):
        self.status_code = status_code
        self.content = content
        self.error_response = error_response

        super().__init__(self.message)

    @property
    def type(self) -> "ApiErrorType":
        return self.error_response.error.type

    @property
    def code(self) -> int:
        return self.error_response.error.code

    @property
    def message(self) -> str:
        return self.error_response.error.message

    @property
    def documentation_url(self) -> Optional[str]:
        return self.error_response.error.documentation_url or None

    @property
    def request_id(self) -> Optional[str]:
        return self.error_response.error.request_id or None

    @property
    def errors(self) -> list["ApiErrorResponseErrorErrorsItem"]:
        return self.error_response.error.errors or []


class InternalError(GoCardlessApiError):
    pass


class InvalidApiUsageError(GoCardlessApiError):
    pass


class InvalidStateError(GoCardlessApiError):
    @property
    def conflicting_resource_id(self) -> Optional[str]:
        """ID of the resource an idempotent create collided with, if that is what happened"""
        if not self.errors:
            return None
        first = self.errors[0]
        if first.reason != "idempotent_creation_conflict" or not first.links:
            return None
        return first.links.additional_properties.get("conflicting_resource_id")


class ValidationFailedError(GoCardlessApiError):
    pass


class AuthenticationFailedError(GoCardlessApiError):
    pass


class InsufficientPermissionsError(GoCardlessApiError):
    pass


class RateLimitReachedError(GoCardlessApiError):
    pass


def api_error_from_response(response: httpx.Response) -> GoCardlessApiError:
    """Build the exception matching an error response.

    401, 403 and 429 responses are reported as authentication, permission and rate
    limit errors whatever type the body claims.
    """
    from .models.api_error_response import ApiErrorResponse
    from .models.api_error_response_error import ApiErrorResponseError
    from .models.api_error_type import ApiErrorType

    try:
        error_response = ApiErrorResponse.from_dict(response.json())
    except (ValueError, TypeError, KeyError):
        logger.debug(f"Response with status {response.status_code} is not a GoCardless error document")
        error_response = ApiErrorResponse(
            error=ApiErrorResponseError(
                message=GENERIC_ERROR_MESSAGE,
                type=ApiErrorType.GOCARDLESS,
                code=response.status_code,
            )
        )
        return GoCardlessApiError(response.status_code, response.content, error_response)

    status_types = {
        401: ApiErrorType.AUTHENTICATION_FAILED,
        403: ApiErrorType.INSUFFICIENT_PERMISSIONS,
        429: ApiErrorType.RATE_LIMIT_REACHED,
    }
    if response.status_code in status_types:
        error_response.error.type = status_types[response.status_code]

    error_classes: dict[ApiErrorType, type[GoCardlessApiError]] = {
        ApiErrorType.GOCARDLESS: InternalError,
        ApiErrorType.INVALID_API_USAGE: InvalidApiUsageError,
        ApiErrorType.INVALID_STATE: InvalidStateError,
        ApiErrorType.VALIDATION_FAILED: ValidationFailedError,
        ApiErrorType.AUTHENTICATION_FAILED: AuthenticationFailedError,
        ApiErrorType.INSUFFICIENT_PERMISSIONS: InsufficientPermissionsError,
        ApiErrorType.RATE_LIMIT_REACHED: RateLimitReachedError,
    }
    error_class = error_classes.get(error_response.error.type, GoCardlessApiError)
    logger.debug(f"API error {error_response.error.type} ({response.status_code}): {error_response.error.message}")
    return error_class(response.status_code, response.content, error_response)


__all__ = [
    "AuthenticationFailedError",
    "CapacityExceeded",
    "GoCardlessApiError",
    "GoCardlessError",
    "InsufficientPermissionsError",
    "InternalError",
    "InvalidApiUsageError",
    "InvalidEnumValue",
    "InvalidKey",
    "InvalidStateError",
    "InvalidValue",
    "MetadataError",
    "RateLimitReachedError",
    "UnexpectedStatus",
    "ValidationFailedError",
    "api_error_from_response",
]
