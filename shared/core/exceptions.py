from fastapi import status

from shared.utils.app_status_code import AppStatusCode


class AppException(Exception):
    """Base for every failure the services raise on purpose.

    Carries the HTTP status and the application status code so the
    boundary translator can render it without knowing the concrete type.
    """

    http_status: int = status.HTTP_400_BAD_REQUEST
    status_code: str = AppStatusCode.OPERATION_FAILED
    default_message: str = "Operation failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateIdentity(AppException):
    http_status = status.HTTP_400_BAD_REQUEST
    status_code = AppStatusCode.DUPLICATE_ADD_ERROR
    default_message = "Email is already taken"


class AuthenticationFailed(AppException):
    http_status = status.HTTP_401_UNAUTHORIZED
    status_code = AppStatusCode.AUTHENTICATION_CREDENTIALS_INVALID
    default_message = "Invalid email or password"


class Unauthenticated(AppException):
    http_status = status.HTTP_401_UNAUTHORIZED
    status_code = AppStatusCode.AUTHENTICATION_TOKEN_INVALID
    default_message = "Not authenticated"


class ResourceNotFound(AppException):
    http_status = status.HTTP_404_NOT_FOUND
    status_code = AppStatusCode.RESOURCE_NOT_FOUND
    default_message = "Resource not found"


class OwnerNotFound(ResourceNotFound):
    status_code = AppStatusCode.AUTHENTICATION_USER_INVALID
    default_message = "User not found"


class NotAuthorized(AppException):
    http_status = status.HTTP_403_FORBIDDEN
    status_code = AppStatusCode.AUTHENTICATION_UNAUTHORIZED_ACCESS
    default_message = "User not authorized for this resource"


class ValidationFailed(AppException):
    http_status = status.HTTP_400_BAD_REQUEST
    status_code = AppStatusCode.INVALID_INPUT
    default_message = "Invalid input"


class SlugConflict(AppException):
    http_status = status.HTTP_409_CONFLICT
    status_code = AppStatusCode.DUPLICATE_ADD_ERROR
    default_message = "Could not allocate a unique slug, please retry"
