# librestock/client/errors.py


class ApiException(Exception):
    """Base class for errors raised by ApiClient."""

    status_code: int | None = None

    def __init__(self, message: str, payload: dict | None = None):
        super().__init__(message)
        self.message = message
        self.payload = payload


class BadRequestException(ApiException):
    status_code = 400


class UnauthorizedException(ApiException):
    status_code = 401


class ForbiddenException(ApiException):
    status_code = 403


class NotFoundException(ApiException):
    status_code = 404


class ConflictException(ApiException):
    status_code = 409


class ValidationException(ApiException):
    status_code = 422

    def __init__(self, message: str, field: str | None = None, payload: dict | None = None):
        self.field = field
        if field:
            message = f"validation error on {field}: {message}"
        super().__init__(message, payload)


class InternalException(ApiException):
    status_code = 500


class TimeoutException(ApiException):
    def __init__(self, message: str, operation: str, duration_ms: int):
        self.operation = operation
        self.duration_ms = duration_ms
        super().__init__(
            f"operation timeout: {operation} after {duration_ms}ms ({message})"
        )


STATUS_EXCEPTIONS = {
    400: BadRequestException,
    401: UnauthorizedException,
    403: ForbiddenException,
    404: NotFoundException,
    409: ConflictException,
}
