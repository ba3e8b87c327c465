# app/core/exceptions.py
from app.core.messages import ErrorMessage

class GlobalException(Exception):
    status_code: int
    error_code: str
    message: str

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)


class ResourceNotFound(GlobalException):
    status_code = 404
    error_code = "not_found"
    message = "Requested resource not found"


class ValidationException(GlobalException):
    status_code = 400
    error_code = "validation_error"
    message = "Validation failed"


class InvalidArgument(ValidationException):
    error_code = "invalid_argument"
    message = "Invalid argument"


class AccessDenied(GlobalException):
    status_code = 403
    error_code = "access_denied"
    message = ErrorMessage.ACCESS_DENIED

class BadRequest(GlobalException):
    status_code = 400
    error_code = "bad_request"
    message = "Bad request"

class Conflict(GlobalException):
    status_code = 409
    error_code = "conflict"
    message = "Request conflicts with the current state of the resource"

class BookingNotFound(ResourceNotFound):
    error_code = "booking_not_found"
    message = ErrorMessage.BOOKING_NOT_FOUND

class BookingNotCancellable(Conflict):
    error_code = "booking_not_cancellable"
    message = ErrorMessage.BOOKING_NOT_CANCELLABLE

class PaymentNotFound(ResourceNotFound):
    error_code = "payment_not_found"
    message = ErrorMessage.PAYMENT_NOT_FOUND

class InvalidServiceSelection(BadRequest):
    error_code = "invalid_service_selection"
    message = ErrorMessage.SERVICE_REQUIRED
