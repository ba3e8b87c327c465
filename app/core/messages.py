class ErrorMessage:
    # ---------- Auth / Access ----------
    SERVER_ERROR = "Internal server error"
    DATABASE_FAILURE = "Database operation failed"
    AUTH_CONTEXT_MISSING = "Authentication context missing"
    USER_NOT_AUTHENTICATED = "User is not authenticated"
    USER_ID_MISSING = "Authenticated user id missing"

    ADMIN_ACCESS_REQUIRED = "Admin access required"
    OWNER_ACCESS_REQUIRED = "Only the booking owner or an admin may do this"
    ACCESS_DENIED = "Access denied"

    # ---------- Generic ----------
    INVALID_AUTH_CONTEXT = "Invalid authentication context"
    REQUEST_VALIDATION_FAILED = "Request validation failed"

    # ---------- Bookings ----------
    BOOKING_NOT_FOUND = "Booking not found"
    BOOKING_NOT_CANCELLABLE = "Booking can no longer be cancelled"
    SERVICE_REQUIRED = "At least one service must be selected"
    SERVICE_NOT_FOUND = "Service not found"

    # ---------- Payments ----------
    PAYMENT_NOT_FOUND = "Payment not found"
    INVALID_AMOUNT = "Amount must be a finite, non-negative number"
    AMOUNT_TOO_LARGE = "Amount exceeds the largest supported value"
    INVALID_DATE = "Not a valid calendar date"


class SuccessMessage:
    BOOKING_CREATED = "Event booked successfully"
    BOOKING_UPDATED = "Booking updated successfully"
    BOOKING_CANCELLED = "Booking cancelled successfully"
    PAYMENT_UPDATED = "Payment updated successfully"
