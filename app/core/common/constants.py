from enum import Enum


class Roles:
    ADMIN = "ADMIN"
    CUSTOMER = "CUSTOMER"


class BookingStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    REJECTED = "REJECTED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    OVERDUE = "OVERDUE"
    REFUNDED = "REFUNDED"


# Bookings in these states are closed and cannot be cancelled again.
CLOSED_BOOKING_STATUSES = frozenset(
    {
        BookingStatus.CANCELLED.value,
        BookingStatus.REJECTED.value,
        BookingStatus.COMPLETED.value,
    }
)
