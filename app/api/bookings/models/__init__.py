from app.api.bookings.models.booking import Booking
from app.api.bookings.models.booking_payment import BookingPayment
from app.api.bookings.models.booking_service_item import BookingServiceItem


__all__ = [
    "Booking",
    "BookingPayment",
    "BookingServiceItem",
]
