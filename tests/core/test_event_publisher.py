import json

from app.core.config import Config
from app.utils import event_publisher


class _FakeSqs:
    def __init__(self, error: Exception | None = None):
        self.messages = []
        self._error = error

    def send_message(self, **message):
        if self._error:
            raise self._error
        self.messages.append(message)


def _use_fake_sqs(monkeypatch, fake: _FakeSqs, queue_url: str | None):
    monkeypatch.setattr(Config, "BOOKING_EVENTS_QUEUE_URL", queue_url)
    monkeypatch.setattr(event_publisher, "_build_sqs_client", lambda: fake)


async def test_cancelled_event_goes_to_fifo_queue(monkeypatch):
    fake = _FakeSqs()
    _use_fake_sqs(monkeypatch, fake, "https://sqs.ap-south-1.amazonaws.com/1/bookings.fifo")

    await event_publisher.publish_booking_cancelled_event(
        {"event_type": "booking.cancelled", "booking_id": "b-1", "refund_amount": "80000.00"}
    )

    [message] = fake.messages
    assert message["MessageGroupId"] == "booking-events"
    assert message["MessageDeduplicationId"] == "cancelled-b-1"
    assert json.loads(message["MessageBody"])["refund_amount"] == "80000.00"


async def test_standard_queue_has_no_fifo_fields(monkeypatch):
    fake = _FakeSqs()
    _use_fake_sqs(monkeypatch, fake, "https://sqs.ap-south-1.amazonaws.com/1/bookings")

    await event_publisher.publish_booking_created_event(
        {"event_type": "booking.created", "booking_id": "b-2"}
    )

    [message] = fake.messages
    assert "MessageGroupId" not in message
    assert "MessageDeduplicationId" not in message


async def test_unconfigured_queue_skips_sending(monkeypatch):
    fake = _FakeSqs()
    _use_fake_sqs(monkeypatch, fake, None)

    await event_publisher.publish_booking_created_event(
        {"event_type": "booking.created", "booking_id": "b-3"}
    )

    assert fake.messages == []


async def test_send_failure_is_logged_not_raised(monkeypatch, caplog):
    fake = _FakeSqs(error=RuntimeError("queue unavailable"))
    _use_fake_sqs(monkeypatch, fake, "https://sqs.ap-south-1.amazonaws.com/1/bookings")

    await event_publisher.publish_booking_cancelled_event(
        {"event_type": "booking.cancelled", "booking_id": "b-4"}
    )

    assert "send_message failed: queue unavailable" in caplog.text
