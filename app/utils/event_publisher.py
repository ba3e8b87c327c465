from __future__ import annotations

import asyncio
import json

import boto3

from app.core.config import Config
from app.core.middlewares import logger


def _build_sqs_client():
    client_kwargs: dict[str, str] = {}
    if Config.AWS_REGION:
        client_kwargs["region_name"] = Config.AWS_REGION
    if Config.AWS_ACCESS_KEY and Config.AWS_SECRET_KEY:
        client_kwargs["aws_access_key_id"] = Config.AWS_ACCESS_KEY
        client_kwargs["aws_secret_access_key"] = Config.AWS_SECRET_KEY
    return boto3.client("sqs", **client_kwargs)


def _send_event(event_data: dict, deduplication_id: str) -> None:
    queue_url = Config.BOOKING_EVENTS_QUEUE_URL
    if not queue_url:
        logger.info(
            f"[event_publisher] queue not configured, skipping {event_data.get('event_type')}"
        )
        return

    message = {
        "QueueUrl": queue_url,
        "MessageBody": json.dumps(event_data, default=str),
    }
    if queue_url.endswith(".fifo"):
        message["MessageGroupId"] = "booking-events"
        message["MessageDeduplicationId"] = deduplication_id

    sqs = _build_sqs_client()
    sqs.send_message(**message)
    logger.info(f"[event_publisher] sent {event_data.get('event_type')} id={deduplication_id}")


async def _publish(event_data: dict, deduplication_id: str) -> None:
    try:
        await asyncio.to_thread(_send_event, event_data, deduplication_id)
    except Exception as exc:
        # The booking is already committed at this point.
        logger.error(f"[event_publisher] send_message failed: {exc}, event_data={event_data}")


async def publish_booking_created_event(event_data: dict) -> None:
    await _publish(event_data, f"created-{event_data.get('booking_id')}")


async def publish_booking_cancelled_event(event_data: dict) -> None:
    await _publish(event_data, f"cancelled-{event_data.get('booking_id')}")
