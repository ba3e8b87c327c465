from decimal import Decimal

from conftest import ADMIN_HEADERS, CUSTOMER_HEADERS, booking_payload

STATS_URL = "/api/v1/dashboard/stats"


async def _book_tent(client, catalogue) -> dict:
    response = await client.post(
        "/api/v1/bookings",
        json=booking_payload([{"serviceId": str(catalogue["tent"].id)}]),
        headers=CUSTOMER_HEADERS,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_stats_count_statuses_and_paid_revenue(client, catalogue, published_events):
    pending = await _book_tent(client, catalogue)
    confirmed = await _book_tent(client, catalogue)
    cancelled = await _book_tent(client, catalogue)

    await client.patch(
        f"/api/v1/bookings/{confirmed['id']}/status",
        json={"status": "CONFIRMED"},
        headers=ADMIN_HEADERS,
    )
    await client.post(f"/api/v1/bookings/{cancelled['id']}/cancel", headers=CUSTOMER_HEADERS)
    for payment in (pending["payments"][0], confirmed["payments"][0]):
        paid = await client.patch(
            f"/api/v1/payments/{payment['id']}", json={"status": "PAID"}, headers=ADMIN_HEADERS
        )
        assert paid.status_code == 200

    response = await client.get(STATS_URL, headers=ADMIN_HEADERS)

    assert response.status_code == 200
    stats = response.json()["data"]
    assert stats["totalBookings"] == 3
    assert stats["pendingBookings"] == 1
    assert stats["confirmedBookings"] == 1
    assert stats["completedBookings"] == 0
    # two FIRST installments of a 40000 booking
    assert Decimal(stats["totalRevenue"]) == Decimal("16000")
    assert stats["upcomingEvents"] == 2
    assert stats["recentBookings"] == 3


async def test_stats_with_no_bookings(client):
    response = await client.get(STATS_URL, headers=ADMIN_HEADERS)

    assert response.status_code == 200
    stats = response.json()["data"]
    assert stats["totalBookings"] == 0
    assert Decimal(stats["totalRevenue"]) == 0
    assert stats["upcomingEvents"] == 0


async def test_stats_are_admin_only(client):
    response = await client.get(STATS_URL, headers=CUSTOMER_HEADERS)

    assert response.status_code == 403
    assert response.json()["message"] == "Admin access required"
