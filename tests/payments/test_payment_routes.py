import uuid

from conftest import ADMIN_HEADERS, CUSTOMER_HEADERS, OTHER_CUSTOMER_HEADERS, booking_payload

PAYMENTS_URL = "/api/v1/payments"


async def _first_payment(client, catalogue) -> dict:
    response = await client.post(
        "/api/v1/bookings",
        json=booking_payload([{"serviceId": str(catalogue["tent"].id)}]),
        headers=CUSTOMER_HEADERS,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]["payments"][0]


async def test_owner_marks_installment_paid(client, catalogue, published_events):
    payment = await _first_payment(client, catalogue)

    response = await client.patch(
        f"{PAYMENTS_URL}/{payment['id']}",
        json={
            "status": "PAID",
            "paidDate": "2024-12-02",
            "paymentMethod": "Bank transfer",
            "transactionId": "IBFT-000123",
        },
        headers=CUSTOMER_HEADERS,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Payment updated successfully"
    data = body["data"]
    assert data["id"] == payment["id"]
    assert data["installmentKind"] == "FIRST"
    assert data["status"] == "PAID"
    assert data["paidDate"] == "2024-12-02"
    assert data["paymentMethod"] == "Bank transfer"
    assert data["transactionId"] == "IBFT-000123"


async def test_paid_without_date_uses_today(client, catalogue, published_events):
    payment = await _first_payment(client, catalogue)

    response = await client.patch(
        f"{PAYMENTS_URL}/{payment['id']}", json={"status": "PAID"}, headers=ADMIN_HEADERS
    )

    assert response.status_code == 200
    assert response.json()["data"]["paidDate"] == "2024-12-01"


async def test_admin_marks_overdue_with_note(client, catalogue, published_events):
    payment = await _first_payment(client, catalogue)

    response = await client.patch(
        f"{PAYMENTS_URL}/{payment['id']}",
        json={"status": "OVERDUE", "notes": "Reminder sent"},
        headers=ADMIN_HEADERS,
    )

    data = response.json()["data"]
    assert data["status"] == "OVERDUE"
    assert data["notes"] == "Reminder sent"
    assert data["paidDate"] is None


async def test_other_customer_is_forbidden(client, catalogue, published_events):
    payment = await _first_payment(client, catalogue)

    response = await client.patch(
        f"{PAYMENTS_URL}/{payment['id']}", json={"status": "PAID"}, headers=OTHER_CUSTOMER_HEADERS
    )

    assert response.status_code == 403


async def test_unknown_payment_is_404(client):
    response = await client.patch(
        f"{PAYMENTS_URL}/{uuid.uuid4()}", json={"status": "PAID"}, headers=ADMIN_HEADERS
    )

    assert response.status_code == 404
    assert response.json()["errors"][0]["code"] == "payment_not_found"


async def test_unknown_status_is_422(client, catalogue, published_events):
    payment = await _first_payment(client, catalogue)

    response = await client.patch(
        f"{PAYMENTS_URL}/{payment['id']}", json={"status": "WAIVED"}, headers=ADMIN_HEADERS
    )

    assert response.status_code == 422
