"""HTTP API tests"""

import pytest
from fastapi.testclient import TestClient

from storefront.main import app

LOLAS_KITCHEN = {
    "latitude": 14.5995,
    "longitude": 120.9842,
    "address": "Ermita, Manila",
    "place_id": "osm-1001",
    "confirmed": True,
}
CUSTOMER = {"name": "Juan Dela Cruz", "contact_number": "0917 123 4567"}


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def cart_id(client):
    return client.post("/api/cart").json()["cart"]["cart_id"]


def add(client, cart_id, menu_item_id, **body):
    return client.post(f"/api/cart/{cart_id}/items", json={"menu_item_id": menu_item_id, **body})


class TestService:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy", "service": "storefront"}

    def test_merchants_and_menu(self, client):
        merchants = client.get("/api/merchants").json()
        assert [m["id"] for m in merchants] == ["merchant-001", "merchant-002", "merchant-003"]

        menu = client.get("/api/merchants/merchant-002/menu").json()
        assert {item["id"] for item in menu} == {"item-003", "item-004"}

        assert client.get("/api/merchants/nope").status_code == 404


class TestCartApi:

    def test_add_configured_item(self, client, cart_id):
        response = add(client, cart_id, "item-001", quantity=2, variation_ids=["var-002"], add_on_ids=["addon-002"])

        assert response.status_code == 200
        cart = response.json()["cart"]
        assert cart["items"][0]["unit_price"] == 205.0
        assert cart["items"][0]["customizations"] == ["Large", "Fried Egg"]
        assert cart["subtotal"] == 410.0

    def test_unknown_option_rejected(self, client, cart_id):
        response = add(client, cart_id, "item-001", add_on_ids=["addon-999"])
        assert response.status_code == 400

    def test_two_sizes_rejected(self, client, cart_id):
        response = add(client, cart_id, "item-001", variation_ids=["var-001", "var-002"])

        assert response.status_code == 400
        assert "Size" in response.json()["detail"]
        assert client.get(f"/api/cart/{cart_id}").json()["cart"]["items"] == []

    def test_required_size_must_be_chosen(self, client, cart_id):
        response = add(client, cart_id, "item-001", add_on_ids=["addon-001"])

        assert response.status_code == 400
        assert response.json()["detail"] == "Please choose Size for Chicken Adobo"

    def test_menu_lists_variation_groups(self, client):
        menu = client.get("/api/merchants/merchant-001/menu").json()
        adobo = next(item for item in menu if item["id"] == "item-001")
        assert adobo["variation_groups"] == [{"name": "Size", "required": True}]

    def test_unknown_menu_item_and_cart(self, client, cart_id):
        assert add(client, cart_id, "item-999").status_code == 404
        assert add(client, "no-such-cart", "item-001").status_code == 404

    def test_update_to_zero_removes(self, client, cart_id):
        item_id = add(client, cart_id, "item-002").json()["cart"]["items"][0]["id"]

        response = client.put(f"/api/cart/{cart_id}/items/{item_id}", json={"quantity": 0})
        assert response.json()["cart"]["items"] == []

        response = client.put(f"/api/cart/{cart_id}/items/{item_id}", json={"quantity": 1})
        assert response.status_code == 404


class TestCheckoutApi:

    def test_quotes_per_merchant(self, client, cart_id):
        add(client, cart_id, "item-001", variation_ids=["var-001"])
        add(client, cart_id, "item-003")
        add(client, cart_id, "item-005")

        response = client.post("/api/checkout/quotes", json={"cart_id": cart_id, "destination": LOLAS_KITCHEN})
        body = response.json()

        quotes = {q["merchant_id"]: q for q in body["quotes"]}
        assert list(quotes) == ["merchant-001", "merchant-002", "merchant-003"]
        assert quotes["merchant-001"]["fee"] == 20.0
        assert quotes["merchant-001"]["distance_km"] == 0.0
        assert quotes["merchant-002"]["deliverable"] is True
        assert 50.0 <= quotes["merchant-002"]["fee"] <= 120.0
        assert quotes["merchant-003"]["reason"] == "Merchant delivery location not configured"
        assert body["all_deliverable"] is False

    def test_unconfirmed_destination_quote(self, client, cart_id):
        add(client, cart_id, "item-001", variation_ids=["var-001"])
        typed = {"address": "somewhere I typed", "confirmed": False}

        body = client.post("/api/checkout/quotes", json={"cart_id": cart_id, "destination": typed}).json()
        assert body["quotes"][0]["deliverable"] is False
        assert "suggested address" in body["quotes"][0]["reason"]

    def test_payment_methods_follow_merchant_mix(self, client, cart_id):
        add(client, cart_id, "item-001", variation_ids=["var-001"])
        single = client.get(f"/api/checkout/{cart_id}/payment-methods").json()
        assert [m["id"] for m in single] == ["cod", "gcash", "bank-merchant-001"]

        add(client, cart_id, "item-003")
        mixed = client.get(f"/api/checkout/{cart_id}/payment-methods").json()
        assert [m["id"] for m in mixed] == ["cod", "gcash"]

    def test_successful_checkout_clears_cart(self, client, cart_id):
        add(client, cart_id, "item-001", quantity=2, variation_ids=["var-001"])
        add(client, cart_id, "item-003")

        response = client.post("/api/checkout", json={
            "cart_id": cart_id,
            "destination": LOLAS_KITCHEN,
            "customer": {**CUSTOMER, "landmark": "Near the church"},
            "payment_method_id": "cod",
        })
        body = response.json()

        assert response.status_code == 200
        assert body["success"] is True
        summary = body["summary"]
        assert summary["can_place_order"] is True
        assert summary["items_subtotal"] == 400.0
        assert summary["grand_total"] == pytest.approx(summary["items_subtotal"] + summary["delivery_fee_total"])
        assert "🏪 Lola's Kitchen:" in summary["message"]
        assert "🏪 Dumpling House:" in summary["message"]
        assert body["messenger_url"].endswith(f"?text={summary['encoded_message']}")

        assert client.get(f"/api/cart/{cart_id}").json()["cart"]["items"] == []

    def test_blocked_checkout_reports_reasons(self, client, cart_id):
        add(client, cart_id, "item-005")

        response = client.post("/api/checkout", json={
            "cart_id": cart_id,
            "destination": LOLAS_KITCHEN,
            "customer": {"name": "", "contact_number": "0917 123 4567"},
            "payment_method_id": "cod",
        })
        body = response.json()

        assert response.status_code == 200
        assert body["success"] is False
        assert body["messenger_url"] is None
        kinds = [b["kind"] for b in body["blockers"]]
        assert kinds == ["missing_field", "undeliverable_merchant"]
        assert body["blockers"][1]["merchant_id"] == "merchant-003"

        assert len(client.get(f"/api/cart/{cart_id}").json()["cart"]["items"]) == 1

    def test_empty_cart_checkout(self, client, cart_id):
        response = client.post("/api/checkout", json={"cart_id": cart_id, "customer": CUSTOMER})
        assert response.status_code == 400
