"""API tests for the authenticated user's cart."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def customer(signup):
    return signup("ann@example.com", name="Ann")


def _add(client: TestClient, prefix: str, product_id, quantity: int = 1):
    return client.post(
        f"{prefix}/cart/add",
        json={"product_id": str(product_id), "quantity": quantity},
    )


@pytest.mark.usefixtures("customer")
class TestCart:
    def test_no_cart_before_first_add(self, test_client: TestClient, api_prefix):
        response = test_client.get(f"{api_prefix}/cart")

        assert response.status_code == 404
        assert response.json() == {"detail": "Cart not found", "code": "CART_NOT_FOUND"}

    def test_add_creates_cart(self, test_client: TestClient, api_prefix, product):
        response = _add(test_client, api_prefix, product.id, 2)

        assert response.status_code == 200
        assert response.json() == {"message": "Item added to cart"}

        cart = test_client.get(f"{api_prefix}/cart").json()
        assert cart["item_count"] == 2
        assert cart["total"] == pytest.approx(4.98)
        [item] = cart["items"]
        assert item["product_id"] == str(product.id)
        assert item["quantity"] == 2
        assert item["product"]["name"] == "Carrots"

    def test_adding_again_sums_quantities(
        self,
        test_client: TestClient,
        api_prefix,
        product,
    ):
        _add(test_client, api_prefix, product.id, 2)
        _add(test_client, api_prefix, product.id, 3)

        items = test_client.get(f"{api_prefix}/cart").json()["items"]

        assert [i["quantity"] for i in items] == [5]

    def test_quantity_defaults_to_one(
        self,
        test_client: TestClient,
        api_prefix,
        product,
    ):
        test_client.post(
            f"{api_prefix}/cart/add",
            json={"product_id": str(product.id)},
        )

        assert test_client.get(f"{api_prefix}/cart").json()["item_count"] == 1

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_add_rejects_non_positive_quantity(
        self,
        test_client: TestClient,
        api_prefix,
        product,
        quantity,
    ):
        response = _add(test_client, api_prefix, product.id, quantity)

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_add_unknown_product(self, test_client: TestClient, api_prefix):
        response = _add(test_client, api_prefix, uuid4())

        assert response.status_code == 404
        assert response.json()["code"] == "PRODUCT_NOT_FOUND"

    def test_update_quantity(self, test_client: TestClient, api_prefix, product):
        _add(test_client, api_prefix, product.id)
        item_id = test_client.get(f"{api_prefix}/cart").json()["items"][0]["id"]

        response = test_client.patch(
            f"{api_prefix}/cart/{item_id}",
            json={"quantity": 4},
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Quantity updated"}
        assert test_client.get(f"{api_prefix}/cart").json()["item_count"] == 4

    def test_update_rejects_zero(self, test_client: TestClient, api_prefix, product):
        _add(test_client, api_prefix, product.id)
        item_id = test_client.get(f"{api_prefix}/cart").json()["items"][0]["id"]

        response = test_client.patch(
            f"{api_prefix}/cart/{item_id}",
            json={"quantity": 0},
        )

        assert response.status_code == 400

    def test_update_unknown_item(self, test_client: TestClient, api_prefix):
        response = test_client.patch(
            f"{api_prefix}/cart/{uuid4()}",
            json={"quantity": 2},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "CART_ITEM_NOT_FOUND"

    def test_remove_item(self, test_client: TestClient, api_prefix, product):
        _add(test_client, api_prefix, product.id)
        item_id = test_client.get(f"{api_prefix}/cart").json()["items"][0]["id"]

        first = test_client.delete(f"{api_prefix}/cart/{item_id}")
        second = test_client.delete(f"{api_prefix}/cart/{item_id}")

        assert first.status_code == 200
        assert first.json() == {"message": "Item removed"}
        assert second.status_code == 404
        assert second.json()["code"] == "CART_ITEM_NOT_FOUND"
        assert test_client.get(f"{api_prefix}/cart").json()["items"] == []


def test_cart_is_scoped_to_signed_in_user(
    test_client: TestClient,
    api_prefix,
    product,
    signup,
):
    signup("ann@example.com")
    _add(test_client, api_prefix, product.id)
    ann_item = test_client.get(f"{api_prefix}/cart").json()["items"][0]["id"]

    test_client.cookies.clear()
    signup("bob@example.com")

    assert test_client.get(f"{api_prefix}/cart").status_code == 404
    patched = test_client.patch(
        f"{api_prefix}/cart/{ann_item}",
        json={"quantity": 9},
    )
    deleted = test_client.delete(f"{api_prefix}/cart/{ann_item}")

    assert patched.status_code == 404
    assert deleted.status_code == 404


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/cart"),
        ("POST", "/cart/add"),
        ("PATCH", f"/cart/{uuid4()}"),
        ("DELETE", f"/cart/{uuid4()}"),
    ],
)
def test_cart_requires_session(test_client: TestClient, api_prefix, method, path):
    body = {"product_id": str(uuid4()), "quantity": 1}
    json = None if method in ("GET", "DELETE") else body
    response = test_client.request(method, f"{api_prefix}{path}", json=json)

    assert response.status_code == 401
    assert response.json()["code"] == "NO_TOKEN"
