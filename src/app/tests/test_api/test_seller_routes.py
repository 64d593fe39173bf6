import pytest

from app.config import get_settings

API = get_settings().API_PREFIX
SELLERS = f"{API}/sellers"


@pytest.mark.asyncio
class TestPing:

    async def test_ping(self, api_client):
        response = await api_client.get("/ping")

        assert response.status_code == 200
        assert response.text == "pong"


@pytest.mark.asyncio
class TestSellerRoutes:

    async def test_create_returns_201_with_envelope(self, api_client, seller_data):
        """
        Behavior:
                - POST /sellers answers 201 with {"data": {...}} echoing the submitted fields.
        """
        response = await api_client.post(SELLERS, json=seller_data)

        assert response.status_code == 201
        body = response.json()["data"]
        assert body["id"] > 0
        assert {k: body[k] for k in seller_data} == seller_data

    async def test_duplicate_cid_is_409(self, api_client, seller_data):
        await api_client.post(SELLERS, json=seller_data)

        response = await api_client.post(SELLERS, json=seller_data)

        assert response.status_code == 409
        body = response.json()
        assert body["code"] == "duplicate"
        assert body["fields"] == ["cid"]

    async def test_missing_locality_is_409(self, api_client, seller_data):
        seller_data["locality_id"] = "0000"

        response = await api_client.post(SELLERS, json=seller_data)

        assert response.status_code == 409
        assert response.json()["code"] == "reference_not_found"
        assert response.json()["detail"] == "locality not found"

    async def test_body_validation_is_422(self, api_client, seller_data):
        """
        Behavior:
                - A missing field and a blank field both produce 422 `validation_failed`
                  naming the offending fields.
        """
        seller_data.pop("telephone")
        seller_data["company_name"] = "   "

        response = await api_client.post(SELLERS, json=seller_data)

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "validation_failed"
        assert sorted(body["fields"]) == ["company_name", "telephone"]

    async def test_unknown_body_field_is_422(self, api_client, seller_data):
        response = await api_client.post(SELLERS, json=dict(seller_data, colour="blue"))

        assert response.status_code == 422

    async def test_list(self, api_client, created_seller):
        response = await api_client.get(SELLERS)

        assert response.status_code == 200
        assert [s["id"] for s in response.json()["data"]] == [created_seller.id]

    async def test_list_empty(self, api_client):
        response = await api_client.get(SELLERS)

        assert response.status_code == 200
        assert response.json() == {"data": []}

    async def test_get(self, api_client, created_seller):
        response = await api_client.get(f"{SELLERS}/{created_seller.id}")

        assert response.status_code == 200
        assert response.json()["data"]["company_name"] == "ACME"

    async def test_get_unknown_is_404(self, api_client):
        response = await api_client.get(f"{SELLERS}/999999")

        assert response.status_code == 404
        assert response.json()["code"] == "not_found"

    @pytest.mark.parametrize("bad_id", ["abc", "0", "-3"])
    async def test_malformed_id_is_400(self, api_client, bad_id):
        """
        Behavior:
                - Ids that are not positive integers are rejected with 400 `invalid_id`
                  before any lookup.
        """
        response = await api_client.get(f"{SELLERS}/{bad_id}")

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_id"

    async def test_patch_updates_given_fields(self, api_client, created_seller):
        response = await api_client.patch(f"{SELLERS}/{created_seller.id}", json={"telephone": "556"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["telephone"] == "556"
        assert data["company_name"] == "ACME"

    async def test_patch_other_id_is_400(self, api_client, created_seller):
        response = await api_client.patch(
            f"{SELLERS}/{created_seller.id}", json={"id": created_seller.id + 1, "telephone": "556"}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "identity_immutable"

    async def test_patch_null_is_422(self, api_client, created_seller):
        response = await api_client.patch(f"{SELLERS}/{created_seller.id}", json={"telephone": None})

        assert response.status_code == 422

    async def test_delete_then_404(self, api_client, created_seller):
        """
        Behavior:
                - DELETE answers 204 with no body; repeating it answers 404.
        """
        first = await api_client.delete(f"{SELLERS}/{created_seller.id}")
        second = await api_client.delete(f"{SELLERS}/{created_seller.id}")

        assert first.status_code == 204
        assert first.content == b""
        assert second.status_code == 404

    async def test_request_id_is_echoed(self, api_client):
        response = await api_client.get(SELLERS, headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"

    async def test_request_id_is_generated(self, api_client):
        response = await api_client.get(SELLERS)

        assert response.headers["X-Request-ID"]
