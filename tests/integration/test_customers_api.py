"""Integration tests for the customer endpoints."""

import pytest
from httpx import AsyncClient

API = "/api/v1"
BOB = {"name": "Bob", "email": "bob@mailinator.com", "phone_number": "01225593234"}


class TestCustomerEndpoints:
    """Customer registration over HTTP."""

    @pytest.mark.asyncio
    async def test_register_and_lookup(self, client: AsyncClient):
        created = await client.post(f"{API}/customers/", json=BOB)
        assert created.status_code == 201
        customer_id = created.json()["id"]

        by_id = await client.get(f"{API}/customers/{customer_id}")
        by_email = await client.get(f"{API}/customers/email/bob@mailinator.com")
        assert by_id.json()["email"] == by_email.json()["email"] == "bob@mailinator.com"

    @pytest.mark.asyncio
    async def test_duplicate_email(self, client: AsyncClient):
        await client.post(f"{API}/customers/", json=BOB)

        response = await client.post(f"{API}/customers/", json={**BOB, "name": "Robert"})

        assert response.status_code == 409
        assert "email" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_missing_fields(self, client: AsyncClient):
        response = await client.post(f"{API}/customers/", json={})

        assert response.status_code == 400
        assert set(response.json()["detail"]) == {"name", "email", "phone_number"}

    @pytest.mark.asyncio
    async def test_delete_is_a_noop(self, client: AsyncClient):
        customer_id = (await client.post(f"{API}/customers/", json=BOB)).json()["id"]

        assert (await client.delete(f"{API}/customers/{customer_id}")).status_code == 204
        assert (await client.get(f"{API}/customers/{customer_id}")).status_code == 200

    @pytest.mark.asyncio
    async def test_unknown_customer(self, client: AsyncClient):
        assert (await client.get(f"{API}/customers/424242")).status_code == 404
        assert (await client.get(f"{API}/customers/email/nobody@mailinator.com")).status_code == 404

    @pytest.mark.asyncio
    async def test_phone_separators_are_not_stored(self, client: AsyncClient):
        response = await client.post(
            f"{API}/customers/", json={**BOB, "phone_number": "01225-593-234"}
        )

        assert response.status_code == 201
        assert response.json()["phone_number"] == "01225593234"
