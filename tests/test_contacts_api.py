"""
Contacts API — Contact Endpoint Tests
=======================================

What:  End-to-end tests of the /contacts routes through the ASGI app.
How:   HTTPX AsyncClient over ASGITransport, backed by an InMemoryDocumentStore
       (or a mock store for failure paths).

What we test:
    ✅ Create → read back round-trip
    ✅ Missing / empty / mistyped fields → 400 and nothing persisted
    ✅ 404 for read, update and delete of unknown ids
    ✅ Partial update leaves other fields unchanged
    ✅ Delete → read → 404
    ✅ Malformed ids → 500 on read/delete, 400 on update
    ✅ Store failures → 500 with the store's message
    ✅ Records with non-string values written by other clients still list
"""

import pytest

from contacts_api.exceptions import DatabaseError
from contacts_api.storage import CONTACTS, InMemoryDocumentStore

UNKNOWN_ID = "0123456789abcdef01234567"
REQUIRED_FIELDS = ["firstName", "lastName", "email", "favoriteColor", "birthday"]


async def create(client, body):
    response = await client.post("/contacts", json=body)
    assert response.status_code == 201, response.text
    return response.json()


class TestListContacts:

    @pytest.mark.asyncio
    async def test_empty_store_returns_empty_array(self, test_client):
        response = await test_client.get("/contacts")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_lists_in_insertion_order(self, test_client, sample_contact):
        first = await create(test_client, {**sample_contact, "firstName": "First"})
        second = await create(test_client, {**sample_contact, "firstName": "Second"})

        response = await test_client.get("/contacts")

        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == [first["id"], second["id"]]

    @pytest.mark.asyncio
    async def test_non_string_stored_value_is_rendered_as_text(self, make_client, sample_contact):
        store = InMemoryDocumentStore(
            initial={CONTACTS: [sample_contact, {**sample_contact, "birthday": 20000101}]}
        )

        async with make_client(store) as client:
            response = await client.get("/contacts")

        assert response.status_code == 200
        assert [c["birthday"] for c in response.json()] == [
            sample_contact["birthday"], "20000101"
        ]

    @pytest.mark.asyncio
    async def test_store_failure_returns_500_with_message(self, make_client, mock_store):
        mock_store.find_all.side_effect = DatabaseError("connection refused")

        async with make_client(mock_store) as client:
            response = await client.get("/contacts")

        assert response.status_code == 500
        assert response.json()["message"] == "connection refused"


class TestCreateContact:

    @pytest.mark.asyncio
    async def test_create_returns_201_with_id_and_fields(self, test_client, sample_contact):
        response = await test_client.post("/contacts", json=sample_contact)

        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], str) and len(body["id"]) == 24
        for field in REQUIRED_FIELDS:
            assert body[field] == sample_contact[field]

    @pytest.mark.asyncio
    async def test_round_trip(self, test_client, sample_contact):
        created = await create(test_client, sample_contact)

        response = await test_client.get(f"/contacts/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], **sample_contact}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", REQUIRED_FIELDS)
    async def test_missing_field_returns_400_and_persists_nothing(
        self, test_client, sample_contact, missing
    ):
        body = {k: v for k, v in sample_contact.items() if k != missing}

        response = await test_client.post("/contacts", json=body)

        assert response.status_code == 400
        assert missing in response.json()["message"]
        assert (await test_client.get("/contacts")).json() == []

    @pytest.mark.asyncio
    async def test_empty_first_name_rejected(self, test_client, sample_contact):
        response = await test_client.post("/contacts", json={**sample_contact, "firstName": ""})

        assert response.status_code == 400
        assert "firstName" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_non_string_field_rejected(self, test_client, sample_contact):
        response = await test_client.post("/contacts", json={**sample_contact, "email": 42})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_email_and_birthday_are_not_format_checked(self, test_client, sample_contact):
        body = {**sample_contact, "email": "not an email", "birthday": "sometime in spring"}

        created = await create(test_client, body)

        assert created["email"] == "not an email"
        assert created["birthday"] == "sometime in spring"

    @pytest.mark.asyncio
    async def test_invalid_json_returns_400(self, test_client):
        response = await test_client.post(
            "/contacts", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert "message" in response.json()


class TestGetContact:

    @pytest.mark.asyncio
    async def test_unknown_id_returns_404(self, test_client):
        response = await test_client.get(f"/contacts/{UNKNOWN_ID}")

        assert response.status_code == 404
        assert response.json()["message"] == "Contact not found"

    @pytest.mark.asyncio
    async def test_malformed_id_returns_500_with_store_message(self, test_client):
        response = await test_client.get("/contacts/not-an-id")

        assert response.status_code == 500
        assert "not a valid ObjectId" in response.json()["message"]


class TestUpdateContact:

    @pytest.mark.asyncio
    async def test_partial_update_leaves_other_fields(self, test_client, sample_contact):
        created = await create(test_client, sample_contact)

        response = await test_client.put(
            f"/contacts/{created['id']}", json={"favoriteColor": "Green"}
        )

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], **sample_contact, "favoriteColor": "Green"}
        fetched = (await test_client.get(f"/contacts/{created['id']}")).json()
        assert fetched["favoriteColor"] == "Green"
        assert fetched["firstName"] == sample_contact["firstName"]

    @pytest.mark.asyncio
    async def test_full_update(self, test_client, sample_contact):
        created = await create(test_client, sample_contact)
        replacement = {
            "firstName": "C",
            "lastName": "D",
            "email": "c@d.com",
            "favoriteColor": "Blue",
            "birthday": "1990-12-31",
        }

        response = await test_client.put(f"/contacts/{created['id']}", json=replacement)

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], **replacement}

    @pytest.mark.asyncio
    async def test_empty_body_returns_current_record(self, test_client, sample_contact):
        created = await create(test_client, sample_contact)

        response = await test_client.put(f"/contacts/{created['id']}", json={})

        assert response.status_code == 200
        assert response.json() == created

    @pytest.mark.asyncio
    async def test_unknown_id_returns_404(self, test_client):
        response = await test_client.put(f"/contacts/{UNKNOWN_ID}", json={"email": "x@y.z"})

        assert response.status_code == 404
        assert response.json()["message"] == "Contact not found"

    @pytest.mark.asyncio
    async def test_unknown_field_rejected(self, test_client, sample_contact):
        created = await create(test_client, sample_contact)

        response = await test_client.put(f"/contacts/{created['id']}", json={"nickname": "Z"})

        assert response.status_code == 400
        assert "nickname" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_null_value_rejected(self, test_client, sample_contact):
        created = await create(test_client, sample_contact)

        response = await test_client.put(f"/contacts/{created['id']}", json={"email": None})

        assert response.status_code == 400
        assert "email" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_malformed_id_returns_400(self, test_client):
        response = await test_client.put("/contacts/not-an-id", json={"email": "x@y.z"})

        assert response.status_code == 400
        assert "not a valid ObjectId" in response.json()["message"]


class TestDeleteContact:

    @pytest.mark.asyncio
    async def test_delete_then_get_returns_404(self, test_client, sample_contact):
        created = await create(test_client, sample_contact)

        response = await test_client.delete(f"/contacts/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {"message": "Contact deleted"}

        response = await test_client.get(f"/contacts/{created['id']}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_id_returns_404(self, test_client):
        response = await test_client.delete(f"/contacts/{UNKNOWN_ID}")

        assert response.status_code == 404
        assert response.json()["message"] == "Contact not found"

    @pytest.mark.asyncio
    async def test_malformed_id_returns_500(self, test_client):
        response = await test_client.delete("/contacts/not-an-id")
        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_only_target_is_removed(self, test_client, sample_contact):
        keep = await create(test_client, {**sample_contact, "firstName": "Keep"})
        drop = await create(test_client, {**sample_contact, "firstName": "Drop"})

        await test_client.delete(f"/contacts/{drop['id']}")

        assert (await test_client.get("/contacts")).json() == [keep]


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generated_request_id_in_header(self, test_client):
        response = await test_client.get("/contacts")
        assert response.headers.get("X-Request-ID")

    @pytest.mark.asyncio
    async def test_client_request_id_is_echoed_in_errors(self, test_client):
        response = await test_client.get(
            f"/contacts/{UNKNOWN_ID}", headers={"X-Request-ID": "trace-123"}
        )

        assert response.headers["X-Request-ID"] == "trace-123"
        assert response.json()["request_id"] == "trace-123"
