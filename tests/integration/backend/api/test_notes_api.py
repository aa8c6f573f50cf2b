"""
Integration Tests for Notes API.

Tests the notes API endpoints with a real database.
"""

from unittest.mock import patch

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from heyo.backend.repositories.note import NoteRepository


async def _create(client: AsyncClient, **fields) -> dict:
    payload = {"title": "Hi", "content": "World"}
    payload.update(fields)
    response = await client.post("/api/notes", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateNote:
    """Tests for POST /api/notes."""

    @pytest.mark.asyncio
    async def test_create_note_success(self, client: AsyncClient, api):
        """Should create a note with server-assigned id and createdAt."""
        response = await client.post(
            "/api/notes",
            json={"title": "Hi", "content": "World", "category": "Sely"},
        )

        data = api.assert_status(response, 201)
        assert data["title"] == "Hi"
        assert data["content"] == "World"
        assert data["category"] == "Sely"
        assert data["isFavorite"] is False
        assert data["id"]
        assert data["createdAt"]

    @pytest.mark.asyncio
    async def test_create_note_without_category(self, client: AsyncClient, api):
        """Omitted category is stored as null."""
        response = await client.post(
            "/api/notes",
            json={"title": "Hi", "content": "World", "isFavorite": True},
        )

        data = api.assert_status(response, 201)
        assert data["category"] is None
        assert data["isFavorite"] is True

    @pytest.mark.asyncio
    async def test_create_note_missing_title_fails(self, client: AsyncClient, api):
        """Should reject a missing title."""
        response = await client.post("/api/notes", json={"content": "World"})

        api.assert_validation_error(response, field="title")

    @pytest.mark.asyncio
    async def test_create_note_blank_content_fails(self, client: AsyncClient, api):
        """Should reject whitespace-only content."""
        response = await client.post(
            "/api/notes",
            json={"title": "Hi", "content": "   "},
        )

        data = api.assert_validation_error(response, field="content")
        assert "Your note cannot be empty" in data["details"][0]["message"]

    @pytest.mark.asyncio
    async def test_create_note_unknown_category_fails(self, client: AsyncClient, api):
        """Should reject a category outside the fixed set."""
        response = await client.post(
            "/api/notes",
            json={"title": "Hi", "content": "World", "category": "Nobody"},
        )

        api.assert_validation_error(response, field="category")

    @pytest.mark.asyncio
    async def test_create_note_non_boolean_favorite_fails(
        self,
        client: AsyncClient,
        api,
    ):
        """isFavorite must be a real boolean."""
        response = await client.post(
            "/api/notes",
            json={"title": "Hi", "content": "World", "isFavorite": "yes"},
        )

        api.assert_validation_error(response, field="isFavorite")

    @pytest.mark.asyncio
    async def test_create_note_non_object_body_fails(self, client: AsyncClient, api):
        """A JSON array is not a note."""
        response = await client.post("/api/notes", json=["Hi", "World"])

        api.assert_error(response, 400, "VAL_REQUEST_INVALID")

    @pytest.mark.asyncio
    async def test_create_note_invalid_json_fails(self, client: AsyncClient, api):
        """Malformed JSON is reported against the whole body."""
        response = await client.post(
            "/api/notes",
            content=b'{"title": "Hi",',
            headers={"Content-Type": "application/json"},
        )

        data = api.assert_error(response, 400, "VAL_REQUEST_INVALID")
        assert data["details"][0]["field"] == "body"
        assert data["details"][0]["type"] == "json_invalid"

    @pytest.mark.asyncio
    async def test_failed_create_stores_nothing(self, client: AsyncClient, api):
        """A rejected create leaves the store unchanged."""
        await client.post("/api/notes", json={"title": "", "content": "World"})

        response = await client.get("/api/notes")

        assert api.assert_status(response, 200) == []


class TestListNotes:
    """Tests for GET /api/notes."""

    @pytest.mark.asyncio
    async def test_list_empty(self, client: AsyncClient, api):
        """Should return an empty array when there are no notes."""
        response = await client.get("/api/notes")

        assert api.assert_status(response, 200) == []

    @pytest.mark.asyncio
    async def test_list_returns_all_notes(self, client: AsyncClient, api):
        """Should return every stored note."""
        first = await _create(client, title="First")
        second = await _create(client, title="Second")

        response = await client.get("/api/notes")

        data = api.assert_status(response, 200)
        assert {note["id"] for note in data} == {first["id"], second["id"]}


class TestGetNote:
    """Tests for GET /api/notes/{id}."""

    @pytest.mark.asyncio
    async def test_get_note_success(self, client: AsyncClient, api):
        """Should return the stored note."""
        created = await _create(client, category="Mika")

        response = await client.get(f"/api/notes/{created['id']}")

        assert api.assert_status(response, 200) == created

    @pytest.mark.asyncio
    async def test_get_note_not_found(self, client: AsyncClient, api):
        """Should return 404 for an unknown id."""
        response = await client.get("/api/notes/does-not-exist")

        data = api.assert_error(response, 404, "RES_NOT_FOUND")
        assert data["error"] == "Note not found"


class TestUpdateNote:
    """Tests for PATCH /api/notes/{id}."""

    @pytest.mark.asyncio
    async def test_favorite_only_update_keeps_other_fields(
        self,
        client: AsyncClient,
        api,
    ):
        """Sending only isFavorite changes nothing else."""
        created = await _create(client, category="Heyo")

        response = await client.patch(
            f"/api/notes/{created['id']}",
            json={"isFavorite": True},
        )

        data = api.assert_status(response, 200)
        assert data["isFavorite"] is True
        for key in ("id", "title", "content", "category", "createdAt"):
            assert data[key] == created[key]

    @pytest.mark.asyncio
    async def test_update_title_and_content(self, client: AsyncClient, api):
        """Should replace the given fields."""
        created = await _create(client)

        response = await client.patch(
            f"/api/notes/{created['id']}",
            json={"title": "Hello", "content": "There"},
        )

        data = api.assert_status(response, 200)
        assert data["title"] == "Hello"
        assert data["content"] == "There"
        assert data["isFavorite"] is False

    @pytest.mark.asyncio
    async def test_null_category_clears_it(self, client: AsyncClient, api):
        """An explicit null category removes it."""
        created = await _create(client, category="Noor")

        response = await client.patch(
            f"/api/notes/{created['id']}",
            json={"category": None},
        )

        assert api.assert_status(response, 200)["category"] is None

    @pytest.mark.asyncio
    async def test_empty_update_returns_note_unchanged(
        self,
        client: AsyncClient,
        api,
    ):
        """An empty body is accepted and changes nothing."""
        created = await _create(client)

        response = await client.patch(f"/api/notes/{created['id']}", json={})

        assert api.assert_status(response, 200) == created

    @pytest.mark.asyncio
    async def test_update_blank_title_fails(self, client: AsyncClient, api):
        """Present fields are validated like on create."""
        created = await _create(client)

        response = await client.patch(
            f"/api/notes/{created['id']}",
            json={"title": " "},
        )

        api.assert_validation_error(response, field="title")

        unchanged = await client.get(f"/api/notes/{created['id']}")
        assert unchanged.json()["title"] == "Hi"

    @pytest.mark.asyncio
    async def test_update_not_found(self, client: AsyncClient, api):
        """Should return 404 for an unknown id."""
        response = await client.patch(
            "/api/notes/does-not-exist",
            json={"isFavorite": True},
        )

        api.assert_error(response, 404, "RES_NOT_FOUND")


class TestDeleteNote:
    """Tests for DELETE /api/notes/{id}."""

    @pytest.mark.asyncio
    async def test_delete_then_get_is_not_found(self, client: AsyncClient, api):
        """A deleted note is gone for good."""
        created = await _create(client)

        response = await client.delete(f"/api/notes/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""

        follow_up = await client.get(f"/api/notes/{created['id']}")
        api.assert_error(follow_up, 404, "RES_NOT_FOUND")

    @pytest.mark.asyncio
    async def test_delete_twice(self, client: AsyncClient, api):
        """The second delete of the same id is a 404."""
        created = await _create(client)
        await client.delete(f"/api/notes/{created['id']}")

        response = await client.delete(f"/api/notes/{created['id']}")

        api.assert_error(response, 404, "RES_NOT_FOUND")


class TestNoteLifecycle:
    """End-to-end flows through the API."""

    @pytest.mark.asyncio
    async def test_create_favorite_list_delete(self, client: AsyncClient, api):
        """Create, favorite, list and delete a note."""
        created = await _create(client, title="Hi", content="World", category="Sely")
        assert created["isFavorite"] is False

        favored = await client.patch(
            f"/api/notes/{created['id']}",
            json={"isFavorite": True},
        )
        assert api.assert_status(favored, 200)["isFavorite"] is True

        listing = api.assert_status(await client.get("/api/notes"), 200)
        assert len(listing) == 1
        assert listing[0]["title"] == "Hi"
        assert listing[0]["category"] == "Sely"
        assert listing[0]["isFavorite"] is True

        deleted = await client.delete(f"/api/notes/{created['id']}")
        assert deleted.status_code == 204

        assert api.assert_status(await client.get("/api/notes"), 200) == []


class TestStoreFailures:
    """Store failures surface as 500 without leaking internals."""

    @pytest.mark.asyncio
    async def test_list_store_failure(self, client: AsyncClient, api):
        error = OperationalError("SELECT", {}, Exception("database is locked"))
        with patch.object(NoteRepository, "get_all", side_effect=error):
            response = await client.get("/api/notes")

        data = api.assert_error(response, 500, "SYS_DATABASE_ERROR")
        assert data["error"] == "Failed to fetch notes"
        assert "locked" not in response.text

    @pytest.mark.asyncio
    async def test_create_store_failure(self, client: AsyncClient, api):
        error = OperationalError("INSERT", {}, Exception("disk full"))
        with patch.object(NoteRepository, "create", side_effect=error):
            response = await client.post(
                "/api/notes",
                json={"title": "Hi", "content": "World"},
            )

        data = api.assert_error(response, 500, "SYS_DATABASE_ERROR")
        assert data["error"] == "Failed to create note"

    @pytest.mark.asyncio
    async def test_get_store_failure(self, client: AsyncClient, api):
        error = OperationalError("SELECT", {}, Exception("server closed the connection"))
        with patch.object(NoteRepository, "get_by_id_or_none", side_effect=error):
            response = await client.get("/api/notes/some-id")

        data = api.assert_error(response, 500, "SYS_DATABASE_ERROR")
        assert data["error"] == "Failed to fetch note"
        assert "server closed" not in response.text

    @pytest.mark.asyncio
    async def test_update_store_failure(self, client: AsyncClient, api):
        created = await _create(client)
        error = OperationalError("UPDATE", {}, Exception("deadlock detected"))
        with patch.object(NoteRepository, "update", side_effect=error):
            response = await client.patch(
                f"/api/notes/{created['id']}",
                json={"isFavorite": True},
            )

        data = api.assert_error(response, 500, "SYS_DATABASE_ERROR")
        assert data["error"] == "Failed to update note"
        assert "deadlock" not in response.text

    @pytest.mark.asyncio
    async def test_delete_store_failure(self, client: AsyncClient, api):
        created = await _create(client)
        error = OperationalError("DELETE", {}, Exception("disk I/O error"))
        with patch.object(NoteRepository, "delete", side_effect=error):
            response = await client.delete(f"/api/notes/{created['id']}")

        data = api.assert_error(response, 500, "SYS_DATABASE_ERROR")
        assert data["error"] == "Failed to delete note"
        assert "disk I/O" not in response.text
