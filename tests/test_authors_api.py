"""
Records API - Author Endpoint Tests
===================================

What we test:
    ✅ Create returns 200 with the envelope and a generated id
    ✅ Missing/empty/blank name is rejected with 400 and nothing persisted
    ✅ List returns every author with totalAuthors
    ✅ Delete removes the author and cascades to its books only
    ✅ Unknown or malformed ids answer 404
    ✅ End-to-end author → book → list → delete flow
"""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from records_api.models.author import Author
from records_api.models.book import Book


class TestCreateAuthor:

    @pytest.mark.asyncio
    async def test_create_author_success(self, client):
        response = await client.post("/api/author", json={"name": "Octavia Butler"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["msg"] == "Author created successfully"
        assert body["data"]["name"] == "Octavia Butler"
        assert body["data"]["id"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": "   "}, {"name": None}])
    async def test_create_author_requires_name(self, client, test_db, payload):
        response = await client.post("/api/author", json=payload)

        assert response.status_code == 400
        assert response.json() == {"success": False, "msg": "Name is required"}

        count = await test_db.execute(select(func.count(Author.id)))
        assert count.scalar() == 0

    @pytest.mark.asyncio
    async def test_create_author_without_body(self, client):
        response = await client.post("/api/author")

        assert response.status_code == 400
        assert response.json()["msg"] == "Name is required"

    @pytest.mark.asyncio
    async def test_create_author_rejects_non_string_name(self, client):
        response = await client.post("/api/author", json={"name": 42})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "name" in body["msg"]


class TestListAuthors:

    @pytest.mark.asyncio
    async def test_list_authors_empty(self, client):
        response = await client.get("/api/authors")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "msg": "Authors fetched successfully",
            "totalAuthors": 0,
            "data": [],
        }

    @pytest.mark.asyncio
    async def test_list_authors_returns_created_records(self, client):
        created = []
        for name in ("A", "B", "C"):
            response = await client.post("/api/author", json={"name": name})
            created.append(response.json()["data"])

        response = await client.get("/api/authors")
        body = response.json()

        assert body["totalAuthors"] == 3
        assert body["data"] == created


class TestDeleteAuthor:

    @pytest.mark.asyncio
    async def test_delete_author_success(self, client, author):
        response = await client.delete(f"/api/author/{author['id']}")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "msg": "Author and their books deleted successfully",
        }

        listing = await client.get("/api/authors")
        assert listing.json()["totalAuthors"] == 0

    @pytest.mark.asyncio
    async def test_delete_author_cascades_to_books(self, client, test_db, author):
        other = (await client.post("/api/author", json={"name": "Other"})).json()["data"]
        for title in ("Book 1", "Book 2"):
            await client.post("/api/book", json={"title": title, "authorId": author["id"]})
        await client.post("/api/book", json={"title": "Kept", "authorId": other["id"]})

        response = await client.delete(f"/api/author/{author['id']}")
        assert response.status_code == 200

        books = (await client.get("/api/books")).json()
        assert books["totalBooks"] == 1
        assert [b["title"] for b in books["data"]] == ["Kept"]

        remaining = await test_db.execute(select(func.count(Book.id)))
        assert remaining.scalar() == 1

    @pytest.mark.asyncio
    async def test_delete_unknown_author_returns_404(self, client):
        response = await client.delete(f"/api/author/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"success": False, "msg": "Author not found"}

    @pytest.mark.asyncio
    async def test_delete_unknown_author_keeps_books(self, client):
        """Books pointing at a never-created author survive a 404 delete."""
        ghost_id = str(uuid4())
        await client.post("/api/book", json={"title": "Orphan", "authorId": ghost_id})

        response = await client.delete(f"/api/author/{ghost_id}")
        assert response.status_code == 404

        books = (await client.get("/api/books")).json()
        assert books["totalBooks"] == 1

    @pytest.mark.asyncio
    async def test_delete_malformed_id_returns_404(self, client):
        response = await client.delete("/api/author/not-a-valid-id")

        assert response.status_code == 404
        assert response.json()["success"] is False


class TestAuthorBookFlow:

    @pytest.mark.asyncio
    async def test_end_to_end(self, client):
        created = await client.post("/api/author", json={"name": "A"})
        assert created.status_code == 200
        assert created.json()["data"]["name"] == "A"
        author_id = created.json()["data"]["id"]

        book = await client.post("/api/book", json={"title": "T", "authorId": author_id})
        assert book.status_code == 200

        books = (await client.get("/api/books")).json()
        assert books["totalBooks"] == 1
        assert books["data"][0]["authorId"] == {"name": "A"}

        deleted = await client.delete(f"/api/author/{author_id}")
        assert deleted.status_code == 200

        books = (await client.get("/api/books")).json()
        assert books["data"] == []
