"""
Records API - Student Endpoint Tests
====================================

What we test:
    ✅ Create answers 201
    ✅ Email is stored and returned exactly as sent
    ✅ Duplicate email answers 400 "Email already exists" (exact match)
    ✅ Required fields; nothing persisted on rejection
    ✅ List with totalStudents, delete by id, 404 on unknown id
"""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from records_api.models.student import Student


class TestCreateStudent:

    @pytest.mark.asyncio
    async def test_create_student_returns_201(self, client):
        response = await client.post(
            "/api/student", json={"name": "Ada", "email": "ada@example.com"}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["msg"] == "Student created successfully"
        assert body["data"]["name"] == "Ada"
        assert body["data"]["email"] == "ada@example.com"

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, client, test_db):
        await client.post("/api/student", json={"name": "Ada", "email": "ada@example.com"})

        response = await client.post(
            "/api/student", json={"name": "Imposter", "email": "ada@example.com"}
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "msg": "Email already exists"}

        count = await test_db.execute(select(func.count(Student.id)))
        assert count.scalar() == 1

    @pytest.mark.asyncio
    async def test_email_returned_as_sent(self, client):
        response = await client.post(
            "/api/student", json={"name": "Ada", "email": "Ada@Example.com"}
        )

        assert response.status_code == 201
        assert response.json()["data"]["email"] == "Ada@Example.com"

        listed = (await client.get("/api/students")).json()["data"]
        assert listed == [response.json()["data"]]

    @pytest.mark.asyncio
    async def test_emails_differing_in_case_are_distinct(self, client):
        await client.post("/api/student", json={"name": "Ada", "email": "ada@example.com"})

        response = await client.post(
            "/api/student", json={"name": "Ada 2", "email": "ADA@Example.com"}
        )

        assert response.status_code == 201
        assert (await client.get("/api/students")).json()["totalStudents"] == 2

    @pytest.mark.asyncio
    async def test_store_usable_after_duplicate(self, client):
        await client.post("/api/student", json={"name": "Ada", "email": "ada@example.com"})
        await client.post("/api/student", json={"name": "Ada", "email": "ada@example.com"})

        response = await client.post(
            "/api/student", json={"name": "Grace", "email": "grace@example.com"}
        )

        assert response.status_code == 201

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [{"name": "Ada"}, {"email": "ada@example.com"}, {"name": "", "email": ""}],
    )
    async def test_create_student_requires_fields(self, client, test_db, payload):
        response = await client.post("/api/student", json=payload)

        assert response.status_code == 400
        assert response.json() == {"success": False, "msg": "Name and email are required"}

        count = await test_db.execute(select(func.count(Student.id)))
        assert count.scalar() == 0


class TestListAndDeleteStudents:

    @pytest.mark.asyncio
    async def test_list_students(self, client):
        await client.post("/api/student", json={"name": "Ada", "email": "ada@example.com"})
        await client.post("/api/student", json={"name": "Grace", "email": "grace@example.com"})

        body = (await client.get("/api/students")).json()

        assert body["msg"] == "Students fetched successfully"
        assert body["totalStudents"] == 2
        assert [s["name"] for s in body["data"]] == ["Ada", "Grace"]

    @pytest.mark.asyncio
    async def test_delete_student(self, client):
        created = await client.post(
            "/api/student", json={"name": "Ada", "email": "ada@example.com"}
        )
        student_id = created.json()["data"]["id"]

        response = await client.delete(f"/api/student/{student_id}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "msg": "Student deleted successfully"}
        assert (await client.get("/api/students")).json()["totalStudents"] == 0

    @pytest.mark.asyncio
    async def test_email_reusable_after_delete(self, client):
        created = await client.post(
            "/api/student", json={"name": "Ada", "email": "ada@example.com"}
        )
        await client.delete(f"/api/student/{created.json()['data']['id']}")

        response = await client.post(
            "/api/student", json={"name": "Ada", "email": "ada@example.com"}
        )

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_delete_unknown_student_returns_404(self, client):
        response = await client.delete(f"/api/student/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"success": False, "msg": "student not found"}
