"""
Records API - Application Package Initializer
=============================================

What: Marks the `records_api` directory as a Python package.
Who:  Imported by uvicorn, Alembic, pytest and `python -m records_api`.

Architecture Note:
    The backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, store calls, shaping
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Five independent record collections live behind this stack:
    authors, books, products, students and classrooms.
"""

__version__ = "1.0.0"
