# Models package init
"""
Records API - ORM Models
========================

One table per record collection. Importing this package registers every
model on `Base.metadata` (used by init_models() and Alembic).

Model Inventory:
    - Author:    authors     (id, name)
    - Book:      books       (id, title, author_id)
    - Product:   products    (id, name, category, price)
    - Student:   students    (id, name, email UNIQUE)
    - Classroom: classrooms  (id, name, students JSON list of student ids)
"""

from records_api.models.author import Author
from records_api.models.book import Book
from records_api.models.classroom import Classroom
from records_api.models.product import Product
from records_api.models.student import Student

__all__ = ["Author", "Book", "Classroom", "Product", "Student"]
