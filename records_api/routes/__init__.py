# Routes package init
"""
Records API - API Routes Package
================================

Route Inventory:
    - authors.py:     POST /api/author, GET /api/authors, DELETE /api/author/{id}
    - books.py:       POST /api/book, GET /api/books, DELETE /api/book/{id}
    - products.py:    POST /api/product, GET /api/products, DELETE /api/product/{id}
    - students.py:    POST /api/student, GET /api/students, DELETE /api/student/{id}
    - classrooms.py:  POST /api/classroom, GET /api/classrooms, DELETE /api/classroom/{id}
    - health.py:      GET /health

Routes stay thin: extract request data, call the service, return its
envelope. Which entity routers are mounted is decided by
settings.enabled_resources (see RESOURCE_ROUTERS).
"""

from records_api.routes import authors, books, classrooms, products, students

RESOURCE_ROUTERS = {
    "authors": authors.router,
    "books": books.router,
    "products": products.router,
    "students": students.router,
    "classrooms": classrooms.router,
}
