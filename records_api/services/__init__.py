# Services package init
"""
Records API - Services Layer
============================

What:  Business logic between routes (HTTP) and the database (persistence).
How:   One stateless service per entity, exposed as a module-level singleton.
       Each call receives the request's AsyncSession from the route.

Service Inventory:
    - AuthorService:     create/list/delete, cascade-deletes the author's books
    - BookService:       create/list (author name expansion)/delete
    - ProductService:    create/list (category filter)/delete
    - StudentService:    create (unique email)/list/delete
    - ClassroomService:  create/list (student name expansion)/delete
    - base.RecordService: shared delete-by-id, field and store-error helpers
"""
