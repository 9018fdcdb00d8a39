"""
Records API - Shared Service Helpers
====================================

What:  Field checks, identifier parsing, store-error translation and the
       delete-by-id flow shared by every entity service.
How:   Entity services subclass RecordService and set `model` / `resource`.

Error Handling Strategy:
    Store calls run inside `store_errors()`. Exceptions that are already part
    of the application hierarchy pass through untouched; anything else is
    logged with its traceback and re-raised as DatabaseError carrying the
    raw failure text.
"""

import logging
import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Type

from sqlalchemy.ext.asyncio import AsyncSession

from records_api.database import Base
from records_api.exceptions import DatabaseError, NotFoundError, RecordsAPIError

logger = logging.getLogger(__name__)


def is_blank(value: Any) -> bool:
    """True for None, whitespace-only strings and empty lists."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def parse_record_id(raw: Any) -> Optional[uuid.UUID]:
    """Parses a path/body identifier; returns None when it is not a UUID."""
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(str(raw).strip())
    except (TypeError, ValueError):
        return None


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Translates unexpected store failures into DatabaseError."""
    try:
        yield
    except RecordsAPIError:
        raise
    except Exception as e:
        logger.error("Store failure during %s: %s", operation, str(e), exc_info=True)
        raise DatabaseError(
            detail=str(e),
            context={"operation": operation, "error_type": type(e).__name__},
        ) from e


class RecordService:
    """
    Base class for the per-entity services.

    Services are stateless: the session is passed into every call, so a
    single module-level instance serves all requests.
    """

    model: Type[Base]
    resource: str = "Record"
    # Overrides the default "<resource> not found" 404 message
    not_found_message: Optional[str] = None

    async def _delete_by_id(self, db: AsyncSession, record_id: str) -> Any:
        """
        Look up a record by id and delete it.

        An id that does not parse as a UUID cannot match any record and is
        reported as not found, same as a well-formed unknown id.

        Raises:
            NotFoundError: No record with this id (→ 404)
        """
        parsed = parse_record_id(record_id)
        if parsed is None:
            raise NotFoundError(
                resource=self.resource,
                resource_id=str(record_id),
                message=self.not_found_message,
            )

        record = await db.get(self.model, parsed)
        if record is None:
            raise NotFoundError(
                resource=self.resource,
                resource_id=str(parsed),
                message=self.not_found_message,
            )

        await db.delete(record)
        await db.flush()
        logger.info("%s %s deleted", self.resource, parsed)
        return record
