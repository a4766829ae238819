"""
Noteful Backend: Uniqueness-Conflict Translator
================================================

What:  Recognises a unique-constraint violation from PostgreSQL and turns
       it into a ConflictError naming the entity.
How:   asyncpg reports SQLSTATE 23505; SQLAlchemy wraps it in IntegrityError
       whose `.orig` exposes `sqlstate` (and `pgcode` on other drivers).
       Every other error propagates unchanged.

Usage:
    with translate_unique_violation("folder"):
        await db.flush()
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError

from noteful.exceptions import ConflictError

UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: BaseException) -> bool:
    if not isinstance(exc, IntegrityError):
        return False
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return code == UNIQUE_VIOLATION


@contextmanager
def translate_unique_violation(entity: str) -> Iterator[None]:
    try:
        yield
    except IntegrityError as e:
        if is_unique_violation(e):
            raise ConflictError(entity=entity, context={"constraint": str(e.orig)}) from e
        raise
