"""
Noteful Backend: Cascade Coordinator
=====================================

What:  Runs a primary delete and its reference cleanup as two concurrent,
       independent writes and joins on both.
How:   Each operation gets its own session and its own transaction from the
       session factory; asyncio.gather(return_exceptions=True) waits for all
       of them, then the first failure (in argument order) is re-raised.

Guarantees:
    - Both operations always run to completion; a failure in one does not
      cancel the other.
    - No rollback across operations: if one commits and the other fails,
      the committed one stays. A crash between them can leave a dangling
      reference, which readers tolerate (tag expansion drops unknown ids).
    - No timeout, no retry.

    requested → {op A, op B} (concurrent) → success | failure
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, List

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = logging.getLogger(__name__)

SessionOperation = Callable[[AsyncSession], Awaitable[Any]]


async def _run_in_own_session(
    session_factory: async_sessionmaker, operation: SessionOperation
) -> Any:
    async with session_factory() as session:
        async with session.begin():
            return await operation(session)


async def run_concurrently(
    session_factory: async_sessionmaker, *operations: SessionOperation
) -> List[Any]:
    """
    Run every operation concurrently, each in its own transaction.

    Returns:
        The operations' results, in argument order.

    Raises:
        The first exception raised by any operation, after all of them
        have finished.
    """
    results = await asyncio.gather(
        *(_run_in_own_session(session_factory, op) for op in operations),
        return_exceptions=True,
    )

    failures = [r for r in results if isinstance(r, BaseException)]
    if failures:
        if len(failures) > 1:
            logger.error(
                "Cascade had %d failing operations; raising the first: %r",
                len(failures), failures[1:],
            )
        raise failures[0]

    return list(results)
