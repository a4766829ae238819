"""
Noteful Backend: Shared Model Columns
======================================

What:  Identifier generation and the id/created_at/updated_at columns every
       entity carries.

Identifier layout (12 bytes, rendered as 24 lowercase hex characters):
    ┌──────────────┬──────────────────┬───────────────┐
    │ 4B timestamp │ 5B process random │ 3B counter    │
    └──────────────┴──────────────────┴───────────────┘
    Roughly time-ordered, unique per process without coordination.
"""

import itertools
import os
import time
from datetime import datetime, timezone

from sqlalchemy import String, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

_PROCESS_RANDOM = os.urandom(5)
_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))


def generate_object_id() -> str:
    """Mint a new 24-character hexadecimal identifier."""
    timestamp = int(time.time()).to_bytes(4, "big")
    counter = (next(_counter) & 0xFFFFFF).to_bytes(3, "big")
    return (timestamp + _PROCESS_RANDOM + counter).hex()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class IdentifiedMixin:
    """Primary key plus insert/update timestamps (UTC, timezone-aware)."""

    id: Mapped[str] = mapped_column(
        String(24),
        primary_key=True,
        default=generate_object_id,
        comment="24-character hexadecimal identifier",
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    # onupdate fires for ORM flushes and for Core UPDATE statements that do
    # not set the column themselves (the cascades rely on the latter).
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )
