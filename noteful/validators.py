"""
Noteful Backend: Input Validators
==================================

What:  Identifier well-formedness and required-field presence checks.
How:   `is_*` functions are pure predicates; `ensure_*` raise ValidationError.
When:  At the top of every service operation, before any storage call.

Identifier format:
    24 hexadecimal characters (12 bytes), the same shape as the ids minted
    by `noteful.models.common.generate_object_id`. This is a structural
    check only; whether a document with that id exists is a separate
    question answered by storage (404 vs 400). Either case is accepted;
    ensure_valid_id hands back the lowercase form that storage holds.
"""

import re
from typing import Any, Iterable, List, Mapping

from noteful.exceptions import ValidationError

OBJECT_ID_LENGTH = 24
_OBJECT_ID_RE = re.compile(r"[0-9a-fA-F]{%d}" % OBJECT_ID_LENGTH)

INVALID_ID_MESSAGE = "The `id` is not valid"
INVALID_FOLDER_ID_MESSAGE = "The `folderId` is not valid"
INVALID_TAG_ID_MESSAGE = "The tag `id` is not valid"


def is_valid_id(value: Any) -> bool:
    """Return True if `value` is a 24-character hexadecimal string."""
    return isinstance(value, str) and _OBJECT_ID_RE.fullmatch(value) is not None


def is_present(payload: Mapping[str, Any], field: str) -> bool:
    """
    Return True if `field` is in `payload` with a non-empty value.

    None, "" and empty collections all count as missing.
    """
    if field not in payload:
        return False
    value = payload[field]
    if value is None:
        return False
    if isinstance(value, (str, list, tuple, dict)) and len(value) == 0:
        return False
    return True


def ensure_valid_id(value: Any, message: str = INVALID_ID_MESSAGE, field: str = "id") -> str:
    """
    Raise ValidationError unless `value` is a well-formed id.

    Returns the id in canonical lowercase form. Stored ids are compared
    case-sensitively, so callers must use the returned value.
    """
    if not is_valid_id(value):
        raise ValidationError(message=message, field=field)
    return value.lower()


def ensure_valid_ids(
    values: Iterable[Any], message: str = INVALID_TAG_ID_MESSAGE, field: str = "tags"
) -> List[str]:
    return [ensure_valid_id(value, message=message, field=field) for value in values]


def ensure_present(payload: Mapping[str, Any], field: str) -> None:
    if not is_present(payload, field):
        raise ValidationError(message=f"Missing `{field}` in request body", field=field)
