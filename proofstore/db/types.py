"""Custom SQLAlchemy types used by the persistence layer."""
from __future__ import annotations

import json
from typing import Iterable, List, Optional

from sqlalchemy.types import Text, TypeDecorator

from proofstore.errors import ProofSerializationError, StoreReadError


def encode_string_list(value: Optional[Iterable[str]]) -> str:
    """Serialize an ordered sequence of strings to compact JSON text.

    The encoding is deterministic (no whitespace, no ASCII escaping) so two
    equal sequences always produce byte-identical text and can be compared
    directly in SQL.
    """
    if value is None:
        return "[]"
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ProofSerializationError(
            f"Expected a sequence of strings, got {type(value).__name__}"
        )
    items = list(value)
    for index, item in enumerate(items):
        if not isinstance(item, str):
            raise ProofSerializationError(
                f"Element {index} is {type(item).__name__}, expected str"
            )
    try:
        return json.dumps(items, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise ProofSerializationError(f"Could not encode sequence: {exc}") from exc


def decode_string_list(raw: Optional[str]) -> List[str]:
    if raw is None or raw == "":
        return []
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StoreReadError(f"Stored array payload is not valid JSON: {raw[:40]!r}") from exc
    # Legacy rows may hold a JSON null for an unset sequence.
    if parsed is None:
        return []
    if not isinstance(parsed, list) or not all(isinstance(item, str) for item in parsed):
        raise StoreReadError(f"Stored array payload is not a list of strings: {raw[:40]!r}")
    return parsed


class JSONEncodedList(TypeDecorator[List[str]]):
    """Store an ordered list of strings as JSON text.

    Text rather than a native JSON column keeps equality comparisons exact on
    every dialect, which the premise matching query relies on.
    """

    cache_ok = True
    impl = Text

    def process_bind_param(self, value, dialect):  # type: ignore[override]
        return encode_string_list(value)

    def process_result_value(self, value, dialect):  # type: ignore[override]
        return decode_string_list(value)

    def copy(self, **kwargs):  # type: ignore[override]
        return JSONEncodedList()
