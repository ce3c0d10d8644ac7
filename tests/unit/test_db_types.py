from types import SimpleNamespace

import pytest

from proofstore.db import types as db_types
from proofstore.errors import ProofSerializationError, StoreReadError

SQLITE = SimpleNamespace(name="sqlite")


def test_encoding_is_compact_and_unescaped():
    assert db_types.encode_string_list(["A", "A → B"]) == '["A","A → B"]'


def test_encoding_is_deterministic_for_equal_sequences():
    assert db_types.encode_string_list(("A", "B")) == db_types.encode_string_list(["A", "B"])


def test_none_encodes_as_empty_list():
    assert db_types.encode_string_list(None) == "[]"


@pytest.mark.parametrize("value", ["AB", b"AB", 5, ["A", 1], [None]])
def test_encoding_rejects_non_string_sequences(value):
    with pytest.raises(ProofSerializationError):
        db_types.encode_string_list(value)


@pytest.mark.parametrize("raw,expected", [(None, []), ("", []), ("null", []), ('["x","y"]', ["x", "y"])])
def test_decoding_accepts_stored_forms(raw, expected):
    assert db_types.decode_string_list(raw) == expected


@pytest.mark.parametrize("raw", ["not json", '{"a": 1}', "[1, 2]", '"A"'])
def test_decoding_rejects_corrupt_payloads(raw):
    with pytest.raises(StoreReadError):
        db_types.decode_string_list(raw)


def test_type_decorator_delegates_to_codec():
    column_type = db_types.JSONEncodedList()
    bound = column_type.process_bind_param(["P", "Q"], SQLITE)
    assert bound == '["P","Q"]'
    assert column_type.process_result_value(bound, SQLITE) == ["P", "Q"]
    assert isinstance(column_type.copy(), db_types.JSONEncodedList)
