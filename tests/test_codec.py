# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Tests for encoding and decoding histories and actions."""

import json

import pytest

from undo_list.actions import FORGET, REDO, RESET, UNDO, New
from undo_list.codec import (
    decode_action,
    decode_undo_list,
    dumps,
    encode_action,
    encode_undo_list,
    loads,
)
from undo_list.core import UndoList
from undo_list.errors import DecodeError, InvalidActionTagError, MissingFieldError


def test_encode_undo_list_document_shape() -> None:
    ul = UndoList((2, 1), 3, (4,))
    assert encode_undo_list(ul) == {"past": [2, 1], "present": 3, "future": [4]}


def test_custom_state_codec_round_trip() -> None:
    ul = UndoList(({1, 2},), {3}, ())
    doc = encode_undo_list(ul, sorted)
    assert doc == {"past": [[1, 2]], "present": [3], "future": []}
    assert decode_undo_list(json.loads(json.dumps(doc)), set) == UndoList(({1, 2},), {3}, ())


@pytest.mark.parametrize("missing", ["past", "present", "future"])
def test_decode_undo_list_missing_field(missing: str) -> None:
    doc = {"past": [], "present": 0, "future": []}
    del doc[missing]
    with pytest.raises(MissingFieldError) as err:
        decode_undo_list(doc)
    assert err.value.field == missing
    assert missing in str(err.value)


def test_decode_undo_list_rejects_bad_shapes() -> None:
    with pytest.raises(DecodeError):
        decode_undo_list([1, 2, 3])
    with pytest.raises(DecodeError):
        decode_undo_list({"past": 1, "present": 0, "future": []})


def test_null_present_is_not_missing() -> None:
    assert decode_undo_list({"past": [], "present": None, "future": []}) == UndoList((), None, ())


@pytest.mark.parametrize(
    "action, doc",
    [
        (RESET, "Reset"),
        (UNDO, "Undo"),
        (REDO, "Redo"),
        (FORGET, "Forget"),
        (New({"x": 1}), {"New": {"x": 1}}),
    ],
)
def test_action_documents(action, doc) -> None:
    assert encode_action(action) == doc
    assert decode_action(doc) == action


def test_action_payload_codecs() -> None:
    assert encode_action(New(3), str) == {"New": "3"}
    assert decode_action({"New": "3"}, int) == New(3)


def test_invalid_action_tag_names_the_tag() -> None:
    with pytest.raises(InvalidActionTagError) as err:
        decode_action("Rewind")
    assert err.value.tag == "Rewind"
    assert "Rewind" in str(err.value)


def test_invalid_action_tag_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        decode_action("undo")


@pytest.mark.parametrize("doc", [{"Old": 1}, {"New": 1, "extra": 2}, {}, 3, None])
def test_decode_action_rejects_other_shapes(doc) -> None:
    with pytest.raises(DecodeError):
        decode_action(doc)


def test_encode_action_rejects_non_actions() -> None:
    with pytest.raises(TypeError):
        encode_action("Undo")  # type: ignore[arg-type]


def test_dumps_and_loads() -> None:
    ul = UndoList(("b", "a"), "c", ("d",))
    text = dumps(ul, sort_keys=True)
    assert json.loads(text) == {"future": ["d"], "past": ["b", "a"], "present": "c"}
    assert loads(text) == ul


def test_loads_rejects_invalid_json() -> None:
    with pytest.raises(DecodeError, match="invalid JSON"):
        loads("{not json")
