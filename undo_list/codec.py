# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""JSON-compatible encoding of histories and actions.

A history becomes ``{"past": [...], "present": ..., "future": [...]}``.
Payload-free actions become their tag string (``"Reset"``, ``"Undo"``,
``"Redo"``, ``"Forget"``) and ``New`` becomes ``{"New": payload}``. State
and payload encoders default to the identity, which suits values that are
already JSON-compatible.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping

from .actions import FORGET, REDO, RESET, UNDO, Action, New
from .core import UndoList
from .errors import DecodeError, InvalidActionTagError, MissingFieldError

log = logging.getLogger(__name__)

_FIELDS = ("past", "present", "future")
_NEW_TAG = "New"
_TAGS: dict[str, Action] = {
    "Reset": RESET,
    "Undo": UNDO,
    "Redo": REDO,
    "Forget": FORGET,
}
_TAG_OF = {type(action): tag for tag, action in _TAGS.items()}


def _identity(value: Any) -> Any:
    return value


def encode_undo_list(ul: UndoList, encode_state: Callable[[Any], Any] = _identity) -> dict:
    """Return the document form of ``ul``."""

    return {
        "past": [encode_state(s) for s in ul.past],
        "present": encode_state(ul.present),
        "future": [encode_state(s) for s in ul.future],
    }


def decode_undo_list(doc: Any, decode_state: Callable[[Any], Any] = _identity) -> UndoList:
    """Rebuild a history from its document form.

    Raises
    ------
    MissingFieldError
        If ``past``, ``present`` or ``future`` is absent.
    DecodeError
        If ``doc`` is not a mapping or a segment is not a list.
    """

    if not isinstance(doc, Mapping):
        raise DecodeError(f"expected an object, got {type(doc).__name__}")
    for name in _FIELDS:
        if name not in doc:
            log.debug("history document without %s: %r", name, doc)
            raise MissingFieldError(name)
    for name in ("past", "future"):
        if not isinstance(doc[name], list):
            raise DecodeError(f"field {name!r} must be a list, got {type(doc[name]).__name__}")
    return UndoList(
        tuple(decode_state(s) for s in doc["past"]),
        decode_state(doc["present"]),
        tuple(decode_state(s) for s in doc["future"]),
    )


def encode_action(action: Action, encode_payload: Callable[[Any], Any] = _identity) -> Any:
    """Return the document form of ``action``."""

    if isinstance(action, New):
        return {_NEW_TAG: encode_payload(action.payload)}
    try:
        return _TAG_OF[type(action)]
    except KeyError:
        raise TypeError(f"expected an Action, got {type(action).__name__}") from None


def decode_action(doc: Any, decode_payload: Callable[[Any], Any] = _identity) -> Action:
    """Rebuild an action from its document form.

    Raises
    ------
    InvalidActionTagError
        If ``doc`` is a string other than the four fixed tags.
    DecodeError
        If ``doc`` is neither a tag nor a single-field ``New`` object.
    """

    if isinstance(doc, str):
        action = _TAGS.get(doc)
        if action is None:
            log.debug("unknown action tag %r", doc)
            raise InvalidActionTagError(doc)
        return action
    if isinstance(doc, Mapping):
        if set(doc) != {_NEW_TAG}:
            raise DecodeError(f"expected a single {_NEW_TAG!r} field, got {list(doc)}")
        return New(decode_payload(doc[_NEW_TAG]))
    raise DecodeError(f"expected a tag or an object, got {type(doc).__name__}")


def dumps(ul: UndoList, encode_state: Callable[[Any], Any] = _identity, **kwargs: Any) -> str:
    """Serialise ``ul`` to JSON text; ``kwargs`` go to :func:`json.dumps`."""

    return json.dumps(encode_undo_list(ul, encode_state), **kwargs)


def loads(text: str, decode_state: Callable[[Any], Any] = _identity) -> UndoList:
    """Parse JSON text produced by :func:`dumps`."""

    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"invalid JSON: {exc}") from exc
    return decode_undo_list(doc, decode_state)


__all__ = [
    "encode_undo_list",
    "decode_undo_list",
    "encode_action",
    "decode_action",
    "dumps",
    "loads",
]
