# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Persistent undo/redo history with an action vocabulary."""

from .actions import (
    FORGET,
    REDO,
    RESET,
    UNDO,
    Action,
    Forget,
    New,
    Redo,
    Reset,
    Undo,
    apply,
    foldp,
    lift,
    map_action,
)
from .codec import decode_action, decode_undo_list, dumps, encode_action, encode_undo_list, loads
from .core import (
    UndoList,
    and_map,
    and_then,
    connect,
    flat_map,
    flatten,
    fresh,
    from_list,
    map2,
    to_list,
)
from .errors import DecodeError, InvalidActionTagError, MissingFieldError

__all__ = [
    "__version__",
    "UndoList",
    "fresh",
    "from_list",
    "map2",
    "and_map",
    "flatten",
    "flat_map",
    "and_then",
    "connect",
    "to_list",
    "Action",
    "Reset",
    "Undo",
    "Redo",
    "Forget",
    "New",
    "RESET",
    "UNDO",
    "REDO",
    "FORGET",
    "apply",
    "lift",
    "map_action",
    "foldp",
    "encode_undo_list",
    "decode_undo_list",
    "encode_action",
    "decode_action",
    "dumps",
    "loads",
    "DecodeError",
    "InvalidActionTagError",
    "MissingFieldError",
]
__version__ = "0.1.0"
