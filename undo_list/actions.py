# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Action vocabulary and the ``apply`` adapter.

Summary
-------
A host program describes what happened with :class:`Action` values.
``New`` wraps one host-level message; the remaining four variants are
handled by the history alone. :func:`apply` lifts a plain
``(payload, state) -> state`` updater to one over :class:`UndoList`.

Examples
--------
>>> from undo_list.core import fresh
>>> inc = lambda _msg, n: n + 1
>>> ul = fresh(0)
>>> for action in (New(None), New(None), UNDO):
...     ul = apply(inc, action, ul)
>>> ul
UndoList(past=(0,), present=1, future=(2,))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

from .core import UndoList, fresh

A = TypeVar("A")
P = TypeVar("P")
S = TypeVar("S")

Shape = Tuple[int, int]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Action:
    """Base class of the closed set of history actions."""


@dataclass(frozen=True)
class Reset(Action):
    """Return to the oldest state and drop everything else."""


@dataclass(frozen=True)
class Undo(Action):
    pass


@dataclass(frozen=True)
class Redo(Action):
    pass


@dataclass(frozen=True)
class Forget(Action):
    """Drop the past."""


@dataclass(frozen=True)
class New(Action, Generic[A]):
    """Host message producing a new present."""

    payload: A


RESET = Reset()
UNDO = Undo()
REDO = Redo()
FORGET = Forget()


def apply(update: Callable[[A, S], S], action: Action, ul: UndoList[S]) -> UndoList[S]:
    """Return the history after ``action``.

    ``update`` is only consulted for :class:`New`, exactly once and with the
    current present. Exceptions from ``update`` propagate to the caller.
    """

    if isinstance(action, New):
        return ul.new(update(action.payload, ul.present))
    if isinstance(action, Undo):
        if not ul.has_past:
            log.debug("undo with empty past; history unchanged")
        return ul.undo()
    if isinstance(action, Redo):
        if not ul.has_future:
            log.debug("redo with empty future; history unchanged")
        return ul.redo()
    if isinstance(action, Forget):
        return ul.forget()
    if isinstance(action, Reset):
        return ul.reset()
    raise TypeError(f"expected an Action, got {type(action).__name__}")


def lift(update: Callable[[A, S], S]) -> Callable[[Action, UndoList[S]], UndoList[S]]:
    """Curry :func:`apply` into an updater over histories."""

    def _update(action: Action, ul: UndoList[S]) -> UndoList[S]:
        return apply(update, action, ul)

    return _update


def map_action(fn: Callable[[A], P], action: Action) -> Action:
    """Map the payload of ``New``; other variants pass through unchanged."""

    if isinstance(action, New):
        return New(fn(action.payload))
    return action


def foldp(
    update: Callable[[A, S], S],
    initial: S,
    actions: Iterable[Action],
    *,
    history: Optional[UndoList[S]] = None,
) -> Iterator[UndoList[S]]:
    """Yield the history after each action in ``actions``.

    Folding starts from ``fresh(initial)``, or from ``history`` when given, in
    which case ``initial`` is ignored. The starting history is not yielded.
    """

    ul = fresh(initial) if history is None else history
    for action in actions:
        ul = apply(update, action, ul)
        yield ul


def shape(ul: UndoList) -> Shape:
    """Return ``(length_past, length_future)``."""

    return ul.length_past, ul.length_future


def expected_shape(action: Action, current: Shape) -> Shape:
    """Shape after ``action`` independent of any state content."""

    past, future = current
    if isinstance(action, New):
        return past + 1, 0
    if isinstance(action, Undo):
        return (past - 1, future + 1) if past > 0 else current
    if isinstance(action, Redo):
        return (past + 1, future - 1) if future > 0 else current
    if isinstance(action, Forget):
        return 0, future
    if isinstance(action, Reset):
        return 0, 0
    raise TypeError(f"expected an Action, got {type(action).__name__}")


__all__ = [
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
    "shape",
    "expected_shape",
]
