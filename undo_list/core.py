# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Persistent linear undo history.

Summary
-------
``UndoList`` keeps a ``present`` state between two tuples: ``past`` holds
superseded states with the most recent first and ``future`` holds undone
states with the next redo target first. Every operation returns a new value;
inputs are never modified.

Complexity
----------
Transitions are ``O(n)`` in the touched segment because tuples are copied;
queries are ``O(1)``.

Examples
--------
>>> ul = fresh(0).new(1).new(2)
>>> ul.to_list()
[0, 1, 2]
>>> ul.undo()
UndoList(past=(0,), present=1, future=(2,))
>>> ul.undo().reset()
UndoList(past=(), present=0, future=())

See Also
--------
undo_list.actions.apply : Drive a history with ``Action`` values.
"""

from __future__ import annotations

import functools
import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Iterator, List, Tuple, TypeVar

S = TypeVar("S")
T = TypeVar("T")
U = TypeVar("U")
B = TypeVar("B")


@dataclass(frozen=True)
class UndoList(Generic[S]):
    """Immutable history split into past, present and future.

    Parameters
    ----------
    past : Iterable[S]
        Earlier states, most recent first.
    present : S
        Current state.
    future : Iterable[S]
        Undone states, next redo target first.

    Segments may be any iterable except ``str`` or ``bytes``, which raise
    ``TypeError`` rather than being split into characters.
    """

    past: Tuple[S, ...]
    present: S
    future: Tuple[S, ...] = field(default=())

    def __post_init__(self) -> None:
        for name in ("past", "future"):
            segment = getattr(self, name)
            if isinstance(segment, (str, bytes)):
                raise TypeError(f"{name} must be a sequence of states, not {type(segment).__name__}")
        # normalise any iterable to a tuple so equality is structural
        if not isinstance(self.past, tuple):
            object.__setattr__(self, "past", tuple(self.past))
        if not isinstance(self.future, tuple):
            object.__setattr__(self, "future", tuple(self.future))

    # ------------------------------------------------------------------ queries

    @property
    def has_past(self) -> bool:
        return bool(self.past)

    @property
    def has_future(self) -> bool:
        return bool(self.future)

    @property
    def length_past(self) -> int:
        return len(self.past)

    @property
    def length_future(self) -> int:
        return len(self.future)

    @property
    def length(self) -> int:
        """Number of states in the history, always at least one."""

        return len(self.past) + 1 + len(self.future)

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[S]:
        """Yield states oldest to newest."""

        yield from reversed(self.past)
        yield self.present
        yield from self.future

    # -------------------------------------------------------------- transitions

    def undo(self) -> "UndoList[S]":
        """Step back one state; no-op when there is no past."""

        if not self.past:
            return self
        return UndoList(self.past[1:], self.past[0], (self.present,) + self.future)

    def redo(self) -> "UndoList[S]":
        """Step forward one state; no-op when there is no future."""

        if not self.future:
            return self
        return UndoList((self.present,) + self.past, self.future[0], self.future[1:])

    def new(self, state: S) -> "UndoList[S]":
        """Record ``state`` as the new present and drop the redo history."""

        return UndoList((self.present,) + self.past, state, ())

    def forget(self) -> "UndoList[S]":
        """Drop the past, keeping present and future."""

        return UndoList((), self.present, self.future)

    def reset(self) -> "UndoList[S]":
        """Return to the oldest recorded state with no past or future."""

        oldest = self.past[-1] if self.past else self.present
        return fresh(oldest)

    # -------------------------------------------------------------- combinators

    def map(self, fn: Callable[[S], T]) -> "UndoList[T]":
        """Apply ``fn`` to every state, keeping each in its segment."""

        return UndoList(
            tuple(fn(s) for s in self.past),
            fn(self.present),
            tuple(fn(s) for s in self.future),
        )

    def map_present(self, fn: Callable[[S], S]) -> "UndoList[S]":
        return UndoList(self.past, fn(self.present), self.future)

    def view(self, fn: Callable[[S], T]) -> T:
        """Project the present through ``fn``."""

        return fn(self.present)

    def foldl(self, reducer: Callable[[B, S], B], initial: B) -> B:
        """Reduce states oldest to newest.

        ``reducer`` receives ``(accumulator, state)`` like
        :func:`functools.reduce`.

        Examples
        --------
        >>> UndoList((1, 0), 2, (3,)).foldl(lambda acc, s: acc + [s], [])
        [0, 1, 2, 3]
        """

        acc = functools.reduce(reducer, reversed(self.past), initial)
        acc = reducer(acc, self.present)
        return functools.reduce(reducer, self.future, acc)

    def foldr(self, reducer: Callable[[B, S], B], initial: B) -> B:
        """Reduce states newest to oldest.

        Examples
        --------
        >>> UndoList((1, 0), 2, (3,)).foldr(lambda acc, s: acc + [s], [])
        [3, 2, 1, 0]
        """

        acc = functools.reduce(reducer, reversed(self.future), initial)
        acc = reducer(acc, self.present)
        return functools.reduce(reducer, self.past, acc)

    def reverse(self) -> "UndoList[S]":
        """Swap past and future so the history reads backwards in time."""

        return UndoList(self.future, self.present, self.past)

    def to_list(self) -> List[S]:
        """Return the full history oldest to newest."""

        return list(self)


def fresh(state: S) -> UndoList[S]:
    """Start a history holding only ``state``."""

    return UndoList((), state, ())


def from_list(present: S, future: Iterable[S]) -> UndoList[S]:
    """Build a history with no past.

    Not the inverse of :meth:`UndoList.to_list`: the first element of a
    flattened history becomes the present and nothing is placed in the past.
    """

    return UndoList((), present, tuple(future))


def map2(fn: Callable[[S, T], U], first: UndoList[S], second: UndoList[T]) -> UndoList[U]:
    """Combine two histories position by position.

    Past and future segments are zipped and therefore truncated to the
    shorter of the two; the presents are always combined.
    """

    return UndoList(
        tuple(fn(a, b) for a, b in zip(first.past, second.past)),
        fn(first.present, second.present),
        tuple(fn(a, b) for a, b in zip(first.future, second.future)),
    )


def and_map(fns: UndoList[Callable[[S], T]], values: UndoList[S]) -> UndoList[T]:
    """Apply a history of functions to a history of values."""

    return map2(lambda fn, value: fn(value), fns, values)


def flatten(nested: UndoList[UndoList[S]]) -> UndoList[S]:
    """Join a history of histories into one history.

    The inner history at the outer present supplies the new present; every
    other inner history is spliced in at its chronological position.
    """

    inner = nested.present
    before = itertools.chain.from_iterable(ul.to_list() for ul in reversed(nested.past))
    after = itertools.chain.from_iterable(ul.to_list() for ul in nested.future)
    past = inner.past + tuple(reversed(list(before)))
    return UndoList(past, inner.present, inner.future + tuple(after))


def flat_map(fn: Callable[[S], UndoList[T]], ul: UndoList[S]) -> UndoList[T]:
    return flatten(ul.map(fn))


def and_then(ul: UndoList[S], fn: Callable[[S], UndoList[T]]) -> UndoList[T]:
    return flat_map(fn, ul)


def connect(first: UndoList[S], second: UndoList[S]) -> UndoList[S]:
    """Append the whole of ``second`` after ``first``'s future.

    ``first``'s present stays the present of the result.
    """

    return UndoList(first.past, first.present, first.future + tuple(second.to_list()))


def to_list(ul: UndoList[Any]) -> List[Any]:
    return ul.to_list()


__all__ = [
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
]
