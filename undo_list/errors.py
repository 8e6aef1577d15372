# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Exceptions raised at the serialization boundary."""

from __future__ import annotations


class DecodeError(ValueError):
    """A document does not describe a history or an action."""


class InvalidActionTagError(DecodeError):
    """An action document carries an unknown string tag."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"invalid action tag: {tag!r}")
        self.tag = tag


class MissingFieldError(DecodeError):
    """A history document lacks one of ``past``, ``present`` or ``future``."""

    def __init__(self, field: str) -> None:
        super().__init__(f"missing field: {field!r}")
        self.field = field


__all__ = ["DecodeError", "InvalidActionTagError", "MissingFieldError"]
