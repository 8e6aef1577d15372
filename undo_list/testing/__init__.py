"""Test utilities for undo_list.

The strategies here need ``hypothesis``, which is installed with the
``test`` extra (``pip install undo-list[test]``).
"""

from .strategies import actions, undo_lists

__all__ = ["actions", "undo_lists"]
