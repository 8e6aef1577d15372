# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
"""Replay a JSON Lines action log through a history.

Each non-blank line of the log holds one encoded action (see
:mod:`undo_list.codec`). Settings are given as ``key=value`` overrides::

    python -m undo_list.replay actions=log.jsonl initial=0 updater=add trace=true

With ``trace=true`` one ``[length_past, length_future]`` pair is printed per
action; otherwise the final encoded history is printed.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional

from omegaconf import OmegaConf

from .actions import Action, foldp, shape
from .codec import decode_action, encode_undo_list
from .core import UndoList, fresh
from .errors import DecodeError

log = logging.getLogger(__name__)


def _replace(payload: Any, state: Any) -> Any:
    return payload


def _add(payload: Any, state: Any) -> Any:
    return state + (1 if payload is None else payload)


UPDATERS: Dict[str, Callable[[Any, Any], Any]] = {
    "replace": _replace,
    "add": _add,
}


@dataclass
class ReplayConfig:
    """Settings for a replay run."""

    actions: str = ""
    initial: Any = 0
    updater: str = "replace"
    trace: bool = False
    indent: Optional[int] = None


def read_actions(path: str | Path) -> Iterator[Action]:
    """Yield decoded actions from a JSON Lines file."""

    with open(path, "r", encoding="utf-8") as fh:
        for lineno, line in enumerate(fh, start=1):
            if not line.strip():
                continue
            try:
                yield decode_action(json.loads(line))
            except (json.JSONDecodeError, DecodeError) as exc:
                raise DecodeError(f"{path}:{lineno}: {exc}") from exc


def replay(cfg: ReplayConfig) -> List[UndoList]:
    """Fold the configured log and return every intermediate history."""

    try:
        update = UPDATERS[cfg.updater]
    except KeyError:
        raise ValueError(
            f"unknown updater {cfg.updater!r}; choose from {sorted(UPDATERS)}"
        ) from None
    histories = []
    for ul in foldp(update, cfg.initial, read_actions(cfg.actions)):
        log.debug("replayed action -> shape %s", shape(ul))
        histories.append(ul)
    log.info("replayed %d actions from %s", len(histories), cfg.actions)
    return histories


def parse_args(args: Optional[List[str]] = None) -> ReplayConfig:
    """Parse ``key=value`` overrides into a :class:`ReplayConfig`."""

    cfg = OmegaConf.structured(ReplayConfig)
    cli_cfg = OmegaConf.from_cli(args or [])
    merged = OmegaConf.merge(cfg, cli_cfg)
    return OmegaConf.to_object(merged)


def main(args: Optional[List[str]] = None) -> int:
    cfg = parse_args(sys.argv[1:] if args is None else args)
    if not cfg.actions:
        print("actions=<path> is required", file=sys.stderr)
        return 2
    histories = replay(cfg)
    if cfg.trace:
        for ul in histories:
            print(json.dumps(list(shape(ul))))
    else:
        final = histories[-1] if histories else fresh(cfg.initial)
        print(json.dumps(encode_undo_list(final), indent=cfg.indent))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    logging.basicConfig(level=logging.INFO)
    raise SystemExit(main())
