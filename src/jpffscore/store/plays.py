"""
Play store for a single game.

`PlayStore` keeps the committed play list in memory; `JsonPlayStore` is the
local-only variant that persists the list to a JSON file after every
mutation. Both order plays by `sequence` and treat `id` as the identity of a
play: create assigns it, update/delete look it up.

The apply_* methods take change events seen from elsewhere (another device,
a reload) and merge them last-writer-wins by id.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from pydantic import TypeAdapter

from jpffscore.play import Play
from jpffscore.store._io import PathLike, read_json, write_json_atomic

_log = logging.getLogger("jpffscore.store")

_plays_adapter = TypeAdapter(list[Play])


class PlayNotFound(KeyError):
    pass


def _sort_key(p: Play):
    return (p.sequence if p.sequence is not None else -1, p.created_at or "")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class PlayStore:
    def __init__(self, plays: Iterable[Play] = ()):
        self._plays: dict[str, Play] = {}
        self.load(plays)

    def __len__(self) -> int:
        return len(self._plays)

    def __contains__(self, play_id: object) -> bool:
        return play_id in self._plays

    def _next_sequence(self) -> int:
        seqs = [p.sequence for p in self._plays.values() if p.sequence is not None]
        return max(seqs, default=0) + 1

    def _changed(self) -> None:
        """Hook run after every mutation."""

    def load(self, plays: Iterable[Play]) -> None:
        """Replace the cached list wholesale."""
        self._plays = {p.id: p for p in plays if p.id is not None}

    def list(self) -> list[Play]:
        return sorted(self._plays.values(), key=_sort_key)

    def get(self, play_id: str) -> Play:
        try:
            return self._plays[play_id]
        except KeyError:
            raise PlayNotFound(play_id) from None

    def create(self, draft: Play) -> Play:
        play = replace(
            draft,
            id=uuid.uuid4().hex,
            sequence=self._next_sequence(),
            created_at=draft.created_at or _now(),
        )
        self._plays[play.id] = play
        _log.debug("created play %s (seq %d)", play.id, play.sequence)
        self._changed()
        return play

    def update(self, play: Play) -> Play:
        """Recommit an edited play; its id, sequence and created_at are kept."""
        old = self.get(play.id)
        play = replace(play, sequence=old.sequence, created_at=old.created_at)
        self._plays[play.id] = play
        _log.debug("updated play %s", play.id)
        self._changed()
        return play

    def delete(self, play_id: str) -> None:
        self.get(play_id)
        del self._plays[play_id]
        _log.debug("deleted play %s", play_id)
        self._changed()

    def apply_created(self, play: Play) -> bool:
        if play.id is None or play.id in self._plays:
            return False
        self._plays[play.id] = play
        self._changed()
        return True

    def apply_updated(self, play: Play) -> bool:
        if play.id not in self._plays:
            _log.debug("ignoring update for unknown play %s", play.id)
            return False
        self._plays[play.id] = play
        self._changed()
        return True


class JsonPlayStore(PlayStore):
    """PlayStore persisted to a JSON file (one file per game)."""

    def __init__(self, path: PathLike):
        self.path = Path(path)
        raw = read_json(self.path, default=[])
        super().__init__(_plays_adapter.validate_python(raw))
        _log.debug("loaded %d plays from %s", len(self), self.path)

    def _changed(self) -> None:
        write_json_atomic([p.to_dict() for p in self.list()], self.path)

