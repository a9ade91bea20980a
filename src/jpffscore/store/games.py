from __future__ import annotations

import logging
import uuid
from dataclasses import asdict, replace
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter

from jpffscore.play import GameMeta
from jpffscore.store._io import PathLike, read_json, write_json_atomic

_log = logging.getLogger("jpffscore.store")

_games_adapter = TypeAdapter(dict[str, GameMeta])


class GameBook:
    """Local registry of games (date, venue and team display names) keyed by id."""

    def __init__(self, path: PathLike):
        self.path = Path(path)
        self._games: dict[str, GameMeta] = _games_adapter.validate_python(
            read_json(self.path, default={})
        )

    def _save(self) -> None:
        write_json_atomic({k: asdict(m) for k, m in self._games.items()}, self.path)

    def list(self) -> list[GameMeta]:
        return sorted(self._games.values(), key=lambda m: (m.date, m.game_id))

    def get(self, game_id: str) -> Optional[GameMeta]:
        return self._games.get(game_id)

    def create_game(self, date: str, venue: str, home: str, visitor: str) -> GameMeta:
        if not home.strip() or not visitor.strip():
            raise ValueError("both home and visitor team names are required")
        _check_distinct(home, visitor)
        meta = GameMeta(game_id=uuid.uuid4().hex, date=date, venue=venue,
                        home=home.strip(), visitor=visitor.strip())
        self._games[meta.game_id] = meta
        self._save()
        _log.info("created game %s: %s vs %s on %s", meta.game_id, meta.home, meta.visitor, date)
        return meta

    def set_names(self, game_id: str, home: Optional[str] = None,
                  visitor: Optional[str] = None) -> GameMeta:
        meta = self._games.get(game_id)
        if meta is None:
            raise KeyError(game_id)
        meta = replace(
            meta,
            home=meta.home if home is None else home.strip(),
            visitor=meta.visitor if visitor is None else visitor.strip(),
        )
        _check_distinct(meta.home_name, meta.visitor_name)
        self._games[game_id] = meta
        self._save()
        return meta


def _check_distinct(home: str, visitor: str) -> None:
    # exported play logs identify sides by display name
    if home.strip() == visitor.strip():
        raise ValueError(f"home and visitor team names must differ (both {home.strip()!r})")
