from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from jpffscore.config import FullConfig, load_config
from jpffscore.export.csv_log import csv_filename, read_csv, write_csv
from jpffscore.play import GameMeta, blank_play
from jpffscore.report import play_log_frame, render_game
from jpffscore.rules.derive import derive_many
from jpffscore.scoring.board import aggregate
from jpffscore.store.games import GameBook
from jpffscore.store.plays import JsonPlayStore

_log = logging.getLogger("jpffscore.cli")


def parse_edits(items: Sequence[str]) -> list[tuple[str, str]]:
    """`field=value` arguments, in the order given."""
    edits = []
    for item in items:
        field, sep, value = item.partition("=")
        if not sep or not field:
            raise ValueError(f"expected field=value, got {item!r}")
        edits.append((field.strip(), value))
    return edits


def _game(cfg: FullConfig, game_id: str) -> GameMeta:
    meta = GameBook(cfg.storage.games_path()).get(game_id)
    if meta is None:
        raise KeyError(f"unknown game {game_id}")
    return meta


def _plays(cfg: FullConfig, game_id: str) -> JsonPlayStore:
    return JsonPlayStore(cfg.storage.plays_file(game_id))


def cmd_new_game(cfg: FullConfig, args) -> None:
    meta = GameBook(cfg.storage.games_path()).create_game(
        args.date, args.venue, args.home, args.visitor)
    print(meta.game_id)


def cmd_games(cfg: FullConfig, args) -> None:
    for m in GameBook(cfg.storage.games_path()).list():
        print(f"{m.game_id}  {m.date}  {m.home_name} vs {m.visitor_name}  {m.venue}".rstrip())


def cmd_add(cfg: FullConfig, args) -> None:
    _game(cfg, args.game)
    draft = derive_many(blank_play(), parse_edits(args.edits))
    play = _plays(cfg, args.game).create(draft)
    print(play.id)


def cmd_edit(cfg: FullConfig, args) -> None:
    _game(cfg, args.game)
    store = _plays(cfg, args.game)
    draft = derive_many(store.get(args.play), parse_edits(args.edits))
    store.update(draft)


def cmd_delete(cfg: FullConfig, args) -> None:
    _game(cfg, args.game)
    _plays(cfg, args.game).delete(args.play)


def cmd_board(cfg: FullConfig, args) -> None:
    meta = _game(cfg, args.game)
    plays = _plays(cfg, args.game).list()
    title = f"{cfg.display.title} {cfg.display.subtitle}"
    print(render_game(aggregate(plays), plays, meta, title=title, recent=cfg.display.recent_plays), end="")


def cmd_log(cfg: FullConfig, args) -> None:
    meta = _game(cfg, args.game)
    plays = _plays(cfg, args.game).list()
    log = play_log_frame(plays, meta, newest_first=not args.oldest_first)
    print("(no plays)" if log.empty else log.to_string())


def cmd_export(cfg: FullConfig, args) -> None:
    meta = _game(cfg, args.game)
    out = args.out or os.path.join(cfg.export.out_dir, csv_filename(meta))
    print(write_csv(_plays(cfg, args.game).list(), meta, out))


def cmd_import(cfg: FullConfig, args) -> None:
    meta = _game(cfg, args.game)
    store = _plays(cfg, args.game)
    plays = read_csv(args.csv, meta)
    for p in plays:
        store.create(p)
    _log.info("imported %d plays into game %s", len(plays), meta.game_id)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="jpff-score", description="JPFF East game scorer")
    ap.add_argument("--config", default=None, help="YAML config file")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("new-game", help="register a game and print its id")
    p.add_argument("--date", required=True)
    p.add_argument("--venue", default="")
    p.add_argument("--home", required=True)
    p.add_argument("--visitor", required=True)
    p.set_defaults(func=cmd_new_game)

    p = sub.add_parser("games", help="list registered games")
    p.set_defaults(func=cmd_games)

    p = sub.add_parser("add", help="record a play from field=value edits")
    p.add_argument("game")
    p.add_argument("edits", nargs="*")
    p.set_defaults(func=cmd_add)

    p = sub.add_parser("edit", help="apply field=value edits to a recorded play")
    p.add_argument("game")
    p.add_argument("play")
    p.add_argument("edits", nargs="*")
    p.set_defaults(func=cmd_edit)

    p = sub.add_parser("delete", help="delete a recorded play")
    p.add_argument("game")
    p.add_argument("play")
    p.set_defaults(func=cmd_delete)

    p = sub.add_parser("board", help="scoreboard and most recent plays")
    p.add_argument("game")
    p.set_defaults(func=cmd_board)

    p = sub.add_parser("log", help="full play log")
    p.add_argument("game")
    p.add_argument("--oldest-first", action="store_true")
    p.set_defaults(func=cmd_log)

    p = sub.add_parser("export", help="write the play log as CSV")
    p.add_argument("game")
    p.add_argument("--out", default=None)
    p.set_defaults(func=cmd_export)

    p = sub.add_parser("import", help="append plays from an exported CSV")
    p.add_argument("game")
    p.add_argument("csv")
    p.set_defaults(func=cmd_import)
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        args.func(cfg, args)
    except (KeyError, ValueError, ValidationError, OSError) as e:
        _log.error("%s", e.args[0] if isinstance(e, KeyError) and e.args else e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
