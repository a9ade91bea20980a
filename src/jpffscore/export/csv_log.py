"""
Play log CSV export

One row per play in list order, every field double-quoted, CRLF line endings.

Columns: Q, TIME, ATTACK TEAM, BALL ON, DOWN, TO GO, PLAYS, GAIN Y, FD,
         PASSER, RUNNER, KICKER, TACKLE BY, TACKLE BY2, INT/PD, TURNOVER,
         PENALTY Y, REMARKS, SCORE (H/V), SCORE METHOD

`parse_csv` reads the same layout back into plays so an exported file can be
re-imported (team display names are resolved through the game's metadata).
"""
from __future__ import annotations

import csv
import io
import logging
import os
import re
from typing import Iterable, Optional

import pandas as pd

from jpffscore.play import GameMeta, Play
from jpffscore.rules.derive import parse_int
from jpffscore.vocab import HOME, NONE, OPPONENT, OWN, VISITOR

_log = logging.getLogger("jpffscore.export")

COLUMNS = [
    "Q", "TIME", "ATTACK TEAM", "BALL ON", "DOWN", "TO GO", "PLAYS", "GAIN Y", "FD",
    "PASSER", "RUNNER", "KICKER", "TACKLE BY", "TACKLE BY2", "INT/PD",
    "TURNOVER", "PENALTY Y", "REMARKS", "SCORE (H/V)", "SCORE METHOD",
]
JERSEY_COLUMNS = {
    "PASSER": "passer_no",
    "RUNNER": "runner_no",
    "KICKER": "kicker_no",
    "TACKLE BY": "tackler_no",
    "TACKLE BY2": "tackler2_no",
    "INT/PD": "interceptor_no",
}

FIRST_DOWN_MARK = "○"
SACK_SUFFIX = " (Sack)"
HALF_PREFIX = {OWN: "OWN", OPPONENT: "OPP"}
SIDE_CODE = {HOME: "H", VISITOR: "V"}
LINE_TERMINATOR = "\r\n"

_BALL_ON = re.compile(r"^(OWN|OPP)(\d*)$")


def _text(v) -> str:
    return "" if v is None else str(v)


def format_ball_on(p: Play) -> str:
    return HALF_PREFIX.get(p.field_half, p.field_half) + _text(p.yard_line)


def parse_ball_on(cell: str) -> tuple[str, Optional[int]]:
    m = _BALL_ON.match(cell.strip())
    if not m:
        return OWN, None
    half = OWN if m.group(1) == "OWN" else OPPONENT
    return half, parse_int(m.group(2))


def play_row(p: Play, meta: GameMeta) -> dict[str, str]:
    row = {
        "Q": p.quarter,
        "TIME": p.clock,
        "ATTACK TEAM": meta.side_name(p.attacking_side),
        "BALL ON": format_ball_on(p),
        "DOWN": _text(p.down),
        "TO GO": _text(p.to_go),
        "PLAYS": p.play_type + (SACK_SUFFIX if p.is_sack else ""),
        "GAIN Y": _text(p.gain_yards),
        "FD": FIRST_DOWN_MARK if p.is_first_down else "",
    }
    for col, attr in JERSEY_COLUMNS.items():
        row[col] = _text(getattr(p, attr))
    row.update({
        "TURNOVER": p.turnover,
        "PENALTY Y": _text(p.penalty_yards),
        "REMARKS": p.remarks,
        "SCORE (H/V)": SIDE_CODE.get(p.scoring_side, ""),
        "SCORE METHOD": p.scoring_method,
    })
    return row


def plays_frame(plays: Iterable[Play], meta: GameMeta) -> pd.DataFrame:
    rows = [play_row(p, meta) for p in plays]
    return pd.DataFrame(rows, columns=COLUMNS, dtype=object)


def export_csv(plays: Iterable[Play], meta: GameMeta) -> str:
    df = plays_frame(plays, meta)
    return df.to_csv(index=False, quoting=csv.QUOTE_ALL, lineterminator=LINE_TERMINATOR)


def csv_filename(meta: GameMeta) -> str:
    return f"game_{meta.date}.csv"


def write_csv(plays: Iterable[Play], meta: GameMeta, filepath: str) -> str:
    """Write the play log to `filepath`, creating its directory. Returns the path."""
    parent = os.path.dirname(filepath)
    if parent:
        os.makedirs(parent, exist_ok=True)
    text = export_csv(plays, meta)
    with open(filepath, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    _log.info("exported play log for game %s to %s", meta.game_id, filepath)
    return filepath


def _row_to_play(row: dict[str, str], meta: GameMeta) -> Play:
    half, yard_line = parse_ball_on(row["BALL ON"])
    play_type = row["PLAYS"]
    is_sack = play_type.endswith(SACK_SUFFIX)
    if is_sack:
        play_type = play_type[: -len(SACK_SUFFIX)]
    side_codes = {v: k for k, v in SIDE_CODE.items()}
    jerseys = {attr: (row[col] or None) for col, attr in JERSEY_COLUMNS.items()}
    return Play(
        quarter=row["Q"],
        clock=row["TIME"],
        attacking_side=meta.side_of(row["ATTACK TEAM"]),
        field_half=half,
        yard_line=yard_line,
        down=parse_int(row["DOWN"]) or 1,
        to_go=parse_int(row["TO GO"]),
        play_type=play_type,
        gain_yards=parse_int(row["GAIN Y"]),
        is_first_down=row["FD"] == FIRST_DOWN_MARK,
        is_sack=is_sack,
        turnover=row["TURNOVER"],
        penalty_yards=parse_int(row["PENALTY Y"]),
        remarks=row["REMARKS"],
        scoring_side=side_codes.get(row["SCORE (H/V)"], NONE),
        scoring_method=row["SCORE METHOD"],
        **jerseys,
    )


def parse_csv(text: str, meta: GameMeta) -> list[Play]:
    """Read an exported play log back into (uncommitted) plays, in file order."""
    df = pd.read_csv(io.StringIO(text), dtype=str, keep_default_na=False)
    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"play log is missing columns: {missing}")
    return [_row_to_play(row, meta) for row in df.to_dict(orient="records")]


def read_csv(filepath: str, meta: GameMeta) -> list[Play]:
    with open(filepath, "r", encoding="utf-8", newline="") as f:
        return parse_csv(f.read(), meta)
