from __future__ import annotations
from typing import Sequence

import pandas as pd

from jpffscore.export.csv_log import SACK_SUFFIX, format_ball_on
from jpffscore.play import GameMeta, Play
from jpffscore.scoring.board import Scoreboard
from jpffscore.vocab import SIDES

BOARD_COLUMNS = ["1Q", "2Q", "3Q", "4Q", "OT", "Total"]
LOG_COLUMNS = ["Q", "TIME", "ATTACK", "BALL ON", "DN", "TG", "PLAYS", "YDS", "FD",
               "REMARKS", "SCORE TEAM", "SCORE METHOD"]


def scoreboard_frame(board: Scoreboard, meta: GameMeta) -> pd.DataFrame:
    rows = {}
    for name, row in ((meta.home_name, board.home), (meta.visitor_name, board.visitor)):
        d = row.as_dict()
        rows[name] = [d["Q1"], d["Q2"], d["Q3"], d["Q4"], d["OT"], d["Total"]]
    return pd.DataFrame.from_dict(rows, orient="index", columns=BOARD_COLUMNS)


def recent_plays(plays: Sequence[Play], n: int) -> list[Play]:
    """The last `n` plays, newest first."""
    return list(reversed(plays[-n:])) if n > 0 else []


def play_log_frame(plays: Sequence[Play], meta: GameMeta, newest_first: bool = True) -> pd.DataFrame:
    ordered = list(reversed(plays)) if newest_first else list(plays)
    rows = []
    for p in ordered:
        rows.append([
            p.quarter,
            p.clock,
            meta.side_name(p.attacking_side),
            format_ball_on(p),
            p.down,
            "" if p.to_go is None else p.to_go,
            p.play_type + (SACK_SUFFIX if p.is_sack else ""),
            "" if p.gain_yards is None else p.gain_yards,
            "Y" if p.is_first_down else "N",
            p.remarks,
            meta.side_name(p.scoring_side) if p.scoring_side in SIDES else "-",
            p.scoring_method or "-",
        ])
    index = [p.id or "" for p in ordered]
    return pd.DataFrame(rows, columns=LOG_COLUMNS, index=index)


def render_game(board: Scoreboard, plays: Sequence[Play], meta: GameMeta,
                title: str = "", recent: int = 0) -> str:
    out = []
    if title:
        out.append(title)
    out.append(f"{meta.date}  {meta.venue}".rstrip())
    out.append("")
    out.append(scoreboard_frame(board, meta).to_string())
    out.append("")
    log = play_log_frame(recent_plays(plays, recent) if recent else plays, meta,
                         newest_first=not recent)
    out.append("(no plays)" if log.empty else log.to_string())
    return "\n".join(out) + "\n"
