from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable

from jpffscore.constants import (
    FIELD_GOAL_POINTS, SAFETY_POINTS, TFP_KICK_POINTS, TFP_PLAY_POINTS, TOUCHDOWN_POINTS,
)
from jpffscore.play import Play
from jpffscore.vocab import FG, HOME, SAFETY, TD, TFP_KICK, TFP_PASS, TFP_RUN, VISITOR

POINTS = {
    TD: TOUCHDOWN_POINTS,
    FG: FIELD_GOAL_POINTS,
    SAFETY: SAFETY_POINTS,
    TFP_KICK: TFP_KICK_POINTS,
    TFP_RUN: TFP_PLAY_POINTS,
    TFP_PASS: TFP_PLAY_POINTS,
}

# Unset quarter is the draft default, 1Q. OT has its own bucket and is
# never folded into Q1..Q4.
QUARTER_BUCKET = {"": "Q1", "1Q": "Q1", "2Q": "Q2", "3Q": "Q3", "4Q": "Q4", "OT": "OT"}
BUCKETS = ("Q1", "Q2", "Q3", "Q4", "OT", "Total")


def point_value(method: str) -> int:
    """Points for a scoring method; unknown or '-' methods are worth 0."""
    return POINTS.get(method, 0)


@dataclass(slots=True)
class ScoreRow:
    Q1: int = 0
    Q2: int = 0
    Q3: int = 0
    Q4: int = 0
    OT: int = 0
    Total: int = 0

    def add(self, bucket: str | None, points: int) -> None:
        if bucket is not None:
            setattr(self, bucket, getattr(self, bucket) + points)
        self.Total += points

    def as_dict(self) -> dict[str, int]:
        return {b: getattr(self, b) for b in BUCKETS}


@dataclass(slots=True)
class Scoreboard:
    home: ScoreRow = field(default_factory=ScoreRow)
    visitor: ScoreRow = field(default_factory=ScoreRow)

    def row(self, side: str) -> ScoreRow:
        return self.home if side == HOME else self.visitor

    def as_dict(self) -> dict[str, dict[str, int]]:
        return {HOME: self.home.as_dict(), VISITOR: self.visitor.as_dict()}


def aggregate(plays: Iterable[Play]) -> Scoreboard:
    """Fold committed plays into a per-team, per-quarter scoreboard.

    Each play contributes on its own quarter/side/method only, so the result
    does not depend on list order. Plays without a side or without a
    point-scoring method are skipped; quarter codes outside 1Q..4Q/OT still
    count toward Total.
    """
    board = Scoreboard()
    for p in plays:
        pts = point_value(p.scoring_method)
        if pts == 0 or p.scoring_side not in (HOME, VISITOR):
            continue
        board.row(p.scoring_side).add(QUARTER_BUCKET.get(p.quarter), pts)
    return board


def final_score(board: Scoreboard) -> tuple[int, int]:
    return board.home.Total, board.visitor.Total
