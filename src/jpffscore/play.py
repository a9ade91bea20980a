from __future__ import annotations
from dataclasses import asdict, dataclass, fields
from typing import Any, Optional

from jpffscore.constants import DEFAULT_CLOCK, DEFAULT_HOME_NAME, DEFAULT_VISITOR_NAME
from jpffscore.vocab import HOME, NONE, OWN, VISITOR

@dataclass(frozen=True, slots=True)
class Play:
    id: Optional[str] = None
    sequence: Optional[int] = None   # assigned at commit, display/scoring order
    created_at: Optional[str] = None
    quarter: str = "1Q"              # 1Q..4Q, OT
    clock: str = DEFAULT_CLOCK
    attacking_side: str = HOME
    field_half: str = OWN            # half of the field yard_line refers to
    yard_line: Optional[int] = None  # 1..50
    down: int = 1                    # 1..4
    to_go: Optional[int] = None      # 1..50
    play_type: str = ""
    gain_yards: Optional[int] = None
    is_first_down: bool = False
    is_sack: bool = False
    passer_no: Optional[str] = None
    runner_no: Optional[str] = None
    kicker_no: Optional[str] = None
    tackler_no: Optional[str] = None
    tackler2_no: Optional[str] = None
    interceptor_no: Optional[str] = None
    turnover: str = NONE
    penalty_yards: Optional[int] = None
    remarks: str = ""
    scoring_side: str = NONE
    scoring_method: str = NONE

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


PLAY_FIELDS = tuple(f.name for f in fields(Play))

# Set by the store at commit; never edited through the entry flow.
COMMIT_FIELDS = frozenset({"id", "sequence", "created_at"})


def blank_play() -> Play:
    return Play()


@dataclass(frozen=True, slots=True)
class GameMeta:
    game_id: str
    date: str
    venue: str = ""
    home: str = ""
    visitor: str = ""

    @property
    def home_name(self) -> str:
        return self.home or DEFAULT_HOME_NAME

    @property
    def visitor_name(self) -> str:
        return self.visitor or DEFAULT_VISITOR_NAME

    def side_name(self, side: str) -> str:
        """Display name for a side code; unknown codes are returned as-is."""
        if side == HOME:
            return self.home_name
        if side == VISITOR:
            return self.visitor_name
        return side

    def side_of(self, name: str) -> str:
        """Inverse of `side_name`."""
        if name == self.home_name:
            return HOME
        if name == self.visitor_name:
            return VISITOR
        return name
