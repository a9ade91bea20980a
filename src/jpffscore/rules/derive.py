"""
Play-entry derivation.

`derive_next` is called once per field edit on a draft play and returns the
next draft with dependent fields filled in. Which edit triggers which rule:

    gain_yards, to_go   -> first-down inference (only ever sets the flag)
    play_type           -> kick-play reset (down 1, 10 to go, no first down)
    any field           -> dead-play zeroing (spike/kneel and timeouts gain 0)
    gain_yards          -> ball-position projection

Rules run once, in that order, against the post-edit draft. Editing
yard_line never re-projects the ball.
"""
from __future__ import annotations
import re
import sys
from dataclasses import fields, replace
from typing import Any, Iterable, Optional

from jpffscore.constants import (
    FIRST_AND_TEN_YTG, MAX_DOWN, MAX_TO_GO, MAX_YARDLINE, MIN_DOWN,
    MIN_PENALTY_YARDS, MIN_TO_GO, MIN_YARDLINE,
)
from jpffscore.play import COMMIT_FIELDS, PLAY_FIELDS, Play
from jpffscore.vocab import DEAD_PLAYS, KICK_PLAYS, OPPONENT, SCRIMMAGE_PLAYS

# (min, max); None means unbounded on that side
NUMERIC_BOUNDS: dict[str, tuple[Optional[int], Optional[int]]] = {
    "yard_line": (MIN_YARDLINE, MAX_YARDLINE),
    "to_go": (MIN_TO_GO, MAX_TO_GO),
    "down": (MIN_DOWN, MAX_DOWN),
    "gain_yards": (None, None),
    "penalty_yards": (MIN_PENALTY_YARDS, None),
}
BOOL_FIELDS = frozenset({"is_first_down", "is_sack"})
JERSEY_FIELDS = frozenset({
    "passer_no", "runner_no", "kicker_no", "tackler_no", "tackler2_no", "interceptor_no",
})
EDITABLE_FIELDS = frozenset(PLAY_FIELDS) - COMMIT_FIELDS
DEFAULTS = {f.name: f.default for f in fields(Play)}

_TRUE_WORDS = frozenset({"1", "true", "yes", "y", "on", "x", "○"})
_DIGITS = re.compile(r"[+-]?\d+")


def parse_int(value: Any) -> Optional[int]:
    """Integral value of `value`, or None for blank, non-numeric or fractional input."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        # too many digits for int(); only the sign matters once clamped
        if _DIGITS.fullmatch(text):
            return -sys.maxsize if text.startswith("-") else sys.maxsize
    try:
        f = float(text)
    except ValueError:
        return None
    return int(f) if f.is_integer() else None


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_WORDS


def parse_jersey(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value).strip() or None


def clamp(n: int, lo: Optional[int], hi: Optional[int]) -> int:
    if lo is not None:
        n = max(lo, n)
    if hi is not None:
        n = min(hi, n)
    return n


def coerce(draft: Play, field: str, value: Any) -> Any:
    """Normalize a raw edit for `field`; numeric values are clamped to their bounds."""
    if field in NUMERIC_BOUNDS:
        n = parse_int(value)
        if n is None:
            # down is never unset
            return draft.down if field == "down" else None
        lo, hi = NUMERIC_BOUNDS[field]
        return clamp(n, lo, hi)
    if field in BOOL_FIELDS:
        return parse_bool(value)
    if field in JERSEY_FIELDS:
        return parse_jersey(value)
    return DEFAULTS[field] if value is None else str(value)


def _infer_first_down(p: Play) -> Play:
    if p.gain_yards is not None and p.to_go is not None and p.gain_yards >= p.to_go:
        return replace(p, is_first_down=True)
    return p


def _reset_kick(p: Play) -> Play:
    if p.play_type in KICK_PLAYS:
        return replace(p, down=1, to_go=FIRST_AND_TEN_YTG, is_first_down=False)
    return p


def _zero_dead_play(p: Play) -> Play:
    if p.play_type in DEAD_PLAYS and p.gain_yards != 0:
        return replace(p, gain_yards=0)
    return p


def _project_ball(p: Play) -> Play:
    if p.play_type not in SCRIMMAGE_PLAYS or p.yard_line is None or p.gain_yards is None:
        return p
    sign = -1 if p.field_half == OPPONENT else 1
    yl = clamp(p.yard_line + sign * p.gain_yards, MIN_YARDLINE, MAX_YARDLINE)
    return replace(p, yard_line=yl)


def derive_next(draft: Play, field: str, value: Any) -> Play:
    """Apply one field edit to `draft` and return the consistent next draft.

    Never raises: malformed numeric input becomes unset, out-of-range input
    snaps to the nearest bound, and unknown or commit-only fields leave the
    draft as it was.
    """
    if field not in EDITABLE_FIELDS:
        return draft
    nxt = replace(draft, **{field: coerce(draft, field, value)})
    if field in ("gain_yards", "to_go"):
        nxt = _infer_first_down(nxt)
    if field == "play_type":
        nxt = _reset_kick(nxt)
    nxt = _zero_dead_play(nxt)
    if field == "gain_yards":
        nxt = _project_ball(nxt)
    return nxt


def derive_many(draft: Play, edits: Iterable[tuple[str, Any]]) -> Play:
    """Fold edits through `derive_next` in order, one field event at a time."""
    for field, value in edits:
        draft = derive_next(draft, field, value)
    return draft
