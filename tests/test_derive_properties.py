import numpy as np

from jpffscore.play import blank_play
from jpffscore.rules.derive import derive_next
from jpffscore.vocab import PLAY_TYPES

BOUNDS = {"yard_line": (1, 50), "to_go": (1, 50), "down": (1, 4)}


def test_numeric_edits_stay_in_bounds():
    rng = np.random.default_rng(0)
    p = blank_play()
    for _ in range(300):
        field = ("yard_line", "to_go", "down")[int(rng.integers(0, 3))]
        p = derive_next(p, field, int(rng.integers(-200, 200)))
        lo, hi = BOUNDS[field]
        assert lo <= getattr(p, field) <= hi


def test_yard_line_bounded_under_random_gains():
    rng = np.random.default_rng(1)
    p = derive_next(derive_next(blank_play(), "play_type", "Run"), "yard_line", 25)
    for _ in range(500):
        if rng.random() < 0.1:
            p = derive_next(p, "field_half", "opponent" if p.field_half == "own" else "own")
        p = derive_next(p, "gain_yards", int(rng.integers(-120, 120)))
        assert 1 <= p.yard_line <= 50


def test_first_down_monotone_under_automatic_rules():
    rng = np.random.default_rng(2)
    p = derive_next(derive_next(blank_play(), "to_go", 3), "gain_yards", 10)
    assert p.is_first_down
    for _ in range(200):
        field = ("gain_yards", "to_go", "yard_line")[int(rng.integers(0, 3))]
        p = derive_next(p, field, int(rng.integers(-20, 60)))
        assert p.is_first_down


def test_random_edit_sequences_never_raise():
    rng = np.random.default_rng(3)
    values = ["", "abc", "4.5", "-7", "1e3", None, 3, -9, 120, True, "Punt"]
    fields = ["yard_line", "to_go", "down", "gain_yards", "penalty_yards", "play_type",
              "is_first_down", "passer_no", "remarks", "quarter", "bogus"]
    p = blank_play()
    for _ in range(500):
        field = fields[int(rng.integers(0, len(fields)))]
        value = values[int(rng.integers(0, len(values)))]
        if field == "play_type" and rng.random() < 0.5:
            value = PLAY_TYPES[int(rng.integers(0, len(PLAY_TYPES)))]
        p = derive_next(p, field, value)
        assert 1 <= p.down <= 4
        assert p.yard_line is None or 1 <= p.yard_line <= 50
        assert p.to_go is None or 1 <= p.to_go <= 50
