from jpffscore.play import Play, blank_play
from jpffscore.rules.derive import derive_many, derive_next, parse_int


def test_parse_int_inputs():
    assert parse_int("12") == 12
    assert parse_int(" -3 ") == -3
    assert parse_int("7.0") == 7
    assert parse_int(7.5) is None
    assert parse_int("") is None
    assert parse_int("abc") is None
    assert parse_int(None) is None
    assert parse_int(True) is None


def test_clamp_numeric_edits():
    p = blank_play()
    assert derive_next(p, "yard_line", 75).yard_line == 50
    assert derive_next(p, "yard_line", "0").yard_line == 1
    assert derive_next(p, "to_go", -4).to_go == 1
    assert derive_next(p, "to_go", "99").to_go == 50
    assert derive_next(p, "down", 7).down == 4
    assert derive_next(p, "down", 0).down == 1
    assert derive_next(p, "penalty_yards", -5).penalty_yards == 0
    assert derive_next(p, "gain_yards", -80).gain_yards == -80


def test_malformed_numeric_is_unset():
    p = Play(yard_line=20, to_go=5)
    assert derive_next(p, "yard_line", "twenty").yard_line is None
    assert derive_next(p, "to_go", "").to_go is None


def test_malformed_down_keeps_previous():
    p = Play(down=3)
    assert derive_next(p, "down", "x").down == 3


def test_first_down_inferred_from_gain():
    p = Play(play_type="Run", to_go=7)
    assert derive_next(p, "gain_yards", 7).is_first_down
    assert not derive_next(p, "gain_yards", 6).is_first_down


def test_first_down_inferred_from_to_go():
    p = Play(gain_yards=4)
    assert derive_next(p, "to_go", 3).is_first_down
    assert not derive_next(p, "to_go", 5).is_first_down


def test_first_down_never_cleared_automatically():
    p = derive_next(Play(play_type="Run", to_go=5), "gain_yards", 8)
    assert p.is_first_down
    p = derive_next(p, "gain_yards", 1)
    assert p.is_first_down
    p = derive_next(p, "is_first_down", False)
    assert not p.is_first_down


def test_kick_play_resets_series():
    p = Play(down=4, to_go=3, is_first_down=True)
    for kick in ("Kick off", "Punt", "Field goal"):
        q = derive_next(p, "play_type", kick)
        assert (q.down, q.to_go, q.is_first_down) == (1, 10, False)


def test_kick_reset_idempotent():
    p = Play(down=3, to_go=8)
    once = derive_next(p, "play_type", "Field goal")
    twice = derive_next(once, "play_type", "Field goal")
    assert once == twice


def test_dead_play_zeroes_gain():
    p = Play(play_type="Run", gain_yards=6)
    assert derive_next(p, "play_type", "Time out").gain_yards == 0
    q = derive_next(Play(play_type="Spike/Knee down"), "gain_yards", 12)
    assert q.gain_yards == 0


def test_ball_projection_own_half():
    p = Play(play_type="Run", field_half="own", yard_line=20)
    assert derive_next(p, "gain_yards", 5).yard_line == 25
    assert derive_next(p, "gain_yards", -4).yard_line == 16


def test_ball_projection_opponent_half():
    p = Play(play_type="Pass", field_half="opponent", yard_line=30)
    assert derive_next(p, "gain_yards", 12).yard_line == 18


def test_ball_projection_clamped():
    p = Play(play_type="Pass", field_half="opponent", yard_line=10)
    assert derive_next(p, "gain_yards", 40).yard_line == 1
    p = Play(play_type="Run", field_half="own", yard_line=45)
    assert derive_next(p, "gain_yards", 30).yard_line == 50


def test_projection_only_for_scrimmage_plays():
    p = Play(play_type="Punt", yard_line=30)
    assert derive_next(p, "gain_yards", 40).yard_line == 30


def test_yard_line_edit_does_not_project():
    p = Play(play_type="Run", yard_line=20, gain_yards=5)
    assert derive_next(p, "yard_line", 30).yard_line == 30


def test_unknown_and_commit_fields_ignored():
    p = Play(id="abc", sequence=3)
    assert derive_next(p, "nope", 1) is p
    assert derive_next(p, "id", "other") is p
    assert derive_next(p, "sequence", 9) is p


def test_unrecognized_play_type_passed_through():
    p = derive_next(blank_play(), "play_type", "Trick")
    assert p.play_type == "Trick"
    assert p.down == 1 and p.to_go is None


def test_jersey_and_bool_fields():
    p = derive_many(blank_play(), [("passer_no", " 12 "), ("tackler_no", ""), ("is_sack", "yes")])
    assert p.passer_no == "12"
    assert p.tackler_no is None
    assert p.is_sack


def test_derive_many_resolves_one_event_at_a_time():
    edits = [("play_type", "Run"), ("yard_line", "25"), ("to_go", "10"), ("gain_yards", "12")]
    p = derive_many(blank_play(), edits)
    assert p.yard_line == 37
    assert p.is_first_down


def test_none_restores_enumerated_default():
    p = Play(scoring_side="home", turnover="Fumble", scoring_method="TD", quarter="3Q")
    assert derive_next(p, "scoring_side", None).scoring_side == "-"
    assert derive_next(p, "turnover", None).turnover == "-"
    assert derive_next(p, "scoring_method", None).scoring_method == "-"
    assert derive_next(p, "quarter", None).quarter == "1Q"
    assert derive_next(p, "remarks", None).remarks == ""


def test_overlong_integer_text_snaps_to_bound():
    p = blank_play()
    assert derive_next(p, "yard_line", "9" * 5000).yard_line == 50
    assert derive_next(p, "to_go", "-" + "9" * 5000).to_go == 1
    assert derive_next(p, "down", "9" * 5000).down == 4
