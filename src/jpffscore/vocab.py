"""
Centralized codes for enumerated play fields.
Import from here instead of redefining string literals in multiple modules.
"""

QUARTERS = ("1Q", "2Q", "3Q", "4Q", "OT")

HOME, VISITOR = "home", "visitor"
SIDES = (HOME, VISITOR)

OWN, OPPONENT = "own", "opponent"
FIELD_HALVES = (OWN, OPPONENT)

NONE = "-"

RUN = "Run"
PASS = "Pass"
PENALTY = "Penalty"
KICKOFF = "Kick off"
PUNT = "Punt"
FIELD_GOAL = "Field goal"
TFP_KICK = "TFP(Kick)"
TFP_RUN = "TFP(Run)"
TFP_PASS = "TFP(Pass)"
SPIKE_OR_KNEEL = "Spike/Knee down"
SAFETY = "Safety"
TIMEOUT = "Time out"

PLAY_TYPES = (
    RUN, PASS, PENALTY, KICKOFF, PUNT, FIELD_GOAL,
    TFP_KICK, TFP_RUN, TFP_PASS, SPIKE_OR_KNEEL, SAFETY, TIMEOUT,
)

KICK_PLAYS = frozenset({KICKOFF, PUNT, FIELD_GOAL})
DEAD_PLAYS = frozenset({SPIKE_OR_KNEEL, TIMEOUT})
SCRIMMAGE_PLAYS = frozenset({RUN, PASS, PENALTY, SPIKE_OR_KNEEL})

TURNOVERS = (NONE, "Intercept", "Fumble", "4th down failed", SAFETY)

SCORING_SIDES = (NONE, HOME, VISITOR)

TD, FG = "TD", "FG"
SCORING_METHODS = (NONE, TD, FG, SAFETY, TFP_KICK, TFP_RUN, TFP_PASS)
