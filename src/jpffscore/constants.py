from __future__ import annotations

# Field bounds (yards measured from the nearer goal line)
MIN_YARDLINE = 1
MAX_YARDLINE = 50
MIN_TO_GO = 1
MAX_TO_GO = 50
MIN_DOWN = 1
MAX_DOWN = 4
MIN_PENALTY_YARDS = 0

# Kick plays restart the series
FIRST_AND_TEN_YTG = 10

# Points per scoring method
TOUCHDOWN_POINTS = 6
FIELD_GOAL_POINTS = 3
SAFETY_POINTS = 2
TFP_KICK_POINTS = 1
TFP_PLAY_POINTS = 2

# Draft defaults
DEFAULT_CLOCK = "12:00"
DEFAULT_HOME_NAME = "Home"
DEFAULT_VISITOR_NAME = "Visitor"
RECENT_PLAYS = 8
