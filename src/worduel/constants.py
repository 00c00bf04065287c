# Area: Shared
"""
worduel.constants — Engine defaults
====================================

Default limits and durations. Every duration is in seconds and can be
overridden through ``EngineSettings``.
"""

MIN_WORDSIZE = 4
MAX_WORDSIZE = 8

# How long each invite type takes to expire
TIMED_INVITE_EXPIRY = 300.0
TURN_INVITE_EXPIRY = 900.0

# Timed duels are interrupted after this long; turn-based duels never
# expire once accepted
TIMED_GAME_EXPIRY = 600.0

# Sweep period; bounds how stale an expired invite or duel can get
CLEANUP_INTERVAL = 30.0

DICT_VARNAME = "WORDCLASH_DICTIONARY"
DICT_FILENAME = "dictionary.json"

VIEW_SEPARATOR = " │ "
