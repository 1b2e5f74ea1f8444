"""
Central configuration for the deck engine.
All constants defined here to avoid magic numbers scattered throughout code.
This single file is the source of truth for deck sizes, defaults and logging.
"""

import os

# ============ DECK CONSTANTS ============
# One physical deck: 13 ranks x 4 suits.
# A shoe of N decks always holds exactly N * CARDS_PER_DECK cards; replace_top()
# checks against this number to detect piles that were edited by hand.
RANKS_PER_SUIT = 13
SUITS = 4
CARDS_PER_DECK = RANKS_PER_SUIT * SUITS

# Number of physical decks in a shoe when the caller does not say (or passes 0).
DEFAULT_NUM_DECKS = 1

# ============ DRAW / DEAL DEFAULTS ============
# pull_top() / pull_bottom() / pull_random() with no argument take one card
# and return it bare instead of inside a list.
DEFAULT_PULL_AMOUNT = 1

# deal() with no arguments deals to four players, like bridge or hearts.
DEFAULT_PLAYERS = 4

# ============ LOGGING ============
# Environment switch:
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
# The engine logs every pull/shuffle/deal at DEBUG, so the default keeps it quiet.
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
