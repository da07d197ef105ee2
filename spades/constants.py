"""Game constants for Spades."""

# Table
TRICKS_PER_ROUND = 13
CARDS_PER_TRICK = 4

# Bids
MIN_BID = 1
MAX_BID = 13
NIL_BID = 0
BLIND_NIL_BID = -1

# Scoring
POINTS_PER_BID = 10
POINTS_PER_BAG = 1
NIL_BONUS = 100
NIL_PENALTY = -100
BLIND_NIL_BONUS = 200
BLIND_NIL_PENALTY = -200
BAG_PENALTY_THRESHOLD = 10
BAG_PENALTY = -100
WINNING_SCORE = 500

# Hand evaluation
HIGH_SPADE_RANK_THRESHOLD = 12  # Queen and above
PROTECTED_KING_MULTIPLIER = 0.7
HIGH_SPADE_MULTIPLIER = 0.3
SPADE_COUNT_THRESHOLD_1 = 4
SPADE_COUNT_THRESHOLD_2 = 6
VOID_SUIT_MULTIPLIER = 0.5
SINGLETON_SUIT_MULTIPLIER = 0.3

# Bot strategy
EASY_RANDOM_PLAY_CHANCE = 0.7
MEDIUM_HIGH_LEAD_CHANCE = 0.6
HARD_NIL_CHANCE = 0.3
NIL_MAX_SPADE_COUNT = 2
MEDIUM_TEAM_TOTAL_THRESHOLD = 11
HARD_TEAM_TOTAL_HIGH = 12
HARD_TEAM_TOTAL_LOW = 6
HARD_MAX_BID_ADJUSTMENT = 8
