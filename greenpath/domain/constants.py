"""Domain constants shared by deterministic logic."""

BASELINE_EMISSION_KG = 390.0

MAX_REDUCTION_PERCENT = -100
CREDITS_PER_REDUCTION_POINT = 30 / 10

MAX_XP = 1200
PROMOTION_THRESHOLD = 1000
DEFAULT_START_XP = 950
PROMOTION_CREDIT_BONUS = 10
