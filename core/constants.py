"""
Scoring constants for contractor matching.

Every sub-score is on a 0-100 scale; the weights sum to 1.0 so the
combined total stays in 0-100 as well.
"""

# Combination weights
DEFAULT_SPECIALTY_WEIGHT = 0.5
DEFAULT_PROXIMITY_WEIGHT = 0.3
DEFAULT_RATING_WEIGHT = 0.2

# Minimum total score for a contractor to qualify for a job
MIN_MATCH_SCORE = 35

# Leading zip characters that must agree for a "nearby" match
LOCATION_PREFIX_LENGTH = 3

# Specialty sub-scores
SPECIALTY_EXACT_SCORE = 100
SPECIALTY_PARTIAL_SCORE = 75

# Proximity sub-scores
PROXIMITY_EXACT_SCORE = 100
PROXIMITY_NEARBY_SCORE = 75

# Rating tiers: (lower bound, sub-score), checked top-down
RATING_EXCELLENT = 4.5
RATING_GOOD = 3.5
RATING_AVERAGE = 2.5

RATING_EXCELLENT_SCORE = 100
RATING_GOOD_SCORE = 75
RATING_AVERAGE_SCORE = 50
RATING_BELOW_AVERAGE_SCORE = 25

# Reported in place of a missing rating
NO_RATING = 0.0

NO_MATCH_SCORE = 0
