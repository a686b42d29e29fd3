"""
Global constants for matching, moderation and completeness.

Centralizes thresholds and score bounds used across the package
for easier maintenance and tuning.
"""

# Compatibility
MAX_COMPATIBILITY_SCORE = 100  # Factor weights sum to this
MIN_COMPATIBILITY_SCORE = 0
AGE_MATCH_MAX_DIFFERENCE = 5  # Years; informational match flag only

# Moderation
MESSAGE_SCORE_DIVISOR = 10  # Hits in a single text that saturate the score
PROFILE_SCORE_DIVISOR = 20  # Hits across profile fields that saturate the score
REVIEW_SCORE_THRESHOLD = 0.5  # Scores above this need manual review
MESSAGE_STATUS_APPROVED = "approved"
MESSAGE_STATUS_PENDING = "pending"

# Completeness
DEFAULT_COMPLETION_THRESHOLD = 80  # Percent required for a "complete" profile
GENDER_MALE = "m"
GENDER_FEMALE = "f"
