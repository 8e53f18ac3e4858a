"""
Rule tables for travel input validation.

Accepted enum values, numeric limits and the vague-term lists shared by
validation, incompleteness detection, follow-up questions and scoring.
"""

VALID_TRAVEL_STYLES = ("budget", "mid-range", "luxury")
VALID_TRAVEL_DURATIONS = ("short", "medium", "long")
VALID_FLEXIBILITY = ("fixed", "flexible", "very-flexible")

MIN_ENTRY_LENGTH = 2

MIN_GROUP_SIZE = 1
MAX_GROUP_SIZE = 50
LARGE_GROUP_SIZE = 10

LOW_BUDGET_THRESHOLD = 100
HIGH_BUDGET_THRESHOLD = 50000

MAX_TRIP_DAYS = 365

VAGUE_DESTINATION_TERMS = (
    "europe", "asia", "africa", "america", "world", "everywhere", "anywhere",
)

VAGUE_EXPERIENCE_TERMS = (
    "adventure", "fun", "experience", "activity", "something", "anything",
)
# Experiences at least this long are specific enough even if they contain
# a vague term ("adventure trekking in Patagonia").
VAGUE_EXPERIENCE_MAX_LENGTH = 15
