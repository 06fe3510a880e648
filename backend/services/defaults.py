"""Placeholder values written into extracted and assembled records.

None of these are derived from the résumé. They fill schema fields the
heuristics cannot determine so the output shape stays complete.
"""

# Used when the text makes no explicit "N years of experience" claim
DEFAULT_TOTAL_EXPERIENCE_YEARS = 1.0

# Experience records carry no parsed dates; these stand in for them
PLACEHOLDER_JOINING_DATE = "2020-01-01T00:00:00"
PLACEHOLDER_RELIEVING_DATE = "2021-01-01T00:00:00"

# Per-skill experience is never estimated
PLACEHOLDER_SKILL_EXPERIENCE_YEARS = 0

# fullName when neither a name line nor an email is present
UNKNOWN_NAME = "Unknown"
