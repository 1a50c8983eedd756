"""Tunable constants for parsing and listening sessions."""

# Seconds of silence after which a listening session drops partial slots.
PARTIAL_TIMEOUT_SECONDS: float = 15.0
RED_LAST_DAY_BONUS: int = 2
RESULT_A_LABEL: str = "R"
RESULT_B_LABEL: str = "L"
