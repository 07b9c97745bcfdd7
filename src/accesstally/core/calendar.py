"""Fixed calendar domain used by the histograms.

Months are 30 days long and a year has no leap days. These are domain
constants, not settings.
"""

HOURS_PER_DAY = 24
DAYS_PER_MONTH = 30
# The day histogram still has a slot for the 31st.
MAX_DAY_OF_MONTH = 31
MONTHS_PER_YEAR = 12

MONTH_STARTS = tuple(range(0, DAYS_PER_MONTH * MONTHS_PER_YEAR, DAYS_PER_MONTH))


def determine_month(day: int) -> int:
    """Map a 1-based day of the year to a month index.

    Args:
        day: Day of the year under the 30-day month model (1-360).

    Returns:
        Month index 0-11. Days past 360 fall back to 0.
    """
    for month, start in enumerate(MONTH_STARTS):
        if day <= start + DAYS_PER_MONTH:
            return month
    return 0
