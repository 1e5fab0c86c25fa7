"""Date formatting utilities for resume entries."""

MONTH_ABBREVIATIONS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

RANGE_SEPARATOR = "–"


def format_date(date: str) -> str:
    """
    Format a resume date (ISO-like "YYYY", "YYYY-MM" or "YYYY-MM-DD") for display.

    Args:
        date: Date string from the resume document (may be empty)

    Returns:
        "Present" for an empty date, the bare year for "YYYY",
        "Mon YYYY" for dates with a month, or the original text if it
        can't be interpreted

    Examples:
        format_date("")            # "Present"
        format_date("2019")        # "2019"
        format_date("2021-03")     # "Mar 2021"
        format_date("2021-03-15")  # "Mar 2021"
    """
    text = str(date).strip() if date else ""
    if not text:
        return "Present"
    if len(text) == 4:
        return text

    parts = text.split("-")
    try:
        year, month = parts[0], int(parts[1])
    except (IndexError, ValueError):
        # Return original if parsing fails
        return text

    if not 1 <= month <= 12:
        return text
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year}"


def date_range(start: str, end: str) -> str:
    """Format a start/end pair as "Mon YYYY–Mon YYYY" (empty end renders as "Present")."""
    return f"{format_date(start)}{RANGE_SEPARATOR}{format_date(end)}"
