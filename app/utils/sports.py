"""Display formatting for sport categories."""

DIVISION_LABELS = {
    "men": "Men's",
    "women": "Women's",
    "mixed": "Mixed",
}

LEVEL_LABELS = {
    "elementary": "Elementary",
    "high_school": "High School",
    "college": "College",
}


def _raw_value(value) -> str:
    # Accepts enum members as well as plain strings
    return getattr(value, "value", value)


def format_division(division) -> str:
    """Format a division, e.g. "men" -> "Men's". Unknown values pass through."""
    raw = _raw_value(division)
    return DIVISION_LABELS.get(raw, raw)


def format_level(level) -> str:
    """Format a level, e.g. "high_school" -> "High School". Unknown values pass through."""
    raw = _raw_value(level)
    return LEVEL_LABELS.get(raw, raw)


def format_category_name(division, levels) -> str:
    """
    Format a sport category for display.

    Examples:
    - ("men", "college") -> "Men's College"
    - ("mixed", "elementary") -> "Mixed Elementary"
    """
    return f"{format_division(division)} {format_level(levels)}"
