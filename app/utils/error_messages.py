"""Localized error messages for API responses."""

ERROR_MESSAGES = {
    "missing_filters": {
        "en": "Season, sport, and category are required for standings.",
        "fil": "Kailangan ang season, sport, at category para sa standings.",
    },
    "stage_not_found": {
        "en": "No stages found for the specified filters.",
        "fil": "Walang nahanap na stage para sa mga napiling filter.",
    },
    "invalid_stage": {
        "en": "Invalid stage ID provided.",
        "fil": "Hindi wasto ang ibinigay na stage ID.",
    },
    "unrecognized_competition_stage": {
        "en": "Unrecognized competition stage.",
        "fil": "Hindi kilalang competition stage.",
    },
    "season_not_found": {
        "en": "Season not found",
        "fil": "Hindi nahanap ang season",
    },
    "participant_not_found": {
        "en": "Match participant not found",
        "fil": "Hindi nahanap ang kalahok sa laban",
    },
    "database_error": {
        "en": "Failed to retrieve standings data.",
        "fil": "Hindi makuha ang datos ng standings.",
    },
}


def get_error_message(error_key: str, lang: str = "en") -> str:
    """Get localized error message.

    Args:
        error_key: Key for the error message
        lang: Language code (en, fil)

    Returns:
        Localized error message, falls back to English if not found
    """
    if error_key not in ERROR_MESSAGES:
        return error_key

    messages = ERROR_MESSAGES[error_key]
    return messages.get(lang, messages.get("en", error_key))
