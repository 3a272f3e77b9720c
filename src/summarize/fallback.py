"""Local summary used when no model is available."""

FALLBACK_WORD_LIMIT = 7
ELLIPSIS = "..."


def summarize_locally(text: str) -> str:
    """First sentence, or the first few words when there is no period.

    Never fails; returns "" only for empty/whitespace input.
    """
    trimmed = text.strip()

    end = trimmed.find(".")
    if end != -1:
        return trimmed[: end + 1]

    words = trimmed.split()
    if len(words) > FALLBACK_WORD_LIMIT:
        return " ".join(words[:FALLBACK_WORD_LIMIT]) + ELLIPSIS
    return trimmed
