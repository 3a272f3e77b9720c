"""Summarization instructions, one set per supported language."""

INSTRUCTIONS_EN = (
    "Summarize the text in one concise, natural sentence, in first person only. "
    "Do not mention the text, author, or writer. Never include phrases like "
    '"This text," "This user," or "The following describes." Do not explain, '
    "apologize, or mention context. If the text is short or unclear, infer a "
    "plausible short summary."
)

INSTRUCTIONS_IT = (
    "Riassumi il testo in un'unica frase concisa e naturale, solo in prima persona. "
    "Non menzionare il testo, l'autore o lo scrittore. Non includere frasi come "
    '"Questo testo", "Questo utente" o "Quanto segue descrive". Non spiegare, '
    "non scusarti e non menzionare il contesto. Se il testo è breve o poco chiaro, "
    "deduci un breve riassunto plausibile."
)

_INSTRUCTIONS = {
    "en": INSTRUCTIONS_EN,
    "it": INSTRUCTIONS_IT,
}


def instructions_for(language: str | None) -> str:
    """Instructions for a language tag; anything unsupported gets English."""
    return _INSTRUCTIONS.get((language or "").lower(), INSTRUCTIONS_EN)
