def normalize(text: str) -> str:
    """Canonical form used for lookups: surrounding whitespace trimmed, lowercased."""
    return text.strip().lower()
