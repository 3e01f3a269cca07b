# /sanctuary/utils/slugs.py

import re
import unicodedata


def convert_to_slug(text: str) -> str:
    """Lowercase, ASCII-only, hyphen-separated slug: 'Birds of Prey' -> 'birds-of-prey'."""
    normalized = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^a-z0-9]+", "-", normalized.lower()).strip("-")
