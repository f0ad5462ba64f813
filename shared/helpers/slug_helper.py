import re
import unicodedata
from typing import Callable

_SLUG_SANITISE_RE = re.compile(r"[^a-z0-9]+")

FALLBACK_SLUG = "space"


def slugify(value: str) -> str:
    """Lowercase, ASCII-only, hyphen separated form of ``value``.

    Accented letters are transliterated (``Café`` -> ``cafe``), every run of
    other characters becomes a single hyphen and edge hyphens are dropped.
    """
    if not isinstance(value, str):
        return ""

    ascii_value = unicodedata.normalize("NFKD", value).encode(
        "ascii", "ignore").decode("ascii")
    slug = _SLUG_SANITISE_RE.sub("-", ascii_value.strip().lower())
    return slug.strip("-")


def allocate_slug(name: str, is_taken: Callable[[str], bool]) -> str:
    """Return the first free slug among ``base``, ``base-1``, ``base-2``, ...

    ``is_taken`` is the only source of truth; nothing is remembered between
    calls, so two concurrent callers can still pick the same value and the
    storage unique index has the final word.
    """
    base_slug = slugify(name) or FALLBACK_SLUG

    candidate = base_slug
    suffix = 0
    while is_taken(candidate):
        suffix += 1
        candidate = f"{base_slug}-{suffix}"
    return candidate


def build_public_url(prefix: str, slug: str) -> str:
    return f"{prefix.rstrip('/')}/{slug}"
