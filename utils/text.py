import math
import re
import time

_NON_WORD = re.compile(r"[^\w\s-]", re.ASCII)
_SPACES = re.compile(r"\s+")
_DASHES = re.compile(r"-+")
_TAGS = re.compile(r"<[^>]*>")


def generate_slug(text: str) -> str:
    """'Hello, World!' -> 'hello-world'"""
    slug = (text or "").lower().strip()
    slug = _NON_WORD.sub("", slug)
    slug = _SPACES.sub("-", slug)
    slug = slug.replace("_", "-")
    slug = _DASHES.sub("-", slug)
    return slug.strip("-")


def generate_unique_slug(base: str, exists) -> str:
    """
    Slug for `base`, suffixed -1, -2, ... until exists(slug) is False.
    Falls back to a timestamp suffix after 1000 attempts.
    """
    slug = generate_slug(base) or "item"
    candidate = slug
    counter = 1
    while exists(candidate):
        candidate = f"{slug}-{counter}"
        counter += 1
        if counter > 1000:
            candidate = f"{slug}-{int(time.time() * 1000)}"
            break
    return candidate


def strip_html(html: str) -> str:
    return _TAGS.sub("", html or "")


def calculate_read_time(content: str, words_per_minute: int = 200) -> int:
    """Minutes to read, never less than 1."""
    words = strip_html(content).split()
    if not words:
        return 1
    return max(1, math.ceil(len(words) / words_per_minute))
