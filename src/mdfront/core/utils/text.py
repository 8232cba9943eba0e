"""Body hashing and slug generation for exported document summaries"""

import hashlib
import re


_NON_WORD_RE = re.compile(r'[^\w\s-]')
_SEPARATOR_RE = re.compile(r'[\s_-]+')


def body_hash(body: str) -> str:
    """Hex SHA-256 of the body, used to spot changed documents between exports."""
    return hashlib.sha256(body.encode('utf-8')).hexdigest()


def slugify(text: str) -> str:
    """Lowercase, hyphen-separated URL-safe slug; empty string if nothing survives."""
    text = _NON_WORD_RE.sub('', text.lower())
    return _SEPARATOR_RE.sub('-', text).strip('-')


def split_tags(value: str | None) -> list[str]:
    """Split a comma-separated tags value, e.g. 'a, b' or '[a, b]', dropping blanks and duplicates."""
    if not value:
        return []
    value = value.strip()
    if value.startswith('[') and value.endswith(']'):
        value = value[1:-1]
    return list(dict.fromkeys(t.strip() for t in value.split(',') if t.strip()))
