"""File discovery and front-matter splitting into metadata and body"""

import logging
import re
from pathlib import Path

from mdfront.core.models import Document


logger = logging.getLogger(__name__)

SENTINEL = "---"
MD_EXTENSIONS = {'.md', '.mdx', '.markdown'}
LINE_BREAK_RE = re.compile(r'(?<=\n)')   # split after '\n' only, keeping line ends


class LoadError(ValueError):
    """Raised when a document file cannot be read or decoded."""

    def __init__(self, path: Path, cause: Exception):
        super().__init__(f"Cannot load {path}: {cause}")
        self.path = path
        self.cause = cause


def _split_pair(line: str) -> tuple[str, str] | None:
    """Split a 'key: value' line on its first colon; None when malformed."""
    key, sep, value = line.partition(':')
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip()


def parse(text: str, sentinel: str = SENTINEL) -> Document:
    """Split text into a Document with front-matter metadata and a verbatim body.

    The block opens when the first non-empty line equals the sentinel and closes
    at the next sentinel line. Without an opening sentinel, or if the block is
    never closed, metadata is empty and the whole input is the body.
    """
    lines = LINE_BREAK_RE.split(text)

    start = next((i for i, line in enumerate(lines) if line.strip()), None)
    if start is None or lines[start].strip() != sentinel:
        return Document(body=text)

    metadata: dict[str, str] = {}
    for i in range(start + 1, len(lines)):
        line = lines[i]
        if line.strip() == sentinel:
            return Document(metadata=metadata, body=''.join(lines[i + 1:]), has_frontmatter=True)
        if not line.strip():
            continue
        pair = _split_pair(line)
        if pair is None:
            logger.debug("Skipping malformed metadata line %d: %r", i, line.rstrip())
            continue
        metadata[pair[0]] = pair[1]

    logger.debug("Unterminated front matter; treating the whole input as body")
    return Document(body=text)


def discover_files(path: Path) -> list[Path]:
    """Return sorted markdown files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in MD_EXTENSIONS)


def parse_file(path: Path, sentinel: str = SENTINEL, encoding: str = 'utf-8') -> Document:
    """Read a single file and parse it, recording its path on the Document."""
    try:
        raw = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(path, e) from e
    doc = parse(raw, sentinel)
    return doc.model_copy(update={"path": str(path)})


def parse_dir(path: Path, sentinel: str = SENTINEL, encoding: str = 'utf-8') -> list[Document]:
    """Parse all markdown files under path (file or directory)."""
    return [parse_file(p, sentinel, encoding) for p in discover_files(path)]
