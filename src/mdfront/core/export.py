"""Export: rebuild document text and write sidecar JSON summaries"""

import json
import logging
from pathlib import Path
from typing import Mapping, Optional

from mdfront.core.extract.blocks import code_blocks_from_tokens, headings_from_tokens, make_parser
from mdfront.core.models import Document
from mdfront.core.parse import SENTINEL
from mdfront.core.utils.text import body_hash, slugify, split_tags


logger = logging.getLogger(__name__)


def build_frontmatter(metadata: Mapping[str, str], sentinel: str = SENTINEL, empty_block: bool = False) -> str:
    """Render metadata as 'key: value' lines between sentinels.

    Empty metadata renders as '' unless empty_block asks for a bare pair of sentinels.
    """
    if not metadata and not empty_block:
        return ""
    lines = [f"{key}: {value}" for key, value in metadata.items()]
    return "\n".join([sentinel, *lines, sentinel]) + "\n"


def build_document(doc: Document, sentinel: str = SENTINEL) -> str:
    """Return the front matter followed by the verbatim body."""
    return build_frontmatter(doc.metadata, sentinel, empty_block=doc.has_frontmatter) + doc.body


def slug_for(doc: Document) -> str:
    """Pick an output slug: explicit slug, then title, then file stem."""
    candidates = [doc.get('slug'), doc.get('title'), Path(doc.path).stem if doc.path else None]
    for candidate in candidates:
        if candidate and (slug := slugify(candidate)):
            return slug
    return "document"


def unique_slug(slug: str, taken: set[str]) -> str:
    """Return slug, or slug-2, slug-3... when already in taken; records the result."""
    candidate, n = slug, 1
    while candidate in taken:
        n += 1
        candidate = f"{slug}-{n}"
    if candidate != slug:
        logger.warning("Slug '%s' already exported, using '%s'", slug, candidate)
    taken.add(candidate)
    return candidate


def build_sidecar(doc: Document, parser_config: str = 'gfm-like', slug: Optional[str] = None) -> dict:
    """Build the sidecar dict: identity, metadata, and the body's code and heading outline.

    Metadata is passed through as loaded; no key is required. The code block and
    heading lists only describe positions, they never carry rendered output.
    """
    tokens = make_parser(parser_config).parse(doc.body)
    return {
        "slug": slug or slug_for(doc),
        "path": doc.path,
        "hash": body_hash(doc.body),
        "metadata": dict(doc.metadata),
        "tags": split_tags(doc.get('tags')),
        "code_blocks": [
            {"line": b.line, "language": b.language}
            for b in code_blocks_from_tokens(tokens)
        ],
        "headings": [h.model_dump() for h in headings_from_tokens(tokens)],
    }


def write_sidecar(
    doc: Document,
    output_dir: Path,
    parser_config: str = 'gfm-like',
    slug: Optional[str] = None,
    ) -> Path:
    """Write <output_dir>/<slug>.json for a single document and return its path.

    slug defaults to slug_for(doc); callers exporting several documents pass a
    unique_slug() result so sidecars never overwrite each other.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    sidecar = build_sidecar(doc, parser_config, slug)
    json_path = output_dir / f"{sidecar['slug']}.json"
    logger.debug("Writing sidecar for %s to %s", doc.path, json_path)
    json_path.write_text(json.dumps(sidecar, indent=2, ensure_ascii=False), encoding='utf-8')
    return json_path
