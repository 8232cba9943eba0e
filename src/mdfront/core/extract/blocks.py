"""Code example and heading listing from markdown-it tokens of a document body"""

from markdown_it import MarkdownIt

from mdfront.core.models import CodeBlock, Heading


CODE_TOKENS = {'fence', 'code_block'}
HEADING_TAGS = {f'h{n}': n for n in range(1, 7)}


def make_parser(preset: str = 'gfm-like') -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _line(token) -> int:
    return token.map[0] if token.map else 0


def code_blocks_from_tokens(tokens: list) -> list[CodeBlock]:
    """Convert fence/code_block tokens to CodeBlocks in document order."""
    blocks = []
    for tok in tokens:
        if tok.type not in CODE_TOKENS:
            continue
        info = tok.info.strip()
        blocks.append(CodeBlock(
            info=info,
            language=info.split()[0] if info else '',
            content=tok.content,
            line=_line(tok),
        ))
    return blocks


def headings_from_tokens(tokens: list) -> list[Heading]:
    """Pair each heading_open with the inline token that follows it."""
    headings = []
    for i, tok in enumerate(tokens):
        level = HEADING_TAGS.get(tok.tag) if tok.type == 'heading_open' else None
        if level is None:
            continue
        inline = tokens[i + 1] if i + 1 < len(tokens) else None
        text = inline.content.strip() if inline is not None and inline.type == 'inline' else ''
        headings.append(Heading(level=level, text=text, line=_line(tok)))
    return headings


def extract_code_blocks(body: str, parser_config: str = 'gfm-like') -> list[CodeBlock]:
    return code_blocks_from_tokens(make_parser(parser_config).parse(body))


def extract_headings(body: str, parser_config: str = 'gfm-like') -> list[Heading]:
    return headings_from_tokens(make_parser(parser_config).parse(body))
