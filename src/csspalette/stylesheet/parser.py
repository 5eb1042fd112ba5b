"""Hand-written reader that pulls declarations out of a CSS stylesheet.

Only declaration blocks are of interest, so selectors and at-rule preludes
are skipped. Braces are tracked by depth, so blocks inside ``@media`` or
``@supports`` and declarations around nested rules are all found:

    @media (prefers-color-scheme: dark) {
        body { color: #eee; background-color: #111; }
    }
    .card { color: #222; .title { color: #000 } background-color: #fff }
"""

from __future__ import annotations

import logging
import re

from csspalette.stylesheet.model import Declaration

__all__ = ["parse_declarations"]

log = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

_BRACE_RE = re.compile(r"[{}]")

# Matches a single declaration: property: value;  (last semicolon optional)
_DECL_RE = re.compile(
    r"""
    (?P<key>-{0,2}[a-zA-Z_][a-zA-Z0-9_-]*)   # property name
    \s*:\s*                                    # colon separator
    (?P<value>[^;]+?)                          # value (non-greedy up to semicolon)
    \s*(?:;|\Z)                                # terminating semicolon or end of block
    """,
    re.VERBOSE,
)

_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)


def _parse_block(body: str, start: int) -> list[Declaration]:
    """Parse the body of a block, numbering declarations from *start*."""
    declarations: list[Declaration] = []
    for match in _DECL_RE.finditer(body):
        value = _IMPORTANT_RE.sub("", match.group("value")).strip()
        if not value:
            continue
        declarations.append(
            Declaration(
                property=match.group("key"),
                value=value,
                source_order=start + len(declarations),
            )
        )
    return declarations


def _declarations_before_rule(text: str) -> str:
    """Drop the selector of a nested rule from the text that precedes it."""
    body, sep, _selector = text.rpartition(";")
    return body + sep


def parse_declarations(source: str) -> list[Declaration]:
    """Parse stylesheet text into declarations in document order.

    Text is read at every brace depth, so a rule's own declarations are kept
    when it also contains nested rules. Malformed fragments are skipped
    rather than reported.
    """
    source = _COMMENT_RE.sub("", source)
    declarations: list[Declaration] = []
    depth = 0
    blocks = 0
    pos = 0
    for match in _BRACE_RE.finditer(source):
        text = source[pos : match.start()]
        pos = match.end()
        if match.group() == "{":
            if depth > 0:
                text = _declarations_before_rule(text)
                declarations.extend(_parse_block(text, len(declarations)))
            depth += 1
            blocks += 1
        elif depth > 0:
            declarations.extend(_parse_block(text, len(declarations)))
            depth -= 1
    if depth > 0:
        # unclosed block at end of input
        declarations.extend(_parse_block(source[pos:], len(declarations)))
    log.debug("Parsed %d declarations from %d blocks", len(declarations), blocks)
    return declarations
