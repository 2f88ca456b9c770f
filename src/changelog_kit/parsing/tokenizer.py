# src/changelog_kit/parsing/tokenizer.py

import logging
import re

from .tokens import Token, TokenKind

logger = logging.getLogger(__name__)

_REFERENCE_LINK_RE = re.compile(r"^\[.*\]:\s*http.*$")
_FLAG_RE = re.compile(r"^<!--(.*)-->$")
_CONTINUATION_INDENT_RE = re.compile(r"^ {1,2}")

# Checked in order, first prefix wins. Horizontal rules are matched
# before this table since "---" also starts with "-".
_PREFIXES: list[tuple[str, int, TokenKind]] = [
    ("# ", 1, TokenKind.H1),
    ("## ", 2, TokenKind.H2),
    ("### ", 3, TokenKind.H3),
    ("-", 1, TokenKind.LIST_ITEM),
    ("*", 1, TokenKind.LIST_ITEM),
]


def tokenize(text: str) -> tuple[Token, ...]:
    """
    Split a changelog into line-numbered tokens.

    - Consecutive paragraph lines merge into one paragraph token
    - Paragraph lines after a list item become its continuation
    - Blank tokens are dropped, blank edge lines are trimmed
    """
    # line numbers count the blank lines removed from the top of the blob
    skipped = text[: len(text) - len(text.lstrip())].count("\n")
    text = text.strip()
    if not text:
        return ()

    pending: list[tuple[int, TokenKind, list[str]]] = []

    for line_number, raw in enumerate(text.split("\n"), start=skipped + 1):
        kind, content = _classify(raw.rstrip("\r"))

        if pending and kind is TokenKind.PARAGRAPH:
            previous_kind = pending[-1][1]
            if previous_kind is TokenKind.PARAGRAPH:
                pending[-1][2].append(content)
                continue
            if previous_kind is TokenKind.LIST_ITEM:
                pending[-1][2].append(_CONTINUATION_INDENT_RE.sub("", content))
                continue

        pending.append((line_number, kind, [content]))

    tokens = tuple(
        Token(line=line_number, kind=kind, content=_trim(content))
        for line_number, kind, content in pending
        if not _is_blank(content)
    )
    logger.debug("Tokenized %d lines into %d tokens", line_number, len(tokens))
    return tokens


def _classify(line: str) -> tuple[TokenKind, str]:
    if line.startswith("---"):
        return TokenKind.HORIZONTAL_RULE, "-"

    for prefix, marker_length, kind in _PREFIXES:
        if line.startswith(prefix):
            return kind, line[marker_length:].strip()

    if _REFERENCE_LINK_RE.match(line):
        return TokenKind.REFERENCE_LINK, line.strip()

    flag = _FLAG_RE.match(line)
    if flag:
        return TokenKind.FLAG, flag.group(1).strip()

    return TokenKind.PARAGRAPH, line.rstrip()


def _is_blank(lines: list[str]) -> bool:
    return not "".join(lines).strip()


def _trim(lines: list[str]) -> tuple[str, ...]:
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return tuple(lines[start:end])
