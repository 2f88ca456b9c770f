# src/changelog_kit/parsing/tokens.py

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    FLAG = "flag"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    LIST_ITEM = "li"
    PARAGRAPH = "p"
    REFERENCE_LINK = "link"
    HORIZONTAL_RULE = "hr"


@dataclass(frozen=True)
class Token:
    line: int
    kind: TokenKind
    content: tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.content)
