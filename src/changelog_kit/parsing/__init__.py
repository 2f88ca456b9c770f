from .config import ParserOptions
from .errors import (
    InvalidReleaseHeader,
    MissingRequiredToken,
    ParseError,
    UnexpectedTrailingContent,
)
from .headers import ReleaseHeader, ReleaseHeaderKind, classify_release_header
from .parser import ChangelogParser, parse_changelog, parse_tokens
from .stream import TokenStream
from .tokenizer import tokenize
from .tokens import Token, TokenKind

__all__ = [
    # Entry points
    "ChangelogParser",
    "parse_changelog",
    "parse_tokens",
    # Config
    "ParserOptions",
    # Stages
    "tokenize",
    "TokenStream",
    "classify_release_header",
    # Types
    "Token",
    "TokenKind",
    "ReleaseHeader",
    "ReleaseHeaderKind",
    # Errors
    "ParseError",
    "MissingRequiredToken",
    "InvalidReleaseHeader",
    "UnexpectedTrailingContent",
]
