# Models
from .models import (
    Changelog,
    DefaultReleaseBuilder,
    Release,
    ReleaseBuilder,
    ReleaseRecord,
)

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsing
from .parsing import (
    ChangelogParser,
    InvalidReleaseHeader,
    MissingRequiredToken,
    ParseError,
    ParserOptions,
    Token,
    TokenKind,
    UnexpectedTrailingContent,
    parse_changelog,
    tokenize,
)

# Schema
from .schema import ChangelogSchema, ReleaseSchema

__all__ = [
    # Models
    "Changelog",
    "DefaultReleaseBuilder",
    "Release",
    "ReleaseBuilder",
    "ReleaseRecord",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsing
    "ChangelogParser",
    "ParserOptions",
    "Token",
    "TokenKind",
    "parse_changelog",
    "tokenize",
    # Errors
    "ParseError",
    "MissingRequiredToken",
    "InvalidReleaseHeader",
    "UnexpectedTrailingContent",
    # Schema
    "ChangelogSchema",
    "ReleaseSchema",
]
