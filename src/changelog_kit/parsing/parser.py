# src/changelog_kit/parsing/parser.py

import logging
import re
from collections.abc import Sequence
from pathlib import Path
from time import monotonic

from changelog_kit.models.builder import DefaultReleaseBuilder, ReleaseBuilder
from changelog_kit.models.changelog import Changelog
from changelog_kit.observability import names
from changelog_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import ParserOptions
from .errors import ParseError, UnexpectedTrailingContent
from .headers import classify_release_header
from .stream import TokenStream
from .tokenizer import tokenize
from .tokens import Token, TokenKind

logger = logging.getLogger(__name__)

_COMPARE_URL_RE = re.compile(r"^\[.*\]:\s*(http.*)/compare/.*$")


class ChangelogParser:
    """
    Parser for "Keep a Changelog" style markdown.
    - Tokenizes the whole document first
    - Applies a fixed grammar, no backtracking
    - Fails on the first structural mismatch, never returns partial output
    """

    def __init__(
        self,
        options: ParserOptions | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.options = options or ParserOptions()
        self.metrics_hook = metrics_hook

    def parse(self, text: str) -> Changelog:
        start = monotonic()
        self.metrics_hook.increment(names.PARSE_REQUESTS_TOTAL)

        tokens = tokenize(text)
        self.metrics_hook.record_gauge(names.TOKENS_EMITTED, len(tokens))

        try:
            changelog = parse_tokens(tokens, self.options.release_builder)
        except ParseError as exc:
            logger.error("Failed to parse changelog: %s", exc)
            self.metrics_hook.increment(
                names.PARSE_ERRORS_TOTAL, labels={"error": type(exc).__name__}
            )
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        self.metrics_hook.record_gauge(names.RELEASES_PARSED, len(changelog.releases))
        logger.info(
            "Parsed changelog %r: %d releases from %d tokens in %.1f ms",
            changelog.title,
            len(changelog.releases),
            len(tokens),
            elapsed_ms,
        )
        return changelog

    def parse_file(self, path: str | Path) -> Changelog:
        logger.debug("Reading changelog from %s", path)
        return self.parse(Path(path).read_text(encoding="utf-8"))


def parse_changelog(
    text: str,
    *,
    options: ParserOptions | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Changelog:
    """Parse changelog markdown into a ``Changelog``.

    Args:
        text: The changelog body.
        options: Parser options, e.g. a custom release builder.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        The fully populated changelog.

    Raises:
        ParseError: If the document does not follow the changelog grammar.

    Example:
        >>> changelog = parse_changelog("# Changelog\\n\\n## 1.0.0 - 2024-01-15\\n")
        >>> changelog.releases[0].version
        '1.0.0'
    """
    return ChangelogParser(options, metrics_hook).parse(text)


def parse_tokens(
    tokens: Sequence[Token],
    builder: ReleaseBuilder | None = None,
) -> Changelog:
    """Apply the changelog grammar to an already tokenized document.

    Errors raised without a line number get the line of the token the
    cursor stopped at.
    """
    stream = TokenStream(tokens)
    try:
        return _consume_changelog(stream, builder or DefaultReleaseBuilder())
    except ParseError as exc:
        if exc.line is None:
            exc.line = stream.current_line()
        raise


def _consume_changelog(stream: TokenStream, builder: ReleaseBuilder) -> Changelog:
    changelog = Changelog()

    changelog.flag = stream.take(TokenKind.FLAG)
    changelog.title = stream.take(TokenKind.H1, required=True)
    changelog.description = stream.take(TokenKind.PARAGRAPH)

    _consume_releases(stream, builder, changelog)
    _consume_reference_links(stream, changelog)

    if stream.take(TokenKind.HORIZONTAL_RULE):
        changelog.footer = stream.take(TokenKind.PARAGRAPH, required=True)

    if not stream.at_end:
        raise UnexpectedTrailingContent(
            stream.remaining(), line=stream.current_line()
        )

    return changelog


def _consume_releases(
    stream: TokenStream, builder: ReleaseBuilder, changelog: Changelog
) -> None:
    while True:
        header_line = stream.current_line()
        title = stream.take(TokenKind.H2)
        if not title:
            return

        header = classify_release_header(title, line=header_line)
        release = header.build(builder)
        changelog.add_release(release)
        logger.debug(
            "Release at line %s: %s version=%s date=%s",
            header_line,
            header.kind.value,
            header.version,
            header.date,
        )

        release.description = stream.take(TokenKind.PARAGRAPH)

        change_type = stream.take(TokenKind.H3).lower()
        while change_type:
            entry = stream.take(TokenKind.LIST_ITEM)
            while entry:
                release.add_change(change_type, entry)
                entry = stream.take(TokenKind.LIST_ITEM)
            change_type = stream.take(TokenKind.H3).lower()


def _consume_reference_links(stream: TokenStream, changelog: Changelog) -> None:
    # only the first compare link names the repository; other links are dropped
    link = stream.take(TokenKind.REFERENCE_LINK)
    while link:
        if not changelog.url:
            match = _COMPARE_URL_RE.match(link)
            if match:
                changelog.url = match.group(1)
        link = stream.take(TokenKind.REFERENCE_LINK)
