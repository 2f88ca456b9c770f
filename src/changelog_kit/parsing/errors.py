# src/changelog_kit/parsing/errors.py

from collections.abc import Sequence

from .tokens import Token, TokenKind


class ParseError(Exception):
    """Base error for every structural failure of a changelog parse.

    ``line`` is the 1-based source line the failure points at, or ``None``
    when the input ran out before any token could be blamed.
    """

    def __init__(self, message: str, *, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return f"Parse error at end of input: {self.message}"
        return f"Parse error in the line {self.line}: {self.message}"


class MissingRequiredToken(ParseError):
    def __init__(
        self,
        expected: TokenKind,
        found: Token | None = None,
        *,
        line: int | None = None,
    ) -> None:
        self.expected = expected
        self.found = found
        if found is None:
            message = f"Required {expected.value} token missing before end of input"
        else:
            message = (
                f"Required {expected.value} token missing, "
                f"found {found.kind.value}: {found.text!r}"
            )
        super().__init__(message, line=line)


class InvalidReleaseHeader(ParseError):
    def __init__(self, header: str, *, line: int | None = None) -> None:
        self.header = header
        super().__init__(f"Syntax error in the release title: {header!r}", line=line)


class UnexpectedTrailingContent(ParseError):
    def __init__(self, tokens: Sequence[Token], *, line: int | None = None) -> None:
        self.tokens = tuple(tokens)
        summary = ", ".join(f"{t.kind.value}@{t.line}" for t in self.tokens)
        super().__init__(f"Unexpected content [{summary}]", line=line)
