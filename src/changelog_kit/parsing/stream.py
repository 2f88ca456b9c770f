# src/changelog_kit/parsing/stream.py

from collections.abc import Sequence

from .errors import MissingRequiredToken
from .tokens import Token, TokenKind


class TokenStream:
    """Forward-only cursor over an immutable token sequence.

    The tokens themselves are never modified, so several streams can walk
    the same tokenization independently.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tuple(tokens)
        self.position = 0

    @property
    def at_end(self) -> bool:
        return self.position >= len(self._tokens)

    def peek(self) -> Token | None:
        if self.at_end:
            return None
        return self._tokens[self.position]

    def take(self, kind: TokenKind, required: bool = False) -> str:
        """Consume the next token if it has ``kind`` and return its text.

        Returns an empty string without moving when the next token is of
        another kind, unless ``required`` is set.

        Raises:
            MissingRequiredToken: If ``required`` and the next token does
                not match or the stream is exhausted.
        """
        token = self.peek()
        if token is None or token.kind is not kind:
            if required:
                raise MissingRequiredToken(kind, token, line=self.current_line())
            return ""
        self.position += 1
        return token.text

    def remaining(self) -> tuple[Token, ...]:
        return self._tokens[self.position :]

    def current_line(self) -> int | None:
        # past the end, blame the last token read; None for an empty stream
        token = self.peek()
        if token is not None:
            return token.line
        if self._tokens:
            return self._tokens[-1].line
        return None
