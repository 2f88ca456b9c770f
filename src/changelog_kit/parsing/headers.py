# src/changelog_kit/parsing/headers.py

import re
from dataclasses import dataclass
from enum import Enum

from changelog_kit.models.builder import ReleaseBuilder, ReleaseRecord

from .errors import InvalidReleaseHeader

_DATED_RE = re.compile(
    r"^\[?([^\]]+)\]?\s*-\s*(\d{4}-\d{1,2}-\d{1,2})$", re.ASCII
)
_LABELED_UNRELEASED_RE = re.compile(r"^\[?([^\]]+)\]?\s*-\s*unreleased$")


class ReleaseHeaderKind(Enum):
    DATED = "dated"
    LABELED_UNRELEASED = "labeled_unreleased"
    BARE_UNRELEASED = "bare_unreleased"


@dataclass(frozen=True)
class ReleaseHeader:
    kind: ReleaseHeaderKind
    version: str | None = None
    date: str | None = None

    def build(self, builder: ReleaseBuilder) -> ReleaseRecord:
        if self.kind is ReleaseHeaderKind.BARE_UNRELEASED:
            return builder.build()
        return builder.build(self.version, self.date)


def classify_release_header(text: str, *, line: int | None = None) -> ReleaseHeader:
    """Identify which release shape an ``##`` heading describes.

    Shapes, tried in order on the lower-cased text:
    - ``[1.2.0] - 2024-01-15``: dated release
    - ``[1.2.0] - Unreleased``: labeled unreleased release
    - anything else mentioning "unreleased": bare unreleased release

    Raises:
        InvalidReleaseHeader: If the heading matches none of the shapes.
    """
    header = text.lower()

    dated = _DATED_RE.match(header)
    if dated:
        return ReleaseHeader(
            ReleaseHeaderKind.DATED,
            version=dated.group(1).strip(),
            date=dated.group(2),
        )

    if "unreleased" in header:
        labeled = _LABELED_UNRELEASED_RE.match(header)
        if labeled:
            return ReleaseHeader(
                ReleaseHeaderKind.LABELED_UNRELEASED,
                version=labeled.group(1).strip(),
            )
        return ReleaseHeader(ReleaseHeaderKind.BARE_UNRELEASED)

    raise InvalidReleaseHeader(text, line=line)
