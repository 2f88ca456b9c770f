# src/changelog_kit/models/builder.py

from typing import Protocol

from .release import Release


class ReleaseRecord(Protocol):
    """What the parser writes to a release it did not construct itself."""

    description: str

    def add_change(self, type_label: str, entry: str) -> None: ...


class ReleaseBuilder(Protocol):
    """Constructs release records on behalf of the parser.

    Implement this to have the parser populate a custom release type.
    """

    def build(
        self,
        version: str | None = None,
        date: str | None = None,
        description: str = "",
    ) -> ReleaseRecord: ...


class DefaultReleaseBuilder:
    def build(
        self,
        version: str | None = None,
        date: str | None = None,
        description: str = "",
    ) -> Release:
        return Release(version, date, description)
