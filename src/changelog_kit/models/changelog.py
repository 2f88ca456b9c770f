# src/changelog_kit/models/changelog.py

from typing import Any


class Changelog:
    """Parsed changelog document.

    Optional text fields use the empty string for "absent", matching what
    the parser produces when a section is missing.
    """

    def __init__(self, title: str = "") -> None:
        self.flag = ""
        self.title = title
        self.description = ""
        self.url = ""
        self.footer = ""
        self.releases: list[Any] = []

    def add_release(self, release: Any) -> None:
        self.releases.append(release)

    def __repr__(self) -> str:
        return f"Changelog(title={self.title!r}, releases={len(self.releases)})"
