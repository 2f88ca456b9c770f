# src/changelog_kit/schema.py

"""Validated, JSON-ready snapshots of a parsed changelog.

The parser populates plain mutable objects; these models freeze a copy
for consumers that serialize, diff, or hand the data to other services.

Example:
    >>> changelog = parse_changelog(text)
    >>> ChangelogSchema.from_changelog(changelog).model_dump_json()
"""

from pydantic import BaseModel, ConfigDict

from .models.changelog import Changelog
from .models.release import Release


class ReleaseSchema(BaseModel):
    version: str | None = None
    date: str | None = None
    description: str = ""
    changes: dict[str, list[str]] = {}

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def from_release(cls, release: Release) -> "ReleaseSchema":
        return cls(
            version=release.version,
            date=release.date,
            description=release.description,
            changes={label: list(entries) for label, entries in release.changes.items()},
        )


class ChangelogSchema(BaseModel):
    title: str
    flag: str = ""
    description: str = ""
    url: str = ""
    footer: str = ""
    releases: list[ReleaseSchema] = []

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def from_changelog(cls, changelog: Changelog) -> "ChangelogSchema":
        return cls(
            title=changelog.title,
            flag=changelog.flag,
            description=changelog.description,
            url=changelog.url,
            footer=changelog.footer,
            releases=[ReleaseSchema.from_release(r) for r in changelog.releases],
        )
