# src/changelog_kit/models/release.py


class Release:
    """One changelog release.

    A release is identified by a version label, a date, or both. A release
    with neither is the bare "Unreleased" section.

    Change entries are grouped by lower-cased change type ("added",
    "fixed", ...) and keep their insertion order.
    """

    def __init__(
        self,
        version: str | None = None,
        date: str | None = None,
        description: str = "",
    ) -> None:
        self.version = version
        self.date = date
        self.description = description
        self.changes: dict[str, list[str]] = {}

    @property
    def is_unreleased(self) -> bool:
        return self.date is None

    def add_change(self, type_label: str, entry: str) -> None:
        self.changes.setdefault(type_label.lower(), []).append(entry)

    def changes_of(self, type_label: str) -> list[str]:
        # copy so callers cannot reorder the stored entries
        return list(self.changes.get(type_label.lower(), []))

    def __repr__(self) -> str:
        return (
            f"Release(version={self.version!r}, date={self.date!r}, "
            f"changes={sum(len(v) for v in self.changes.values())})"
        )
