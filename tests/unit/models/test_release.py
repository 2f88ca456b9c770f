from changelog_kit.models.builder import DefaultReleaseBuilder
from changelog_kit.models.changelog import Changelog
from changelog_kit.models.release import Release


class TestRelease:
    def test_add_change_groups_by_lower_cased_type(self) -> None:
        release = Release("1.0.0", "2024-01-15")

        release.add_change("Added", "first")
        release.add_change("fixed", "second")
        release.add_change("ADDED", "third")

        assert release.changes == {"added": ["first", "third"], "fixed": ["second"]}

    def test_changes_of_returns_copy(self) -> None:
        release = Release("1.0.0")
        release.add_change("added", "entry")

        entries = release.changes_of("Added")
        entries.append("mutated")

        assert release.changes_of("added") == ["entry"]

    def test_changes_of_unknown_type_is_empty(self) -> None:
        assert Release().changes_of("security") == []

    def test_is_unreleased_depends_on_date(self) -> None:
        assert Release().is_unreleased
        assert Release("2.0.0").is_unreleased
        assert not Release("1.0.0", "2024-01-15").is_unreleased

    def test_defaults(self) -> None:
        release = Release()

        assert release.version is None
        assert release.date is None
        assert release.description == ""
        assert release.changes == {}


class TestChangelog:
    def test_add_release_keeps_order_and_duplicates(self) -> None:
        changelog = Changelog("Changelog")
        first = Release("1.0.0", "2024-01-15")
        second = Release("1.0.0", "2024-01-16")

        changelog.add_release(first)
        changelog.add_release(second)

        assert changelog.releases == [first, second]

    def test_optional_fields_start_empty(self) -> None:
        changelog = Changelog()

        assert changelog.title == ""
        assert changelog.flag == ""
        assert changelog.url == ""


def test_default_builder_returns_release() -> None:
    release = DefaultReleaseBuilder().build("1.0.0", "2024-01-15", "notes")

    assert isinstance(release, Release)
    assert (release.version, release.date, release.description) == (
        "1.0.0",
        "2024-01-15",
        "notes",
    )


def test_default_builder_without_arguments_is_bare_unreleased() -> None:
    release = DefaultReleaseBuilder().build()

    assert (release.version, release.date, release.description) == (None, None, "")
