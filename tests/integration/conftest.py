from pathlib import Path

import pytest

from changelog_kit.models.changelog import Changelog
from changelog_kit.parsing.parser import ChangelogParser

SAMPLE_CHANGELOG = """\
<!-- changelog-kit: managed -->
# Changelog

All notable changes to this project will be documented in this file.

The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.1.0/),
and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html).

## [Unreleased]

### Added
- Support for custom release builders.

## [1.1.0] - 2024-03-05

Maintenance release with a few fixes.

### Fixed
- Crash when the footer was missing.
- Reference links with trailing
  whitespace are now ignored.

### Security
- Bump pydantic.

## [1.0.0] - 2024-01-15

### Added
- Initial release.

[unreleased]: https://github.com/acme/widget/compare/v1.1.0...HEAD
[1.1.0]: https://github.com/acme/widget/compare/v1.0.0...v1.1.0
[1.0.0]: https://github.com/acme/widget/releases/tag/v1.0.0

---

Generated from commit history.
"""


@pytest.fixture(scope="module")
def changelog_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Write the sample changelog once per module."""
    path: Path = tmp_path_factory.mktemp("changelogs") / "CHANGELOG.md"
    path.write_text(SAMPLE_CHANGELOG, encoding="utf-8")
    return path


@pytest.fixture(scope="module")
def parsed_changelog(changelog_path: Path) -> Changelog:
    """Parse the sample changelog once, reuse across tests."""
    return ChangelogParser().parse_file(changelog_path)
