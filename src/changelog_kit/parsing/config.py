# src/changelog_kit/parsing/config.py

from dataclasses import dataclass, field

from changelog_kit.models.builder import DefaultReleaseBuilder, ReleaseBuilder


@dataclass(frozen=True)
class ParserOptions:
    """Options for changelog parsing.

    Immutable. Explicit. Nothing is read from the environment.
    """

    # Swap in a custom builder to have releases parsed into your own type
    release_builder: ReleaseBuilder = field(default_factory=DefaultReleaseBuilder)
