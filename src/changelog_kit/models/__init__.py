from .builder import DefaultReleaseBuilder, ReleaseBuilder, ReleaseRecord
from .changelog import Changelog
from .release import Release

__all__ = [
    "Changelog",
    "DefaultReleaseBuilder",
    "Release",
    "ReleaseBuilder",
    "ReleaseRecord",
]
