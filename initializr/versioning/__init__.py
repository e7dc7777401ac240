from initializr.versioning.ordering import compare_versions, qualifier_rank, version_sort_key
from initializr.versioning.ranges import VersionBound, VersionRange, filter_compatible, parse_version_range, satisfies
from initializr.versioning.version import Version, parse_version

__all__ = [
    "Version",
    "VersionBound",
    "VersionRange",
    "compare_versions",
    "filter_compatible",
    "parse_version",
    "parse_version_range",
    "qualifier_rank",
    "satisfies",
    "version_sort_key",
]
