"""Total ordering over parsed versions.

Numeric parts are compared first. Equal numeric parts fall back to a
qualifier rank: releases beat release candidates, which beat milestones,
which beat snapshots. Unknown qualifiers sort below everything else.
"""

from functools import cmp_to_key

from initializr.versioning.version import Version

RELEASE_RANK = 4
RELEASE_CANDIDATE_RANK = 3
MILESTONE_RANK = 2
SNAPSHOT_RANK = 1
UNKNOWN_RANK = 0


def qualifier_rank(qualifier: str) -> int:
    """Return the precedence class of a qualifier (higher is more released)."""
    if not qualifier or qualifier == "RELEASE":
        return RELEASE_RANK
    if qualifier.startswith("RC"):
        return RELEASE_CANDIDATE_RANK
    if qualifier.startswith("M"):
        return MILESTONE_RANK
    if "SNAPSHOT" in qualifier:
        return SNAPSHOT_RANK
    return UNKNOWN_RANK


def compare_versions(left: Version, right: Version) -> int:
    """Compare two versions.

    Args:
        left: The first version.
        right: The second version.

    Returns:
        A negative number if ``left`` sorts before ``right``, zero if they are
        equivalent, a positive number otherwise. Two release-like versions
        ("" and "RELEASE") with equal numeric parts are equivalent.
    """
    for left_part, right_part in (
        (left.major, right.major),
        (left.minor, right.minor),
        (left.patch, right.patch),
    ):
        if left_part != right_part:
            return left_part - right_part

    left_rank = qualifier_rank(left.qualifier)
    right_rank = qualifier_rank(right.qualifier)
    if left_rank != right_rank:
        return left_rank - right_rank

    if left_rank == RELEASE_RANK:
        return 0

    # Same pre-release class: M1 < M2, RC1 < RC2
    if left.qualifier == right.qualifier:
        return 0
    return -1 if left.qualifier < right.qualifier else 1


version_sort_key = cmp_to_key(compare_versions)
