"""Version range expressions as published in dependency metadata.

Two notations are accepted:

- a bare version (``3.1.0``), meaning "this version or newer";
- an interval (``[3.0.0,4.0.0)``), where ``[``/``]`` are inclusive and
  ``(``/``)`` exclusive, and either side may be left empty.

Evaluation fails open: a missing or unreadable range never excludes a
version.
"""

import logging
from collections.abc import Iterable
from typing import Protocol, TypeVar

from pydantic import BaseModel, ConfigDict

from initializr.versioning.ordering import compare_versions
from initializr.versioning.version import Version, parse_version

logger = logging.getLogger(__name__)

_OPENING_BRACKETS = ("[", "(")
_CLOSING_BRACKETS = ("]", ")")


class VersionBound(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: Version
    inclusive: bool


class VersionRange(BaseModel):
    """A range with optional lower and upper bounds. No bounds means any version."""

    model_config = ConfigDict(frozen=True)

    lower: VersionBound | None = None
    upper: VersionBound | None = None

    @property
    def is_unconstrained(self) -> bool:
        return self.lower is None and self.upper is None

    def contains(self, version: Version) -> bool:
        """Check whether a version lies within this range."""
        if self.lower is not None:
            comparison = compare_versions(version, self.lower.version)
            if self.lower.inclusive and comparison < 0:
                return False
            if not self.lower.inclusive and comparison <= 0:
                return False

        if self.upper is not None:
            comparison = compare_versions(version, self.upper.version)
            if self.upper.inclusive and comparison > 0:
                return False
            if not self.upper.inclusive and comparison >= 0:
                return False

        return True


def _make_bound(bound_str: str, inclusive: bool) -> VersionBound | None:
    if not bound_str:
        return None
    return VersionBound(version=parse_version(bound_str), inclusive=inclusive)


def parse_version_range(expression: str | None) -> VersionRange:
    """Parse a range expression into a VersionRange.

    Args:
        expression: The range expression (e.g. "[3.0.0,4.0.0)", "3.1.0").

    Returns:
        The parsed VersionRange. Empty expressions and intervals that do not
        contain exactly one comma yield an unconstrained range.
    """
    details = (expression or "").strip()
    if not details:
        return VersionRange()

    if details.startswith(_OPENING_BRACKETS) and details.endswith(_CLOSING_BRACKETS):
        sides = details[1:-1].split(",")
        if len(sides) != 2:
            # Ambiguous interval: treat as unconstrained rather than hiding the candidate
            logger.debug("Ignoring unparseable version range %r", expression)
            return VersionRange()

        lower_str, upper_str = (side.strip() for side in sides)
        return VersionRange(
            lower=_make_bound(lower_str, inclusive=details.startswith("[")),
            upper=_make_bound(upper_str, inclusive=details.endswith("]")),
        )

    return VersionRange(lower=_make_bound(details, inclusive=True))


def satisfies(version_str: str, range_expression: str | None) -> bool:
    """Check whether a version string satisfies a range expression.

    Args:
        version_str: The version to test (e.g. "3.1.0").
        range_expression: The range to test against. Empty or None means
            no constraint.

    Returns:
        True if the version is within the range, or the range is empty or
        unparseable.
    """
    if not range_expression:
        return True
    return parse_version_range(range_expression).contains(parse_version(version_str))


class SupportsVersionRange(Protocol):
    @property
    def version_range(self) -> str | None: ...


CandidateType = TypeVar("CandidateType", bound=SupportsVersionRange)


def filter_compatible(candidates: Iterable[CandidateType], target_version: str) -> list[CandidateType]:
    """Keep the candidates whose version range is satisfied by the target version.

    Args:
        candidates: Items exposing a ``version_range`` expression.
        target_version: The selected platform version.

    Returns:
        The matching candidates, in their original order.
    """
    return [candidate for candidate in candidates if satisfies(target_version, candidate.version_range)]
