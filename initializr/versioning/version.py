"""Version values and the lenient parser used for boot versions and range bounds.

The metadata service uses a ``major.minor.patch(-qualifier)`` scheme where the
qualifier may also be dot-separated (``2.7.18.RELEASE``). Parsing never fails:
malformed input degrades to zeroed numeric parts.
"""

import re

from pydantic import BaseModel, ConfigDict

_SEPARATOR_PATTERN = re.compile(r"[.\-]")

_NUMERIC_PARTS = 3


class Version(BaseModel):
    """A parsed version: three numeric parts plus an optional qualifier."""

    model_config = ConfigDict(frozen=True)

    major: int = 0
    minor: int = 0
    patch: int = 0
    qualifier: str = ""

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.qualifier:
            return f"{base}-{self.qualifier}"
        return base


def _is_decimal(token: str) -> bool:
    # str.isdigit() also accepts superscripts and other non-ASCII digits
    return token.isascii() and token.isdecimal()


def parse_version(version_str: str | None) -> Version:
    """Parse a version string into a Version.

    Tokens are split on ``.`` and ``-``. Leading numeric tokens fill major,
    minor and patch; the first non-numeric token becomes the qualifier and
    stops parsing, so anything after it is dropped (``3.0.0-M2-extra`` has
    qualifier ``M2``).

    Args:
        version_str: The version string (e.g. "3.1.0", "3.0.0-RC1", "3").

    Returns:
        The parsed Version. Missing numeric parts default to 0 and the
        qualifier defaults to "".
    """
    numeric_parts: list[int] = []
    qualifier = ""

    for token in _SEPARATOR_PATTERN.split(version_str or ""):
        if not _is_decimal(token):
            qualifier = token
            break
        numeric_parts.append(int(token))

    numeric_parts = numeric_parts[:_NUMERIC_PARTS]
    while len(numeric_parts) < _NUMERIC_PARTS:
        numeric_parts.append(0)

    major, minor, patch = numeric_parts
    return Version(major=major, minor=minor, patch=patch, qualifier=qualifier)
