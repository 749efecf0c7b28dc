"""Value object for exporter release versions.

Versions compare numerically segment by segment, so "0.10.0" sorts after
"0.9.0" and "0.4" equals "0.4.0".
"""

import re
from dataclasses import dataclass, field
from functools import total_ordering

from consul_exporter.exceptions import ValidationError

_VERSION_PATTERN = re.compile(r"^(\d+(?:\.\d+)*)(?:[-+].*)?\Z")


@total_ordering
@dataclass(frozen=True)
class Version:
    """Immutable semantic version.

    Only the numeric release segments take part in comparisons; a pre-release
    or build suffix ("-rc.1", "+build") is kept in ``raw`` but ignored when
    ordering. A leading "v" is rejected: release URLs add their own.

    Example:
        >>> Version("0.10.0") > Version("0.9.1")
        True
        >>> Version("0.4") == Version("0.4.0")
        True
    """

    raw: str
    segments: tuple[int, ...] = field(compare=False)

    def __init__(self, raw: str):
        # Use object.__setattr__ to bypass frozen dataclass
        object.__setattr__(self, "raw", raw)
        object.__setattr__(self, "segments", self._parse(raw))

    @staticmethod
    def _parse(raw: str) -> tuple[int, ...]:
        match = _VERSION_PATTERN.match(raw) if isinstance(raw, str) else None
        if match is None:
            raise ValidationError(f"Malformed version: {raw!r}", field="version")
        return tuple(int(part) for part in match.group(1).split("."))

    def _key(self) -> tuple[int, ...]:
        segments = list(self.segments)
        while len(segments) > 1 and segments[-1] == 0:
            segments.pop()
        return tuple(segments)

    def __eq__(self, other: object) -> bool:
        other = self._coerce(other)
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "Version | str") -> bool:
        other = self._coerce(other)
        if not isinstance(other, Version):
            return NotImplemented
        return self.segments_padded(len(other.segments)) < other.segments_padded(
            len(self.segments)
        )

    @staticmethod
    def _coerce(other: object) -> object:
        """Parse strings for comparison; malformed ones compare as unrelated."""
        if not isinstance(other, str):
            return other
        try:
            return Version(other)
        except ValidationError:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key())

    def segments_padded(self, length: int) -> tuple[int, ...]:
        """Return the numeric segments right-padded with zeros to ``length``."""
        return self.segments + (0,) * max(0, length - len(self.segments))

    def __str__(self) -> str:
        return self.raw

    def __repr__(self) -> str:
        return f"Version('{self.raw}')"
