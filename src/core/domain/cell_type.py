"""Cell type values used by the puzzle provider.

The provider encodes the visual variant of every non-block cell as a small
integer. Only the three values below are understood; anything else means
the upstream schema changed and the import must stop.
"""

from __future__ import annotations

from enum import IntEnum


class CellType(IntEnum):
    """Supported `type` values of a source cell."""

    NORMAL = 1
    CIRCLE = 2
    HIGHLIGHT = 3

    @classmethod
    def is_supported(cls, value: object) -> bool:
        """True when `value` is one of the recognized cell types."""

        if not isinstance(value, int) or isinstance(value, bool):
            return False
        return value in cls._value2member_map_
