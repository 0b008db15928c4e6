"""Hex color value object."""
from __future__ import annotations

import re

from nexus_kernel.domain.base_value_object import BaseValueObject
from nexus_kernel.exceptions import InvalidValueError

_HEX_COLOR = re.compile(r"^#[0-9A-F]{6}$")


class Color(BaseValueObject):
    """#RRGGBB, upper-case. The leading # is optional on input."""

    def __init__(self, raw: str) -> None:
        if not isinstance(raw, str):
            raise InvalidValueError("color must be a string")
        value = raw.strip().upper()
        if not value.startswith("#"):
            value = "#" + value
        if not _HEX_COLOR.match(value):
            raise InvalidValueError("invalid color format: must be #RRGGBB")
        self.value = value
        self._finalize_init()

    def __str__(self) -> str:
        return self.value

    def rgb(self) -> tuple[int, int, int]:
        return (
            int(self.value[1:3], 16),
            int(self.value[3:5], 16),
            int(self.value[5:7], 16),
        )

    @property
    def brightness(self) -> int:
        """Perceived brightness, 0-255 (ITU-R BT.601 weights)."""
        r, g, b = self.rgb()
        return (r * 299 + g * 587 + b * 114) // 1000

    @property
    def is_light(self) -> bool:
        return self.brightness > 128
