"""Records describing the files listed in an 'inst' idb file."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

__all__ = ["Flag", "IdbLine"]


class Flag(IntFlag):
    """Per-file flags; together they fit in one byte."""

    NEEDRQS = 1
    NOHIST = 2
    NOSHARE = 4
    NOSTRIP = 8
    STRIPDSO = 16
    DELHIST = 32
    NORQS = 64
    SHADOW = 128


@dataclass
class IdbLine:
    """Everything one line of an idb file says about a file.

    Numeric attributes that the line does not mention are ``None``.
    """

    line_num: int = 0
    type: str = ""
    flags: Flag = Flag(0)
    mode: int = 0
    user_name: str | None = None
    group_name: str | None = None
    install_path: str = ""
    source_path: str | None = None
    subsystem: str = ""
    config1: str | None = None
    exitop: str | None = None
    mach: str | None = None
    postop: str | None = None
    preop: str | None = None
    removeop: str | None = None
    symval: str | None = None
    mac: str | None = None
    cmpsize: int | None = None
    off: int | None = None
    size: int | None = None
    sum: int | None = None
    f: int | None = None

    def image_name(self) -> str:
        """Return the image part of a ``product.image.subsystem`` name.

        Raises ValueError when the subsystem name is not of that form.
        """
        head, dot, _ = self.subsystem.rpartition(".")
        if not dot:
            raise ValueError(f"no last dot in subsystem name '{self.subsystem}'")
        _, dot, image = head.partition(".")
        if not dot:
            raise ValueError(f"no first dot in image name '{head}'")
        if "." in image:
            raise ValueError("image name has dots")
        return image