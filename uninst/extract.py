"""Extracting, listing and checking the files of an 'inst' package."""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import BinaryIO

from .copypipe import ImageReadError, copypipe, seek_past_name
from .idb import IdbLine
from .lzw import LzwError, unlzwpipe

__all__ = ["ExtractError", "Mode", "Extractor", "open_mkdir"]


class ExtractError(Exception):
    """A package could not be read or a file could not be written."""


class Mode(Enum):
    """What to do with each file of the package."""

    EXTRACT = "extract"
    LIST = "list"
    TEST = "test"


def open_mkdir(path: str | os.PathLike[str]) -> BinaryIO:
    """Open ``path`` for writing, creating the directories leading to it.

    An existing file is opened without being truncated.
    """
    path = os.fspath(path)
    parts = path.split("/")
    for depth in range(1, len(parts)):
        try:
            os.mkdir("/".join(parts[:depth]), 0o755)
        except FileExistsError:
            pass
    flags = os.O_WRONLY | os.O_CREAT | getattr(os, "O_BINARY", 0)
    fd = os.open(path, flags, 0o644)
    return os.fdopen(fd, "wb")


class Extractor:
    """Handles idb lines one by one, keeping the current image file open."""

    def __init__(
        self,
        product_path: str | os.PathLike[str],
        mode: Mode = Mode.EXTRACT,
        listing: bool = False,
    ) -> None:
        self.product_path = os.fspath(product_path)
        self.mode = mode
        self.listing = listing
        self.failed = False
        self._image: BinaryIO | None = None
        self._image_path: str | None = None

    def _open_image(self, image_path: str) -> BinaryIO:
        if self._image_path is not None and self._image_path != image_path:
            self.close()
        if self._image is None:
            try:
                self._image = open(image_path, "rb")
            except OSError as exc:
                raise ExtractError(
                    f"couldn't open image file '{image_path}': {exc.strerror}"
                ) from exc
            self._image_path = image_path
        return self._image

    def handle(self, line: IdbLine) -> int | None:
        """Process one file; return its checksum, or None if nothing was read."""
        if self.mode is Mode.LIST or (self.listing and self.mode is not Mode.TEST):
            print(line.install_path)
        if self.mode is Mode.LIST:
            return None

        try:
            image = line.image_name()
        except ValueError as exc:
            raise ExtractError(str(exc)) from exc
        src = self._open_image(f"{self.product_path}.{image}")

        if line.off is None or line.size is None:
            return None

        dst: BinaryIO | None = None
        if self.mode is not Mode.TEST:
            try:
                dst = open_mkdir(line.install_path)
            except OSError as exc:
                raise ExtractError(
                    f"couldn't open outfile '{line.install_path}': {exc.strerror}"
                ) from exc

        try:
            try:
                src.seek(line.off)
            except (OSError, ValueError) as exc:
                raise ExtractError("while seeking image") from exc
            try:
                seek_past_name(src)
                if line.cmpsize is not None and line.cmpsize > 0:
                    total = unlzwpipe(src, dst, line.cmpsize)
                else:
                    total = copypipe(src, dst, line.size)
            except ImageReadError as exc:
                raise ExtractError(str(exc)) from exc
            except LzwError as exc:
                raise ExtractError(f"while extracting: {exc}") from exc
        finally:
            if dst is not None:
                dst.close()

        if line.sum is not None:
            if line.sum == total:
                if self.listing:
                    print(f"{line.install_path}:  OK", file=sys.stderr)
            else:
                print(f"{line.install_path}:  checksum failed", file=sys.stderr)
                self.failed = True
        return total

    def close(self) -> None:
        """Close the image file that is open, if any."""
        if self._image is not None:
            self._image.close()
        self._image = None
        self._image_path = None

    def __enter__(self) -> Extractor:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()