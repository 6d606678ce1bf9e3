"""Checksums, LZW decompression and file extraction for IRIX 'inst' packages."""

__version__ = "0.2"