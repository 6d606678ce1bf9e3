# uninst

Read, check and unpack the file data of IRIX `inst` software packages without
an IRIX machine.

An `inst` package is a set of files that share a base name:

- `<pkgname>`: the product description. It is not needed for extraction.
- `<pkgname>.idb`: the index. It lists every installed file with its install
  path, its subsystem (`product.image.subsystem`), and its offset, size,
  compressed size and checksum inside an image file.
- `<pkgname>.<image>`: the image files. They hold the file data, stored plain
  or compressed with Unix `compress`-style LZW.

For each index entry, the package finds the right image file, seeks to the
entry's offset, skips the stored install path, and copies or decompresses the
data. When the entry gives a checksum, the package checks it.

## Installation

```
pip install .
```

Install the test extra with `pip install .[test]`, then run the tests with
`pytest`.

## Checksums

`uninst.cksum` provides the 16-bit rotating checksum used in `.idb` files:

```python
from uninst.cksum import cksum, cksum_update

total = cksum(b"hello")
# Checksumming in pieces gives the same result:
assert cksum_update(b"lo", cksum_update(b"hel", 0)) == total
```

## Image data

`uninst.copypipe`:

- `seek_past_name(src)` skips the record that comes before each file in an
  image. The record is a big-endian 16-bit length followed by the install path.
  The function returns the skipped path as bytes. It raises `ImageReadError`
  if the record is truncated or the length exceeds 8192.
- `copypipe(src, dst, length)` copies `length` bytes of stored data from `src`
  to `dst` and returns their checksum. It only computes the checksum when
  `dst` is `None`. It raises `ImageReadError` if the data ends early.

`uninst.lzw`:

- `decompress(data)` takes a complete compressed stream and returns the
  decompressed bytes. The stream's first two bytes are the magic bytes, which
  are skipped without being checked.
- `unlzwpipe(src, dst, length)` reads `length` compressed bytes from `src` and
  writes the decompressed data to `dst`, or to nothing when `dst` is `None`.
  It returns the checksum of the decompressed data.

Both raise `LzwDataError` for invalid data and `LzwBufferError` for a stream
that ends inside its header or inside a code. Both errors are subclasses of
`LzwError`.

```python
from uninst.lzw import LzwError, decompress

try:
    payload = decompress(compressed_bytes)
except LzwError as exc:
    print(f"bad image data: {exc}")
```

## Index entries and extraction

`uninst.idb.IdbLine` is a dataclass that describes one entry of an `.idb` file.
`Flag` holds that entry's flag bits. Numeric fields that the entry does not
give are `None`. `IdbLine.image_name()` returns the image part of the entry's
`product.image.subsystem` name. It raises `ValueError` when the name does not
have that form.

`uninst.extract.Extractor(product_path, mode, listing)` handles entries one at
a time through `handle(line)`:

- With `Mode.LIST`, it prints the install path and does nothing else.
- With `Mode.EXTRACT`, it writes the file to its install path. It creates the
  missing directories with `open_mkdir`. It prints the path first when
  `listing` is true.
- With `Mode.TEST`, it reads and checksums the data without writing anything.

The image file `<product_path>.<image>` is opened when it is first needed and
stays open until an entry needs a different image. `handle` returns the
checksum of the data, or `None` when the entry has no offset or size. A
checksum mismatch is reported on standard error and sets `failed` to `True`.
With `listing`, matching checksums are reported as `OK`. Problems that stop
the work, such as a missing image file or corrupt data, raise `ExtractError`.
The extractor is a context manager, and `close()` closes the open image file.

```python
from uninst.extract import Extractor, Mode

with Extractor("pkgname", Mode.TEST) as extractor:
    for line in entries:          # IdbLine objects
        extractor.handle(line)
    if extractor.failed:
        print("checksum errors")
```

## Command-line helpers

`uninst.cli` holds the option handling for a `uninst` command:

- `parse_args(argv)` understands `-h`, `-l`, `-t`, `-v` and `-V`. It returns
  `Options`, whose `mode` property gives the matching `Mode`. Options given
  twice, the pairs `-l -t` and `-l -v`, unknown options and a missing file
  name raise `UsageError`.
- `usage_text(prog)` and `version_text()` return the help and version texts.
  `program_name(argv0)` strips the directory and suffix from a program path.
- `product_description_name(filename)` rejects names that contain a dot.
  `idb_path(product)` gives the path of the `.idb` file.

## What it does not do

- It does not read `.idb` files. The caller must build the `IdbLine` entries.
- It has no installed command. `uninst.cli` only provides the pieces for
  building one.