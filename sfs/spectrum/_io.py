"""
Reading and writing spectra.

Two formats are supported:

- text: a header line `#SHAPE=<a/b/...>` giving the `/`-separated shape,
  followed by a single line with all values in row-major order separated by
  a space.
- npy: the numpy binary format, version 1.0, little-endian float64.

Both can be read from and written to a path (compressed if the extension
says so, e.g. `.gz`), a binary file object, or stdin/stdout.
"""
import enum
import io
import os
import re
import sys
from typing import Optional, Union

from smart_open import open

from .._errors import FormatError, ReadError
from ..array import MAGIC, Array, Shape
from ._spectrum import Scs, Spectrum

TEXT_START = b"#SHAPE"


class Format(enum.Enum):
    TEXT = "text"
    NPY = "npy"

    @classmethod
    def detect(cls, raw: bytes) -> Optional["Format"]:
        """Detect the format from the leading bytes of `raw`, or None if unknown"""
        if raw.startswith(MAGIC):
            return cls.NPY
        elif raw.startswith(TEXT_START):
            return cls.TEXT
        else:
            return None


def _read_bytes(source) -> bytes:
    if source is None or source == "-":
        if sys.stdin.isatty() and "SFS_ALLOW_STDIN" not in os.environ:
            raise ReadError("no input file provided and no input on stdin")
        return sys.stdin.buffer.read()
    elif isinstance(source, (str, os.PathLike)):
        with open(source, "rb") as f:
            return f.read()
    else:
        return source.read()


def _parse_text(raw: bytes) -> Scs:
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FormatError("spectrum in text format is not valid UTF-8") from e

    header, _, body = text.partition("\n")
    if not header.startswith(TEXT_START.decode()):
        raise FormatError(f"invalid text header '{header.strip()}'")
    # e.g. "#SHAPE=<3/5>" -> "3/5"
    shape_str = re.sub(r"^[^0-9]+|[^0-9]+$", "", header.strip())
    try:
        shape = Shape(int(v) for v in shape_str.split("/"))
        values = [float(v) for v in body.split()]
    except ValueError as e:
        raise FormatError(f"invalid spectrum in text format: {e}") from e

    if len(values) != shape.elements():
        raise FormatError(
            f"spectrum of shape {shape} requires {shape.elements()} values, "
            f"found {len(values)}"
        )
    return Scs(values, shape)


def read_scs(source=None, format: Optional[Union[str, Format]] = None) -> Scs:
    """
    Read a spectrum of counts

    Parameters
    ----------
    source : str, path-like, binary file object or None
        where to read from; None or "-" reads from stdin
    format : str or Format, optional
        "text" or "npy"; detected from the leading bytes if not provided

    Returns
    -------
    Scs
        the spectrum; values are always read as counts

    Raises
    ------
    FormatError
        if the format cannot be detected or the data cannot be decoded
    """
    raw = _read_bytes(source)
    format = Format(format) if format is not None else Format.detect(raw)

    if format is Format.TEXT:
        return _parse_text(raw)
    elif format is Format.NPY:
        return Scs.from_array(Array.read_npy(io.BytesIO(raw)))
    else:
        raise FormatError("could not detect spectrum format")


def format_text(spectrum: Spectrum, precision: int = 6) -> str:
    values = " ".join(f"{x:.{precision}f}" for x in spectrum.inner.as_slice())
    return f"#SHAPE=<{spectrum.shape}>\n{values}\n"


def write_spectrum(
    spectrum: Spectrum,
    dest=None,
    format: Union[str, Format] = Format.TEXT,
    precision: int = 6,
):
    """
    Write a spectrum

    Parameters
    ----------
    spectrum : Spectrum
        spectrum to write
    dest : str, path-like, binary file object or None
        where to write; None or "-" writes to stdout
    format : str or Format
        "text" or "npy"
    precision : int
        number of decimals in text format
    """
    format = Format(format)
    if format is Format.TEXT:
        raw = format_text(spectrum, precision).encode("utf-8")
    else:
        buffer = io.BytesIO()
        spectrum.inner.write_npy(buffer)
        raw = buffer.getvalue()

    if dest is None or dest == "-":
        sys.stdout.buffer.write(raw)
        sys.stdout.buffer.flush()
    elif isinstance(dest, (str, os.PathLike)):
        with open(dest, "wb") as f:
            f.write(raw)
    else:
        dest.write(raw)
