"""Reading and writing arrays in the numpy `.npy` format.

Only C-ordered arrays with boolean, integer or floating point dtypes are read;
values are always converted to float64. Arrays are always written as
little-endian float64, format version 1.0.
"""
import numpy as np
from numpy.lib import format as npy_format

from .._errors import FormatError
from ._array import Array

MAGIC = b"\x93NUMPY"


def read_npy(source) -> Array:
    """
    Read an array from a binary file object in npy format

    Parameters
    ----------
    source : binary file object
        positioned at the start of the magic string
    """
    try:
        version = npy_format.read_magic(source)
    except ValueError as e:
        raise FormatError(f"invalid npy magic: {e}") from e

    try:
        if version == (1, 0):
            shape, fortran_order, dtype = npy_format.read_array_header_1_0(source)
        elif version in [(2, 0), (3, 0)]:
            shape, fortran_order, dtype = npy_format.read_array_header_2_0(source)
        else:
            raise FormatError(f"unsupported npy version {version}")
    except ValueError as e:
        raise FormatError(f"invalid npy header: {e}") from e

    if fortran_order:
        raise FormatError("Fortran-ordered npy arrays are not supported")
    if dtype.kind not in "biuf":
        raise FormatError(f"unsupported npy dtype '{dtype.str}'")

    count = int(np.prod(shape, dtype=np.int64))
    raw = source.read(count * dtype.itemsize)
    try:
        data = np.frombuffer(raw, dtype=dtype, count=count).astype(np.float64)
    except ValueError as e:
        raise FormatError(
            f"npy data truncated: expected {count} values of type '{dtype.str}'"
        ) from e

    return Array(data, shape)


def write_npy(array: Array, dest):
    """Write `array` to the binary file object `dest` in npy format"""
    npy_format.write_array_header_1_0(
        dest,
        {
            "descr": "<f8",
            "fortran_order": False,
            "shape": tuple(array.shape),
        },
    )
    dest.write(array.as_slice().astype("<f8").tobytes())
