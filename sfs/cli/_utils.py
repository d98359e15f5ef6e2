import sfs
from typing import List, Optional, Tuple


def log_params(name, params):
    sfs.logger.info(
        f"Received parameters: \n{name}\n  "
        + "\n  ".join(f"--{k}={v}" for k, v in params.items())
    )


def parse_list(value, sep: str = ",") -> Optional[List[str]]:
    """Parse a list argument, which `fire` may pass as str, number, list or tuple"""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [v for v in str(value).split(sep) if v != ""]


def parse_ints(value, sep: str = ",") -> Optional[List[int]]:
    values = parse_list(value, sep=sep)
    if values is None:
        return None
    try:
        return [int(v) for v in values]
    except ValueError:
        raise ValueError(f"expected a list of integers, found '{value}'")


def parse_shape(value) -> Optional[Tuple[int, ...]]:
    """Parse a shape given as e.g. "5/7", "5,7", 5 or (5, 7)"""
    if value is None:
        return None
    if isinstance(value, str) and "/" in value:
        return tuple(parse_ints(value, sep="/"))
    return tuple(parse_ints(value))


def write_output(spectrum, output: str = None, format: str = "text", precision: int = 6):
    assert format in ["text", "npy"], "format should be 'text' or 'npy'"
    sfs.write_spectrum(spectrum, dest=output, format=format, precision=precision)
    if output is not None:
        sfs.logger.info(f"Spectrum of shape {spectrum.shape} written to {output}")
