import numpy as np
import sfs
from ._utils import log_params, parse_ints, parse_shape, write_output

FILL_VALUES = {
    "nan": np.nan,
    "zero": 0.0,
    "minus-one": -1.0,
    "inf": np.inf,
}


def fold(
    input: str = None,
    fill: str = "nan",
    output: str = None,
    format: str = "text",
    precision: int = 6,
):
    """Fold a spectrum

    Parameters
    ----------
    input : str
        input spectrum, by default read from stdin
    fill : str
        value of folded cells: "nan", "zero", "minus-one" or "inf"
    output : str
        output path, by default stdout
    format : str
        output format, "text" or "npy"
    precision : int
        decimals in text output
    """
    log_params("fold", locals())
    assert fill in FILL_VALUES, f"fill should be one of {list(FILL_VALUES)}"
    scs = sfs.read_scs(input)
    folded = scs.fold().into_spectrum(FILL_VALUES[fill])
    write_output(folded, output=output, format=format, precision=precision)


def marginalize(
    input: str = None,
    remove: str = None,
    keep: str = None,
    output: str = None,
    format: str = "text",
    precision: int = 6,
):
    """Marginalize populations out of a spectrum

    Parameters
    ----------
    input : str
        input spectrum, by default read from stdin
    remove : str
        comma-separated 0-based axes to remove
    keep : str
        comma-separated 0-based axes to keep; all others are removed. Cannot
        be used together with `remove`.
    output : str
        output path, by default stdout
    format : str
        output format, "text" or "npy"
    precision : int
        decimals in text output
    """
    log_params("marginalize", locals())
    assert (remove is None) != (keep is None), "exactly one of --remove and --keep is required"
    scs = sfs.read_scs(input)
    if remove is not None:
        axes = parse_ints(remove)
    else:
        keep = parse_ints(keep)
        for axis in keep:
            assert 0 <= axis < scs.dimensions, (
                f"axis {axis} out of bounds for spectrum with {scs.dimensions} dimensions"
            )
        axes = [axis for axis in range(scs.dimensions) if axis not in keep]
    write_output(scs.marginalize(axes), output=output, format=format, precision=precision)


def project(
    input: str = None,
    shape: str = None,
    individuals: str = None,
    output: str = None,
    format: str = "text",
    precision: int = 6,
):
    """Project a spectrum to a smaller shape

    Parameters
    ----------
    input : str
        input spectrum, by default read from stdin
    shape : str
        shape to project to, e.g. "5/7"
    individuals : str
        comma-separated number of individuals to project each population to.
        Cannot be used together with `shape`.
    output : str
        output path, by default stdout
    format : str
        output format, "text" or "npy"
    precision : int
        decimals in text output
    """
    log_params("project", locals())
    assert (shape is None) != (
        individuals is None
    ), "exactly one of --shape and --individuals is required"
    if shape is not None:
        project_to = parse_shape(shape)
    else:
        project_to = [2 * i + 1 for i in parse_ints(individuals)]
    scs = sfs.read_scs(input)
    write_output(scs.project(project_to), output=output, format=format, precision=precision)


def normalize(
    input: str = None,
    output: str = None,
    format: str = "text",
    precision: int = 6,
):
    """Normalize a spectrum to frequencies summing to one"""
    log_params("normalize", locals())
    scs = sfs.read_scs(input)
    write_output(scs.into_normalized(), output=output, format=format, precision=precision)


def view(
    input: str = None,
    output: str = None,
    format: str = "text",
    precision: int = 6,
):
    """Print a spectrum, or convert it between formats

    Parameters
    ----------
    input : str
        input spectrum in text or npy format, by default read from stdin
    output : str
        output path, by default stdout
    format : str
        output format, "text" or "npy"
    precision : int
        decimals in text output
    """
    log_params("view", locals())
    scs = sfs.read_scs(input)
    write_output(scs, output=output, format=format, precision=precision)
