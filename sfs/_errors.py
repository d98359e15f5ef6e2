"""
Exceptions defined in sfs.
"""


class SfsError(Exception):
    """
    Base class for all errors raised by sfs.
    """


class ShapeError(SfsError, ValueError):
    """
    Data does not fit the declared shape, or a shape has a non-positive dimension.
    """


class _KindError(SfsError, ValueError):
    """
    An error tagged with a `kind`; any keyword details are kept as attributes.
    """

    def __init__(self, kind: str, message: str, **details):
        super().__init__(message)
        self.kind = kind
        for name, value in details.items():
            setattr(self, name, value)


class MarginalizationError(_KindError):
    """
    Invalid axes for marginalizing a spectrum.

    `kind` is one of "duplicate_axis", "axis_out_of_bounds" or "too_many_axes".
    """


class ProjectionError(_KindError):
    """
    Invalid projection between two shapes.

    `kind` is one of "zero", "unequal_dimensions", "invalid_projection" or
    "mismatching_shapes".
    """


class StatisticError(SfsError, ValueError):
    """
    A statistic was requested from a spectrum of the wrong dimension or shape.
    """


class SampleMapError(SfsError, ValueError):
    """
    The sample to population mapping is empty or does not fit the genotype reader.
    """


class FormatError(SfsError, ValueError):
    """
    A spectrum file could not be decoded.
    """


class GenotypeError(SfsError):
    """
    A structurally invalid genotype call, such as a non-diploid genotype.
    """


class ReadError(SfsError, IOError):
    """
    Reading sites was aborted.
    """
