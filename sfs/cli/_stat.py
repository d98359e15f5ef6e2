import sys
import pandas as pd
import sfs
from ._utils import log_params, parse_list, parse_ints

# statistics computed on counts, and those requiring a normalized spectrum
STATISTICS = {
    "d_fu_li": lambda scs: scs.d_fu_li(),
    "d_tajima": lambda scs: scs.d_tajima(),
    "f2": lambda scs: scs.into_normalized().f2(),
    "f3": lambda scs: scs.into_normalized().f3(),
    "f4": lambda scs: scs.into_normalized().f4(),
    "fst": lambda scs: scs.into_normalized().fst(),
    "heterozygosity": lambda scs: scs.into_normalized().heterozygosity(),
    "king": lambda scs: scs.king(),
    "pi": lambda scs: scs.pi(),
    "pi_xy": lambda scs: scs.pi_xy(),
    "r0": lambda scs: scs.r0(),
    "r1": lambda scs: scs.r1(),
    "segregating_sites": lambda scs: scs.segregating_sites(),
    "sum": lambda scs: scs.sum(),
    "theta": lambda scs: scs.theta_watterson(),
}


def calc_stats(scs, statistics, precision=6) -> pd.DataFrame:
    """Calculate statistics from a count spectrum

    Parameters
    ----------
    scs : Scs
        count spectrum; statistics requiring frequencies normalize it first
    statistics : list of str
        names of statistics, see `STATISTICS`
    precision : int or list of int
        decimals for all statistics, or one per statistic

    Returns
    -------
    pd.DataFrame
        single row with one column of formatted values per statistic
    """
    if isinstance(precision, int):
        precision = [precision] * len(statistics)
    assert len(precision) == len(statistics), (
        "number of precision specifiers must equal one or the number of statistics "
        f"(found {len(precision)} precision specifiers and {len(statistics)} statistics)"
    )
    for s in statistics:
        assert s in STATISTICS, f"unknown statistic '{s}', should be one of {list(STATISTICS)}"

    row = {s: f"{STATISTICS[s](scs):.{p}f}" for s, p in zip(statistics, precision)}
    return pd.DataFrame([row], columns=statistics)


def stat(
    input: str = None,
    statistics: str = None,
    header: bool = False,
    delimiter: str = ",",
    precision: str = "6",
):
    """Calculate statistics from a spectrum

    Parameters
    ----------
    input : str
        input spectrum, by default read from stdin. The spectrum is normalized
        as required for each statistic.
    statistics : str
        comma-separated statistics: d_fu_li, d_tajima, f2, f3, f4, fst,
        heterozygosity, king, pi, pi_xy, r0, r1, segregating_sites, sum, theta
    header : bool
        include a header with the names of the statistics
    delimiter : str
        delimiter between statistics
    precision : str
        decimals, either one for all statistics or one per statistic
    """
    log_params("stat", locals())
    assert statistics is not None, "--statistics is required"
    statistics = parse_list(statistics)
    precision = parse_ints(precision)
    if len(precision) == 1:
        precision = precision[0]

    scs = sfs.read_scs(input)
    df = calc_stats(scs, statistics, precision=precision)
    df.to_csv(sys.stdout, sep=delimiter, header=header, index=False)
