import sfs
from ._utils import log_params, parse_list, parse_ints, parse_shape, write_output


def create(
    input: str,
    samples: str = None,
    samples_file: str = None,
    project_individuals: str = None,
    project_shape: str = None,
    strict: bool = False,
    output: str = None,
    format: str = "text",
    precision: int = None,
    progress: bool = False,
):
    """Create a site count spectrum from a VCF file

    Parameters
    ----------
    input : str
        path to the (optionally gzipped) VCF file
    samples : str
        comma-separated samples to include, each optionally assigned to a
        population as "sample=population", e.g. "s0=A,s1=A,s2=B". By default,
        all samples form a single population.
    samples_file : str
        file with one sample per line, optionally followed by a tab and the
        population. Cannot be used together with `samples`.
    project_individuals : str
        comma-separated number of individuals to project each population to
    project_shape : str
        shape to project to, e.g. "5/7". Cannot be used together with
        `project_individuals`.
    strict : bool
        fail on the first record with an invalid genotype or insufficient data
    output : str
        output path, by default stdout
    format : str
        output format, "text" or "npy"
    precision : int
        decimals in text output, by default 0, or 6 when projecting
    progress : bool
        show a progress bar
    """
    log_params("create", locals())
    assert not (
        samples is not None and samples_file is not None
    ), "only one of --samples and --samples_file can be provided"
    assert not (
        project_individuals is not None and project_shape is not None
    ), "only one of --project_individuals and --project_shape can be provided"

    if samples_file is not None:
        sample_map = sfs.SampleMap.from_path(samples_file)
    elif samples is not None:
        sample_map = sfs.SampleMap.from_strings(parse_list(samples))
    else:
        sample_map = None

    project_individuals = parse_ints(project_individuals)
    project_to = parse_shape(project_shape)
    if precision is None:
        projecting = project_individuals is not None or project_to is not None
        precision = 6 if projecting else 0

    reader = sfs.VcfGenotypeReader(input)
    scs = sfs.create(
        reader,
        samples=sample_map,
        project_to=project_to,
        project_individuals=project_individuals,
        strict=strict,
        progress=progress,
    )
    write_output(scs, output=output, format=format, precision=precision)
