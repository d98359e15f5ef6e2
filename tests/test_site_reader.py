import numpy as np
import pytest
import sfs
from sfs import ListGenotypeReader, SiteReader
from sfs.input import Genotype, SiteKind, Skipped, from_alleles

SAMPLES = ["s0", "s1", "s2", "s3"]


def make_reader(*genotypes):
    return ListGenotypeReader(
        SAMPLES, [("chr1", 10 * (i + 1), g) for i, g in enumerate(genotypes)]
    )


def test_from_alleles():
    assert from_alleles([0, 0]) == Genotype.ZERO
    assert from_alleles([1, 0]) == Genotype.ONE
    assert from_alleles([1, 1]) == Genotype.TWO
    assert from_alleles([-1, 1]) == Skipped.MISSING
    assert from_alleles([1, 2]) == Skipped.MULTIALLELIC
    assert isinstance(from_alleles([0, 1, 1]), sfs.GenotypeError)
    assert Skipped.MISSING.reason == "missing"


def test_read_site_standard():
    reader = SiteReader.build(make_reader([0, 1, 2, 1]))
    assert reader.create_zero_scs().shape == (9,)

    site = reader.read_site()
    assert site.kind is SiteKind.STANDARD
    assert site.count == [4]
    assert reader.current_contig == "chr1"
    assert reader.current_position == 10
    assert reader.read_site() is None


def test_read_site_populations():
    samples = [("s0", "A"), ("s2", "B"), ("s3", "A")]
    reader = SiteReader.build(make_reader([2, 1, 1, 0], [1, 0, 2, 2]), samples=samples)
    assert reader.create_zero_scs().shape == (5, 3)

    # s1 is not in the samples mapping and is ignored
    assert reader.read_site().count == [2, 1]
    assert reader.read_site().count == [3, 2]
    assert reader.read_site() is None


def test_read_site_skipped():
    reader = SiteReader.build(make_reader([0, None, 2, Skipped.MULTIALLELIC]))
    site = reader.read_site()
    assert site.kind is SiteKind.INSUFFICIENT_DATA
    assert reader.current_skipped_samples() == [
        ("s1", Skipped.MISSING),
        ("s3", Skipped.MULTIALLELIC),
    ]


def test_read_site_invalid_genotype():
    reader = SiteReader.build(make_reader([0, sfs.GenotypeError("genotype not diploid"), 1, 1]))
    with pytest.raises(sfs.ReadError) as e:
        reader.read_site()
    assert isinstance(e.value.__cause__, sfs.GenotypeError)


def test_read_site_projection():
    samples = [("s0", "A"), ("s1", "A"), ("s2", "B"), ("s3", "B")]
    reader = SiteReader.build(
        make_reader([0, 1, 2, 0], [1, None, 0, 1], [None, None, 1, 1]),
        samples=samples,
        project_individuals=[1, 1],
    )
    scs = reader.create_zero_scs()
    assert scs.shape == (3, 3)

    site = reader.read_site()
    assert site.kind is SiteKind.PROJECTED
    site.add_to(scs)
    assert np.isclose(scs.sum(), 1.0)

    site = reader.read_site()
    assert site.kind is SiteKind.PROJECTED
    assert reader.current_skipped_samples() == [("s1", Skipped.MISSING)]

    site = reader.read_site()
    assert site.kind is SiteKind.INSUFFICIENT_DATA
    with pytest.raises(AssertionError):
        site.add_to(scs)


def test_read_site_projection_exact():
    reader = SiteReader.build(make_reader([0, 1, 2, None]), project_to=[7])
    site = reader.read_site()
    assert site.kind is SiteKind.STANDARD
    assert site.count == [3]


def test_build_errors():
    with pytest.raises(sfs.SampleMapError):
        SiteReader.build(make_reader(), samples=[])
    with pytest.raises(sfs.SampleMapError):
        SiteReader.build(make_reader(), samples=[("s0", "A"), ("s9", "A")])

    with pytest.raises(sfs.ProjectionError) as e:
        SiteReader.build(make_reader(), project_to=[3, 3])
    assert e.value.kind == "unequal_dimensions"

    with pytest.raises(sfs.ProjectionError) as e:
        SiteReader.build(make_reader(), samples=[("s0", "A")], project_individuals=[2])
    assert e.value.kind == "invalid_projection"
