import io
import os
import tempfile
import numpy as np
import pytest
import sfs
from sfs import Scs
from sfs.spectrum import Format, format_text
from sfs.utils import cd


def test_format_text():
    assert format_text(Scs.from_range(range(3), 3), precision=2) == "#SHAPE=<3>\n0.00 1.00 2.00\n"
    assert (
        format_text(Scs.from_range(range(4), [2, 2]), precision=0)
        == "#SHAPE=<2/2>\n0 1 2 3\n"
    )


def test_read_text():
    raw = b"#SHAPE=<2/3>\n0 1 2 3 4 5.5\n"
    scs = sfs.read_scs(io.BytesIO(raw))
    assert scs == Scs([0, 1, 2, 3, 4, 5.5], [2, 3])


def test_read_text_errors():
    for raw in [
        b"#SHAPE=<2/3>\n0 1 2 3 4\n",
        b"#SHAPE=<2/x>\n0 1 2 3 4 5\n",
        b"#SHAPE=<2/3>\n0 1 2 a 4 5\n",
    ]:
        with pytest.raises(sfs.FormatError):
            sfs.read_scs(io.BytesIO(raw))

    with pytest.raises(sfs.FormatError):
        sfs.read_scs(io.BytesIO(b"0 1 2\n"))


def test_detect():
    assert Format.detect(b"#SHAPE=<17/19>\n1 2 3") == Format.TEXT
    assert Format.detect(b"\x93NUMPYfoobar") == Format.NPY
    assert Format.detect(b"foobar") is None


def test_write_read():
    scs = Scs(np.random.rand(12), [3, 4])
    with tempfile.TemporaryDirectory() as tmp_dir:
        with cd(tmp_dir):
            sfs.write_spectrum(scs, "out.npy", format="npy")
            assert np.array_equal(np.load("out.npy").ravel(), scs.inner.as_slice())
            assert sfs.read_scs("out.npy") == scs

            sfs.write_spectrum(scs, "out.sfs", format="text", precision=3)
            with open("out.sfs") as f:
                assert f.readline() == "#SHAPE=<3/4>\n"
            assert np.allclose(list(sfs.read_scs("out.sfs")), list(scs), atol=1e-3)

            sfs.write_spectrum(scs, "out.sfs.gz", precision=3)
            assert np.allclose(list(sfs.read_scs("out.sfs.gz")), list(scs), atol=1e-3)


def test_read_npy_from_numpy():
    with tempfile.TemporaryDirectory() as tmp_dir:
        path = os.path.join(tmp_dir, "counts.npy")
        np.save(path, np.arange(6, dtype=np.int64).reshape(2, 3))
        assert sfs.read_scs(path, format="npy") == Scs.from_range(range(6), [2, 3])


def test_write_fileobj():
    f = io.BytesIO()
    sfs.write_spectrum(Scs.from_vec([1, 2]), f, precision=1)
    assert f.getvalue() == b"#SHAPE=<2>\n1.0 2.0\n"
