"""
End-to-end tests for the sfs command line interfaces.
"""
import os
import tempfile
import subprocess
import numpy as np
import sfs
from sfs.utils import cd

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


def run(cmds):
    return subprocess.check_output(" ".join(cmds), shell=True).decode()


def test_create():
    with tempfile.TemporaryDirectory() as tmp_dir:
        with cd(tmp_dir):
            out = run(["sfs create", f"{DATA_DIR}/example.vcf"])
            assert out == "#SHAPE=<9>\n0 0 0 1 1 0 0 0 1\n"

            run(
                [
                    "sfs create",
                    f"{DATA_DIR}/example.vcf",
                    f"--samples_file {DATA_DIR}/example.samples",
                    "--output example.npy",
                    "--format npy",
                ]
            )
            scs = sfs.read_scs("example.npy")
            assert scs.shape == (5, 5)
            assert scs.sum() == 3.0

            out = run(
                [
                    "sfs create",
                    f"{DATA_DIR}/example.vcf",
                    "--samples s0=A,s1=A,s2=B,s3=B",
                    "--project_individuals 1,1",
                ]
            )
            assert out.startswith("#SHAPE=<3/3>\n")
            assert np.isclose(sum(float(x) for x in out.split("\n")[1].split()), 5.0)


def test_create_strict():
    result = subprocess.run(
        f"sfs create {DATA_DIR}/example.vcf --strict",
        shell=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    assert result.returncode != 0
    assert result.stdout == b""


def test_transform():
    with tempfile.TemporaryDirectory() as tmp_dir:
        with cd(tmp_dir):
            sfs.write_spectrum(sfs.Scs.from_range(range(9), [3, 3]), "input.sfs", precision=0)

            out = run(["sfs fold input.sfs --fill zero --precision 0"])
            assert out == "#SHAPE=<3/3>\n8 8 4 8 4 0 4 0 0\n"

            out = run(["sfs marginalize input.sfs --remove 0 --precision 0"])
            assert out == "#SHAPE=<3>\n9 12 15\n"
            out = run(["sfs marginalize input.sfs --keep 0 --precision 0"])
            assert out == "#SHAPE=<3>\n3 12 21\n"

            out = run(["sfs project input.sfs --shape 2/2 --precision 1"])
            assert out == "#SHAPE=<2/2>\n3.0 6.0 12.0 15.0\n"
            out = run(["sfs project input.sfs --individuals 0,0 --precision 1"])
            assert out == "#SHAPE=<1/1>\n36.0\n"

            out = run(["sfs normalize input.sfs --precision 4"])
            assert out.split("\n")[1].split()[-1] == "0.2222"

            run(["sfs view input.sfs --format npy --output input.npy"])
            out = run(["sfs view input.npy --precision 0"])
            assert out == "#SHAPE=<3/3>\n0 1 2 3 4 5 6 7 8\n"


def test_stat():
    with tempfile.TemporaryDirectory() as tmp_dir:
        with cd(tmp_dir):
            sfs.write_spectrum(sfs.Scs.from_vec([0, 34, 6, 4, 0, 0, 0]), "input.sfs")

            out = run(["sfs stat input.sfs --statistics d_tajima,theta --header"])
            assert out == "d_tajima,theta\n-0.995875,17.959184\n"

            out = run(
                [
                    "sfs stat input.sfs",
                    "--statistics pi,segregating_sites,sum",
                    "--precision 2,0,1",
                    "--delimiter ';'",
                ]
            )
            assert out == "14.86;44;44.0\n"
