# flake8: noqa
from setuptools import setup, find_packages
from pathlib import Path

long_description = (Path(__file__).parent / "README.md").read_text()

exec(open("sfs/version.py").read())

setup(
    name="sfs-kit",
    version=__version__,
    description="Tool kits for creating and analyzing site frequency spectra",
    packages=find_packages(include=["sfs", "sfs.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pandas",
        "tqdm",
        "structlog>=22.1",
        "fire",
        "scikit-allel",
        "smart_open",
    ],
    extras_require={"test": ["pytest", "scipy"]},
    entry_points={"console_scripts": ["sfs=sfs.cli:cli"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Intended Audience :: Science/Research",
    ],
    long_description=long_description,
    long_description_content_type="text/markdown",
)
