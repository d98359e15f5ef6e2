#!/usr/bin/env python

import fire
from ._utils import log_params
from ._create import create
from ._spectrum import fold, marginalize, project, normalize, view
from ._stat import stat


def cli():
    """
    Entry point for the sfs command line interface.
    """
    fire.Fire()


if __name__ == "__main__":
    fire.Fire()
