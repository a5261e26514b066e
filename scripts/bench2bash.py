#!/usr/bin/env python
"""Set up, run and clean a reproducible bioinformatics research project.

Wraps conda, Snakemake and Docker behind a fixed set of named operations. Each
operation checks its preconditions, creates missing files from templates or
placeholders and hands the real work to the external tool.

Usage:
  bench2bash.py [--workdir <dir>] [--project <bench2bash.yaml>] <command>

Run `bench2bash.py help` for the list of commands.
"""
import sys

from bench2bash.pipeline.main import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
