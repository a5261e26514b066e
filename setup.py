#!/usr/bin/env python

"""Setup file and install script for the bench2bash project dispatcher"""

import os
import subprocess

import setuptools

VERSION = '0.1.0'

# add version number and git commit hash of the current revision to version.py
try:
    git_run = subprocess.run(['git', 'rev-parse', '--short', 'HEAD'], stdout=subprocess.PIPE,
                             stderr=subprocess.DEVNULL)
    git_run.check_returncode()
except (OSError, subprocess.SubprocessError):
    commit_hash = ''
else:
    commit_hash = git_run.stdout.strip().decode()

here = os.path.dirname(os.path.abspath(__file__))
with open(os.path.join(here, 'bench2bash', 'pipeline', 'version.py'), 'w') as version_file:
    version_file.writelines([f'__version__ = "{VERSION}"\n',
                             f'__git_revision__ = "{commit_hash}"\n'])

# conda, snakemake, docker and graphviz are external programs, installed separately
setuptools.setup(
    name='bench2bash',
    version=VERSION,
    description='Command dispatcher for reproducible bioinformatics research projects',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    scripts=['scripts/bench2bash.py'],
    python_requires='>=3.6',
    install_requires=['logbook', 'PyYAML', 'six', 'toolz'],
    extras_require={'test': ['pytest', 'pytest-mock', 'mock']},
)
