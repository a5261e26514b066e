"""Pytest fixtures and test helper functions"""

import os

import pytest

from bench2bash.pipeline import config_utils


@pytest.fixture
def work_dir(tmp_path):
    """Provide an empty project directory and run the test inside it"""
    original_dir = os.getcwd()
    os.chdir(str(tmp_path))
    yield str(tmp_path)
    os.chdir(original_dir)


@pytest.fixture
def project_config(work_dir):
    """Default project settings with a fixed environment name"""
    config = config_utils.load_project_config()
    config['env_name'] = 'bench2bash-test'
    return config


@pytest.fixture
def config_template(work_dir):
    os.makedirs('config')
    template = os.path.join('config', 'config.template.yaml')
    with open(template, 'w') as out_handle:
        out_handle.write('samples: data/samples.tsv\nthreads: 4\nmemory: 8G\n')
    return template


@pytest.fixture
def snapshot():
    """Map every file below a directory to its content, for comparing filesystem state"""
    def _snapshot(root):
        out = {}
        for dirpath, dirnames, fnames in os.walk(root):
            rel_dir = os.path.relpath(dirpath, root)
            out[rel_dir] = None
            for fname in fnames:
                with open(os.path.join(dirpath, fname), 'rb') as in_handle:
                    out[os.path.join(rel_dir, fname)] = in_handle.read()
        return out
    return _snapshot
