import os

import pytest

from bench2bash.pipeline import scaffold


class TestEnsureConfig(object):

    def test_copies_template_when_config_missing(self, project_config, config_template):
        assert scaffold.ensure_config(project_config) is True
        with open(project_config['config_file']) as in_handle, open(config_template) as t_handle:
            assert in_handle.read() == t_handle.read()

    def test_existing_config_is_kept(self, project_config, config_template):
        with open(project_config['config_file'], 'w') as out_handle:
            out_handle.write('threads: 16\n')
        assert scaffold.ensure_config(project_config) is False
        with open(project_config['config_file']) as in_handle:
            assert in_handle.read() == 'threads: 16\n'

    def test_missing_template_is_fatal(self, project_config):
        with pytest.raises(IOError):
            scaffold.ensure_config(project_config)
        assert not os.path.exists(project_config['config_file'])


@pytest.mark.parametrize('ensure, created', [
    (scaffold.ensure_config, os.path.join('config', 'config.yaml')),
    (scaffold.ensure_tests, os.path.join('tests', 'test_pipeline.py')),
    (scaffold.ensure_docs, os.path.join('docs', 'README.md')),
    (scaffold.ensure_dockerfile, 'Dockerfile'),
])
def test_create_if_missing_is_idempotent(ensure, created, project_config, config_template,
                                         snapshot, work_dir):
    assert ensure(project_config) is True
    assert os.path.exists(created)
    first = snapshot(work_dir)
    assert ensure(project_config) is False
    assert snapshot(work_dir) == first


def test_placeholder_test_file(project_config):
    scaffold.ensure_tests(project_config)
    with open(os.path.join('tests', 'test_pipeline.py')) as in_handle:
        assert in_handle.read() == '# Add your tests here\n'


def test_existing_tests_directory_is_not_populated(project_config):
    os.makedirs('tests')
    assert scaffold.ensure_tests(project_config) is False
    assert os.listdir('tests') == []


def test_placeholder_dockerfile_installs_environment(project_config):
    scaffold.ensure_dockerfile(project_config)
    with open('Dockerfile') as in_handle:
        lines = in_handle.read().splitlines()
    assert lines == ['FROM continuumio/miniconda3',
                     'COPY environment.yml /tmp/',
                     'RUN conda env create -f /tmp/environment.yml']
