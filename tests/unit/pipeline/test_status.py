import os
import subprocess

import mock
import pytest

from bench2bash import install
from bench2bash.pipeline import status
from bench2bash.provenance import do


@pytest.fixture
def api():
    return mock.Mock(spec=install.CondaAPI)


def _by_name(checks):
    return dict((c.name, c.passed) for c in checks)


def test_reports_exactly_three_checks(project_config, api):
    api.env_exists.return_value = False
    checks = status.get_status(project_config, api)
    assert [c.name for c in checks] == ['config', 'results', 'environment']


@pytest.mark.parametrize('has_config', [True, False])
@pytest.mark.parametrize('has_results', [True, False])
@pytest.mark.parametrize('has_env', [True, False])
def test_checks_are_independent(has_config, has_results, has_env, project_config, api):
    if has_config:
        os.makedirs('config')
        open(project_config['config_file'], 'w').close()
    if has_results:
        os.makedirs('results')
    api.env_exists.return_value = has_env
    assert _by_name(status.get_status(project_config, api)) == {
        'config': has_config, 'results': has_results, 'environment': has_env}


def test_results_check_reports_size(project_config, api):
    os.makedirs('results')
    with open(os.path.join('results', 'counts.tsv'), 'w') as out_handle:
        out_handle.write('x' * 2048)
    check = status.check_results(project_config)
    assert check.passed
    assert '2.0K' in check.detail


@pytest.mark.parametrize('error', [do.CmdNotFound('conda'),
                                   subprocess.CalledProcessError(1, 'conda env list')])
def test_environment_check_fails_when_conda_unavailable(error, project_config, api):
    api.env_exists.side_effect = error
    check = status.check_environment(project_config, api)
    assert check.passed is False


def test_status_does_not_modify_project(project_config, api, snapshot, work_dir):
    api.env_exists.return_value = True
    before = snapshot(work_dir)
    status.report(status.get_status(project_config, api))
    assert snapshot(work_dir) == before
