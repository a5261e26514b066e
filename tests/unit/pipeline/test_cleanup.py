import os

import pytest

from bench2bash.pipeline import cleanup


@pytest.fixture
def project_tree(project_config):
    for dname in [os.path.join('results', 'temp'), os.path.join('results', 'final'),
                  '.snakemake', 'logs', os.path.join('scripts', '__pycache__')]:
        os.makedirs(dname)
    for fname in [os.path.join('results', 'final', 'calls.vcf'),
                  os.path.join('results', 'temp', 'aln.sam'),
                  os.path.join('logs', 'bwa.log'),
                  os.path.join('scripts', 'qc.py'),
                  os.path.join('scripts', 'qc.pyc'),
                  os.path.join('scripts', '__pycache__', 'qc.cpython-38.pyc')]:
        with open(fname, 'w') as out_handle:
            out_handle.write(fname)
    return project_config


def test_clean_removes_transient_state(project_tree):
    cleanup.clean(project_tree)
    assert not os.path.exists(os.path.join('results', 'temp'))
    assert not os.path.exists('.snakemake')
    assert not os.path.exists('logs')
    assert not os.path.exists(os.path.join('scripts', 'qc.pyc'))
    assert not os.path.exists(os.path.join('scripts', '__pycache__'))
    assert os.path.exists(os.path.join('scripts', 'qc.py'))
    assert os.path.exists(os.path.join('results', 'final', 'calls.vcf'))


def test_clean_succeeds_when_nothing_to_remove(project_config):
    cleanup.clean(project_config)
    cleanup.clean(project_config)


@pytest.mark.parametrize('answer', ['n', 'N', '', 'yes', 'no', None])
def test_clean_all_declined_leaves_results_unchanged(answer, project_tree, snapshot):
    cleanup.clean(project_tree)
    before = snapshot('results')
    assert cleanup.clean_all(project_tree, ask=lambda: answer) is False
    assert snapshot('results') == before


@pytest.mark.parametrize('answer', ['y', 'Y', ' y\n'])
def test_clean_all_confirmed_leaves_empty_results(answer, project_tree):
    assert cleanup.clean_all(project_tree, ask=lambda: answer) is True
    assert os.path.isdir('results')
    assert os.listdir('results') == []


def test_ask_confirmation_treats_end_of_input_as_declined(mocker):
    mocker.patch('builtins.input', side_effect=EOFError)
    assert cleanup.ask_confirmation() is None
