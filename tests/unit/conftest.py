import pytest


@pytest.fixture
def do_run(mocker):
    yield mocker.patch('bench2bash.provenance.do.run')


@pytest.fixture
def find_cmd(mocker):
    """Pretend every external program is installed in /usr/bin"""
    fc = mocker.patch('bench2bash.provenance.do.find_cmd')
    fc.side_effect = lambda cmd: '/usr/bin/%s' % cmd
    yield fc


@pytest.fixture
def no_cmds(mocker):
    """Pretend no external program is installed"""
    fc = mocker.patch('bench2bash.provenance.do.find_cmd')
    fc.return_value = None
    yield fc
