"""Centralize running of external commands, providing logging and tracking.

Every external tool the dispatcher touches (conda, snakemake, docker, dot,
pytest) is invoked through this module, which keeps the whole command surface
mockable in tests.
"""
import collections
import os
import subprocess

import six

from bench2bash import utils
from bench2bash.log import logger, logger_cl, logger_stdout


class CmdNotFound(Exception):
    """A required external program is not installed or not on the PATH.
    """
    returncode = 127

    def __init__(self, cmd):
        self.cmd = cmd
        super(CmdNotFound, self).__init__("Required program not found on PATH: %s" % cmd)

def run(cmd, descr=None, log_error=True, log_stdout=True, env=None):
    """Run the provided command, logging details and checking for errors.

    Raises subprocess.CalledProcessError with the exit status of the tool
    when it fails.
    """
    if descr:
        logger.debug(descr)
    if not isinstance(cmd, six.string_types):
        require_cmd(str(cmd[0]))
    try:
        logger_cl.debug(" ".join(str(x) for x in cmd) if not isinstance(cmd, six.string_types) else cmd)
        _do_run(cmd, log_stdout, env=env)
    except subprocess.CalledProcessError:
        # tool output was already streamed; traceback goes to debug logs only
        if log_error:
            logger.debug("External command failed", exc_info=True)
        raise

def find_bash():
    for test_bash in [find_cmd("bash"), "/bin/bash", "/usr/bin/bash", "/usr/local/bin/bash"]:
        if test_bash and os.path.exists(test_bash):
            return test_bash
    raise CmdNotFound("bash")

def find_cmd(cmd):
    return utils.which(cmd)

def require_cmd(cmd):
    """Return the full path to a required program, failing if it is not installed.
    """
    path = find_cmd(cmd)
    if not path:
        raise CmdNotFound(cmd)
    return path

def check_output(cmd, env=None):
    """Capture standard output of a read-only query command, like `conda env list`.
    """
    require_cmd(str(cmd[0]))
    logger_cl.debug(" ".join(str(x) for x in cmd))
    return subprocess.check_output([str(x) for x in cmd], env=env).decode("utf-8", errors="replace")

def _normalize_cmd_args(cmd):
    """Normalize subprocess arguments to handle list commands, string and pipes.
    Piped commands set pipefail and require use of bash to help with debugging
    intermediate errors.
    """
    if isinstance(cmd, six.string_types):
        # check for standard or anonymous named pipes
        if cmd.find(" | ") >= 0 or cmd.find(">(") >= 0 or cmd.find("<(") >= 0:
            return "set -o pipefail; " + cmd, True, find_bash()
        else:
            return cmd, True, None
    else:
        return [str(x) for x in cmd], False, None

def _do_run(cmd, log_stdout=True, env=None):
    """Perform running and check results, raising errors for issues.
    """
    cmd, shell_arg, executable_arg = _normalize_cmd_args(cmd)
    s = subprocess.Popen(
        cmd,
        shell=shell_arg,
        executable=executable_arg,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        close_fds=True,
        env=env,
    )
    debug_stdout = collections.deque(maxlen=100)
    while 1:
        line = s.stdout.readline().decode("utf-8", errors="replace")
        if line.rstrip():
            debug_stdout.append(line)
            if log_stdout:
                logger_stdout.info(line.rstrip())
            else:
                logger.debug(line.rstrip())
        exitcode = s.poll()
        if exitcode is not None:
            for line in s.stdout:
                line = line.decode("utf-8", errors="replace")
                debug_stdout.append(line)
                if log_stdout and line.rstrip():
                    logger_stdout.info(line.rstrip())
            if exitcode != 0:
                error_msg = " ".join(cmd) if not isinstance(cmd, six.string_types) else cmd
                error_msg += "\n"
                error_msg += "".join(debug_stdout)
                s.communicate()
                s.stdout.close()
                raise subprocess.CalledProcessError(exitcode, error_msg)
            else:
                break
    s.communicate()
    s.stdout.close()
