"""Read-only diagnostics of the project: config, results and environment.
"""
import collections
import os
import subprocess

from bench2bash import install, utils
from bench2bash.log import logger
from bench2bash.provenance import do

StatusCheck = collections.namedtuple("StatusCheck", ["name", "passed", "detail"])

def check_config(config):
    config_file = config["config_file"]
    if os.path.isfile(config_file):
        return StatusCheck("config", True, "Config file: %s" % config_file)
    return StatusCheck("config", False, "Config file missing: %s" % config_file)

def check_results(config):
    results_dir = config["results_dir"]
    if os.path.isdir(results_dir):
        size = utils.human_size(utils.get_size(results_dir))
        return StatusCheck("results", True, "Results directory: %s\t%s" % (size, results_dir))
    return StatusCheck("results", False, "Results directory missing")

def check_environment(config, api=None):
    api = api or install.CondaAPI()
    env_name = config["env_name"]
    try:
        exists = api.env_exists(env_name)
    except (do.CmdNotFound, subprocess.CalledProcessError) as e:
        return StatusCheck("environment", False, "Conda environment missing: %s (%s)" % (env_name, e))
    if exists:
        return StatusCheck("environment", True, "Conda environment: %s" % env_name)
    return StatusCheck("environment", False, "Conda environment missing: %s" % env_name)

def get_status(config, api=None):
    return [check_config(config), check_results(config), check_environment(config, api)]

def report(checks):
    logger.info("Pipeline Status:")
    logger.info("====================")
    for check in checks:
        logger.info("%s %s" % ("[ok]" if check.passed else "[missing]", check.detail))
