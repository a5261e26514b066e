"""Create missing project files from templates or minimal placeholders.

Every function here only writes when its target is absent, so repeated calls
leave an existing project exactly as they found it.
"""
import os
import shutil

from bench2bash import docker, utils
from bench2bash.log import logger

PLACEHOLDER_TEST = "# Add your tests here"
PLACEHOLDER_DOCS = "# Project Documentation"

def ensure_config(config):
    """Copy the config template into place when the workflow config is missing.

    Returns True if a new config file was written.
    """
    config_file = config["config_file"]
    if os.path.exists(config_file):
        return False
    template = config["config_template"]
    if not os.path.exists(template):
        raise IOError("Config file %s not found and template %s is missing" % (config_file, template))
    logger.warning("Config file not found. Creating from template...")
    utils.safe_makedir(os.path.dirname(config_file))
    shutil.copyfile(template, config_file)
    return True

def ensure_tests(config):
    tests_dir = config["tests_dir"]
    if os.path.isdir(tests_dir):
        return False
    logger.warning("No tests directory found. Creating basic test structure...")
    utils.write_lines(os.path.join(tests_dir, "test_pipeline.py"), [PLACEHOLDER_TEST])
    return True

def ensure_docs(config):
    docs_dir = config["docs_dir"]
    if os.path.isdir(docs_dir):
        return False
    utils.write_lines(os.path.join(docs_dir, "README.md"), [PLACEHOLDER_DOCS])
    logger.info("Created basic documentation structure")
    return True

def ensure_dockerfile(config):
    dockerfile = config["dockerfile"]
    if os.path.exists(dockerfile):
        return False
    logger.warning("Dockerfile not found. Creating basic Dockerfile...")
    utils.write_lines(dockerfile, docker.PLACEHOLDER_DOCKERFILE)
    logger.info("Basic Dockerfile created. Customize and run again.")
    return True
