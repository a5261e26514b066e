"""Handle creation and updates of the project conda environment.

The environment descriptor (environment.yml) is the single source of truth for
installed tools; the environment is only created when missing and only changed
through an explicit update.
"""
import json
import os

from bench2bash.log import logger
from bench2bash.provenance import do


class CondaAPI(object):
    """Thin wrapper around the conda command line.
    """
    def __init__(self, conda_bin="conda"):
        self.conda_bin = conda_bin

    def _get_env_names(self):
        """Names of all environments, with the root installation reported as `base`.
        """
        info = json.loads(do.check_output([self.conda_bin, "info", "--envs", "--json"]))
        root_prefix = info.get("root_prefix")
        names = []
        for e in info.get("envs", []):
            if root_prefix and os.path.normpath(e) == os.path.normpath(root_prefix):
                names.append("base")
            else:
                names.append(os.path.basename(os.path.normpath(e)))
        return names

    def env_exists(self, env_name):
        """Check if a named environment is present, matching on the env directory name.
        """
        return env_name in self._get_env_names()

    def create_env(self, env_file):
        do.run([self.conda_bin, "env", "create", "-f", env_file],
               "Create conda environment from %s" % env_file)

    def update_env(self, env_file, prune=True):
        cmd = [self.conda_bin, "env", "update", "-f", env_file]
        if prune:
            cmd.append("--prune")
        do.run(cmd, "Update conda environment from %s" % env_file)

def setup_env(config, api=None):
    """Create the project environment from its descriptor unless it already exists.

    Returns True when the environment was created and False when an existing
    environment was left untouched.
    """
    api = api or CondaAPI()
    env_name = config["env_name"]
    if api.env_exists(env_name):
        logger.warning("Environment '%s' already exists. Use 'update-env' to update." % env_name)
        created = False
    else:
        api.create_env(config["env_file"])
        logger.info("Environment '%s' created successfully!" % env_name)
        created = True
    logger.info("To activate: conda activate %s" % env_name)
    return created

def update_env(config, api=None):
    api = api or CondaAPI()
    api.update_env(config["env_file"], prune=True)
    logger.info("Environment updated!")
