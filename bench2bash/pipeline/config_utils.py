"""Loads project settings from .yaml files and expands environment variables.

Every path the dispatcher reads or writes is fixed by convention; an optional
bench2bash.yaml in the project directory can override any of them.
"""
import copy
import os

import toolz as tz
import yaml

DEFAULT_ENV_NAME = "bench2bash-research"
PROJECT_FILE = "bench2bash.yaml"

DEFAULTS = {"env_name": None,
            "env_file": "environment.yml",
            "config_file": os.path.join("config", "config.yaml"),
            "config_template": os.path.join("config", "config.template.yaml"),
            "snakefile": os.path.join("workflows", "snakemake", "Snakefile"),
            "cores": 4,
            "results_dir": "results",
            "temp_dirs": [os.path.join("results", "temp"), ".snakemake", "logs"],
            "tests_dir": "tests",
            "docs_dir": "docs",
            "scripts_dir": "scripts",
            "dockerfile": "Dockerfile",
            "image": "bench2bash-starter",
            "image_tag": "latest",
            "container_workdir": "/workspace",
            "dag_file": "workflow_dag.png",
            "log_dir": None}

# ## Retrieval functions

def load_project_config(project_file=None, allow_missing=True):
    """Load bench2bash.yaml project settings, merged over the standard defaults.

    Missing project files are fine unless explicitly requested on the
    commandline, in which case they are reported as an error.
    """
    if project_file is None:
        project_file = PROJECT_FILE
    if os.path.exists(project_file):
        user_config = load_config(project_file)
    elif allow_missing:
        user_config = {}
    else:
        raise ValueError("Could not find project configuration file %s" % project_file)
    unknown = sorted(set(user_config.keys()) - set(DEFAULTS.keys()))
    if unknown:
        raise ValueError("Unexpected keys in project configuration %s: %s" %
                         (project_file, ", ".join(unknown)))
    config = tz.merge(copy.deepcopy(DEFAULTS), user_config)
    if not config["env_name"]:
        config["env_name"] = get_descriptor_env_name(config["env_file"]) or DEFAULT_ENV_NAME
    return config

def load_config(config_file):
    """Load YAML config file, replacing environmental variables.
    """
    with open(config_file) as in_handle:
        config = yaml.safe_load(in_handle)
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ValueError("Expected a mapping of settings in %s" % config_file)
    return _expand_paths(config)

def _expand_paths(config):
    for field, setting in config.items():
        if isinstance(config[field], dict):
            config[field] = _expand_paths(config[field])
        elif isinstance(config[field], list):
            config[field] = [expand_path(x) for x in setting]
        else:
            config[field] = expand_path(setting)
    return config

def expand_path(path):
    """ Combines os.path.expandvars with replacing ~ with $HOME.
    """
    try:
        return os.path.expandvars(path.replace("~", "$HOME"))
    except AttributeError:
        return path

def get_descriptor_env_name(env_file):
    """Retrieve the environment name declared in a conda environment descriptor.
    """
    if not os.path.exists(env_file):
        return None
    with open(env_file) as in_handle:
        descriptor = yaml.safe_load(in_handle) or {}
    if not isinstance(descriptor, dict):
        return None
    return descriptor.get("name")

def get_image(config):
    """Full name:tag reference for the project container image.
    """
    return "%s:%s" % (config["image"], config.get("image_tag") or "latest")
