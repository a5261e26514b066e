"""Dispatch named project operations: environment setup, workflow runs, cleanup.

Each operation is registered with the `command` decorator in the order it is
declared; its one-line description is the first line of its docstring and is
used both by `help` and the commandline sub-commands.
"""
import argparse
import collections
import os
import subprocess
import sys

from bench2bash import docker, install, utils
from bench2bash.log import logger, setup_local_logging
from bench2bash.pipeline import cleanup, config_utils, scaffold, status, version
from bench2bash.provenance import do
from bench2bash.workflow import snakemake

SUCCESS = "success"
WARNING = "warning"
ABORTED = "aborted"
SCAFFOLDED = "scaffolded"

Command = collections.namedtuple("Command", ["name", "fn", "descr"])
COMMANDS = collections.OrderedDict()

def command(name):
    """Register a function as a named operation, described by its docstring.
    """
    def decor(fn):
        descr = (fn.__doc__ or "").strip().split("\n")[0].strip()
        COMMANDS[name] = Command(name, fn, descr)
        return fn
    return decor

# ## Environment

@command("setup")
def setup(config):
    """Initialize the conda environment from environment.yml, if not present.
    """
    logger.info("Setting up %s research environment..." % config["env_name"])
    created = install.setup_env(config)
    return SUCCESS if created else WARNING

@command("update-env")
def update_env(config):
    """Update the conda environment from environment.yml, pruning removed packages.
    """
    logger.info("Updating conda environment...")
    install.update_env(config)
    return SUCCESS

# ## Workflow

@command("run")
def run(config):
    """Execute the main pipeline with Snakemake.
    """
    logger.info("Running pipeline...")
    scaffold.ensure_config(config)
    snakemake.run(config)
    return SUCCESS

@command("run-parallel")
def run_parallel(config):
    """Execute the pipeline using all available cores.
    """
    logger.info("Running pipeline with maximum cores...")
    scaffold.ensure_config(config)
    snakemake.run(config, cores="all")
    return SUCCESS

@command("dry-run")
def dry_run(config):
    """Show what would be executed without running anything.
    """
    logger.info("Dry run - showing pipeline steps...")
    snakemake.dry_run(config)
    return SUCCESS

@command("dag")
def dag(config):
    """Generate a workflow diagram with graphviz.
    """
    logger.info("Generating workflow diagram...")
    snakemake.dag(config)
    return SUCCESS

# ## Quality

@command("test")
def test(config):
    """Run validation tests, creating a tests directory if missing.
    """
    logger.info("Running pipeline tests...")
    if scaffold.ensure_tests(config):
        return SCAFFOLDED
    do.run([sys.executable, "-m", "pytest", config["tests_dir"] + os.sep, "-v"], "Run tests")
    return SUCCESS

@command("lint")
def lint(config):
    """Check workflow and script code quality with available linters.
    """
    logger.info("Checking code quality...")
    snakemake.lint(config)
    if do.find_cmd("black") and os.path.isdir(config["scripts_dir"]):
        do.run(["black", config["scripts_dir"] + os.sep], "Format scripts with black")
    else:
        logger.debug("black or %s not found, skipping formatting" % config["scripts_dir"])
    return SUCCESS

# ## Cleanup

@command("clean")
def clean(config):
    """Remove temporary files, engine state and logs.
    """
    logger.info("Cleaning temporary files...")
    cleanup.clean(config)
    return SUCCESS

@command("clean-all")
def clean_all(config):
    """Remove all outputs and logs, after confirmation.
    """
    removed = cleanup.clean_all(config, ask=cleanup.ask_confirmation)
    return SUCCESS if removed else ABORTED

# ## Documentation and containers

@command("docs")
def docs(config):
    """Show documentation, creating a docs directory if missing.
    """
    logger.info("Generating documentation...")
    if scaffold.ensure_docs(config):
        return SCAFFOLDED
    logger.info("Documentation available in %s/ directory" % config["docs_dir"])
    for fname in sorted(os.listdir(config["docs_dir"])):
        logger.info(fname)
    return SUCCESS

@command("docker-build")
def docker_build(config):
    """Build the project docker image, creating a basic Dockerfile if missing.
    """
    logger.info("Building Docker container...")
    if scaffold.ensure_dockerfile(config):
        return SCAFFOLDED
    docker.build(config)
    return SUCCESS

@command("docker-run")
def docker_run(config):
    """Execute the pipeline inside the project docker container.
    """
    logger.info("Running pipeline in Docker container...")
    docker.run(config)
    return SUCCESS

# ## Diagnostics

@command("status")
def show_status(config):
    """Check presence of config, results and conda environment.
    """
    status.report(status.get_status(config))
    return SUCCESS

@command("help")
def show_help(config):
    """Show available commands.
    """
    print(format_help(config))
    return SUCCESS

def format_help(config):
    width = max(len(name) for name in COMMANDS)
    lines = ["bench2bash %s" % version.__version__, "=" * 30, ""]
    for cmd in COMMANDS.values():
        lines.append("  %s %s" % (cmd.name.ljust(width), cmd.descr))
    lines += ["", "Quick start: bench2bash.py setup && conda activate %s && bench2bash.py run"
              % config["env_name"]]
    return "\n".join(lines)

# ## Commandline

def run_command(name, config):
    """Run a registered operation by name, returning its outcome.
    """
    if name not in COMMANDS:
        raise ValueError("Unknown command %s. Available: %s" % (name, ", ".join(COMMANDS)))
    return COMMANDS[name].fn(config)

def parse_cl_args(in_args):
    """Parse input commandline arguments, defaulting to `help` without a command.
    """
    description = "Reproducible bioinformatics project setup, run and cleanup."
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--workdir", default=os.getcwd(),
                        help=("Project directory to operate in. Defaults to "
                              "current working directory"))
    parser.add_argument("--project", default=None,
                        help=("YAML file overriding project paths and names "
                              "(defaults to %s in the project directory, if present)"
                              % config_utils.PROJECT_FILE))
    parser.add_argument("--debug", action="store_true", default=False,
                        help="Show debug messages, including skipped optional tools")
    parser.add_argument("-v", "--version", action="version",
                        version="%(prog)s " + version.__version__)
    subparsers = parser.add_subparsers(dest="command", metavar="command",
                                       help="bench2bash project commands")
    for cmd in COMMANDS.values():
        subparsers.add_parser(cmd.name, help=cmd.descr)
    args = parser.parse_args(in_args)
    if not args.command:
        args.command = "help"
    args.workdir = os.path.abspath(args.workdir)
    if not os.path.isdir(args.workdir):
        parser.error("Project directory does not exist: %s" % args.workdir)
    return parser, args

def main(in_args=None):
    """Run a single operation from the commandline, returning the process exit code.
    """
    parser, args = parse_cl_args(sys.argv[1:] if in_args is None else in_args)
    with utils.chdir(args.workdir):
        try:
            config = config_utils.load_project_config(args.project, allow_missing=args.project is None)
        except ValueError as e:
            parser.error(str(e))
        handler = setup_local_logging(config, verbose=args.debug)
        try:
            run_command(args.command, config)
        except subprocess.CalledProcessError as e:
            return e.returncode
        except do.CmdNotFound as e:
            logger.error(str(e))
            return e.returncode
        except IOError as e:
            logger.error(str(e))
            return 1
        finally:
            handler.pop_application()
            handler.close()
    return 0
