"""Build and run Snakemake commandlines for the project workflow.

Parallelism, scheduling and the task graph itself belong to Snakemake; this
module only chooses flags and hands over to the process runner.
"""
from six.moves import shlex_quote

from bench2bash.log import logger
from bench2bash.provenance import do


def _base_cmd(config):
    return ["snakemake", "--snakefile", config["snakefile"],
            "--configfile", config["config_file"]]

def run_cmd(config, cores=None):
    cores = cores if cores is not None else config["cores"]
    return _base_cmd(config) + ["--cores", str(cores), "--use-conda"]

def dry_run_cmd(config):
    return _base_cmd(config) + ["--dry-run", "--quiet"]

def dag_cmd(config):
    """Pipe the workflow graph through graphviz into the configured image file.
    """
    snake = " ".join(shlex_quote(x) for x in _base_cmd(config) + ["--dag"])
    return "%s | dot -Tpng > %s" % (snake, shlex_quote(config["dag_file"]))

def lint_cmd(config):
    return ["snakemake", "--lint", "--snakefile", config["snakefile"]]

def run(config, cores=None):
    """Execute the workflow, with a fixed core count or `all` available cores.
    """
    do.run(run_cmd(config, cores), "Run Snakemake workflow %s" % config["snakefile"])

def dry_run(config):
    do.run(dry_run_cmd(config), "Dry run of Snakemake workflow")

def dag(config):
    # both ends of the shell pipe
    do.require_cmd("snakemake")
    do.require_cmd("dot")
    do.run(dag_cmd(config), "Render workflow graph")
    logger.info("Workflow diagram saved as %s" % config["dag_file"])
    return config["dag_file"]

def lint(config):
    if do.find_cmd("snakemake"):
        do.run(lint_cmd(config), "Lint Snakemake workflow")
        return True
    else:
        logger.debug("snakemake not found, skipping workflow lint")
        return False