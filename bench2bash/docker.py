"""Build and run the project container image with the docker commandline.
"""
import os

from bench2bash.pipeline import config_utils
from bench2bash.provenance import do

PLACEHOLDER_DOCKERFILE = ["FROM continuumio/miniconda3",
                          "COPY environment.yml /tmp/",
                          "RUN conda env create -f /tmp/environment.yml"]

def build_cmd(config):
    build_dir = os.path.dirname(config["dockerfile"]) or "."
    cmd = ["docker", "build", "-t", config_utils.get_image(config)]
    if os.path.basename(config["dockerfile"]) != "Dockerfile":
        cmd += ["-f", config["dockerfile"]]
    return cmd + [build_dir]

def run_cmd(config, work_dir=None):
    """Mount the project directory into a container and re-run the workflow there.
    """
    work_dir = os.path.abspath(work_dir or os.getcwd())
    container_dir = config["container_workdir"]
    return ["docker", "run",
            "-v", "%s:%s" % (work_dir, container_dir),
            "-w", container_dir,
            config_utils.get_image(config),
            "bench2bash.py", "run"]

def build(config):
    do.run(build_cmd(config), "Build docker image %s" % config_utils.get_image(config))

def run(config, work_dir=None):
    do.run(run_cmd(config, work_dir), "Run workflow in docker image %s" % config_utils.get_image(config))
