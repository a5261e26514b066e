"""High level code for driving a bench2bash research project.

This structures the command surface into the following modules:

  - main.py: Registry of named operations and commandline dispatch.
  - config_utils.py: Project paths and names, with bench2bash.yaml overrides.
  - scaffold.py: Create missing config, tests, docs and Dockerfile.
  - cleanup.py: Remove transient state and, after confirmation, results.
  - status.py: Read-only checks of config, results and environment.
"""
