"""Remove transient workflow state and, behind confirmation, all results.
"""
import os

from bench2bash import utils
from bench2bash.log import logger

CONFIRM_PROMPT = "Are you sure? This will delete all results! (y/N): "

def clean(config, root=os.curdir):
    """Remove temporary outputs, engine state, logs and compiled python caches.

    Targets that are already gone are skipped silently.
    """
    for dname in config["temp_dirs"]:
        utils.remove_safe(dname)
    for fname in list(utils.locate("*.pyc", root)):
        utils.remove_safe(fname)
    for dname in list(utils.locate("__pycache__", root, dirs=True)):
        utils.remove_safe(dname)
    logger.info("Cleanup complete!")

def is_confirmed(answer):
    return answer is not None and answer.strip() in ("y", "Y")

def ask_confirmation(prompt=CONFIRM_PROMPT):
    try:
        return input(prompt)
    except EOFError:
        return None

def clean_all(config, ask=ask_confirmation, root=os.curdir):
    """Clean, then wipe and recreate the results directory if the user agrees.

    Returns True if results were removed, False if the user declined.
    """
    clean(config, root)
    logger.info("Deep cleaning - removing all outputs...")
    if not is_confirmed(ask()):
        logger.info("Aborted.")
        return False
    results_dir = config["results_dir"]
    utils.remove_safe(results_dir)
    utils.safe_makedir(results_dir)
    logger.info("All outputs removed!")
    return True
