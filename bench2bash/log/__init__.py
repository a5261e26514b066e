"""Utility functionality for logging.
"""
import os
import sys

import logbook

from bench2bash import utils

LOG_NAME = "bench2bash"

def get_log_dir(config):
    d = config.get("log_dir")
    return d

logger = logbook.Logger(LOG_NAME)
logger_cl = logbook.Logger(LOG_NAME + "-commands")
logger_stdout = logbook.Logger(LOG_NAME + "-stdout")

def _is_cl(record, _):
    return record.channel == LOG_NAME + "-commands"

def _is_stdout(record, _):
    return record.channel == LOG_NAME + "-stdout"

def _not_cl(record, handler):
    return not _is_cl(record, handler) and not _is_stdout(record, handler)

class CloseableNestedSetup(logbook.NestedSetup):
    def close(self):
        for obj in self.objects:
            if hasattr(obj, "close"):
                obj.close()

def _create_log_handler(config, verbose=False):
    logbook.set_datetime_format("utc")
    handlers = [logbook.NullHandler()]
    file_format_str = "[{record.time:%Y-%m-%dT%H:%MZ}] {record.message}"

    log_dir = get_log_dir(config)
    if log_dir:
        utils.safe_makedir(log_dir)
        handlers.append(logbook.FileHandler(os.path.join(log_dir, "%s.log" % LOG_NAME),
                                            format_string=file_format_str, level="INFO",
                                            filter=_not_cl))
        handlers.append(logbook.FileHandler(os.path.join(log_dir, "%s-debug.log" % LOG_NAME),
                                            format_string=file_format_str, level="DEBUG", bubble=True,
                                            filter=_not_cl))
        handlers.append(logbook.FileHandler(os.path.join(log_dir, "%s-commands.log" % LOG_NAME),
                                            format_string=file_format_str, level="DEBUG",
                                            filter=_is_cl))
    # tool output is streamed straight through, as if the tool ran in the shell
    handlers.append(logbook.StreamHandler(sys.stdout, format_string="{record.message}",
                                          level="DEBUG", filter=_is_stdout))
    handlers.append(logbook.StreamHandler(sys.stderr, format_string="{record.message}",
                                          level="DEBUG" if verbose else "INFO", bubble=True,
                                          filter=_not_cl))
    return CloseableNestedSetup(handlers)

def setup_local_logging(config=None, verbose=False):
    """Setup logging for a dispatcher invocation, directing messages to stderr and log files.
    """
    if config is None: config = {}
    handler = _create_log_handler(config, verbose)
    handler.push_application()
    return handler
