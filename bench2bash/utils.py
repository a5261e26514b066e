"""Helpful utilities for managing project directories and files.
"""
import contextlib
import fnmatch
import os
import shutil
import time


def safe_makedir(dname):
    """Make a directory if it doesn't exist, handling concurrent race conditions.
    """
    if not dname:
        return dname
    num_tries = 0
    max_tries = 5
    while not os.path.exists(dname):
        # we could get an error here if multiple processes are creating
        # the directory at the same time. Grr, concurrency.
        try:
            os.makedirs(dname)
        except OSError:
            if num_tries > max_tries:
                raise
            num_tries += 1
            time.sleep(2)
    return dname

@contextlib.contextmanager
def chdir(new_dir):
    """Context manager to temporarily change to a new directory.
    """
    cur_dir = os.getcwd()
    safe_makedir(new_dir)
    os.chdir(new_dir)
    try:
        yield
    finally:
        os.chdir(cur_dir)

def get_size(path):
    """ Returns the size in bytes if `path` is a file,
        or the size of all files in `path` if it's a directory.
        Analogous to `du -s`.
    """
    if os.path.islink(path):
        return 0
    if os.path.isfile(path):
        return os.path.getsize(path)
    return sum(get_size(os.path.join(path, f)) for f in os.listdir(path))

def human_size(num_bytes):
    """Format a byte count the way `du -h` does: 512B, 4.0K, 1.2G.
    """
    size = float(num_bytes)
    for unit in ["B", "K", "M", "G", "T"]:
        if size < 1024.0 or unit == "T":
            if unit == "B":
                return "%dB" % size
            return "%.1f%s" % (size, unit)
        size /= 1024.0

def remove_safe(f):
    try:
        if os.path.isdir(f) and not os.path.islink(f):
            shutil.rmtree(f)
        else:
            os.remove(f)
    except OSError:
        pass

def locate(pattern, root=os.curdir, dirs=False):
    """Locate all files (or directories) matching supplied filename pattern recursively.
    """
    for path, dirnames, files in os.walk(os.path.abspath(root)):
        for name in fnmatch.filter(dirnames if dirs else files, pattern):
            yield os.path.join(path, name)

def write_lines(fname, lines):
    """Write a small text file, one entry per line, creating parent directories.
    """
    safe_makedir(os.path.dirname(fname))
    with open(fname, "w") as out_handle:
        for line in lines:
            out_handle.write("%s\n" % line)
    return fname

def which(program, env=None):
    """ returns the path to an executable or None if it can't be found"""
    if env is None:
        env = os.environ.copy()

    def is_exe(fpath):
        return os.path.isfile(fpath) and os.access(fpath, os.X_OK)

    fpath, fname = os.path.split(program)
    if fpath:
        if is_exe(program):
            return program
    else:
        for path in env.get("PATH", "").split(os.pathsep):
            exe_file = os.path.join(path, program)
            if is_exe(exe_file):
                return exe_file
    return None
