# utils.py
# python3

"""
Code to work with portal_votes.py on tallying alumni portal votes.
Various utilities: printing, warnings, errors, and logging setup.
"""

import logging
import sys


##############################################################################
# myprint  (user-facing output; diagnostics go through logging)
##############################################################################

myprint_files = {"stdout": sys.stdout}


def myprint(*args, **kwargs):
    """ variant print statement; prints to all files in myprint_files. """

    for output_file_name in myprint_files:
        kwargs["file"] = myprint_files[output_file_name]
        print(*args, **kwargs)


def close_myprint_files():
    """ Close myprint files other than stdout and stderr. """

    for output_file_name in list(myprint_files):
        if output_file_name not in ["stdout", "stderr"]:
            myprint_files[output_file_name].close()
            del myprint_files[output_file_name]


##############################################################################
# error and warning messages


class VotesError(Exception):
    """ Base class of all errors raised by the vote tallying code. """


def myerror(msg):
    """ Print error message and halt immediately """

    print("FATAL ERROR:", msg, file=sys.stderr)
    raise VotesError(msg)


warnings_given = 0


def mywarning(msg):
    """ Print error message, but keep going.
        Keep track of how many warnings have been given.
    """

    global warnings_given
    warnings_given += 1
    print("WARNING:", msg, file=sys.stderr)


##############################################################################
# logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(verbose=False):
    """
    Configure the root logger for diagnostic tracing on stderr.
    Debug tracing (each option seen while tallying, etc.) only appears
    when verbose is set.
    """

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr,
                        force=True)
