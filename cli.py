# cli.py
# python3

"""
Command-line parser and dispatch
"""


import argparse
import logging
import sys

import csv_readers
import session
import utils

logger = logging.getLogger(__name__)


##############################################################################
# Command-line arguments

def parse_args(argv=None):

    parser = argparse.ArgumentParser(description="""portal_votes.py: Tally a
            single-question alumni portal vote from the exported voting
            tokens and the Google Forms responses.""")

    # Mandatory arguments are the two exported files
    parser.add_argument("tokens_filename", help="""
                        The tokens.csv file exported from the portal's Vote Link
                        (one voting token per line, no header).""")

    parser.add_argument("results_filename", help="""
                        The results.csv file downloaded from the Google Form's
                        responses spreadsheet (header line, then
                        time,token,option lines).""")

    # All others are optional

    parser.add_argument("--encoding", help="""Text encoding of both files.
                        Defaults to "{}".""".format(csv_readers.DEFAULT_ENCODING),
                        default=csv_readers.DEFAULT_ENCODING)

    parser.add_argument("--status", action="store_true", help="""
                        Print how many tokens and votes were loaded before
                        the results.""")

    parser.add_argument("--verbose", action="store_true", help="""
                        Trace the tally on stderr.""")

    args = parser.parse_args(argv)
    return args


def check_inputs(s, e):
    """
    Warn about inputs that are tallied anyway but deserve a second look.
    Warnings never change the report.
    """

    duplicates = len(s.tokens) - len(set(s.tokens))
    if duplicates > 0:
        utils.mywarning("{} duplicate token(s) in tokens file; each counts once."
                        .format(duplicates))
    if e.tally is not None and e.tally.abstentions < 0:
        utils.mywarning("Negative abstentions ({}): votes were cast with invalid tokens."
                        .format(e.tally.abstentions))


def process_args(args):
    """
    Load both files into a new session and print the results.
    Return the exit status.
    """

    logger.debug("tokens file %s, results file %s", args.tokens_filename, args.results_filename)
    s = session.VoteSession()
    try:
        tokens_text = csv_readers.read_text_file(args.tokens_filename, args.encoding)
        results_text = csv_readers.read_text_file(args.results_filename, args.encoding)
    except (OSError, UnicodeDecodeError) as error:
        utils.myerror("Cannot read input file: {}".format(error))

    s.load_tokens(tokens_text)
    e = s.load_votes(results_text)
    if not e.ok:
        print(s.results, end="", file=sys.stderr)
        return 1

    if args.status:
        for line in s.status_lines():
            utils.myprint(line)
    check_inputs(s, e)
    utils.myprint(e.report)
    return 0
