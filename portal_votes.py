# portal_votes.py
# python3

"""
Tally a vote run through the alumni portal.

A vote is a single multiple choice question asked to all eligible alumni,
collected with a Google Form.  The portal issues every eligible voter a
voting token, which the form asks for.  After the vote closes, two files
are exported:

    tokens.csv    the eligible voting tokens, from the portal's Vote Link
    results.csv   the form responses, from the linked spreadsheet

and this program reports how many votes each option received:

    python3 portal_votes.py tokens.csv results.csv

For documentation purposes, keep the printed results together with both
csv files.
"""

# MIT License

import sys

import cli
import utils


def main(argv=None):

    args = cli.parse_args(argv)
    utils.setup_logging(args.verbose)
    try:
        return cli.process_args(args)
    except utils.VotesError:
        return 1
    finally:
        utils.close_myprint_files()


if __name__ == "__main__":
    sys.exit(main())
