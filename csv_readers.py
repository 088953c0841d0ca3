# csv_readers.py
# python3

"""
Code to read the two files that portal_votes.py uses.

tokens.csv has no header line; each line is one eligible voting token:
    a81f0c
    77de2b
    c0ffee

results.csv is the Google Forms export of a single-question vote.  It has
a header line (ignored), then one line per submitted response:
    Timestamp,What is your voting token?,Which option?
    2021/05/01 10:00:01,a81f0c,Yes
    2021/05/01 10:02:17,77de2b,No

Lines are split on bare commas; quoting is not interpreted.  A form with
more than one question gives rows of more than three fields, and such an
export is rejected as a whole.
"""

import collections
import logging

import utils

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8-sig"

BAD_GOOGLE_FORM_MESSAGE = (
    "Detected more than a single question in the Google Form. \n"
    "It says 'A vote is a single multiple choice question asked to all eligible alumni'. \n"
    "Please go and evaluate the vote by hand and RTFM next time. \n")

Vote = collections.namedtuple("Vote", ["time", "token", "option"])


class MultiQuestionFormError(utils.VotesError):
    """
    The vote export has a row that does not split into exactly
    (time, token, option).
    """

    def __init__(self, message=BAD_GOOGLE_FORM_MESSAGE, line=None):
        super().__init__(message)
        self.message = message
        self.line = line


def clean_lines(lines):
    """ Strip each line and eliminate blank ones. """

    return [line for line in (l.strip() for l in lines) if line != ""]


def read_tokens_text(text):
    """
    Return list of tokens from the text of tokens.csv, one per nonblank line.
    Duplicates are kept; the tally collapses them.
    """

    return clean_lines(text.split("\n"))


def read_votes_text(text):
    """
    Return list of Votes from the text of results.csv.

    The first line is the header and is dropped before blank lines are
    eliminated.  Raise MultiQuestionFormError if any remaining line does not
    have exactly three comma-separated fields; in that case no votes at all
    are returned.
    """

    lines = clean_lines(text.split("\n")[1:])
    votes = []
    bad_line = None
    for line in lines:
        fields = line.split(",")
        if len(fields) != 3:
            if bad_line is None:
                bad_line = line
            continue
        votes.append(Vote(*fields))
    if bad_line is not None:
        logger.debug("rejecting vote export, first bad row: %r", bad_line)
        raise MultiQuestionFormError(line=bad_line)
    return votes


def read_text_file(filename, encoding=DEFAULT_ENCODING):
    """
    Return the whole text of filename.
    Line endings are left as they are; the readers strip them.
    """

    logger.debug("reading %s", filename)
    with open(filename, encoding=encoding, newline="") as file:
        return file.read()


def read_tokens_file(filename, encoding=DEFAULT_ENCODING):
    """ Read tokens.csv from filename. """

    return read_tokens_text(read_text_file(filename, encoding))


def read_votes_file(filename, encoding=DEFAULT_ENCODING):
    """ Read results.csv from filename. """

    return read_votes_text(read_text_file(filename, encoding))
