# session.py
# python3

"""
The state of one tallying session: the most recently loaded tokens and
votes, and the results computed from them.

Loading either input re-evaluates with the latest value of the other.
Results are cleared while either input is missing.  A vote export that
is rejected leaves the previously loaded votes in place, and the results
show the rejection message instead of a tally.
"""

import logging

import csv_readers
import outcomes
import report

logger = logging.getLogger(__name__)


class Evaluation(object):

    """
    What a session produced for its current inputs.

        report   the results report, or None if there is nothing to report
        tally    the TallyResult behind the report, or None
        error    the VotesError that prevented evaluation, or None
    """

    def __init__(self, report=None, tally=None, error=None):
        self.report = report
        self.tally = tally
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        return "Evaluation(report={!r}, error={!r})".format(self.report, self.error)


class VoteSession(object):

    def __init__(self):
        self.tokens = None
        self.votes = None
        self.results = None

    def load_tokens(self, text):
        """ Load the text of tokens.csv and re-evaluate. """

        self.tokens = csv_readers.read_tokens_text(text)
        logger.debug("%d token(s) loaded", len(self.tokens))
        return self.evaluate()

    def load_votes(self, text):
        """
        Load the text of results.csv and re-evaluate.
        A malformed export is not loaded; the returned Evaluation carries
        the error and self.results holds its message.
        """

        try:
            votes = csv_readers.read_votes_text(text)
        except csv_readers.MultiQuestionFormError as error:
            logger.info("vote export rejected: more than one question")
            self.results = error.message
            return Evaluation(error=error)
        self.votes = votes
        logger.debug("%d vote(s) loaded", len(self.votes))
        return self.evaluate()

    def clear_tokens(self):
        self.tokens = None
        self.results = None

    def clear_votes(self):
        self.votes = None
        self.results = None

    def evaluate(self):
        """ Tally the current inputs, if both are present. """

        if self.tokens is None or self.votes is None:
            self.results = None
            return Evaluation()
        tally = outcomes.tally_votes(self.tokens, self.votes)
        self.results = report.render_report(tally)
        return Evaluation(report=self.results, tally=tally)

    def status_lines(self):
        """ Return the load indicators for the inputs loaded so far. """

        lines = []
        if self.tokens is not None:
            lines.append("{} token(s) loaded".format(len(self.tokens)))
        if self.votes is not None:
            lines.append("{} vote(s) loaded".format(len(self.votes)))
        return lines
