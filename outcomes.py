# outcomes.py
# python3

"""
Tally computations.
Code to tally a single-question vote, given the eligible voting tokens
and the sequence of submitted votes.

Every token gets one vote: if a token submitted more than once, its last
submission counts.  A vote whose token is not eligible is reported as an
error but is still counted, and it still uses up one "vote cast", so the
number of abstentions can go negative; it is not clamped at zero.
"""

import logging

import report

logger = logging.getLogger(__name__)


def compute_tally(vec):
    """
    Here vec is an iterable of hashable elements.
    Return dict giving tally of elements, in order of first appearance.
    """

    tally = {}
    for x in vec:
        tally[x] = tally.get(x, 0) + 1
    return tally


def collect_cast_votes(token_set, votes):
    """
    Return (cast_votes, log) for the given votes, in file order.

    cast_votes maps each token to the option of its last vote; a token keeps
    the position of its first vote.  log lists an error line for every vote
    whose token is not in token_set.
    """

    log = []
    cast_votes = {}
    for vote in votes:
        if vote.token not in token_set:
            log.append("Error: Invalid voting token {}".format(vote.token))
        cast_votes[vote.token] = vote.option
    return cast_votes, log


class TallyResult(object):

    """
    Result of tallying one vote.

        results         list of (option, count) pairs, ascending by count;
                        ties in order of first appearance
        log             error lines, in file order
        total_eligible  number of distinct eligible tokens
        votes_cast      number of distinct tokens that voted
        abstentions     total_eligible - votes_cast (may be negative)
    """

    def __init__(self, results, log, total_eligible, votes_cast):

        self.results = results
        self.log = log
        self.total_eligible = total_eligible
        self.votes_cast = votes_cast
        self.abstentions = total_eligible - votes_cast

    @property
    def counts(self):
        return dict(self.results)

    def __repr__(self):
        return ("TallyResult(results={!r}, log={!r}, total_eligible={}, votes_cast={})"
                .format(self.results, self.log, self.total_eligible, self.votes_cast))


def tally_votes(tokens, votes):
    """
    Return TallyResult for the given iterable of tokens and sequence of Votes.
    """

    logger.debug("tallying %d vote(s)", len(votes))

    token_set = set(tokens)
    cast_votes, log = collect_cast_votes(token_set, votes)

    for option in cast_votes.values():
        logger.debug("got option %s", option)
    tally = compute_tally(cast_votes.values())

    # sorted() is stable, so equal counts stay in order of first appearance
    results = sorted(tally.items(), key=lambda item: item[1])

    return TallyResult(results, log, len(token_set), len(cast_votes))


def evaluate(tokens, votes):
    """
    Return the text report for the given tokens and votes.
    """

    return report.render_report(tally_votes(tokens, votes))
