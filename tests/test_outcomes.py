from csv_readers import Vote
import outcomes


def votes_for(*pairs):
    return [Vote("2021/05/01 10:00:{:02d}".format(i), token, option)
            for i, (token, option) in enumerate(pairs)]


def test_compute_tally_keeps_first_appearance_order():
    tally = outcomes.compute_tally(["b", "a", "b", "c", "a", "b"])
    assert tally == {"b": 3, "a": 2, "c": 1}
    assert list(tally) == ["b", "a", "c"]


def test_evaluate_empty():
    result = outcomes.tally_votes([], [])
    assert result.total_eligible == 0
    assert result.votes_cast == 0
    assert result.abstentions == 0
    assert result.results == []
    assert outcomes.evaluate([], []) == "\nResults:\n\n0 Vote(s) / 0 Abstain(s) / 0 Total"


def test_evaluate_counts_and_abstentions():
    tokens = ["a", "b", "c"]
    votes = votes_for(("a", "X"), ("b", "Y"))

    result = outcomes.tally_votes(tokens, votes)
    assert result.total_eligible == 3
    assert result.votes_cast == 2
    assert result.abstentions == 1
    assert result.counts == {"X": 1, "Y": 1}
    assert result.log == []

    assert outcomes.evaluate(tokens, votes) == "\n".join([
        "",
        "Results:",
        "Option X: 1 33.33333333333333%",
        "Option Y: 1 33.33333333333333%",
        "",
        "2 Vote(s) / 1 Abstain(s) / 3 Total",
    ])


def test_invalid_token_is_logged_and_still_counted():
    result = outcomes.tally_votes(["a"], votes_for(("z", "X")))
    assert result.log == ["Error: Invalid voting token z"]
    assert result.counts == {"X": 1}
    assert result.votes_cast == 1
    assert result.abstentions == 0

    assert outcomes.evaluate(["a"], votes_for(("z", "X"))) == "\n".join([
        "Error: Invalid voting token z",
        "",
        "Results:",
        "Option X: 1 100%",
        "",
        "1 Vote(s) / 0 Abstain(s) / 1 Total",
    ])


def test_invalid_token_logged_once_per_row():
    result = outcomes.tally_votes(["a"], votes_for(("z", "X"), ("a", "X"), ("z", "Y")))
    assert result.log == ["Error: Invalid voting token z", "Error: Invalid voting token z"]
    assert result.counts == {"X": 1, "Y": 1}


def test_abstentions_can_go_negative():
    result = outcomes.tally_votes(["a"], votes_for(("a", "X"), ("z", "Y")))
    assert result.abstentions == -1
    assert outcomes.evaluate(["a"], votes_for(("a", "X"), ("z", "Y"))).endswith(
        "2 Vote(s) / -1 Abstain(s) / 1 Total")


def test_last_vote_for_a_token_wins():
    result = outcomes.tally_votes(["a"], votes_for(("a", "X"), ("a", "Y")))
    assert result.counts == {"Y": 1}
    assert result.votes_cast == 1
    report = outcomes.evaluate(["a"], votes_for(("a", "X"), ("a", "Y")))
    assert "Option X" not in report
    assert "Option Y: 1 100%" in report


def test_revoted_token_keeps_its_first_position():
    result = outcomes.tally_votes(["a", "b"], votes_for(("a", "X"), ("b", "Y"), ("a", "Z")))
    assert result.results == [("Z", 1), ("Y", 1)]


def test_results_sorted_ascending_with_stable_ties():
    tokens = ["t1", "t2", "t3", "t4", "t5"]
    votes = votes_for(("t1", "A"), ("t2", "B"), ("t3", "C"), ("t4", "A"), ("t5", "C"))
    result = outcomes.tally_votes(tokens, votes)
    assert result.results == [("B", 1), ("A", 2), ("C", 2)]

    lines = outcomes.evaluate(tokens, votes).split("\n")
    assert lines[2:5] == ["Option B: 1 20%", "Option A: 2 40%", "Option C: 2 40%"]


def test_duplicate_tokens_collapse():
    result = outcomes.tally_votes(["a", "a", "b"], votes_for(("a", "X")))
    assert result.total_eligible == 2
    assert result.abstentions == 1
    assert "Option X: 1 50%" in outcomes.evaluate(["a", "a", "b"], votes_for(("a", "X")))


def test_no_eligible_tokens_gives_infinite_percentage():
    report = outcomes.evaluate([], votes_for(("z", "X")))
    assert report.split("\n") == [
        "Error: Invalid voting token z",
        "",
        "Results:",
        "Option X: 1 Infinity%",
        "",
        "1 Vote(s) / -1 Abstain(s) / 0 Total",
    ]


def test_evaluate_does_not_keep_state_between_calls():
    first = outcomes.evaluate(["a", "b"], votes_for(("a", "X")))
    outcomes.evaluate(["c"], votes_for(("z", "Y")))
    assert outcomes.evaluate(["a", "b"], votes_for(("a", "X"))) == first
