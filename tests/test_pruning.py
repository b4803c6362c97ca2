from alphabeta.constraints import filter_candidates
from alphabeta.feedback import feedback
from alphabeta.word import Word

W = Word.from_str


def test_pruning_after_allot_pattern():
    # Small controlled pool so the test doesn't depend on a dictionary file
    words = [W(w) for w in ["total", "stoal", "allot", "tally", "alloy", "atoll"]]
    guess = W("allot")
    patt = feedback(W("total"), guess)  # should be 11011

    remaining = filter_candidates(words, [(guess, patt)])

    # "total" and "stoal" are consistent; others are not.
    assert W("total") in remaining
    assert W("stoal") in remaining
    assert W("allot") not in remaining  # yellows forbid those slots
    assert W("tally") not in remaining
    assert W("alloy") not in remaining
    assert W("atoll") not in remaining


def test_pruning_is_monotonic_with_more_feedback():
    words = [W(w) for w in ["total", "stoal", "bleed", "blend"]]
    # First feedback from "allot" vs "total"
    patt1 = feedback(W("total"), W("allot"))
    rem1 = set(filter_candidates(words, [(W("allot"), patt1)]))
    # Add second feedback from "stoal" vs "total"
    patt2 = feedback(W("total"), W("stoal"))
    rem2 = set(filter_candidates(words, [(W("allot"), patt1), (W("stoal"), patt2)]))
    # Candidate set should not grow as we add constraints
    assert rem2.issubset(rem1)
    assert W("total") in rem2
