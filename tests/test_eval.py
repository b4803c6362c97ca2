from alphabeta.constraints import WordConstraints
from alphabeta.feedback import feedback
from alphabeta.word import Word
from starting_word.eval import best_guesses, evaluate_guesses

W = Word.from_str


def test_scores_and_order():
    answers = [W("abcde"), W("abcdf")]
    results = evaluate_guesses([W("vwxyz"), W("abcde")], answers)
    assert [r["guess"] for r in results] == ["abcde", "vwxyz"]
    assert results[0] == {"guess": "abcde", "max_count": 1, "sum_count_squared": 1, "in_answers": True}
    assert results[1] == {"guess": "vwxyz", "max_count": 2, "sum_count_squared": 8, "in_answers": False}


def test_all_tied_best_guesses_are_listed():
    answers = [W("abcde"), W("abcdf"), W("abcdg")]
    results = evaluate_guesses([W("qqqqq"), W("vwxyz")], answers)
    assert best_guesses(results) == ["qqqqq", "vwxyz"]


def test_history_filters_answers():
    answers = [W("total"), W("stoal"), W("atoll")]
    constraints = WordConstraints.empty().fold(W("allot"), feedback(W("total"), W("allot")))
    results = evaluate_guesses([W("total")], answers, constraints)
    # only total and stoal are left, guessing total leaves at most stoal
    assert results[0]["max_count"] == 1
    assert results[0]["in_answers"] is True
