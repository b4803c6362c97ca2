import pytest

from alphabeta.constraints import WordConstraints
from alphabeta.feedback import feedback
from alphabeta.fitness import Fitness, SearchResult
from alphabeta.search import AlphaBetaSearch, PreconditionError, search
from alphabeta.word import Word

W = Word.from_str

ANSWERS = [W(w) for w in ["shake", "shame", "shape", "share", "shade", "shave", "stage", "spare"]]
ALLOWED = ANSWERS + [W(w) for w in ["mover", "dhikr", "vampy", "crane", "adopt", "ghost"]]

SPREAD_ANSWERS = [W(w) for w in ["cigar", "rebut", "sissy", "humph", "awake", "blush", "focal", "evade", "naval", "serve"]]
SPREAD_ALLOWED = SPREAD_ANSWERS + [W(w) for w in ["slate", "crony", "xylyl"]]


def _minimax_mini(allowed, constraints, remaining, depth, max_depth):
    """Unpruned reference: same rules as the search, no alpha/beta."""
    if len(remaining) == 1:
        return SearchResult(Fitness(0, depth), remaining[0])
    best = SearchResult.maxi()
    for guess in allowed:
        value = _minimax_maxi(allowed, constraints, guess, remaining, depth + 1, max_depth)
        if value < best.fitness:
            best = SearchResult(value, guess)
    return best


def _minimax_maxi(allowed, constraints, guess, remaining, depth, max_depth):
    best = Fitness.mini()
    for answer in remaining:
        child = constraints.copy().fold(guess, feedback(answer, guess))
        filtered = [w for w in remaining if w != guess and child.is_valid(w)]
        if depth + 1 >= max_depth:
            value = Fitness(len(filtered), depth)
        elif not filtered:
            value = Fitness(0, depth)
        else:
            value = _minimax_mini(allowed, child, filtered, depth + 1, max_depth).fitness
        best = max(best, value)
    return best


def _exhaustive(allowed, remaining, max_depth):
    return _minimax_mini(allowed, WordConstraints.empty(), list(remaining), 0, max_depth)


def test_single_answer_is_solved_regardless_of_guesses():
    expected = SearchResult(Fitness.solved(), W("zymic"))
    assert search(ALLOWED, [W("zymic")], 4) == expected
    assert search([], [W("zymic")], 2) == expected


@pytest.mark.parametrize("max_depth", [1, 2, 3, 4])
def test_matches_exhaustive_minimax(max_depth):
    got = search(ALLOWED, ANSWERS, max_depth, workers=1)
    assert got == _exhaustive(ALLOWED, ANSWERS, max_depth)


def test_matches_exhaustive_minimax_spread_words():
    for max_depth in (2, 4):
        got = search(SPREAD_ALLOWED, SPREAD_ANSWERS, max_depth, workers=1)
        assert got == _exhaustive(SPREAD_ALLOWED, SPREAD_ANSWERS, max_depth)


@pytest.mark.parametrize("max_depth", [2, 4])
def test_parallel_matches_sequential(max_depth):
    sequential = search(ALLOWED, ANSWERS, max_depth, workers=1)
    for workers in (2, 4, 8):
        assert search(ALLOWED, ANSWERS, max_depth, workers=workers) == sequential


def test_ties_go_to_the_first_guess():
    answers = [W("abcde"), W("abcdf"), W("abcdg")]
    # none of these share a letter with the answers, so they all score the same
    allowed = [W("vwxyz"), W("qqqqq"), W("jjjjj"), W("kkkkk")]
    for workers in (1, 4):
        for _ in range(5):
            result = search(allowed, answers, 2, workers=workers)
            assert result == SearchResult(Fitness(3, 1), W("vwxyz"))


def test_root_stops_once_a_guess_reaches_alpha(monkeypatch):
    solver = AlphaBetaSearch(ALLOWED, max_depth=2, workers=1)
    seen = []
    maxi = solver._maxi

    def recording(constraints, guess, *args):
        seen.append(guess)
        return maxi(constraints, guess, *args)

    monkeypatch.setattr(solver, "_maxi", recording)
    alpha = Fitness(len(ANSWERS), 99)
    result = solver._mini_root(WordConstraints.empty(), ANSWERS, alpha, Fitness.maxi())
    assert seen == [ALLOWED[0]]
    assert result.word == ALLOWED[0]
    assert result.fitness <= alpha


def test_depth_one_fitness_is_worst_case_count():
    result = search(ALLOWED, ANSWERS, 2, workers=1)
    # recount the worst case of the chosen guess directly
    worst = 0
    for answer in ANSWERS:
        c = WordConstraints.empty().fold(result.word, feedback(answer, result.word))
        worst = max(worst, len(c.filter(ANSWERS, exclude=result.word)))
    assert result.fitness == Fitness(worst, 1)
    assert worst < len(ANSWERS)


def test_constraints_filter_the_answers_first():
    history = [(W("crane"), feedback(W("shape"), W("crane")))]
    constraints = WordConstraints.from_history(history)
    remaining = constraints.filter(ANSWERS)
    solver = AlphaBetaSearch(ALLOWED, max_depth=2, workers=1)
    assert solver.run(ANSWERS, constraints) == _minimax_mini(ALLOWED, constraints, remaining, 0, 2)


def test_empty_answers_raise():
    with pytest.raises(PreconditionError):
        search(ALLOWED, [], 2)


def test_empty_guesses_raise():
    with pytest.raises(PreconditionError):
        search([], ANSWERS, 2)


def test_constraints_removing_every_answer_raise():
    constraints = WordConstraints.empty().fold(W("shake"), feedback(W("vwxyz"), W("shake")))
    with pytest.raises(PreconditionError):
        AlphaBetaSearch(ALLOWED, max_depth=2).run(ANSWERS, constraints)


@pytest.mark.parametrize("kwargs", [{"max_depth": 0}, {"workers": 0}, {"max_depth": -3}])
def test_bad_configuration_raises(kwargs):
    with pytest.raises(ValueError):
        AlphaBetaSearch(ALLOWED, **kwargs)


def test_fitness_ordering_and_sentinels():
    assert Fitness.mini() < Fitness(0, 1) < Fitness(0, 3) < Fitness(1, 0) < Fitness.maxi()
    f = Fitness(2, 3)
    assert f < f.successor()
    assert not Fitness(2, 4) < f.successor()
