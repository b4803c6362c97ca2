"""
starting_word/eval.py

Score every allowed guess by how well it splits the remaining answers, one
guess deep.

Metrics per guess:
- max_count: the largest number of answers left after the feedback, over all
  possible answers (lower is better, this is the worst case)
- sum_count_squared: sum over answers of (answers left)^2, the tie-break
- in_answers: whether the guess can itself be the answer (preferred on ties)

Usage:
  python -m starting_word.eval dictionaries/en
  python -m starting_word.eval dictionaries/en weary00102 --out results.csv
"""

from __future__ import annotations

import argparse
import csv
import logging
import time
from typing import Dict, List, Optional, Sequence, Tuple

from alphabeta.constraints import WordConstraints
from alphabeta.data_utils import load_dictionaries
from alphabeta.feedback import feedback
from alphabeta.word import Word
from solver.solver_cli import parse_word_and_state

logger = logging.getLogger(__name__)


def _score_guess(guess: Word, answers: Sequence[Word], constraints: WordConstraints) -> Tuple[int, int, bool]:
    """
    Returns (max_count, sum_count_squared, in_answers) for one guess.
    The guess itself is never counted as a remaining answer.
    """
    max_count = 0
    sum_sq = 0
    in_answers = False
    for answer in answers:
        if answer == guess:
            in_answers = True
            continue
        child = constraints.folded(guess, feedback(answer, guess))
        count = 0
        for word in answers:
            if word != guess and child.is_valid(word):
                count += 1
        if count > max_count:
            max_count = count
        sum_sq += count * count
    return max_count, sum_sq, in_answers


def _sort_key(row: Dict) -> Tuple[int, int, bool]:
    return (row["max_count"], row["sum_count_squared"], not row["in_answers"])


def evaluate_guesses(
    guesses: Sequence[Word],
    answers: Sequence[Word],
    constraints: Optional[WordConstraints] = None,
    *,
    progress: bool = False,
) -> List[Dict]:
    """
    Evaluate each guess against the remaining answers.

    Parameters
    ----------
    guesses : list[Word]
        Candidate guesses to score.
    answers : list[Word]
        Answers still possible. Filtered through `constraints` if given.
    constraints : WordConstraints | None
        Knowledge from earlier guesses.
    progress : bool
        If True, logs a progress line every 500 guesses.

    Returns
    -------
    list[dict]
        Sorted (best first, stable) records with keys:
        'guess', 'max_count', 'sum_count_squared', 'in_answers'
    """
    if constraints is None:
        constraints = WordConstraints.empty()
    else:
        answers = constraints.filter(answers)
    if not answers:
        raise ValueError("answers must be non-empty")

    results: List[Dict] = []
    for i, g in enumerate(guesses):
        max_count, sum_sq, in_answers = _score_guess(g, answers, constraints)
        results.append(
            {
                "guess": str(g),
                "max_count": max_count,
                "sum_count_squared": sum_sq,
                "in_answers": in_answers,
            }
        )
        if progress and (i + 1) % 500 == 0:
            logger.info("Scored %d/%d guesses...", i + 1, len(guesses))

    results.sort(key=_sort_key)
    return results


def best_guesses(results: List[Dict]) -> List[str]:
    """All guesses tied with the best record."""
    if not results:
        return []
    best = _sort_key(results[0])
    return [r["guess"] for r in results if _sort_key(r) == best]


def _print_top(results: List[Dict], k: int = 20) -> None:
    print(f"\nTop {k} guesses by worst case:")
    print(f"{'rank':>4}  {'guess':<8}  {'worst':>6}  {'sum_sq':>10}  {'answer':>6}")
    for idx, r in enumerate(results[:k], start=1):
        print(
            f"{idx:>4}  {r['guess']:<8}  {r['max_count']:>6}  {r['sum_count_squared']:>10}  {'yes' if r['in_answers'] else 'no':>6}"
        )


def _write_csv(results: List[Dict], path: str) -> None:
    fieldnames = ["guess", "max_count", "sum_count_squared", "in_answers"]
    with open(path, mode="w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for row in results:
            writer.writerow(row)


def main(argv: List[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Score guesses one level deep by worst-case remaining answers.")
    ap.add_argument("prefix", help="Dictionary prefix, loads <prefix>_allowed.txt and <prefix>_correct.txt")
    ap.add_argument("states", nargs="*", help="Guesses already made with their feedback, e.g. weary00102")
    ap.add_argument("--out", default="guess_results.csv", help="Output CSV filename")
    ap.add_argument("--top", type=int, default=15, help="How many top rows to print")
    ap.add_argument("--limit-guesses", type=int, default=None, help="Evaluate only the first K guesses (for speed)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        history = [parse_word_and_state(s) for s in args.states]
    except ValueError as e:
        ap.error(str(e))

    allowed, correct = load_dictionaries(args.prefix)
    guesses = allowed.words()
    if args.limit_guesses is not None:
        guesses = guesses[: args.limit_guesses]

    constraints = WordConstraints.from_history(history)
    print(f"Scoring {len(guesses)} guesses against {len(correct)} answers...", flush=True)
    t0 = time.perf_counter()
    results = evaluate_guesses(guesses, correct.words(), constraints, progress=True)
    print(f"Done in {time.perf_counter() - t0:.2f}s", flush=True)

    _print_top(results, k=args.top)
    print("Best:", " ".join(best_guesses(results)))
    _write_csv(results, args.out)
    print(f"Wrote results to {args.out}")


if __name__ == "__main__":
    main()
