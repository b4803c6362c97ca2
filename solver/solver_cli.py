"""
solver/solver_cli.py

Wordle solver: finds the guess that keeps the worst case as small as possible.

- Loads <prefix>_allowed.txt (every enterable word) and <prefix>_correct.txt
  (possible answers), or a word_list.csv with --csv.
- Each extra argument is a guess you already made followed by its feedback,
  e.g. 'weary00102' or 'wearybbyby':
    0 / b: letter does not exist
    1 / y: letter exists but in the wrong spot
    2 / g: letter is in the correct spot
- Prints the answers still possible, then the best guess and its fitness.

Run:
  python -m solver.solver_cli dictionaries/en
  python -m solver.solver_cli dictionaries/en weary00102 yelps10000 --depth 4
"""
from __future__ import annotations

import argparse
import logging
import re
from typing import List, Tuple

from alphabeta.constraints import WordConstraints
from alphabeta.data_utils import heuristic_sort, load_answer_vocab, load_dictionaries
from alphabeta.search import AlphaBetaSearch, PreconditionError
from alphabeta.vocab import WordVocab
from alphabeta.word import WORD_LENGTH, Feedback, Word


def parse_feedback(s: str) -> Feedback:
    """Parse a 5-char feedback into a Feedback.
    Accepted forms:
      - letters: g/y/b  (green/yellow/black)
      - digits:  2/1/0
      - list:   [0, 1, 2, 2, 0]
    Raises ValueError on invalid input.
    """
    s = s.strip().lower()
    # List-like form: [0,1,2,2,0]
    if s.startswith("[") and s.endswith("]"):
        nums = re.findall(r"[012]", s)
        if len(nums) != WORD_LENGTH:
            raise ValueError("list form must contain exactly five 0/1/2 values")
        return Feedback(int(x) for x in nums)

    # letters or digits
    mapping = {"g": 2, "y": 1, "b": 0, "2": 2, "1": 1, "0": 0}
    if len(s) != WORD_LENGTH:
        raise ValueError("feedback must be length 5 (gybgy / 21001 / [0,1,2,2,0])")
    try:
        return Feedback(mapping[ch] for ch in s)
    except KeyError as e:
        raise ValueError("feedback must use only g/y/b or 2/1/0") from e


def parse_word_and_state(arg: str) -> Tuple[Word, Feedback]:
    """Split 'weary00102' into the guess and its feedback."""
    arg = arg.strip()
    if len(arg) != 2 * WORD_LENGTH:
        raise ValueError(f"expected {WORD_LENGTH} letters followed by {WORD_LENGTH} feedback marks: {arg!r}")
    return Word.from_str(arg[:WORD_LENGTH].lower()), parse_feedback(arg[WORD_LENGTH:])


def _load(args: argparse.Namespace) -> Tuple[List[Word], List[Word]]:
    if args.csv:
        allowed = WordVocab.from_csv(args.csv)
        correct = load_answer_vocab(args.csv)
    else:
        allowed, correct = load_dictionaries(args.prefix)
    allowed_words = allowed.words()
    correct_words = correct.words()
    if args.sort:
        # most informative guesses first, they prune the most
        allowed_words = heuristic_sort(allowed_words)[::-1]
        correct_words = heuristic_sort(correct_words)
    return allowed_words, correct_words


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Wordle solver (alpha-beta over the worst case)")
    ap.add_argument("prefix", nargs="?", default=None, help="Dictionary prefix, loads <prefix>_allowed.txt and <prefix>_correct.txt")
    ap.add_argument("states", nargs="*", help="Guesses already made with their feedback, e.g. weary00102")
    ap.add_argument("--csv", default=None, help="Load words from a word_list.csv instead (answers are rows with a 'day')")
    ap.add_argument("--depth", type=int, default=4, help="Search depth in plies (2 = one guess ahead, 4 = two)")
    ap.add_argument("--workers", type=int, default=None, help="Threads at the root (default: number of CPUs)")
    ap.add_argument(
        "--sort",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Presort words by letter frequency (use --no-sort to keep dictionary order)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Log search progress")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.csv and args.prefix:
        # with --csv every positional is a word-state
        args.states = [args.prefix] + args.states
        args.prefix = None
    if not args.csv and not args.prefix:
        ap.error("either a dictionary prefix or --csv is required")

    try:
        history = [parse_word_and_state(s) for s in args.states]
    except ValueError as e:
        ap.error(str(e))

    allowed, correct = _load(args)

    constraints = WordConstraints.from_history(history)
    logging.getLogger(__name__).info("constraints:\n%s", constraints)
    remaining = constraints.filter(correct)
    print(" ".join(str(w) for w in remaining))

    try:
        solver = AlphaBetaSearch(allowed, max_depth=args.depth, workers=args.workers)
        result = solver.run(remaining, constraints)
    except PreconditionError as e:
        print(f"No result: {e}")
        return 1
    except ValueError as e:
        ap.error(str(e))

    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
