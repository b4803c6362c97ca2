"""
solver/play_cli.py

Play Wordle in the terminal.

- A random answer is drawn from <prefix>_correct.txt (or give one with --answer).
- Type a guess, the feedback is printed as 0/1/2 per letter.
- '?' reveals the answer, 'hint' asks the solver for the best next guess.

Run:
  python -m solver.play_cli dictionaries/en
  python -m solver.play_cli dictionaries/en --answer crane

Shortcuts:
  quit / q / exit  -> exit
"""
from __future__ import annotations

import argparse
import logging
from typing import List

from alphabeta.data_utils import heuristic_sort, load_dictionaries
from alphabeta.env import WordleEnv
from alphabeta.sampler import WordSampler
from alphabeta.search import AlphaBetaSearch
from alphabeta.word import Word


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Play Wordle against a random answer")
    ap.add_argument("prefix", help="Dictionary prefix, loads <prefix>_allowed.txt and <prefix>_correct.txt")
    ap.add_argument("--answer", default=None, help="Use this answer instead of a random one")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed for the answer")
    ap.add_argument("--max-guesses", type=int, default=6, help="Guess budget")
    ap.add_argument("--hint-depth", type=int, default=2, help="Search depth used by 'hint'")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log search progress")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    allowed, correct = load_dictionaries(args.prefix)
    env = WordleEnv(correct, WordSampler(correct, seed=args.seed), max_guesses=args.max_guesses)
    try:
        answer = Word.from_str(args.answer.lower()) if args.answer else None
        env.reset(answer)
    except ValueError as e:
        ap.error(str(e))

    hint_guesses = heuristic_sort(allowed.words())[::-1]

    done = False
    while not done:
        try:
            text = input(f"guess #{len(env.history) + 1}: ").strip().lower()
        except EOFError:
            print()
            return 0
        if text in {"q", "quit", "exit"}:
            print("bye!")
            return 0
        if text == "?":
            print(f"Correct word: {env.answer}")
            continue
        if text == "hint":
            result = AlphaBetaSearch(hint_guesses, max_depth=args.hint_depth).run(
                env.candidates, env.constraints
            )
            print(f"hint: {result.word} (worst case {result.fitness.max_count} left)")
            continue
        try:
            guess = Word.from_str(text)
        except ValueError as e:
            print("Invalid guess:", e)
            continue
        if not allowed.contains(guess):
            print("Not in the word list.")
            continue

        fb, done, info = env.step(guess)
        if info["solved"]:
            print("CORRECT!")
            return 0
        print(fb)
        print(f"{info['remaining']} possible answers left")

    print(f"Out of guesses. The answer was {info['answer']}.")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
