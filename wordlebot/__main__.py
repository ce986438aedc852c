#!/usr/bin/python3

import argparse
import os
import time
from colorama import Fore, Style

from .algorithms import colored_guess, pattern_string
from .batch import pick_targets, run_batch
from .solver import Solver, SolverConfig, TurnLimitExceeded
from .wordlist import WordListError, eligible_words, load_words, unidecode


EMPH = Fore.BLUE + Style.BRIGHT
RESET = Style.RESET_ALL


def word_file(fn):
    # Relative paths that don't exist here are looked up in /usr/share/dict
    if not os.path.isabs(fn) and not os.path.exists(fn):
        fn = os.path.join('/usr/share/dict', fn)
    return argparse.FileType()(fn)


def emph(value, color=True):
    return f"{EMPH}{value}{RESET}" if color else str(value)


def show_guess(guess, clues, color=True):
    return colored_guess(guess, clues) if color else f"{guess} {pattern_string(clues)}"


def show_game(game, color=True):
    for ii, (guess, clues, left) in enumerate(game.turns, 1):
        print(f"Guess #{ii}: {show_guess(guess, clues, color)}  ({emph(left, color)} possible)")
    if game.solved:
        print(f"The word was: {emph(game.answer, color)}. We found it in {emph(game.guesses, color)} guesses!")
    else:
        print(f"Sorry, the word was: {emph(game.answer, color)}. Gave up after {emph(game.guesses, color)} guesses.")


def show_report(stats, color=True):
    print("Here are the results!")
    if stats.games:
        print(f"Minimum # of Guesses: {emph(stats.minimum, color)}")
        print(f"Median # of Guesses: {emph(stats.median, color)}")
        print(f"Maximum # of Guesses: {emph(stats.maximum, color)}")
        print(f"Average # of Guesses: {emph(f'{stats.mean:.3f}', color)}")
        width = max(len(str(n)) for n in stats.histogram.values())
        for guesses, n in stats.histogram.items():
            print(f"  {guesses:3d} guesses: {n:{width}d} {'#' * max(1, 60 * n // len(stats.games))}")
    if stats.failures:
        print(f"Failed to solve {emph(len(stats.failures), color)} of {len(stats)} words: "
              f"{', '.join(g.answer for g in stats.failures)}")


def parse_args(args=None):
    p = argparse.ArgumentParser(description='Solve Wordle by always guessing the word which leaves the fewest possibilities on average.')
    p.add_argument('dict', type=word_file,
                   help='Possible answers, one per line; either a path or a path relative to /usr/share/dict.')
    p.add_argument('-G', '--guesses-dict', type=word_file,
                   help='Additional words which may be guessed but are never the answer.')
    p.add_argument('-L', '--lenient', action='store_true',
                   help='Skip words of the wrong length or containing non-letters, instead of rejecting the word list. '
                        'Needed for general-purpose dictionaries.')
    p.add_argument('-l', '--length', default=5, type=int,
                   help='Length of words to guess. Default %(default)s.')
    p.add_argument('-g', '--max-turns', type=int,
                   help='Give up after this many guesses. Default is the number of possible answers.')
    p.add_argument('-H', '--hard-final-turn', action='store_true',
                   help='On the last allowed turn, only guess words which could be the answer.')
    p.add_argument('-e', '--easy', action='store_true',
                   help='Mark every occurrence of a guessed letter that appears in the answer, however many times '
                        'it appears (not how Wordle does it).')
    p.add_argument('-f', '--first-guess-file',
                   help='Cache the best first guess in this file. Delete it if the word lists change!')
    p.add_argument('-t', '--target',
                   help='Play a single game with this answer, showing every guess.')
    p.add_argument('-n', '--sample', type=int,
                   help='Play this many randomly chosen answers, instead of every one.')
    p.add_argument('-s', '--seed', type=int,
                   help='Random seed for --sample.')
    p.add_argument('-v', '--verbose', action='store_true',
                   help='Show every game played.')
    p.add_argument('-P', '--no-progress', dest='progress', action='store_false',
                   help="Don't show progress bars.")
    p.add_argument('--no-color', action='store_true',
                   help="Don't color the output.")
    if unidecode:
        p.add_argument('-D', '--strip-diacritics', action='store_true',
                       help='Strip diacritics from words (should allow playing with Spanish/French wordlists)')
    args = p.parse_args(args)
    if not unidecode:
        args.strip_diacritics = False
    if args.max_turns is not None and args.max_turns < 1:
        p.error("--max-turns must be at least 1")
    if args.sample is not None and args.sample < 1:
        p.error("--sample must be at least 1")
    return p, args


def read_words(p, args, df):
    with df:
        try:
            if args.lenient:
                return list(eligible_words(df, args.length, args.strip_diacritics))
            return load_words(df, args.length, args.strip_diacritics)
        except WordListError as e:
            p.error(str(e))


def main(args=None):
    p, args = parse_args(args)
    color = not args.no_color

    answers = read_words(p, args, args.dict)
    guesses = read_words(p, args, args.guesses_dict) if args.guesses_dict else ()
    if not answers:
        p.error(f"No {args.length}-letter words found in {args.dict.name}")

    config = SolverConfig(
        length=args.length,
        easy=args.easy,
        max_turns=args.max_turns,
        hard_final_turn=args.hard_final_turn,
        first_guess_file=args.first_guess_file,
    )

    start_at = time.time()
    solver = Solver(answers, guesses, config, progress=args.progress)
    print(f"Partitioned {emph(len(solver.answers), color)} possible answers by "
          f"{emph(len(solver.guesses), color)} allowed guesses in {emph(f'{time.time() - start_at:.2f}', color)} s.")
    print(f"Best first guess is {emph(solver.first_guess(args.progress), color)}.")
    print()

    if args.target:
        target = args.target.strip().upper()
        if target not in solver.answers:
            p.error(f"Need a known {args.length}-letter word to test, not {target!r}")
        try:
            show_game(solver.play(target), color)
        except TurnLimitExceeded as e:
            show_game(e.game, color)
            return 1
        return 0

    targets = pick_targets(solver.words, args.sample, args.seed)
    start_at = time.time()
    stats = run_batch(solver, targets, args.progress)
    if args.verbose:
        for game in stats.games + stats.failures:
            print(f"Wordle {game.answer}:")
            show_game(game, color)
            print()
    show_report(stats, color)
    print(f"Played {emph(len(stats), color)} games in {emph(f'{time.time() - start_at:.2f}', color)} s.")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
