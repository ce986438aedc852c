'''
Greedy Wordle solver
====================

Every turn, play the guess which ON AVERAGE leaves the fewest possible
answers. For a guess g and candidate answers C, the score is

    sum(|{v in C : pattern(g, v) == pattern(g, w)}| for w in C)

i.e. for every answer w that might be the real one, how many candidates
would g fail to eliminate. A guess that splits C into singletons scores |C|,
a guess that tells us nothing scores |C|**2. Lowest score wins; ties go to a
guess that could itself be the answer, which is what guarantees that every
turn removes at least one candidate.
'''

import sys
from collections import Counter
from tqdm import tqdm

from .algorithms import is_solved
from .cache import ResultCache
from .index import PartitionIndex


class SolverConfig:
    def __init__(self, length=5, easy=False, max_turns=None, hard_final_turn=False, first_guess_file=None):
        self.length = length
        self.easy = easy                        # mark every occurrence of a present letter
        self.max_turns = max_turns              # None: as many turns as there are answers
        self.hard_final_turn = hard_final_turn  # last allowed guess must be a candidate
        self.first_guess_file = first_guess_file

    def __repr__(self):
        return f"{self.__class__.__name__}({', '.join(f'{k}={v!r}' for k, v in vars(self).items())})"


class Game:
    def __init__(self, answer):
        self.answer = answer
        self.turns = []  # (guess, pattern, candidates left before the guess)

    @property
    def guesses(self):
        return len(self.turns)

    @property
    def solved(self):
        return bool(self.turns) and self.turns[-1][0] == self.answer


class TurnLimitExceeded(RuntimeError):
    def __init__(self, game):
        super().__init__(f"Failed to find {game.answer} within {game.guesses} guesses")
        self.game = game


class Solver:
    def __init__(self, answers, guesses=(), config=None, cache=None, progress=False):
        self.config = config = config or SolverConfig()
        if cache is None:
            cache = ResultCache(config.easy)
        elif cache.easy != config.easy:
            raise ValueError("Result cache and solver disagree about easy mode")
        self.cache = cache

        self.words = tuple(dict.fromkeys(answers))  # answer list, in its original order
        if not self.words:
            raise ValueError("Need at least one possible answer")
        guesses = tuple(guesses)
        for w in self.words + guesses:
            if len(w) != config.length:
                raise ValueError(f"{w!r} is not a {config.length}-letter word")

        self.index = PartitionIndex.build(guesses, self.words, cache, progress)
        self.answers = self.index.answers
        self.guesses = self.index.guesses  # always includes every answer
        self.max_turns = config.max_turns or len(self.answers)
        self._first_guess = None

    def score_guess(self, guess, candidates, bound=None):
        '''
        Total, over every candidate w, of the candidates which would give the
        same pattern as w does. If bound is given, stop and return None as soon
        as the score is known to exceed it.

        This is the same number as summing len(index.lookup(guess, pattern) & candidates)
        over every candidate, since that intersection is exactly the candidates
        sharing the pattern; counting patterns avoids building the intersections.
        '''
        get = self.cache.get
        seen = Counter()
        score = 0
        for w in candidates:
            pattern = get(guess, w)
            # Adding one more word to a bucket of n adds (n+1)**2 - n**2
            score += 2 * seen[pattern] + 1
            seen[pattern] += 1
            if bound is not None and score > bound:
                return None
        return score

    def select_guess(self, pool, candidates, progress=False):
        if not candidates:
            raise ValueError("No candidates left to choose from")
        if len(candidates) == 1:
            return next(iter(candidates))

        best = best_score = None
        best_is_candidate = False
        for guess in tqdm(sorted(pool), desc="Scoring", unit="guess", leave=False, disable=not progress):
            is_candidate = guess in candidates
            if best is None:
                bound = None
            elif is_candidate and not best_is_candidate:
                bound = best_score      # a tie is good enough
            else:
                bound = best_score - 1  # must beat it outright

            score = self.score_guess(guess, candidates, bound)
            if score is not None:
                best, best_score, best_is_candidate = guess, score, is_candidate
        if best is None:
            raise ValueError("No guesses to choose from")
        return best

    def prune(self, candidates, guess, pattern):
        if guess not in self.index:
            raise ValueError(f"{guess!r} is not a known guess")
        return self.index.lookup(guess, pattern) & frozenset(candidates)

    def guess_pool(self, turn, candidates):
        if self.config.hard_final_turn and turn >= self.max_turns:
            return candidates
        return self.guesses

    def first_guess(self, progress=False):
        if self._first_guess is None:
            guess = self._read_first_guess()
            if guess is None:
                guess = self.select_guess(self.guesses, self.answers, progress)
                self._write_first_guess(guess)
            self._first_guess = guess
        return self._first_guess

    def _read_first_guess(self):
        fn = self.config.first_guess_file
        if not fn:
            return None
        try:
            with open(fn) as f:
                guess = f.read().strip().upper()
        except FileNotFoundError:
            return None
        except OSError as e:
            print(f"Could not read cached first guess from {fn}: {e}", file=sys.stderr)
            return None

        if not guess:
            return None
        elif guess not in self.index:
            print(f"Ignoring cached first guess {guess!r} from {fn}: not an allowed guess", file=sys.stderr)
            return None
        return guess

    def _write_first_guess(self, guess):
        fn = self.config.first_guess_file
        if not fn:
            return
        try:
            with open(fn, 'w') as f:
                print(guess, file=f)
        except OSError as e:
            print(f"Could not save first guess to {fn}: {e}", file=sys.stderr)

    def play(self, answer):
        if answer not in self.answers:
            raise ValueError(f"{answer!r} is not a possible answer")

        game = Game(answer)
        candidates = self.answers
        for turn in range(1, self.max_turns + 1):
            pool = self.guess_pool(turn, candidates)
            if len(candidates) == 1 or pool is candidates or turn > 1:
                guess = self.select_guess(pool, candidates)
            else:
                guess = self.first_guess()

            pattern = self.cache.get(guess, answer)
            game.turns.append((guess, pattern, len(candidates)))
            if is_solved(pattern):
                return game

            candidates = self.prune(candidates, guess, pattern)

        raise TurnLimitExceeded(game)
