from .algorithms import clues_of_guess


class ResultCache:
    '''
    Memoizes clues_of_guess(guess, answer) for the lifetime of the process.

    There is no eviction or invalidation: the word lists a solver works with
    never change once loaded, so a stored pattern can never go stale. The
    duplicate-letter mode is fixed when the cache is created, so everything
    that shares a cache also shares one way of scoring.

    Not safe for concurrent use.
    '''

    def __init__(self, easy=False):
        self.easy = easy
        self.hits = self.misses = 0
        self._results = {}    # guess -> {answer: pattern}
        self._patterns = {}   # interned patterns, there are at most 3**L of them

    def get(self, guess, answer):
        row = self._results.get(guess)
        if row is None:
            row = self._results[guess] = {}
        else:
            pattern = row.get(answer)
            if pattern is not None:
                self.hits += 1
                return pattern

        self.misses += 1
        pattern = clues_of_guess(guess, answer, self.easy)
        pattern = row[answer] = self._patterns.setdefault(pattern, pattern)
        return pattern

    def __contains__(self, key):
        guess, answer = key
        return answer in self._results.get(guess, ())

    def __len__(self):
        return sum(len(row) for row in self._results.values())
