from collections import defaultdict
from tqdm import tqdm


_empty = frozenset()


class PartitionIndex:
    '''
    Maps (guess, pattern) to the set of answers which would show that pattern
    if that guess were played against them.

    Building it costs O(guesses * answers) pattern computations and is done
    once; every game and every turn after that only does lookups. The buckets
    for one guess partition the answer list.
    '''

    def __init__(self, guesses, answers, buckets):
        self.guesses = guesses
        self.answers = answers
        self._buckets = buckets

    @classmethod
    def build(cls, guesses, answers, cache, progress=False):
        guesses = frozenset(guesses) | frozenset(answers)
        answers = frozenset(answers)
        buckets = defaultdict(set)
        for guess in tqdm(sorted(guesses), desc="Partitioning", unit="guess", disable=not progress):
            for word in answers:
                buckets[guess, cache.get(guess, word)].add(word)
        return cls(guesses, answers, {k: frozenset(v) for k, v in buckets.items()})

    def lookup(self, guess, pattern):
        return self._buckets.get((guess, pattern), _empty)

    def partitions(self, guess):
        return {p: b for (g, p), b in self._buckets.items() if g == guess}

    def __contains__(self, guess):
        return guess in self.guesses

    def __len__(self):
        return len(self._buckets)
