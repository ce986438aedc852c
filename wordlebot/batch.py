import random
from collections import Counter
from tqdm import tqdm

from .solver import TurnLimitExceeded


class BatchStats:
    def __init__(self, games, failures=()):
        self.games = list(games)
        self.failures = list(failures)
        self.counts = sorted(g.guesses for g in self.games)
        self.histogram = dict(sorted(Counter(self.counts).items()))

        n = len(self.counts)
        if n:
            self.minimum = self.counts[0]
            self.median = self.counts[n // 2]
            self.maximum = self.counts[-1]
            self.mean = sum(self.counts) / n
        else:
            self.minimum = self.median = self.maximum = self.mean = None

    def __len__(self):
        return len(self.games) + len(self.failures)


def pick_targets(words, sample=None, seed=None):
    words = list(words)
    if sample is None or sample >= len(words):
        return words
    return random.Random(seed).sample(words, sample)


def run_batch(solver, targets, progress=False):
    games, failures = [], []
    for target in tqdm(targets, desc="Playing", unit="game", disable=not progress):
        try:
            games.append(solver.play(target))
        except TurnLimitExceeded as e:
            failures.append(e.game)
    return BatchStats(games, failures)
