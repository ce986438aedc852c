from wordlebot.batch import BatchStats, pick_targets, run_batch
from wordlebot.solver import Game, Solver, SolverConfig

WORDS = ['CRANE', 'SLATE', 'TRACE', 'ABACK', 'BAKER', 'BAKES', 'CRATE', 'GRATE', 'PLATE', 'STALE', 'STEAL',
         'LEAST', 'TEARS', 'RATES', 'STARE', 'ROAST', 'TOAST', 'BOAST', 'COAST', 'HOIST', 'MOIST', 'JOIST']


def _game(answer, guesses):
    game = Game(answer)
    game.turns = [(answer, None, 1)] * guesses
    return game


def test_stats():
    stats = BatchStats([_game('A', n) for n in (4, 2, 3, 3, 5, 3)])
    assert stats.counts == [2, 3, 3, 3, 4, 5]
    assert (stats.minimum, stats.median, stats.maximum) == (2, 3, 5)
    assert stats.mean == 20 / 6
    assert stats.histogram == {2: 1, 3: 3, 4: 1, 5: 1}
    assert list(stats.histogram) == [2, 3, 4, 5]
    assert len(stats) == 6


def test_median_of_even_count_is_upper_middle():
    assert BatchStats([_game('A', n) for n in (1, 2, 3, 4)]).median == 3


def test_stats_without_games():
    stats = BatchStats([], [_game('A', 1)])
    assert stats.minimum is stats.median is stats.maximum is stats.mean is None
    assert len(stats) == 1


def test_pick_targets():
    assert pick_targets(WORDS) == WORDS
    assert pick_targets(WORDS, sample=100) == WORDS
    sample = pick_targets(WORDS, sample=5, seed=1)
    assert len(sample) == len(set(sample)) == 5
    assert set(sample) <= set(WORDS)
    assert pick_targets(WORDS, sample=5, seed=1) == sample


def test_exhaustive_run():
    solver = Solver(WORDS)
    stats = run_batch(solver, pick_targets(solver.words))
    assert not stats.failures
    assert sorted(g.answer for g in stats.games) == sorted(WORDS)
    assert stats.minimum >= 1
    assert stats.maximum <= len(WORDS)
    assert stats.minimum <= stats.median <= stats.maximum


def test_seeded_runs_are_reproducible():
    def run():
        solver = Solver(WORDS, ['BUMPY', 'CHOMP'])
        stats = run_batch(solver, pick_targets(solver.words, sample=10, seed=42))
        return stats.minimum, stats.median, stats.maximum, stats.mean, stats.histogram

    assert run() == run()


def test_failures_are_collected():
    solver = Solver(WORDS, config=SolverConfig(max_turns=1))
    stats = run_batch(solver, WORDS)
    first = solver.first_guess()
    assert [g.answer for g in stats.games] == [first]
    assert sorted(g.answer for g in stats.failures) == sorted(set(WORDS) - {first})
    assert stats.counts == [1]
