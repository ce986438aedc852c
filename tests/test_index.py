from wordlebot.algorithms import clues_of_guess, parse_pattern
from wordlebot.cache import ResultCache
from wordlebot.index import PartitionIndex

WORDS = ['CRANE', 'SLATE', 'TRACE', 'CRATE', 'GRATE', 'PLATE', 'STALE', 'STEAL', 'LEAST', 'TEARS']


def test_cache_memoizes():
    cache = ResultCache()
    first = cache.get('SLATE', 'TRACE')
    assert (cache.hits, cache.misses) == (0, 1)
    assert cache.get('SLATE', 'TRACE') is first
    assert (cache.hits, cache.misses) == (1, 1)
    assert ('SLATE', 'TRACE') in cache
    assert ('TRACE', 'SLATE') not in cache
    assert len(cache) == 1


def test_cache_interns_patterns():
    cache = ResultCache()
    # Neither shares any letter with the guess
    assert cache.get('BUMPY', 'CRANE') is cache.get('BUMPY', 'SLATE')


def test_cache_easy_mode():
    assert ResultCache(easy=True).get('EMBED', 'CRANE') == clues_of_guess('EMBED', 'CRANE', easy=True)
    assert ResultCache().get('EMBED', 'CRANE') == clues_of_guess('EMBED', 'CRANE')


def test_index_partitions_answers():
    cache = ResultCache()
    index = PartitionIndex.build(['BUMPY'], WORDS, cache)
    assert index.answers == frozenset(WORDS)
    assert index.guesses == frozenset(WORDS) | {'BUMPY'}
    for guess in index.guesses:
        buckets = index.partitions(guess)
        assert sum(len(b) for b in buckets.values()) == len(WORDS)
        assert frozenset().union(*buckets.values()) == index.answers
        for pattern, bucket in buckets.items():
            assert all(clues_of_guess(guess, w) == pattern for w in bucket)


def test_index_lookup():
    index = PartitionIndex.build((), WORDS, ResultCache())
    assert index.lookup('SLATE', parse_pattern('22222')) == {'SLATE'}
    assert index.lookup('SLATE', parse_pattern('00212')) == {'TRACE'}
    assert index.lookup('SLATE', parse_pattern('11111')) == frozenset()
    assert index.lookup('BUMPY', parse_pattern('00000')) == frozenset()
    assert 'SLATE' in index
    assert 'BUMPY' not in index


def test_index_fills_cache():
    cache = ResultCache()
    index = PartitionIndex.build(['BUMPY'], WORDS, cache)
    assert len(cache) == len(index.guesses) * len(WORDS)
    assert cache.misses == len(cache)
