try:
    from unidecode import unidecode
except ImportError:
    unidecode = None

from .algorithms import LETTERS


class WordListError(ValueError):
    pass


def _normalize(word, strip_diacritics):
    if strip_diacritics:
        if not unidecode:
            raise NotImplementedError("unidecode module required for strip_diacritics")
        # Need to do this before checking length, because unidecode can change it,
        # as in unidecode('buß') -> 'buss'.
        word = unidecode(word)
    return word


def load_words(df, length, strip_diacritics=False):
    '''
    Reads a word list with one word per line, uppercasing every word.

    Unlike eligible_words, every non-blank line must hold a word of exactly
    `length` letters: anything else raises WordListError rather than being
    silently skipped. Duplicates are dropped, keeping the first occurrence.
    '''
    name = getattr(df, 'name', '<word list>')
    words = {}
    for lineno, line in enumerate(df, 1):
        word = _normalize(line.strip(), strip_diacritics).upper()
        if not word:
            continue
        elif len(word) != length or any(c not in LETTERS for c in word):
            raise WordListError(f"{name}, line {lineno}: {word!r} is not a {length}-letter word")
        words.setdefault(word, lineno)

    if not words:
        raise WordListError(f"{name}: no words found")
    return list(words)


def eligible_words(df, length, strip_diacritics=False):
    for line in df:
        word = _normalize(line.strip(), strip_diacritics)

        if len(word) == length:
            # No non-letter characters, or mixed case (latter are likely proper nouns)
            if all(c.upper() in LETTERS for c in word) and word in (word.upper(), word.lower()):
                yield word.upper()
