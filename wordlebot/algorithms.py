from collections import Counter
from enum import Enum
from colorama import Back, Style


LETTERS = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'


ClueColors = Enum('ClueColors', {
    'Absent': Back.RED,
    'WrongPosition': Back.YELLOW,
    'RightPosition': Back.GREEN,
})

# Grey/yellow/green as the digits 0/1/2
_clue_digits = {
    ClueColors.Absent: '0',
    ClueColors.WrongPosition: '1',
    ClueColors.RightPosition: '2',
}
_digit_clues = {d: c for c, d in _clue_digits.items()}


def clues_of_guess(guess, target, easy=False):
    if len(guess) != len(target):
        raise ValueError(f"Cannot compare {guess!r} with {target!r}: lengths differ")

    clues = []
    leftovers = Counter()

    # Two-pass so that we don't overcount WrongPosition: letters matched
    # exactly never count towards the leftovers.
    for gl, tl in zip(guess, target):
        if gl == tl:
            clues.append(ClueColors.RightPosition)
        else:
            clues.append(ClueColors.Absent)
            leftovers[tl] += 1
    for ii, (gl, tl) in enumerate(zip(guess, target)):
        if gl == tl:
            pass  # Don't change
        elif easy:
            # Every occurrence of a letter in the target is marked, however many times it's guessed
            if gl in target:
                clues[ii] = ClueColors.WrongPosition
        elif leftovers[gl] > 0:
            leftovers[gl] -= 1
            clues[ii] = ClueColors.WrongPosition

    return tuple(clues)


def is_solved(clues):
    return all(c == ClueColors.RightPosition for c in clues)


def pattern_string(clues):
    return ''.join(_clue_digits[c] for c in clues)


def parse_pattern(s):
    try:
        return tuple(_digit_clues[d] for d in s.strip())
    except KeyError as e:
        raise ValueError(f"Pattern {s!r} must consist only of the digits 0, 1 and 2") from e


def colored_guess(guess, clues):
    return ''.join(s.value + l for s, l in zip(clues, guess)) + Style.RESET_ALL
