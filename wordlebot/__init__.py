from .algorithms import LETTERS, ClueColors, clues_of_guess, pattern_string, parse_pattern
from .cache import ResultCache
from .index import PartitionIndex
from .solver import Game, Solver, SolverConfig, TurnLimitExceeded
from .wordlist import WordListError, load_words
