#!/usr/bin/python3

'''
Wordle best-first-guess ranking
===============================

Start with a dictionary containing N eligible words of length L.
Assume all N words are equally likely as a target.

Q: What is the optimal first guess? That is, what first guess will
   ON AVERAGE leave the fewest possible remaining words to guess?
A: Partition the N words by the pattern each guess would show, which
   is O(N^2) pattern computations; the average number left after a
   guess is then the sum of squared partition sizes, divided by N.

usage: best_first_guess.py [wordlist.txt] [target_word_len] > results.csv
 e.g.: best_first_guess.py answers.txt 5 > results.csv
'''

from wordlebot import Solver, SolverConfig, load_words
from tqdm import tqdm
import sys

if len(sys.argv) == 3:
    dictfn = sys.argv[1]
    targetlen = int(sys.argv[2])
else:
    raise SystemExit(f"usage: {sys.argv[0]} [wordlist] [wordlen]")

with open(dictfn) as df:
    words = load_words(df, targetlen)
solver = Solver(words, config=SolverConfig(length=targetlen), progress=True)

scores = {guess: solver.score_guess(guess, solver.answers)
          for guess in tqdm(solver.words, desc="Scoring", unit="guess")}
print('guess,avg_words_left_after_first_guess')
for guess, score in sorted(scores.items(), key=lambda kv: (kv[1], kv[0])):
    print(f'"{guess}",{score / len(words)}')
