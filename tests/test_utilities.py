# tests/test_utilities.py
from collections import Counter
from itertools import permutations

import numpy as np

from utilities import make_rng, shuffle


def test_shuffle_is_permutation_and_copy():
    items = list(range(1, 10))
    out = shuffle(items, make_rng(3))
    assert sorted(out) == items
    assert items == list(range(1, 10))


def test_shuffle_short_inputs():
    assert shuffle([], make_rng(0)) == []
    assert shuffle([7], make_rng(0)) == [7]


def test_make_rng_reuses_generator():
    rng = np.random.default_rng(5)
    assert make_rng(rng) is rng
    assert shuffle(range(9), make_rng(11)) == shuffle(range(9), make_rng(11))


def test_shuffle_uniform_over_permutations():
    # chi-square over all 4! orderings, df=23, p=0.001 critical ~49.7
    rng = make_rng(2024)
    trials = 24000
    counts = Counter(tuple(shuffle([1, 2, 3, 4], rng)) for _ in range(trials))
    assert set(counts) == set(permutations([1, 2, 3, 4]))
    expected = trials / 24
    chi2 = sum((n - expected) ** 2 / expected for n in counts.values())
    assert chi2 < 49.7


def test_shuffle_digits_uniform_per_position():
    # each digit lands in each position ~1/9 of the time; df=8, p=0.001 critical ~26.1
    rng = make_rng(99)
    trials = 9000
    table = np.zeros((9, 9), dtype=int)
    for _ in range(trials):
        for pos, d in enumerate(shuffle(range(1, 10), rng)):
            table[pos, d - 1] += 1
    expected = trials / 9
    chi2 = ((table - expected) ** 2 / expected).sum(axis=1)
    assert (chi2 < 26.1).all()
