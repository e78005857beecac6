"""
Testing secret word selection.
"""

import random

import pytest

from jotto.exceptions import EmptyCandidateListError
from jotto.services.word_source import pick_secret

CANDIDATES = ['apple', 'beach', 'chair', 'dance', 'eagle']


def test_pick_secret_returns_a_candidate():
    assert pick_secret(CANDIDATES) in CANDIDATES


def test_pick_secret_is_repeatable_with_seed():
    first = [pick_secret(CANDIDATES, random.Random(42)) for _ in range(5)]
    second = [pick_secret(CANDIDATES, random.Random(42)) for _ in range(5)]
    assert first == second


def test_pick_secret_reaches_every_candidate():
    rng = random.Random(0)
    seen = {pick_secret(CANDIDATES, rng) for _ in range(500)}
    assert seen == set(CANDIDATES)


def test_pick_secret_lowercases():
    assert pick_secret(['MOUSE']) == 'mouse'


def test_pick_secret_empty_list_fails():
    with pytest.raises(EmptyCandidateListError):
        pick_secret([])
