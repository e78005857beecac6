"""
Word Source

Secret word selection.
"""

import random
from typing import Optional, Sequence

from ..exceptions import EmptyCandidateListError


def pick_secret(candidates: Sequence[str], rng: Optional[random.Random] = None) -> str:
    """
    Select one candidate uniformly at random.

    Args:
        candidates: Candidate words
        rng: Random source; pass a seeded random.Random for repeatable draws

    Returns:
        str: The chosen word in lowercase

    Raises:
        EmptyCandidateListError: If there is nothing to choose from
    """
    if not candidates:
        raise EmptyCandidateListError("Cannot pick a secret word from an empty word list")

    chooser = rng if rng is not None else random
    return chooser.choice(list(candidates)).lower()
