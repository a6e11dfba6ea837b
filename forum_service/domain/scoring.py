"""
Vote scoring - net score and upvote percentage of a post
"""
import math
from typing import Iterable, Tuple

from .models import UPVOTE, Vote


def calculate_score(votes: Iterable[Vote]) -> Tuple[int, int]:
    """
    Compute the net score and upvote percentage for a set of votes

    The percentage is the ratio of upvote count to downvote count, so a post
    with more upvotes than downvotes reports more than 100.

    Returns:
        Tuple of (score, upvote_percentage)
    """
    upvotes = 0
    downvotes = 0
    score = 0

    for vote in votes:
        if vote.value == UPVOTE:
            upvotes += 1
        else:
            downvotes += 1
        score += vote.value

    if score == 0:
        return score, 0
    if downvotes:
        # Halves round away from zero
        return score, int(math.floor(upvotes / downvotes * 100 + 0.5))
    return score, 100
