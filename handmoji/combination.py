"""
Two-handed "don't" detection.
"""
import logging
from typing import Dict, FrozenSet, Iterable, Optional, Set

from .labels import disallowed_directions, normalize_direction
from .types import Handedness

logger = logging.getLogger(__name__)


class CombinationDetector:
    """
    Fires once both hands have shown a disallowed finger direction.

    Hands are evaluated one at a time (once per detected hand per frame), so a
    match is remembered until the other hand matches too. There is no per-hand
    expiry: a hand that matched once stays in the pair until it completes.
    The pair is cleared the moment it fires.
    """

    def __init__(self, patterns: Optional[Dict[Handedness, FrozenSet[str]]] = None):
        if patterns is None:
            patterns = {hand: disallowed_directions(hand) for hand in Handedness}
        self.patterns = patterns
        self.pair: Set[Handedness] = set()

    def matches(self, hand: Handedness, finger_directions: Iterable[str]) -> bool:
        """True if any finger of the hand points in a disallowed direction."""
        disallowed = self.patterns[hand]
        return any(normalize_direction(d) in disallowed for d in finger_directions)

    def evaluate(self, hand: Handedness, finger_directions: Iterable[str]) -> bool:
        """
        Record a match for the hand and report whether the pair completed.

        Args:
            hand: Which hand the directions belong to
            finger_directions: Direction label of each finger in this frame

        Returns:
            True if the disallowed-combination signal fired on this call
        """
        if not self.matches(hand, finger_directions):
            return False

        self.pair.add(hand)
        if len(self.pair) != 2:
            return False

        self.pair.clear()
        logger.info("🙅 Disallowed hand combination detected")
        return True

    def reset(self) -> None:
        self.pair.clear()
