"""
Mock presenter implementation for testing gesture feedback.
"""
import logging
from typing import Dict, List

from .types import FingerPose, Handedness

logger = logging.getLogger(__name__)


class MockPresenter:
    """Mock presenter that logs actions instead of drawing them."""

    def __init__(self):
        """Initialize the mock presenter."""
        self.video_top = 0
        self.results: Dict[Handedness, str] = {hand: "" for hand in Handedness}
        self.move_count = 0
        self.result_count = 0

    async def clear_results(self) -> None:
        for hand in Handedness:
            self.results[hand] = ""

    async def show_result(self, hand: Handedness, text: str) -> None:
        """Log the result instead of showing it."""
        self.result_count += 1
        self.results[hand] = text
        logger.info(f"[MockPresenter] Result {hand.value}: {text} (call #{self.result_count})")

    async def show_pose_data(self, hand: Handedness, pose_data: List[FingerPose]) -> None:
        summary = ", ".join(f"{p.name.value}={p.curl.value}/{p.direction.value}" for p in pose_data)
        logger.debug(f"[MockPresenter] Pose {hand.value}: {summary}")

    async def move(self, dy: int) -> None:
        """Track the offset and log the move instead of executing it."""
        self.move_count += 1
        self.video_top += dy
        logger.info(f"[MockPresenter] Move: dy={dy} top={self.video_top} (call #{self.move_count})")

    def reset_counters(self) -> None:
        """Reset action counters for testing."""
        self.move_count = 0
        self.result_count = 0
