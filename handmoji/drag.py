"""
Vertical drag tracking: moves the video while the flat hand is dragged.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .config import DragConfig
from .labels import Gesture
from .types import Keypoint, MoveCommand

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GestureLocation:
    """Wrist position of one frame in fixed-point units."""
    gesture: Optional[Gesture]
    x: int
    y: int


def to_fixed_point(value: float, scale: int) -> int:
    """Scale and truncate toward zero (1.2345e-3 * 1e6 -> 1234)."""
    return int(value * scale)


class DragTracker:
    """
    Converts wrist motion between consecutive "paper" frames into move commands.

    Only one sample is remembered, and only when its gesture is the remember
    gesture; every call clears it first. A move needs the previous and the
    current frame to carry the same gesture.
    """

    def __init__(self, cfg: DragConfig):
        self.cfg = cfg
        self.last_location: Optional[GestureLocation] = None

    def evaluate(self, wrist: Keypoint, gesture: Optional[Gesture]) -> Optional[MoveCommand]:
        """
        Compare this frame's wrist position with the remembered one.

        Args:
            wrist: 3D wrist keypoint of the hand
            gesture: Best gesture of the hand in this frame

        Returns:
            MoveCommand if the wrist travelled far enough, None otherwise
        """
        last_location = self.last_location
        self.last_location = None

        location = GestureLocation(
            gesture=gesture,
            x=to_fixed_point(wrist.x, self.cfg.scale),
            y=to_fixed_point(wrist.y, self.cfg.scale),
        )

        command = None
        if last_location is not None and location.gesture == last_location.gesture:
            command = self._compare(last_location, location)

        if location.gesture == self.cfg.remember_gesture:
            self.last_location = location

        return command

    def _compare(self, last: GestureLocation, new: GestureLocation) -> Optional[MoveCommand]:
        delta_y = last.y - new.y
        threshold = self.cfg.threshold

        # Kept as observed: reduces to delta_y / threshold > ratio_guard
        if not (-delta_y) / (-threshold) > self.cfg.ratio_guard:
            return None

        logger.debug(f"last: {last.y} new: {new.y} delta: {delta_y}")

        if delta_y > threshold:
            dy = -self.cfg.step_px
        elif delta_y < -threshold:
            dy = self.cfg.step_px
        else:
            return None

        logger.info(f"↕️ Drag move: dy={dy}")
        return MoveCommand(dy=dy)

    def reset(self) -> None:
        self.last_location = None
