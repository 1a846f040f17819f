"""
OpenCV overlay presenter: shows gesture feedback and moves the video.
"""
import logging
from typing import Dict, List, Sequence

import cv2
import numpy as np

from .labels import LANDMARK_COLORS, Gesture, LandmarkGroup
from .types import FingerPose, Handedness, Keypoint

logger = logging.getLogger(__name__)

CAPTIONS_BY_GLYPH: Dict[str, str] = {gesture.glyph: gesture.caption for gesture in Gesture}


def draw_keypoints(frame: np.ndarray, keypoints: List[Keypoint], radius: int = 3) -> np.ndarray:
    """
    Draw pixel keypoints coloured by finger.

    Args:
        frame: Frame to draw on (modified in place)
        keypoints: Pixel-space keypoints
        radius: Point radius in pixels

    Returns:
        Frame with keypoints drawn
    """
    for kp in keypoints:
        color = LANDMARK_COLORS[LandmarkGroup.from_keypoint_name(kp.name)]
        cv2.circle(frame, (int(kp.x), int(kp.y)), radius, color, -1)
    return frame


class OverlayPresenter:
    """
    Draws the camera frame on a taller canvas, shifted by the drag offset,
    with coloured landmarks, per-hand results and the finger pose tables.
    """

    def __init__(self, padding_px: int = 120, point_radius: int = 3,
                 show_landmarks: bool = True, draw_pose_tables: bool = True):
        self.padding_px = padding_px
        self.point_radius = point_radius
        self.show_landmarks = show_landmarks
        self.draw_pose_tables = draw_pose_tables
        self.video_top = 0
        self.results: Dict[Handedness, str] = {hand: "" for hand in Handedness}
        self.pose_tables: Dict[Handedness, List[FingerPose]] = {hand: [] for hand in Handedness}

    async def clear_results(self) -> None:
        for hand in Handedness:
            self.results[hand] = ""

    async def show_result(self, hand: Handedness, text: str) -> None:
        self.results[hand] = text

    async def show_pose_data(self, hand: Handedness, pose_data: List[FingerPose]) -> None:
        self.pose_tables[hand] = list(pose_data)

    async def move(self, dy: int) -> None:
        self.video_top += dy
        logger.debug(f"New video top: {self.video_top}")

    def frame_offset(self) -> int:
        """Row of the canvas where the frame starts; the frame never leaves the canvas."""
        return int(max(0, min(2 * self.padding_px, self.padding_px + self.video_top)))

    def render(self, frame: np.ndarray, keypoints: Sequence[List[Keypoint]]) -> np.ndarray:
        """
        Compose the output image.

        Args:
            frame: Camera frame in BGR
            keypoints: Pixel keypoints of each detected hand

        Returns:
            Canvas with the frame placed at the current offset
        """
        frame = frame.copy()
        if self.show_landmarks:
            for hand_keypoints in keypoints:
                draw_keypoints(frame, hand_keypoints, self.point_radius)

        height, width = frame.shape[:2]
        canvas = np.zeros((height + 2 * self.padding_px, width, 3), dtype=np.uint8)
        top = self.frame_offset()
        canvas[top:top + height, :width] = frame

        self._draw_result(canvas, Handedness.LEFT, (10, 40))
        self._draw_result(canvas, Handedness.RIGHT, (width - 200, 40))

        if self.draw_pose_tables:
            self._draw_pose_table(canvas, Handedness.LEFT, 10)
            self._draw_pose_table(canvas, Handedness.RIGHT, width // 2 + 10)

        return canvas

    def _draw_result(self, canvas: np.ndarray, hand: Handedness, origin) -> None:
        text = self.results[hand]
        if not text:
            return
        caption = CAPTIONS_BY_GLYPH.get(text, text)
        cv2.putText(canvas, caption, origin, cv2.FONT_HERSHEY_SIMPLEX, 1.0, (0, 255, 255), 2)

    def _draw_pose_table(self, canvas: np.ndarray, hand: Handedness, x: int) -> None:
        rows = self.pose_tables[hand]
        base_y = canvas.shape[0] - 15 * len(rows) - 5
        for i, pose in enumerate(rows):
            line = f"{pose.name.value}: {pose.curl.value} / {pose.direction.value}"
            cv2.putText(canvas, line, (x, base_y + 15 * i), cv2.FONT_HERSHEY_SIMPLEX, 0.4,
                        (255, 255, 255), 1)
