"""
Hand landmark detection using MediaPipe.
"""
import cv2
import mediapipe as mp
import numpy as np
from typing import Any, List, Tuple

from .labels import LANDMARK_NAMES
from .types import DetectedHand, Handedness, Keypoint


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, max_num_hands: int = 2, model_complexity: int = 1,
                 min_detection_conf: float = 0.6, min_tracking_conf: float = 0.6):
        """
        Initialize the hands tracker.

        Args:
            max_num_hands: Maximum number of hands to detect
            model_complexity: 0 for the lite model, 1 for the full one
            min_detection_conf: Minimum confidence for hand detection
            min_tracking_conf: Minimum confidence for hand tracking
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            model_complexity=model_complexity,
            min_detection_confidence=min_detection_conf,
            min_tracking_confidence=min_tracking_conf
        )

    def process(self, frame_bgr: np.ndarray) -> List[DetectedHand]:
        """
        Process a frame and return every detected hand.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            Detected hands with pixel and world keypoints (empty if none)
        """
        # Convert BGR to RGB for MediaPipe
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)

        height, width = frame_bgr.shape[:2]
        return hands_from_results(results, (width, height))

    def close(self) -> None:
        self.hands.close()


def hands_from_results(results: Any, frame_wh: Tuple[int, int]) -> List[DetectedHand]:
    """
    Convert a MediaPipe Hands result into DetectedHand values.

    Args:
        results: Object with multi_hand_landmarks, multi_hand_world_landmarks
            and multi_handedness, as returned by Hands.process
        frame_wh: Frame dimensions (width, height)

    Returns:
        One DetectedHand per hand that has both landmark sets
    """
    if not results.multi_hand_landmarks:
        return []

    width, height = frame_wh
    world_landmarks = results.multi_hand_world_landmarks or []
    handedness = results.multi_handedness or []

    hands = []
    for i, hand_landmarks in enumerate(results.multi_hand_landmarks):
        if i >= len(world_landmarks) or i >= len(handedness):
            break

        classification = handedness[i].classification[0]
        keypoints = [
            Keypoint(name=name, x=lm.x * width, y=lm.y * height)
            for name, lm in zip(LANDMARK_NAMES, hand_landmarks.landmark)
        ]
        keypoints3d = [
            Keypoint(name=name, x=lm.x, y=lm.y, z=lm.z)
            for name, lm in zip(LANDMARK_NAMES, world_landmarks[i].landmark)
        ]
        hands.append(DetectedHand(
            handedness=Handedness.parse(classification.label),
            keypoints=keypoints,
            keypoints3d=keypoints3d,
            score=classification.score
        ))

    return hands
