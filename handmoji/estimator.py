"""
Rule-based finger pose estimation and gesture scoring from 3D hand landmarks.
"""
import math
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .config import EstimatorConfig
from .labels import Gesture
from .types import (
    Estimation,
    Finger,
    FingerCurl,
    FingerDirection,
    FingerPose,
    GestureCandidate,
    Keypoint,
)

# Landmark indices of each finger, base to tip
FINGER_CHAINS: Dict[Finger, Tuple[int, int, int, int]] = {
    Finger.THUMB: (1, 2, 3, 4),
    Finger.INDEX: (5, 6, 7, 8),
    Finger.MIDDLE: (9, 10, 11, 12),
    Finger.RING: (13, 14, 15, 16),
    Finger.PINKY: (17, 18, 19, 20),
}

# Counter-clockwise from +x, 45 degree sectors centred on the axes
DIRECTION_SECTORS: Tuple[FingerDirection, ...] = (
    FingerDirection.HORIZONTAL_RIGHT,
    FingerDirection.DIAGONAL_UP_RIGHT,
    FingerDirection.VERTICAL_UP,
    FingerDirection.DIAGONAL_UP_LEFT,
    FingerDirection.HORIZONTAL_LEFT,
    FingerDirection.DIAGONAL_DOWN_LEFT,
    FingerDirection.VERTICAL_DOWN,
    FingerDirection.DIAGONAL_DOWN_RIGHT,
)


def joint_angle(start: np.ndarray, mid: np.ndarray, end: np.ndarray) -> float:
    """
    Angle at `mid` between `start` and `end` in degrees (law of cosines).

    A straight finger gives ~180, a fully folded one ~0.
    """
    start_mid = float(np.linalg.norm(start - mid))
    mid_end = float(np.linalg.norm(mid - end))
    start_end = float(np.linalg.norm(start - end))
    if start_mid == 0.0 or mid_end == 0.0:
        return 180.0

    cos_angle = (mid_end ** 2 + start_mid ** 2 - start_end ** 2) / (2 * mid_end * start_mid)
    return math.degrees(math.acos(float(np.clip(cos_angle, -1.0, 1.0))))


def pointing_direction(start: np.ndarray, end: np.ndarray) -> FingerDirection:
    """Bucket the image-plane vector start->end into one of eight directions."""
    dx = float(end[0] - start[0])
    dy = float(end[1] - start[1])
    # Image y grows downward
    angle = math.degrees(math.atan2(-dy, dx))
    sector = int(((angle + 22.5) % 360.0) // 45.0)
    return DIRECTION_SECTORS[sector]


class GestureDescription:
    """Weighted expectations on the curl and direction of each finger."""

    def __init__(self, name: Gesture):
        self.name = name
        self.curls: Dict[Finger, List[Tuple[FingerCurl, float]]] = {}
        self.directions: Dict[Finger, List[Tuple[FingerDirection, float]]] = {}

    def add_curl(self, finger: Finger, curl: FingerCurl, weight: float = 1.0) -> "GestureDescription":
        self.curls.setdefault(finger, []).append((curl, weight))
        return self

    def add_direction(self, finger: Finger, direction: FingerDirection,
                      weight: float = 1.0) -> "GestureDescription":
        self.directions.setdefault(finger, []).append((direction, weight))
        return self

    def score(self, pose: Dict[Finger, FingerPose]) -> float:
        """Achieved over possible weight, on a 0..10 scale."""
        possible = 0.0
        achieved = 0.0

        for finger, expected in self.curls.items():
            possible += max(weight for _, weight in expected)
            achieved += max((weight for curl, weight in expected if curl == pose[finger].curl), default=0.0)

        for finger, expected in self.directions.items():
            possible += max(weight for _, weight in expected)
            achieved += max(
                (weight for direction, weight in expected if direction == pose[finger].direction),
                default=0.0,
            )

        if possible == 0.0:
            return 0.0
        return achieved / possible * 10.0


def default_descriptions() -> List[GestureDescription]:
    """Known gestures, in the order candidates are reported."""
    fingers = (Finger.INDEX, Finger.MIDDLE, Finger.RING, Finger.PINKY)
    up = (
        (FingerDirection.VERTICAL_UP, 1.0),
        (FingerDirection.DIAGONAL_UP_LEFT, 0.9),
        (FingerDirection.DIAGONAL_UP_RIGHT, 0.9),
    )

    victory = GestureDescription(Gesture.VICTORY)
    for finger in (Finger.INDEX, Finger.MIDDLE):
        victory.add_curl(finger, FingerCurl.NO_CURL)
        for direction, weight in up:
            victory.add_direction(finger, direction, weight)
    for finger in (Finger.RING, Finger.PINKY):
        victory.add_curl(finger, FingerCurl.FULL_CURL)
    victory.add_curl(Finger.THUMB, FingerCurl.HALF_CURL, 0.5)
    victory.add_curl(Finger.THUMB, FingerCurl.FULL_CURL, 0.5)

    thumbs_up = GestureDescription(Gesture.THUMBS_UP)
    thumbs_up.add_curl(Finger.THUMB, FingerCurl.NO_CURL)
    for direction, weight in up:
        thumbs_up.add_direction(Finger.THUMB, direction, weight)
    for finger in fingers:
        thumbs_up.add_curl(finger, FingerCurl.FULL_CURL)
        thumbs_up.add_curl(finger, FingerCurl.HALF_CURL, 0.9)

    rock = GestureDescription(Gesture.ROCK)
    rock.add_curl(Finger.THUMB, FingerCurl.HALF_CURL)
    rock.add_curl(Finger.THUMB, FingerCurl.FULL_CURL)
    for finger in fingers:
        rock.add_curl(finger, FingerCurl.FULL_CURL)

    paper = GestureDescription(Gesture.PAPER)
    for finger in Finger:
        paper.add_curl(finger, FingerCurl.NO_CURL)

    scissors = GestureDescription(Gesture.SCISSORS)
    for finger in (Finger.INDEX, Finger.MIDDLE):
        scissors.add_curl(finger, FingerCurl.NO_CURL)
        scissors.add_direction(finger, FingerDirection.HORIZONTAL_LEFT)
        scissors.add_direction(finger, FingerDirection.HORIZONTAL_RIGHT)
        scissors.add_direction(finger, FingerDirection.DIAGONAL_DOWN_LEFT, 0.9)
        scissors.add_direction(finger, FingerDirection.DIAGONAL_DOWN_RIGHT, 0.9)
    for finger in (Finger.RING, Finger.PINKY):
        scissors.add_curl(finger, FingerCurl.FULL_CURL)
    scissors.add_curl(Finger.THUMB, FingerCurl.HALF_CURL, 0.5)
    scissors.add_curl(Finger.THUMB, FingerCurl.FULL_CURL, 0.5)

    hangloose = GestureDescription(Gesture.HANGLOOSE)
    hangloose.add_curl(Finger.THUMB, FingerCurl.NO_CURL)
    hangloose.add_curl(Finger.PINKY, FingerCurl.NO_CURL)
    for finger in (Finger.INDEX, Finger.MIDDLE, Finger.RING):
        hangloose.add_curl(finger, FingerCurl.FULL_CURL)

    dont = GestureDescription(Gesture.DONT)
    for finger in Finger:
        dont.add_curl(finger, FingerCurl.NO_CURL)
    for finger in fingers:
        dont.add_direction(finger, FingerDirection.HORIZONTAL_LEFT)
        dont.add_direction(finger, FingerDirection.HORIZONTAL_RIGHT)
        dont.add_direction(finger, FingerDirection.DIAGONAL_UP_LEFT, 0.9)
        dont.add_direction(finger, FingerDirection.DIAGONAL_UP_RIGHT, 0.9)

    return [victory, thumbs_up, rock, paper, scissors, hangloose, dont]


class GestureEstimator:
    """
    Classifies each finger's curl and direction and scores known gestures.

    Features:
    - Curl from the bend at the second joint of each finger
    - Direction from the base-to-tip vector in the image plane
    - Weighted gesture descriptions scored on a 0..10 scale
    """

    def __init__(self, descriptions: Optional[List[GestureDescription]] = None,
                 no_curl_limit_deg: float = 130.0, thumb_no_curl_limit_deg: float = 120.0,
                 half_curl_limit_deg: float = 60.0):
        self.descriptions = descriptions if descriptions is not None else default_descriptions()
        self.no_curl_limit_deg = no_curl_limit_deg
        self.thumb_no_curl_limit_deg = thumb_no_curl_limit_deg
        self.half_curl_limit_deg = half_curl_limit_deg

    @classmethod
    def from_config(cls, cfg: EstimatorConfig) -> "GestureEstimator":
        return cls(
            no_curl_limit_deg=cfg.no_curl_limit_deg,
            thumb_no_curl_limit_deg=cfg.thumb_no_curl_limit_deg,
            half_curl_limit_deg=cfg.half_curl_limit_deg,
        )

    def classify_curl(self, finger: Finger, angle_deg: float) -> FingerCurl:
        no_curl_limit = self.thumb_no_curl_limit_deg if finger == Finger.THUMB else self.no_curl_limit_deg
        if angle_deg > no_curl_limit:
            return FingerCurl.NO_CURL
        if angle_deg > self.half_curl_limit_deg:
            return FingerCurl.HALF_CURL
        return FingerCurl.FULL_CURL

    def pose_data(self, keypoints3d: Sequence[Keypoint]) -> List[FingerPose]:
        """
        Curl and direction of every finger, thumb first.

        Args:
            keypoints3d: The 21 hand landmarks in MediaPipe order

        Returns:
            One FingerPose per finger
        """
        if len(keypoints3d) < 21:
            raise ValueError(f"Expected 21 hand landmarks, got {len(keypoints3d)}")

        points = np.array([[kp.x, kp.y, kp.z] for kp in keypoints3d], dtype=np.float64)
        poses = []
        for finger, chain in FINGER_CHAINS.items():
            base, mid, _, tip = (points[i] for i in chain)
            curl = self.classify_curl(finger, joint_angle(base, mid, tip))
            poses.append(FingerPose(name=finger, curl=curl, direction=pointing_direction(base, tip)))
        return poses

    def estimate(self, keypoints3d: Sequence[Keypoint], min_score: float) -> Estimation:
        """
        Score every known gesture against the hand.

        Args:
            keypoints3d: The 21 hand landmarks in MediaPipe order
            min_score: Candidates scoring below this are dropped

        Returns:
            Estimation with the surviving candidates and the pose data
        """
        pose_data = self.pose_data(keypoints3d)
        by_finger = {pose.name: pose for pose in pose_data}

        gestures = []
        for description in self.descriptions:
            score = description.score(by_finger)
            if score >= min_score:
                gestures.append(GestureCandidate(name=description.name.value, score=score))

        return Estimation(gestures=gestures, pose_data=pose_data)
