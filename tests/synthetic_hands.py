"""
Synthetic hand landmarks for tests.
"""
import math
from typing import List, Optional, Sequence, Tuple

from handmoji.labels import LANDMARK_NAMES
from handmoji.types import DetectedHand, Handedness, Keypoint

PHALANX = 0.02
FINGER_SPACING = 0.015


def make_keypoints(pointing: Tuple[float, float] = (0.0, -1.0),
                   curled: Sequence[bool] = (False,) * 5,
                   wrist: Tuple[float, float] = (0.0, 0.0)) -> List[Keypoint]:
    """
    Build 21 named landmarks of a flat hand.

    Args:
        pointing: Image-plane direction every finger points in (y grows downward)
        curled: Per finger (thumb first), whether it is folded back on itself
        wrist: Wrist position; the whole hand is placed relative to it

    Returns:
        Keypoints in MediaPipe order
    """
    length = math.hypot(*pointing)
    ux, uy = pointing[0] / length, pointing[1] / length
    px, py = -uy, ux
    wx, wy = wrist

    points = [(wx, wy)]
    for k in range(5):
        bx = wx + ux * 0.03 + px * (k - 2) * FINGER_SPACING
        by = wy + uy * 0.03 + py * (k - 2) * FINGER_SPACING
        if curled[k]:
            steps = (0.0, 1.0, 0.75, 0.5)
        else:
            steps = (0.0, 1.0, 2.0, 3.0)
        for s in steps:
            points.append((bx + ux * PHALANX * s, by + uy * PHALANX * s))

    return [Keypoint(name=name, x=x, y=y, z=0.0) for name, (x, y) in zip(LANDMARK_NAMES, points)]


def open_hand(pointing: Tuple[float, float] = (0.0, -1.0),
              wrist: Tuple[float, float] = (0.0, 0.0)) -> List[Keypoint]:
    return make_keypoints(pointing, (False,) * 5, wrist)


def fist(wrist: Tuple[float, float] = (0.0, 0.0)) -> List[Keypoint]:
    return make_keypoints((0.0, -1.0), (True,) * 5, wrist)


def detected(handedness: Handedness, keypoints3d: List[Keypoint],
             keypoints: Optional[List[Keypoint]] = None) -> DetectedHand:
    if keypoints is None:
        keypoints = [Keypoint(kp.name, kp.x * 640, kp.y * 480) for kp in keypoints3d]
    return DetectedHand(handedness=handedness, keypoints=keypoints, keypoints3d=keypoints3d)
