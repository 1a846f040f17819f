"""
Hand Gesture Overlay

Reads webcam frames, detects hand landmarks using MediaPipe, classifies simple
gestures, and turns them into on-screen feedback: a two-handed "don't" signal
and an open-palm vertical drag that moves the video.
"""

__version__ = "0.1.0"

from .types import (
    Handedness,
    Finger,
    FingerCurl,
    FingerDirection,
    FingerPose,
    Keypoint,
    GestureCandidate,
    DetectedHand,
    MoveCommand,
    FrameResult,
    PresenterProto,
)
from .labels import Gesture, LandmarkGroup, disallowed_directions
from .config import load_config, Cfg
from .combination import CombinationDetector
from .drag import DragTracker, GestureLocation
from .estimator import GestureEstimator, GestureDescription
from .gestures import GestureProcessor, best_candidate
from .presenter_mock import MockPresenter

__all__ = [
    "Handedness",
    "Finger",
    "FingerCurl",
    "FingerDirection",
    "FingerPose",
    "Keypoint",
    "GestureCandidate",
    "DetectedHand",
    "MoveCommand",
    "FrameResult",
    "PresenterProto",
    "Gesture",
    "LandmarkGroup",
    "disallowed_directions",
    "load_config",
    "Cfg",
    "CombinationDetector",
    "DragTracker",
    "GestureLocation",
    "GestureEstimator",
    "GestureDescription",
    "GestureProcessor",
    "best_candidate",
    "MockPresenter",
]
