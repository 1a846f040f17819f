"""
Lookup tables: gesture glyphs, landmark colours and the disallowed
finger-direction patterns used by the "don't" combination.
"""
from enum import Enum
from typing import Dict, FrozenSet, Tuple

from .types import Handedness


class Gesture(str, Enum):
    """Gestures the estimator knows about."""
    THUMBS_UP = "thumbs_up"
    VICTORY = "victory"
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"
    HANGLOOSE = "hangloose"
    DONT = "dont"

    @property
    def glyph(self) -> str:
        return GESTURE_GLYPHS[self]

    @property
    def caption(self) -> str:
        return GESTURE_CAPTIONS[self]


GESTURE_GLYPHS: Dict[Gesture, str] = {
    Gesture.THUMBS_UP: "👍",
    Gesture.VICTORY: "✌🏻",
    Gesture.ROCK: "✊️",
    Gesture.PAPER: "🖐",
    Gesture.SCISSORS: "✌️",
    Gesture.HANGLOOSE: " 🤙",
    Gesture.DONT: "🙅",
}

# Hershey fonts only cover ASCII, so the overlay prints these instead
GESTURE_CAPTIONS: Dict[Gesture, str] = {
    Gesture.THUMBS_UP: "THUMBS UP",
    Gesture.VICTORY: "VICTORY",
    Gesture.ROCK: "ROCK",
    Gesture.PAPER: "PAPER",
    Gesture.SCISSORS: "SCISSORS",
    Gesture.HANGLOOSE: "HANG LOOSE",
    Gesture.DONT: "DONT",
}


class LandmarkGroup(str, Enum):
    """Landmark family, taken from the keypoint name before the first '_'."""
    THUMB = "thumb"
    INDEX = "index"
    MIDDLE = "middle"
    RING = "ring"
    PINKY = "pinky"
    WRIST = "wrist"

    @classmethod
    def from_keypoint_name(cls, name: str) -> "LandmarkGroup":
        return cls(name.split("_")[0].lower())


# BGR
LANDMARK_COLORS: Dict[LandmarkGroup, Tuple[int, int, int]] = {
    LandmarkGroup.THUMB: (0, 0, 255),        # red
    LandmarkGroup.INDEX: (255, 0, 0),        # blue
    LandmarkGroup.MIDDLE: (0, 255, 255),     # yellow
    LandmarkGroup.RING: (0, 128, 0),         # green
    LandmarkGroup.PINKY: (203, 192, 255),    # pink
    LandmarkGroup.WRIST: (255, 255, 255),    # white
}


# MediaPipe hand landmark order
LANDMARK_NAMES: Tuple[str, ...] = (
    "wrist",
    "thumb_cmc", "thumb_mcp", "thumb_ip", "thumb_tip",
    "index_finger_mcp", "index_finger_pip", "index_finger_dip", "index_finger_tip",
    "middle_finger_mcp", "middle_finger_pip", "middle_finger_dip", "middle_finger_tip",
    "ring_finger_mcp", "ring_finger_pip", "ring_finger_dip", "ring_finger_tip",
    "pinky_finger_mcp", "pinky_finger_pip", "pinky_finger_dip", "pinky_finger_tip",
)


class Orientation(str, Enum):
    HORIZONTAL = "Horizontal"
    DIAGONAL_UP = "Diagonal Up"


class Side(str, Enum):
    LEFT = "Left"
    RIGHT = "Right"


def pattern_key(orientation: Orientation, side: Side) -> str:
    """Canonical whitespace-free key, e.g. (DIAGONAL_UP, RIGHT) -> 'DiagonalUpRight'."""
    return normalize_direction(orientation.value + side.value)


def normalize_direction(direction: str) -> str:
    """Drop every whitespace character from a direction label."""
    return "".join(direction.split())


# Each hand is "disallowed" when a finger points across the body
DISALLOWED_SIDE: Dict[Handedness, Side] = {
    Handedness.LEFT: Side.RIGHT,
    Handedness.RIGHT: Side.LEFT,
}


def disallowed_directions(hand: Handedness) -> FrozenSet[str]:
    """Direction keys that put the given hand into the "don't" pattern."""
    side = DISALLOWED_SIDE[hand]
    return frozenset(pattern_key(orientation, side) for orientation in Orientation)
