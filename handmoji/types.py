"""
Type definitions for the hand gesture overlay.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Protocol, Tuple, runtime_checkable

if TYPE_CHECKING:
    from .labels import Gesture


class Handedness(str, Enum):
    """Hand label reported by the pose source."""
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, label: str) -> "Handedness":
        """Parse a handedness label case-insensitively ("Left" -> LEFT)."""
        return cls(label.strip().lower())


class Finger(str, Enum):
    THUMB = "Thumb"
    INDEX = "Index"
    MIDDLE = "Middle"
    RING = "Ring"
    PINKY = "Pinky"


class FingerCurl(str, Enum):
    """Per-finger bend classification."""
    NO_CURL = "No Curl"
    HALF_CURL = "Half Curl"
    FULL_CURL = "Full Curl"


class FingerDirection(str, Enum):
    """Per-finger pointing orientation in the image plane."""
    VERTICAL_UP = "Vertical Up"
    VERTICAL_DOWN = "Vertical Down"
    HORIZONTAL_LEFT = "Horizontal Left"
    HORIZONTAL_RIGHT = "Horizontal Right"
    DIAGONAL_UP_RIGHT = "Diagonal Up Right"
    DIAGONAL_UP_LEFT = "Diagonal Up Left"
    DIAGONAL_DOWN_RIGHT = "Diagonal Down Right"
    DIAGONAL_DOWN_LEFT = "Diagonal Down Left"


@dataclass(frozen=True)
class FingerPose:
    """Curl and direction of one finger in one frame."""
    name: Finger
    curl: FingerCurl
    direction: FingerDirection


@dataclass(frozen=True)
class Keypoint:
    """Named landmark. 2D keypoints are in pixels, 3D ones in metres."""
    name: str
    x: float
    y: float
    z: float = 0.0


@dataclass(frozen=True)
class GestureCandidate:
    """Scored gesture produced by the estimator (score on a 0..10 scale)."""
    name: str
    score: float


@dataclass
class Estimation:
    """Estimator output for one hand: scored candidates plus pose data."""
    gestures: List[GestureCandidate]
    pose_data: List[FingerPose]


@dataclass
class DetectedHand:
    """One hand reported by the tracker for one frame."""
    handedness: Handedness
    keypoints: List[Keypoint]
    keypoints3d: List[Keypoint]
    score: float = 1.0


@dataclass
class MoveCommand:
    """Command to shift the video vertically by a pixel delta."""
    dy: int


@dataclass
class HandReport:
    """What the processor worked out for one hand in one frame."""
    hand: DetectedHand
    pose_data: List[FingerPose]
    gesture: Optional["Gesture"] = None
    score: float = 0.0


@dataclass
class FrameResult:
    """Outcome of processing one frame."""
    hands: List[HandReport] = field(default_factory=list)
    moves: List[MoveCommand] = field(default_factory=list)
    dont_fired: bool = False
    results: Dict[Handedness, str] = field(default_factory=dict)
    debug: List[Tuple[Handedness, List[FingerPose]]] = field(default_factory=list)


@runtime_checkable
class PresenterProto(Protocol):
    """Abstract protocol for the layer that shows gesture feedback."""

    async def clear_results(self) -> None:
        """Blank the result text of both hands."""
        ...

    async def show_result(self, hand: Handedness, text: str) -> None:
        """Show a result glyph for the given hand."""
        ...

    async def show_pose_data(self, hand: Handedness, pose_data: List[FingerPose]) -> None:
        """Publish the per-finger curl/direction table for the given hand."""
        ...

    async def move(self, dy: int) -> None:
        """Shift the video vertically by dy pixels."""
        ...
