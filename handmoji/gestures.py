"""
Per-frame orchestration: estimate each hand's gesture and feed the detectors.
"""
import logging
from typing import List, Optional, Sequence

from .combination import CombinationDetector
from .config import Cfg
from .drag import DragTracker
from .estimator import GestureEstimator
from .labels import Gesture
from .types import (
    DetectedHand,
    FrameResult,
    GestureCandidate,
    Handedness,
    HandReport,
    Keypoint,
    PresenterProto,
)

logger = logging.getLogger(__name__)

WRIST = "wrist"


def best_candidate(candidates: Sequence[GestureCandidate]) -> Optional[GestureCandidate]:
    """Highest scoring candidate; on a tie the later one wins."""
    best = None
    for candidate in candidates:
        if best is None or not best.score > candidate.score:
            best = candidate
    return best


def find_keypoint(keypoints: Sequence[Keypoint], name: str) -> Optional[Keypoint]:
    """First keypoint with the given name, or None."""
    return next((kp for kp in keypoints if kp.name == name), None)


class GestureProcessor:
    """
    Main gesture processor that coordinates the "don't" and drag detection.

    One processor is created per tracking session; it owns the detector state.
    """

    def __init__(self, cfg: Cfg, estimator: Optional[GestureEstimator] = None):
        """Initialize gesture processor with configuration."""
        self.cfg = cfg
        self.estimator = estimator or GestureEstimator.from_config(cfg.estimator)
        self.combination = CombinationDetector()
        self.drag = DragTracker(cfg.drag)

    def process_frame(self, hands: List[DetectedHand]) -> FrameResult:
        """
        Process the hands of one frame.

        Args:
            hands: Hands reported by the tracker for this frame (may be empty)

        Returns:
            FrameResult with per-hand reports, move commands and result text
        """
        result = FrameResult(results={hand: "" for hand in Handedness})

        for hand in hands:
            estimation = self.estimator.estimate(hand.keypoints3d, self.cfg.estimator.min_score)
            best = best_candidate(estimation.gestures)

            if best is None:
                # Unrecognised hands only feed the left debug table
                result.debug.append((Handedness.LEFT, estimation.pose_data))
                result.hands.append(HandReport(hand=hand, pose_data=estimation.pose_data))
                continue

            chosen_hand = hand.handedness
            gesture = Gesture(best.name)
            result.debug.append((chosen_hand, estimation.pose_data))
            result.hands.append(HandReport(
                hand=hand, pose_data=estimation.pose_data, gesture=gesture, score=best.score
            ))

            if self.cfg.display.show_gesture_labels:
                result.results[chosen_hand] = gesture.glyph

            wrist = find_keypoint(hand.keypoints3d, WRIST)
            if wrist is not None:
                move = self.drag.evaluate(wrist, gesture)
                if move is not None:
                    result.moves.append(move)
            else:
                logger.debug(f"No wrist keypoint for {chosen_hand.value} hand, skipping drag")

            directions = [pose.direction.value for pose in estimation.pose_data]
            if self.combination.evaluate(chosen_hand, directions):
                result.dont_fired = True
                for side in Handedness:
                    result.results[side] = Gesture.DONT.glyph

        return result

    def reset(self) -> None:
        self.combination.reset()
        self.drag.reset()


async def apply_result(result: FrameResult, presenter: PresenterProto) -> None:
    """Push one frame's outcome to the presenter, in the order it happened."""
    await presenter.clear_results()

    for hand, pose_data in result.debug:
        await presenter.show_pose_data(hand, pose_data)

    for move in result.moves:
        await presenter.move(move.dy)

    for hand, text in result.results.items():
        if text:
            await presenter.show_result(hand, text)
