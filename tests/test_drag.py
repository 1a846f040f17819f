"""
Test cases for the open-palm vertical drag tracker.
"""
import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from handmoji.config import load_config
from handmoji.drag import DragTracker, GestureLocation, to_fixed_point
from handmoji.labels import Gesture
from handmoji.types import Keypoint, MoveCommand

SCALE = 1_000_000


def wrist(y: float, x: float = 0.0) -> Keypoint:
    return Keypoint(name="wrist", x=x, y=y / SCALE, z=0.0)


class TestFixedPoint(unittest.TestCase):
    """Test scaling of wrist coordinates."""

    def test_truncates_toward_zero(self):
        """Test that scaled values are truncated, not rounded."""
        self.assertEqual(to_fixed_point(0.0012345, SCALE), 1234)
        self.assertEqual(to_fixed_point(-0.0007891, SCALE), -789)

    def test_sample_is_stored_truncated(self):
        tracker = DragTracker(load_config().drag)
        tracker.evaluate(Keypoint("wrist", 0.0012345, -0.0007891, 0.0), Gesture.PAPER)
        self.assertEqual(tracker.last_location, GestureLocation(Gesture.PAPER, 1234, -789))


class TestDragTracker(unittest.TestCase):
    """Test drag detection between consecutive frames."""

    def setUp(self):
        """Set up test configuration."""
        self.cfg = load_config()
        self.tracker = DragTracker(self.cfg.drag)

    def test_first_call_never_moves(self):
        """Test that no move is emitted without a previous sample."""
        self.assertIsNone(self.tracker.evaluate(wrist(1000), Gesture.PAPER))

    def test_upward_drag_moves_up(self):
        """Test that a delta above the threshold emits move(-20)."""
        self.tracker.evaluate(wrist(1000), Gesture.PAPER)
        cmd = self.tracker.evaluate(wrist(-500), Gesture.PAPER)

        self.assertIsInstance(cmd, MoveCommand)
        self.assertEqual(cmd.dy, -20)

    def test_downward_drag_moves_down(self):
        """Test that a delta just below -threshold emits move(+20)."""
        self.tracker.evaluate(wrist(0), Gesture.PAPER)
        cmd = self.tracker.evaluate(wrist(1300), Gesture.PAPER)

        self.assertIsInstance(cmd, MoveCommand)
        self.assertEqual(cmd.dy, 20)

    def test_ratio_guard_blocks_large_downward_drag(self):
        """Test that delta / threshold must stay above -1.2."""
        self.tracker.evaluate(wrist(0), Gesture.PAPER)
        self.assertIsNone(self.tracker.evaluate(wrist(2000), Gesture.PAPER))

    def test_small_motion_ignored(self):
        """Test that deltas within the threshold emit nothing."""
        self.tracker.evaluate(wrist(1000), Gesture.PAPER)
        self.assertIsNone(self.tracker.evaluate(wrist(0), Gesture.PAPER))

    def test_exact_threshold_ignored(self):
        self.tracker.evaluate(wrist(1200), Gesture.PAPER)
        self.assertIsNone(self.tracker.evaluate(wrist(0), Gesture.PAPER))

    def test_gesture_change_blocks_move(self):
        """Test that a different gesture in the current frame emits nothing."""
        self.tracker.evaluate(wrist(1000), Gesture.PAPER)
        self.assertIsNone(self.tracker.evaluate(wrist(-500), Gesture.ROCK))

    def test_other_gesture_clears_sample(self):
        """Test that a non-paper frame leaves nothing to compare against."""
        self.tracker.evaluate(wrist(1000), Gesture.PAPER)
        self.tracker.evaluate(wrist(1000), Gesture.ROCK)
        self.assertIsNone(self.tracker.last_location)

        # Next paper frame starts fresh
        self.assertIsNone(self.tracker.evaluate(wrist(-500), Gesture.PAPER))

    def test_missing_gesture_clears_sample(self):
        self.tracker.evaluate(wrist(1000), Gesture.PAPER)
        self.assertIsNone(self.tracker.evaluate(wrist(-500), None))
        self.assertIsNone(self.tracker.last_location)

    def test_only_one_sample_remembered(self):
        """Test that each frame compares against the previous frame only."""
        self.tracker.evaluate(wrist(3000), Gesture.PAPER)
        self.assertIsNone(self.tracker.evaluate(wrist(2500), Gesture.PAPER))
        # 2500 -> 2000 is within the threshold even though 3000 -> 2000 is not
        self.assertIsNone(self.tracker.evaluate(wrist(2000), Gesture.PAPER))
        self.assertAlmostEqual(self.tracker.last_location.y, 2000, delta=1)

    def test_continuous_drag(self):
        """Test that a steady upward drag keeps emitting moves."""
        moves = []
        for y in (10000, 8500, 7000, 5500):
            cmd = self.tracker.evaluate(wrist(y), Gesture.PAPER)
            if cmd is not None:
                moves.append(cmd.dy)
        self.assertEqual(moves, [-20, -20, -20])


if __name__ == '__main__':
    unittest.main()
