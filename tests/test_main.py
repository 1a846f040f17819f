"""
Test cases for the application entry point.
"""
import importlib.util
import unittest
import sys
from pathlib import Path
from unittest import mock

sys.path.insert(0, str(Path(__file__).parent.parent))

HAS_MEDIAPIPE = importlib.util.find_spec("mediapipe") is not None


@unittest.skipUnless(HAS_MEDIAPIPE, "mediapipe not installed")
class TestRun(unittest.TestCase):
    """Test the console script wrapper."""

    def setUp(self):
        from handmoji import main as main_module
        self.main_module = main_module

    def test_keyboard_interrupt_exits_cleanly(self):
        """Test that Ctrl+C during shutdown is logged instead of raised."""
        async def interrupted():
            raise KeyboardInterrupt

        with mock.patch.object(self.main_module, "main", interrupted):
            with self.assertLogs(self.main_module.logger, level="INFO") as logs:
                self.main_module.run()

        self.assertIn("Application interrupted by user", logs.output[0])

    def test_parse_config_path(self):
        self.assertIsNone(self.main_module.parse_config_path(["--mock"]))
        self.assertEqual(self.main_module.parse_config_path(["--config", "a.yaml"]), "a.yaml")
        with self.assertRaises(ValueError):
            self.main_module.parse_config_path(["--config"])


if __name__ == '__main__':
    unittest.main()
