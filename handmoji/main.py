"""
Main application for the hand gesture overlay.
"""
import asyncio
import logging
import sys
from typing import List, Optional, Union

import cv2

from .config import Cfg, load_config
from .gestures import GestureProcessor, apply_result
from .landmarks import HandsTracker
from .presenter import OverlayPresenter
from .presenter_mock import MockPresenter

logger = logging.getLogger(__name__)


class GestureOverlayApp:
    """Main application class for the hand gesture overlay."""

    def __init__(self, config: Cfg, use_mock: bool = False):
        """Initialize the application with configuration."""
        self.config = config
        self.tracker = HandsTracker(
            max_num_hands=self.config.mediapipe.max_num_hands,
            model_complexity=self.config.mediapipe.model_complexity,
            min_detection_conf=self.config.mediapipe.min_detection_confidence,
            min_tracking_conf=self.config.mediapipe.min_tracking_confidence
        )

        self.presenter: Union[OverlayPresenter, MockPresenter]
        if use_mock:
            self.presenter = MockPresenter()
        else:
            self.presenter = OverlayPresenter(
                padding_px=self.config.display.canvas_padding_px,
                point_radius=self.config.display.point_radius,
                show_landmarks=self.config.display.show_landmarks,
                draw_pose_tables=self.config.display.show_pose_data
            )

        self.gesture_processor = GestureProcessor(self.config)

        # Initialize camera
        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")
        logger.info("Camera is ready")

    async def run(self):
        """Run the main estimation loop, one pass per frame."""
        logger.info(f"Starting {self.config.display.window_name}")
        logger.info("🖐 Open palm + vertical motion = move video")
        logger.info("🙅 Both hands pointing across = don't")
        logger.info("Press 'q' to quit")

        frame_interval = 1.0 / self.config.camera.fps

        try:
            while True:
                ret, frame = self.cap.read()
                if not ret:
                    logger.error("Failed to read frame from camera")
                    break

                if self.config.camera.flip_horizontal:
                    frame = cv2.flip(frame, 1)

                hands = self.tracker.process(frame)
                result = self.gesture_processor.process_frame(hands)
                await apply_result(result, self.presenter)

                if isinstance(self.presenter, OverlayPresenter):
                    output = self.presenter.render(frame, [hand.keypoints for hand in hands])
                else:
                    output = frame
                cv2.imshow(self.config.display.window_name, output)

                # Check for quit key
                if cv2.waitKey(1) & 0xFF == ord('q'):
                    break

                await asyncio.sleep(frame_interval)
        finally:
            self.close()

    def close(self):
        """Release camera, model and window."""
        if self.cap.isOpened():
            self.cap.release()
        self.tracker.close()
        cv2.destroyAllWindows()


def parse_config_path(argv: List[str]) -> Optional[str]:
    """Value following --config, if given."""
    if "--config" not in argv:
        return None
    index = argv.index("--config")
    if index + 1 >= len(argv):
        raise ValueError("--config needs a path")
    return argv[index + 1]


async def main():
    """Entry point for the application."""
    argv = sys.argv[1:]
    use_mock = "--mock" in argv

    config = load_config(parse_config_path(argv))
    logging.basicConfig(level=getattr(logging, config.logging.level, logging.INFO))

    try:
        app = GestureOverlayApp(config, use_mock=use_mock)
        await app.run()
    except Exception as e:
        logger.exception(f"Error: {e}")


def run():
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        # asyncio.run re-raises Ctrl+C here, outside main()
        logger.info("Application interrupted by user")


if __name__ == "__main__":
    run()
