"""
Configuration management for the hand gesture overlay.
"""
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass

from .labels import Gesture


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int
    width: int
    height: int
    fps: int
    flip_horizontal: bool


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int
    model_complexity: int
    min_detection_confidence: float
    min_tracking_confidence: float


@dataclass
class EstimatorConfig:
    """Finger pose and gesture scoring settings."""
    min_score: float
    no_curl_limit_deg: float
    thumb_no_curl_limit_deg: float
    half_curl_limit_deg: float


@dataclass
class DragConfig:
    """Vertical drag gesture settings."""
    threshold: int
    step_px: int
    scale: int
    ratio_guard: float
    remember_gesture: Gesture


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    window_name: str
    show_landmarks: bool
    show_pose_data: bool
    show_gesture_labels: bool
    point_radius: int
    canvas_padding_px: int


@dataclass
class LoggingConfig:
    level: str


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig
    mediapipe: MediaPipeConfig
    estimator: EstimatorConfig
    drag: DragConfig
    display: DisplayConfig
    logging: LoggingConfig


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses config.default.yaml

    Returns:
        Configuration object with all settings
    """
    if path is None:
        # Use default config file in project root
        project_root = Path(__file__).parent.parent
        path = project_root / "config.default.yaml"

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    return _dict_to_config(data)


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    camera_data = data['camera']
    camera = CameraConfig(
        index=camera_data['index'],
        width=camera_data['width'],
        height=camera_data['height'],
        fps=camera_data['fps'],
        flip_horizontal=camera_data['flip_horizontal']
    )

    mp_data = data['mediapipe']
    mediapipe = MediaPipeConfig(
        max_num_hands=mp_data['max_num_hands'],
        model_complexity=mp_data['model_complexity'],
        min_detection_confidence=mp_data['min_detection_confidence'],
        min_tracking_confidence=mp_data['min_tracking_confidence']
    )

    est_data = data['estimator']
    estimator = EstimatorConfig(
        min_score=est_data['min_score'],
        no_curl_limit_deg=est_data['no_curl_limit_deg'],
        thumb_no_curl_limit_deg=est_data['thumb_no_curl_limit_deg'],
        half_curl_limit_deg=est_data['half_curl_limit_deg']
    )

    drag_data = data['drag']
    if drag_data['threshold'] <= 0:
        raise ValueError(f"drag.threshold must be positive, got {drag_data['threshold']}")
    drag = DragConfig(
        threshold=drag_data['threshold'],
        step_px=drag_data['step_px'],
        scale=drag_data['scale'],
        ratio_guard=drag_data['ratio_guard'],
        # Raises ValueError for an unknown gesture name
        remember_gesture=Gesture(drag_data['remember_gesture'])
    )

    display_data = data['display']
    display = DisplayConfig(
        window_name=display_data['window_name'],
        show_landmarks=display_data['show_landmarks'],
        show_pose_data=display_data['show_pose_data'],
        show_gesture_labels=display_data['show_gesture_labels'],
        point_radius=display_data['point_radius'],
        canvas_padding_px=display_data['canvas_padding_px']
    )

    logging_data = data.get('logging') or {}
    log_cfg = LoggingConfig(level=str(logging_data.get('level', 'INFO')).upper())

    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        estimator=estimator,
        drag=drag,
        display=display,
        logging=log_cfg
    )
