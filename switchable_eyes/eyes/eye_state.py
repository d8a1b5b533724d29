from dataclasses import dataclass
from enum import Enum, auto

from switchable_eyes.config import EyeConfig, WindowConfig


class Mode(Enum):
    NORMAL = auto()
    CREEPY = auto()


@dataclass(frozen=True)
class EyeGeometry:
    """Fixed layout of both eyes inside the window."""

    width: int
    height: int
    left_center: tuple
    right_center: tuple
    eye_radius: float
    pupil_radius: float
    creepy_pupil_radius: float
    shadow_offset: float

    @classmethod
    def from_config(cls, window: WindowConfig, eyes: EyeConfig) -> "EyeGeometry":
        cy = window.height / 2
        return cls(
            width=window.width,
            height=window.height,
            left_center=(window.width / 2 - eyes.eye_spacing / 2, cy),
            right_center=(window.width / 2 + eyes.eye_spacing / 2, cy),
            eye_radius=eyes.eye_radius,
            pupil_radius=eyes.pupil_radius,
            creepy_pupil_radius=eyes.creepy_pupil_radius,
            shadow_offset=eyes.shadow_offset,
        )

    @property
    def center(self) -> tuple:
        return (self.width / 2, self.height / 2)

    @property
    def eye_centers(self) -> tuple:
        return (self.left_center, self.right_center)


@dataclass
class AppState:
    """Complete interactive state, mutated by EyeAnimator.update once per frame."""

    mode: Mode = Mode.NORMAL
    frozen: bool = False

    # Drag anchor, in screen coordinates
    dragging: bool = False
    drag_start_cursor: tuple = (0, 0)
    drag_start_window: tuple = (0, 0)

    # Cursor as of the latest frame (window-local)
    cursor: tuple = (0, 0)

    # Idle tracking (normal mode only)
    last_cursor: tuple = (0, 0)
    idle_frames: int = 0

    # Smoothed gaze and the point it drifts toward while idle
    gaze: tuple = (0.0, 0.0)
    wander_target: tuple = (0.0, 0.0)

    @property
    def creepy(self) -> bool:
        return self.mode is Mode.CREEPY


@dataclass(frozen=True)
class FrameInput:
    """Everything the host reports about one frame."""

    cursor: tuple = (0, 0)
    window_position: tuple = (0, 0)
    now_ms: int = 0
    left_pressed: bool = False
    left_held: bool = False
    right_pressed: bool = False
    freeze_pressed: bool = False
    exit_pressed: bool = False

    @property
    def screen_cursor(self) -> tuple:
        return (self.window_position[0] + self.cursor[0],
                self.window_position[1] + self.cursor[1])


@dataclass
class FrameRequests:
    """What the host should do after an update."""

    window_position: tuple | None = None
    terminate: bool = False
