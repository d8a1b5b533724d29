import logging
from dataclasses import dataclass

from switchable_eyes.config import GestureConfig
from switchable_eyes.eyes.eye_state import AppState, FrameInput

log = logging.getLogger("switchable-eyes")


@dataclass
class GestureState:
    last_click_ms: int | None = None
    click_count: int = 0
    # Deferred drag start; polled against the frame clock
    drag_pending: bool = False
    drag_deadline_ms: int = 0


class GestureRecognizer:
    """Tells single clicks (drag after a grace delay) from double clicks (mode toggle)."""

    def __init__(self, config: GestureConfig):
        self._cfg = config
        self.state = GestureState()

    def press(self, now_ms: int) -> bool:
        """Register a left-button press. Returns True if it completed a double click.

        A double click never schedules a drag. Any other press (re)schedules the
        single pending drag start for now_ms + drag_delay_ms.
        """
        s = self.state
        if s.last_click_ms is not None and 0 <= now_ms - s.last_click_ms < self._cfg.double_click_ms:
            s.click_count += 1
        else:
            # First click, slow click, or the clock went backwards
            s.click_count = 1
        s.last_click_ms = now_ms

        if s.click_count >= 2:
            s.click_count = 0
            return True

        s.drag_pending = True
        s.drag_deadline_ms = now_ms + self._cfg.drag_delay_ms
        return False

    def poll_drag(self, app: AppState, frame: FrameInput):
        """Start the deferred drag once its deadline passes, if it is still eligible."""
        s = self.state
        if not s.drag_pending or frame.now_ms < s.drag_deadline_ms:
            return
        s.drag_pending = False
        if s.click_count == 1 and not app.dragging:
            app.dragging = True
            app.drag_start_cursor = frame.screen_cursor
            app.drag_start_window = frame.window_position
            log.debug(f"Drag started at {frame.screen_cursor}")

    def track_drag(self, app: AppState, frame: FrameInput) -> tuple | None:
        """End the drag on release; while dragging return the new window position."""
        if not frame.left_held:
            if app.dragging:
                log.debug("Drag ended")
            app.dragging = False
            return None

        if not app.dragging:
            return None

        sx, sy = frame.screen_cursor
        dx = sx - app.drag_start_cursor[0]
        dy = sy - app.drag_start_cursor[1]
        return (app.drag_start_window[0] + dx, app.drag_start_window[1] + dy)
