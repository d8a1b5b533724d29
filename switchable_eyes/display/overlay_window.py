"""Borderless, always-on-top, color-keyed Tk window that hosts the eyes."""

import logging
import tkinter as tk

from PIL import Image, ImageTk

from switchable_eyes.config import WindowConfig
from switchable_eyes.eyes.eye_state import FrameInput

log = logging.getLogger("switchable-eyes")


class OverlayWindow:
    """Collects input between frames and shows rendered frames."""

    def __init__(self, config: WindowConfig):
        self._cfg = config
        self._root = tk.Tk()
        self._root.title(config.title)
        self._root.overrideredirect(True)

        key = "#%02x%02x%02x" % tuple(config.chromakey)
        self._root.configure(bg=key)
        self._set_attribute("-topmost", True)
        self.transparent = self._set_attribute("-transparentcolor", key)
        if not self.transparent:
            log.warning("Window transparency unsupported here; background stays opaque")

        sw = self._root.winfo_screenwidth()
        sh = self._root.winfo_screenheight()
        x = (sw - config.width) // 2
        y = (sh - config.height) // 2
        self._root.geometry(f"{config.width}x{config.height}+{x}+{y}")

        self._canvas = tk.Canvas(self._root, width=config.width, height=config.height,
                                 bg=key, highlightthickness=0, bd=0)
        self._canvas.pack()
        self._image_id = self._canvas.create_image(0, 0, anchor=tk.NW)
        self._photo = None

        # Edge-triggered flags, cleared by poll()
        self._left_pressed = False
        self._right_pressed = False
        self._freeze_pressed = False
        self._exit_pressed = False
        self._left_held = False

        self._root.bind("<ButtonPress-1>", self._on_left_press)
        self._root.bind("<ButtonRelease-1>", self._on_left_release)
        self._root.bind("<ButtonPress-3>", self._on_right_press)
        self._root.bind("<KeyPress-f>", self._on_freeze_key)
        self._root.bind("<KeyPress-F>", self._on_freeze_key)
        self._root.bind("<Escape>", self._on_exit_key)
        self._root.focus_force()

    def _set_attribute(self, name: str, value) -> bool:
        try:
            self._root.wm_attributes(name, value)
            return True
        except tk.TclError as e:
            log.warning(f"Window attribute {name} rejected: {e}")
            return False

    def _on_left_press(self, _event):
        self._left_pressed = True
        self._left_held = True

    def _on_left_release(self, _event):
        self._left_held = False

    def _on_right_press(self, _event):
        self._right_pressed = True

    def _on_freeze_key(self, _event):
        self._freeze_pressed = True

    def _on_exit_key(self, _event):
        self._exit_pressed = True

    def poll(self, now_ms: int) -> FrameInput:
        """Snapshot input for one frame and reset the pressed-this-frame flags."""
        px, py = self._root.winfo_pointerxy()
        wx, wy = self._root.winfo_rootx(), self._root.winfo_rooty()
        frame = FrameInput(
            cursor=(px - wx, py - wy),
            window_position=(wx, wy),
            now_ms=now_ms,
            left_pressed=self._left_pressed,
            left_held=self._left_held,
            right_pressed=self._right_pressed,
            freeze_pressed=self._freeze_pressed,
            exit_pressed=self._exit_pressed,
        )
        self._left_pressed = False
        self._right_pressed = False
        self._freeze_pressed = False
        self._exit_pressed = False
        return frame

    def move(self, x: int, y: int):
        self._root.geometry(f"+{int(x)}+{int(y)}")

    def show(self, image: Image.Image):
        # Keep a reference or Tk drops the image
        self._photo = ImageTk.PhotoImage(image)
        self._canvas.itemconfig(self._image_id, image=self._photo)

    def schedule(self, delay_ms: int, callback):
        self._root.after(delay_ms, callback)

    def run(self):
        self._root.mainloop()

    def close(self):
        self._root.destroy()
