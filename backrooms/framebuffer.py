"""The render target: a pixel for every texel and the depth drawn there."""

from __future__ import annotations


class FrameBuffer:
    """Pixels of the render texture together with a depth buffer."""

    FAR = 100.0

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"frame size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self.size = width * height
        self.pixels = [0] * self.size
        self.depth = [0.0] * self.size

    def clear_depth(self) -> None:
        """Push every depth back to the far distance."""
        self.depth[:] = [self.FAR] * self.size

    def check_depth(self, index: int, z: float) -> bool:
        """Whether something at distance ``z`` is nearer than what is drawn at ``index``."""
        return 0 <= index < self.size and z < self.depth[index]

    def set_depth(self, index: int, z: float) -> None:
        """Record distance ``z`` at ``index``; indices outside the frame are ignored."""
        if 0 <= index < self.size:
            self.depth[index] = z