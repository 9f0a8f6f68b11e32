"""Camera state and mouse handling for a virtual-trackball viewer."""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

import numpy as np

from .vectors import VectorLike, cross, dot, norm

#: Draw modes every trackball starts with, and the one that is active.
DEFAULT_DRAW_MODES = ("Wireframe", "Solid Flat", "Solid Smooth")
DEFAULT_DRAW_MODE = "Solid Smooth"

#: Vertical field of view in degrees.
FIELD_OF_VIEW = 45.0


def _translation_matrix(t: VectorLike) -> np.ndarray:
    m = np.identity(4)
    m[:3, 3] = np.asarray(t, dtype=float)[:3]
    return m


def _rotation_matrix(axis: VectorLike, angle: float) -> np.ndarray:
    """Rotation by angle degrees around axis (right-handed)."""
    a = np.asarray(axis, dtype=float)
    length = norm(a)
    if length == 0.0:
        raise ValueError("rotation axis must not be the zero vector")
    x, y, z = a / length
    rad = math.radians(angle)
    c, s = math.cos(rad), math.sin(rad)
    t = 1.0 - c
    m = np.identity(4)
    m[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return m


def _perspective_matrix(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    top = near * math.tan(fovy * math.pi / 360.0)
    bottom = -top
    left = bottom * aspect
    right = top * aspect
    m = np.zeros((4, 4))
    m[0, 0] = 2.0 * near / (right - left)
    m[1, 1] = 2.0 * near / (top - bottom)
    m[0, 2] = (right + left) / (right - left)
    m[1, 2] = (top + bottom) / (top - bottom)
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -2.0 * far * near / (far - near)
    m[3, 2] = -1.0
    return m


class Trackball:
    """Viewer camera driven by a virtual trackball.

    Holds the list of draw modes, the scene center and radius, and the
    modelview and projection matrices, and turns mouse and keyboard input
    into camera motion.
    """

    def __init__(self, width: int = 800, height: int = 600) -> None:
        self.width = 1
        self.height = 1
        self.resize(width, height)

        self._draw_modes: List[str] = []
        self._draw_mode = 0
        for name in DEFAULT_DRAW_MODES:
            self.add_draw_mode(name)
        self.set_draw_mode(DEFAULT_DRAW_MODE)

        self.center = np.zeros(3)
        self.radius = 1.0
        self.fovy = FIELD_OF_VIEW
        self.near = 0.01 * self.radius
        self.far = 10.0 * self.radius

        self.modelview_matrix = np.identity(4)
        self.projection_matrix = np.identity(4)

        self.last_point_2d: Tuple[int, int] = (0, 0)
        self.last_point_3d = np.zeros(3)
        self.last_point_ok = False

        self.update_projection()

    # draw modes

    @property
    def draw_modes(self) -> List[str]:
        """Names of the available draw modes, in order."""
        return list(self._draw_modes)

    @property
    def draw_mode(self) -> str:
        """Name of the active draw mode, or "" if none is active."""
        if self._draw_mode < len(self._draw_modes):
            return self._draw_modes[self._draw_mode]
        return ""

    def clear_draw_modes(self) -> None:
        """Remove all draw modes."""
        self._draw_modes.clear()

    def add_draw_mode(self, name: str) -> int:
        """Append a draw mode and return its index."""
        self._draw_modes.append(name)
        return len(self._draw_modes) - 1

    def set_draw_mode(self, name: str) -> None:
        """Activate the named draw mode; unknown names are ignored."""
        if name in self._draw_modes:
            self._draw_mode = self._draw_modes.index(name)

    def next_draw_mode(self) -> str:
        """Cycle to the next draw mode and return its name."""
        self._draw_mode += 1
        if self._draw_mode >= len(self._draw_modes):
            self._draw_mode = 0
        return self.draw_mode

    # scene and projection

    def _eye(self, point: VectorLike) -> np.ndarray:
        p = np.ones(4)
        p[:3] = np.asarray(point, dtype=float)
        return self.modelview_matrix @ p

    def set_scene(self, center: VectorLike, radius: float) -> None:
        """Set the scene's bounding sphere and move the camera to see it all."""
        self.center = np.asarray(center, dtype=float).copy()
        self.radius = float(radius)
        self.view_all()

    def view_all(self) -> None:
        """Move the camera so that the whole scene is visible."""
        t = self._eye(self.center)
        self.translate((-t[0], -t[1], -t[2] - 2.5 * self.radius))

    def update_projection(self) -> np.ndarray:
        """Fit the clipping planes to the scene sphere and return the projection."""
        z = -self._eye(self.center)[2]
        self.fovy = FIELD_OF_VIEW
        self.near = max(0.001 * self.radius, z - self.radius)
        self.far = max(0.002 * self.radius, z + self.radius)
        self.projection_matrix = _perspective_matrix(
            self.fovy, self.width / self.height, self.near, self.far
        )
        return self.projection_matrix

    def resize(self, width: int, height: int) -> None:
        """Set the viewport size in pixels; both must be positive."""
        if width <= 0 or height <= 0:
            raise ValueError(f"viewport size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)

    # trackball

    def map_to_sphere(self, x: float, y: float) -> Optional[np.ndarray]:
        """Map a window position to the unit sphere; None if outside the window."""
        if not (0 <= x <= self.width and 0 <= y <= self.height):
            return None
        w, h = float(self.width), float(self.height)
        sx = math.sin(math.pi * ((x - 0.5 * w) / w) * 0.5)
        sy = math.sin(math.pi * ((0.5 * h - y) / h) * 0.5)
        s2 = sx * sx + sy * sy
        return np.array([sx, sy, math.sqrt(1.0 - s2) if s2 < 1.0 else 0.0])

    def translate(self, t: VectorLike) -> None:
        """Translate the scene in eye coordinates."""
        self.modelview_matrix = _translation_matrix(t) @ self.modelview_matrix

    def rotate(self, axis: VectorLike, angle: float) -> None:
        """Rotate the scene by angle degrees around axis through its center."""
        ec = self._eye(self.center)
        c = ec[:3] / ec[3]
        self.modelview_matrix = (
            _translation_matrix(c)
            @ _rotation_matrix(axis, angle)
            @ _translation_matrix(-c)
            @ self.modelview_matrix
        )

    def rotation(self, x: float, y: float) -> None:
        """Rotate by dragging from the last trackball point to (x, y)."""
        if not self.last_point_ok:
            return
        new_point = self.map_to_sphere(x, y)
        if new_point is None:
            return
        axis = cross(self.last_point_3d, new_point)
        cos_angle = dot(self.last_point_3d, new_point)
        if abs(cos_angle) < 1.0 and norm(axis) > 0.0:
            angle = 2.0 * math.degrees(math.acos(cos_angle))
            self.rotate(axis, angle)

    def translation(self, x: float, y: float) -> None:
        """Translate in the view plane by the mouse movement to (x, y)."""
        dx = x - self.last_point_2d[0]
        dy = y - self.last_point_2d[1]
        ec = self._eye(self.center)
        z = -(ec[2] / ec[3])
        aspect = self.width / self.height
        up = math.tan(math.radians(self.fovy / 2.0)) * self.near
        right = aspect * up
        self.translate(
            (
                2.0 * dx / self.width * right / self.near * z,
                -2.0 * dy / self.height * up / self.near * z,
                0.0,
            )
        )

    def zoom(self, x: float, y: float) -> None:
        """Move along the view direction by the vertical mouse movement to y."""
        dy = y - self.last_point_2d[1]
        self.translate((0.0, 0.0, self.radius * dy * 3.0 / self.height))

    def scroll(self, yoffset: float) -> None:
        """Move along the view direction for a scroll-wheel step."""
        self.translate((0.0, 0.0, -float(yoffset) * 0.12 * self.radius))

    def motion(
        self,
        x: float,
        y: float,
        left: bool = False,
        middle: bool = False,
        right: bool = False,
        shift: bool = False,
        alt: bool = False,
    ) -> None:
        """Handle mouse motion with the given buttons and modifiers held."""
        if right or (left and shift):
            self.zoom(x, y)
        elif middle or (left and alt):
            self.translation(x, y)
        elif left:
            self.rotation(x, y)

        self.last_point_2d = (int(x), int(y))
        point = self.map_to_sphere(*self.last_point_2d)
        self.last_point_ok = point is not None
        if point is not None:
            self.last_point_3d = point

    def unproject(self, x: float, y: float, depth: float) -> Optional[np.ndarray]:
        """Return the scene point at window position (x, y) and depth-buffer value.

        Returns None for depth 1.0, where nothing was drawn.
        """
        if depth == 1.0:
            return None
        gl_y = self.height - y
        xf = x / self.width * 2.0 - 1.0
        yf = gl_y / self.height * 2.0 - 1.0
        zf = depth * 2.0 - 1.0
        inverse = np.linalg.inv(self.projection_matrix @ self.modelview_matrix)
        p = inverse @ np.array([xf, yf, zf, 1.0])
        return p[:3] / p[3]

    def fly_to(self, point: VectorLike) -> None:
        """Make point the rotation center and move halfway toward it."""
        self.center = np.asarray(point, dtype=float).copy()
        t = self._eye(self.center)
        self.translate((-t[0], -t[1], -0.5 * t[2]))