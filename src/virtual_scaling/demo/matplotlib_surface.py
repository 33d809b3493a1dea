"""MatplotlibSurface: a DrawingSurface backed by a matplotlib Axes."""

from __future__ import annotations

import pathlib

from ..layout.geometry import RectF
from .box import Color


class MatplotlibSurface:
    """Draws in screen coordinates (origin top-left, y pointing down)."""

    def __init__(
        self,
        width: int,
        height: int,
        background: Color = (100, 149, 237, 255),
        font_size: float = 7.0,
    ) -> None:
        import matplotlib.pyplot as plt

        self._width = width
        self._height = height
        self._font_size = font_size
        self._fig, self._ax = plt.subplots(figsize=(width / 100, height / 100), dpi=100)
        self._ax.set_xlim(0, width)
        self._ax.set_ylim(height, 0)
        self._ax.set_aspect("equal")
        self._ax.set_facecolor(_to_mpl_color(background))
        self._ax.set_xticks([])
        self._ax.set_yticks([])

    @property
    def figure(self):
        return self._fig

    @property
    def axes(self):
        return self._ax

    def fill_rect(self, rect: RectF, color: Color) -> None:
        from matplotlib.patches import Rectangle

        x, y, width, height = rect.to_tuple()
        self._ax.add_patch(
            Rectangle(
                (x, y),
                width,
                height,
                facecolor=_to_mpl_color(color),
                edgecolor="none",
            )
        )

    def draw_text(self, text: str, x: float, y: float) -> None:
        self._ax.text(x, y, text, fontsize=self._font_size, va="top", ha="left")

    def save(self, path: str | pathlib.Path) -> None:
        self._fig.savefig(path)

    def close(self) -> None:
        import matplotlib.pyplot as plt

        plt.close(self._fig)


def _to_mpl_color(color: Color) -> tuple[float, float, float, float]:
    """0-255 RGBA -> matplotlib's 0-1 floats."""
    return tuple(c / 255 for c in color)
