"""Line chart geometry for a daily hours series, rendered as SVG."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .model import DailyBucket

SMOOTHING = 0.3
TICK_EVERY = 5
GRID_RATIOS = (0, 0.25, 0.5, 0.75, 1)


@dataclass(frozen=True)
class ChartPoint:
    x: float
    y: float
    value: float


@dataclass(frozen=True)
class ChartData:
    width: int
    height: int
    padding: int
    max_value: float
    positive_points: list[ChartPoint]
    negative_points: list[ChartPoint]
    tick_labels: list[tuple[float, str]]

    @property
    def positive_path(self) -> str:
        return smooth_path(self.positive_points)

    @property
    def negative_path(self) -> str:
        return smooth_path(self.negative_points)


def _fmt(value: float) -> str:
    return f"{round(value, 2):g}"


def smooth_path(points: Sequence[ChartPoint]) -> str:
    """Cubic bezier path through ``points`` with horizontal tangents."""
    if len(points) < 2:
        return ""

    parts = [f"M {_fmt(points[0].x)} {_fmt(points[0].y)}"]
    for i in range(1, len(points)):
        prev, curr = points[i - 1], points[i]
        nxt = points[i + 1] if i + 1 < len(points) else curr
        cp1x = prev.x + (curr.x - prev.x) * SMOOTHING
        cp2x = curr.x - (nxt.x - curr.x) * SMOOTHING
        parts.append(
            f"C {_fmt(cp1x)} {_fmt(prev.y)}, {_fmt(cp2x)} {_fmt(curr.y)}, {_fmt(curr.x)} {_fmt(curr.y)}"
        )
    return " ".join(parts)


def build_chart(
    buckets: Sequence[DailyBucket],
    *,
    width: int = 600,
    height: int = 220,
    padding: int = 50,
) -> ChartData:
    max_value = max((max(abs(b.positive), abs(b.negative)) for b in buckets), default=0.0) or 1.0
    plot_w = width - padding * 2
    plot_h = height - padding * 2
    last = len(buckets) - 1

    def x_at(index: int) -> float:
        return (index / last) * plot_w + padding if last > 0 else float(padding)

    def y_at(value: float) -> float:
        return height - padding - (value / max_value) * plot_h

    positive = [ChartPoint(x_at(i), y_at(b.positive), b.positive) for i, b in enumerate(buckets)]
    negative = [ChartPoint(x_at(i), y_at(b.negative), b.negative) for i, b in enumerate(buckets)]
    ticks = [(x_at(i), b.short_date) for i, b in enumerate(buckets) if i % TICK_EVERY == 0]

    return ChartData(
        width=width,
        height=height,
        padding=padding,
        max_value=max_value,
        positive_points=positive,
        negative_points=negative,
        tick_labels=ticks,
    )


def render_svg(chart: ChartData) -> str:
    w, h, p = chart.width, chart.height, chart.padding
    out = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">',
        '<rect width="100%" height="100%" fill="#eff6ff" rx="8"/>',
    ]
    for ratio in GRID_RATIOS:
        y = _fmt(p + ratio * (h - p * 2))
        out.append(
            f'<line x1="{p}" y1="{y}" x2="{w - p}" y2="{y}" stroke="currentColor" '
            f'stroke-width="0.5" opacity="0.2" stroke-dasharray="2,2"/>'
        )
    out.append(f'<path d="{chart.positive_path}" fill="none" stroke="rgb(34, 197, 94)" stroke-width="4"/>')
    out.append(f'<path d="{chart.negative_path}" fill="none" stroke="rgb(239, 68, 68)" stroke-width="4"/>')

    for i, point in enumerate(chart.positive_points):
        if i % TICK_EVERY:
            continue
        out.append(
            f'<circle cx="{_fmt(point.x)}" cy="{_fmt(point.y)}" r="5" fill="rgb(34, 197, 94)" '
            f'stroke="white" stroke-width="3"/>'
        )
        if point.value > 0:
            out.append(
                f'<text x="{_fmt(point.x)}" y="{_fmt(point.y - 15)}" text-anchor="middle" font-size="10" '
                f'fill="rgb(34, 197, 94)" font-weight="bold">+{point.value:.1f}h</text>'
            )

    for x, label in chart.tick_labels:
        out.append(f'<text x="{_fmt(x)}" y="{h - 10}" text-anchor="middle" font-size="11">{label}</text>')

    out.append("</svg>")
    return "\n".join(out)
