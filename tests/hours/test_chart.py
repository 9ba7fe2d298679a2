from __future__ import annotations

from datetime import date, timedelta

from src.hours_bank.hours_bank.hours.chart import ChartPoint, build_chart, render_svg, smooth_path
from src.hours_bank.hours_bank.hours.model import DailyBucket


def buckets(values):
    start = date(2025, 3, 1)
    return [
        DailyBucket(day=start + timedelta(days=i), label=str(i + 1), positive=p, negative=n)
        for i, (p, n) in enumerate(values)
    ]


def test_points_are_scaled_to_the_largest_magnitude():
    chart = build_chart(buckets([(0, 1), (2, 0)]))

    assert chart.max_value == 2
    assert [(p.x, p.y) for p in chart.positive_points] == [(50, 170), (550, 50)]
    assert [(p.x, p.y) for p in chart.negative_points] == [(50, 110), (550, 170)]


def test_smooth_path_uses_horizontal_control_points():
    chart = build_chart(buckets([(0, 1), (2, 0)]))

    assert chart.positive_path == "M 50 170 C 200 170, 550 50, 550 50"


def test_smooth_path_needs_two_points():
    assert smooth_path([]) == ""
    assert smooth_path([ChartPoint(1, 2, 0)]) == ""


def test_all_zero_series_does_not_divide_by_zero():
    chart = build_chart(buckets([(0, 0)] * 7))

    assert chart.max_value == 1
    assert all(p.y == 170 for p in chart.positive_points)


def test_single_bucket_sits_on_the_left_edge():
    chart = build_chart(buckets([(1, 0)]))

    assert chart.positive_points[0].x == 50
    assert chart.positive_path == ""


def test_ticks_every_fifth_bucket():
    chart = build_chart(buckets([(0, 0)] * 30))

    assert [label for _, label in chart.tick_labels] == ["01/03", "06/03", "11/03", "16/03", "21/03", "26/03"]


def test_render_svg_document():
    chart = build_chart(buckets([(1.25, 0)] + [(0, 0.5)] * 6))

    svg = render_svg(chart)

    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" width="600" height="220"')
    assert svg.endswith("</svg>")
    assert svg.count("<line ") == 5
    assert svg.count("<path ") == 2
    assert "+1.2h" in svg or "+1.3h" in svg
    assert chart.positive_path in svg
