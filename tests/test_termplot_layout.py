from __future__ import annotations

import math
import unittest

from termplot.layout import compute_layout, layout_x_labels, layout_y_labels, synthesize_data_labels
from termplot.raster.draw_text import text_width
from termplot.series import Series
from termplot.value_range import ValueRange


def _series(**named: list[float]) -> dict[str, Series]:
    return {name: Series.from_values(name, values) for name, values in named.items()}


class ValueRangeTests(unittest.TestCase):
    def test_fresh_range_takes_first_observation(self) -> None:
        vr = ValueRange()
        self.assertTrue(vr.is_fresh)
        vr.observe(0.0, 10.0, padding=0.2)
        self.assertEqual(vr.as_tuple(), (-2.0, 12.0))
        self.assertFalse(vr.is_fresh)

    def test_range_does_not_shrink_for_inner_data(self) -> None:
        vr = ValueRange()
        vr.observe(0.0, 10.0, padding=0.2)
        changed = vr.observe(1.0, 9.0, padding=0.2)
        self.assertFalse(changed)
        self.assertEqual(vr.as_tuple(), (-2.0, 12.0))

    def test_range_widens_only_on_breached_side(self) -> None:
        vr = ValueRange()
        vr.observe(0.0, 10.0, padding=0.2)
        vr.observe(-5.0, 10.0, padding=0.2)
        self.assertEqual(vr.bottom, -8.0)
        self.assertEqual(vr.top, 12.0)

    def test_range_is_clamped_to_floor_and_ceil(self) -> None:
        vr = ValueRange()
        vr.observe(-100.0, 100.0, padding=0.2, floor=0.0, ceil=5.0)
        self.assertEqual(vr.as_tuple(), (0.0, 5.0))

    def test_data_below_floor_keeps_bottom_not_above_top(self) -> None:
        vr = ValueRange()
        vr.observe(1.0, 2.0, padding=0.2, floor=10.0)
        self.assertEqual(vr.as_tuple(), (10.0, 10.0))
        self.assertLessEqual(vr.bottom, vr.top)

    def test_clamp_to_pulls_stored_range_inside_new_limits(self) -> None:
        vr = ValueRange()
        vr.observe(0.0, 10.0, padding=0.0)
        self.assertTrue(vr.clamp_to(-math.inf, 5.0))
        self.assertEqual(vr.as_tuple(), (0.0, 5.0))
        self.assertFalse(vr.clamp_to(-math.inf, 5.0))

    def test_clamp_to_leaves_fresh_range_fresh(self) -> None:
        vr = ValueRange()
        self.assertFalse(vr.clamp_to(0.0, 1.0))
        self.assertTrue(vr.is_fresh)

    def test_layout_applies_tightened_ceiling(self) -> None:
        vr = ValueRange()
        compute_layout(_series(a=[0.0, 10.0]), 20, 8, mode="dot", value_range=vr, y_padding=0.0)
        layout = compute_layout(_series(a=[1.0, 3.0]), 20, 8, mode="dot", value_range=vr, y_padding=0.0, y_ceil=5.0)
        self.assertEqual((layout.bottom, layout.top), (0.0, 5.0))

    def test_reset_returns_to_fresh_state(self) -> None:
        vr = ValueRange()
        vr.observe(0.0, 1.0, padding=0.0)
        vr.reset()
        self.assertTrue(vr.is_fresh)
        self.assertEqual(vr.span, 0.0)


class LayoutTests(unittest.TestCase):
    def test_single_dot_series_scenario(self) -> None:
        vr = ValueRange()
        layout = compute_layout(_series(a=[1.0, 2.0, 3.0, 2.0]), 4, 5, mode="dot", value_range=vr, y_padding=0.2)
        self.assertAlmostEqual(layout.bottom, 0.6, places=12)
        self.assertAlmostEqual(layout.top, 3.4, places=12)
        self.assertEqual(layout.axis_y_height, 3)
        self.assertAlmostEqual(layout.scale, 2.8 / 3.0, places=12)
        self.assertEqual([label.text for label in layout.y_labels], ["0.60", "2.00"])
        self.assertEqual(layout.label_y_space, 4)
        self.assertEqual(layout.axis_x_width, -1)
        self.assertEqual(layout.x_labels, ())
        self.assertEqual(layout.data_labels, ("0", "1", "2", "3"))

    def test_second_pass_with_inner_data_keeps_range(self) -> None:
        vr = ValueRange()
        first = compute_layout(_series(a=[0.0, 10.0]), 20, 8, mode="dot", value_range=vr)
        second = compute_layout(_series(a=[2.0, 3.0, 8.0]), 20, 8, mode="dot", value_range=vr)
        self.assertEqual((first.bottom, first.top), (second.bottom, second.top))

    def test_visible_window_uses_most_recent_samples(self) -> None:
        # Width 2 in dot mode: only the last two samples count.
        vr = ValueRange()
        layout = compute_layout(_series(a=[100.0, 1.0, 3.0]), 2, 6, mode="dot", value_range=vr, y_padding=0.0)
        self.assertEqual((layout.bottom, layout.top), (1.0, 3.0))

    def test_braille_window_is_twice_the_width(self) -> None:
        vr = ValueRange()
        values = [100.0, 1.0, 2.0, 3.0, 4.0]
        layout = compute_layout(_series(a=values), 2, 6, mode="braille", value_range=vr, y_padding=0.0)
        self.assertEqual((layout.bottom, layout.top), (1.0, 4.0))

    def test_clamping_holds_for_any_magnitude(self) -> None:
        vr = ValueRange()
        layout = compute_layout(
            _series(a=[-1e9, 1e9]),
            30,
            10,
            mode="braille",
            value_range=vr,
            y_floor=-1.0,
            y_ceil=1.0,
        )
        self.assertEqual((layout.bottom, layout.top), (-1.0, 1.0))

    def test_all_series_contribute_in_name_order(self) -> None:
        vr = ValueRange()
        layout = compute_layout(_series(b=[0.0, 1.0], a=[5.0, 6.0]), 20, 8, mode="dot", value_range=vr, y_padding=0.0)
        self.assertEqual((layout.bottom, layout.top), (0.0, 6.0))

    def test_flat_series_gives_zero_scale(self) -> None:
        vr = ValueRange()
        layout = compute_layout(_series(a=[5.0, 5.0, 5.0]), 20, 8, mode="dot", value_range=vr)
        self.assertEqual((layout.bottom, layout.top), (5.0, 5.0))
        self.assertEqual(layout.scale, 0.0)

    def test_zero_area_produces_empty_labels(self) -> None:
        vr = ValueRange()
        layout = compute_layout(_series(a=[1.0, 2.0]), 0, 0, mode="braille", value_range=vr)
        self.assertEqual(layout.x_labels, ())
        self.assertEqual(layout.y_labels, ())
        self.assertEqual(layout.label_y_space, 0)
        self.assertEqual(layout.scale, 0.0)

    def test_empty_collection_leaves_range_fresh(self) -> None:
        vr = ValueRange()
        layout = compute_layout({}, 20, 8, mode="dot", value_range=vr)
        self.assertTrue(vr.is_fresh)
        self.assertEqual(layout.y_labels, ())
        self.assertEqual(layout.data_labels, ())

    def test_supplied_data_labels_are_used(self) -> None:
        vr = ValueRange()
        layout = compute_layout(
            _series(a=[1.0, 2.0, 3.0]),
            20,
            6,
            mode="dot",
            value_range=vr,
            data_labels=["mon", "tue", "wed"],
        )
        self.assertEqual(layout.data_labels, ("mon", "tue", "wed"))
        self.assertEqual(layout.x_labels[0].text, "mon")

    def test_labels_fit_reserved_space(self) -> None:
        vr = ValueRange()
        labels = [f"t{i}" for i in range(200)]
        layout = compute_layout(
            _series(a=[float(i % 7) for i in range(200)]),
            37,
            12,
            mode="braille",
            value_range=vr,
            data_labels=labels,
        )
        self.assertTrue(layout.x_labels)
        for label in layout.x_labels:
            self.assertLessEqual(label.offset + label.width, layout.axis_x_width)
        for label in layout.y_labels:
            self.assertLessEqual(label.width, layout.label_y_space)


class LabelWalkTests(unittest.TestCase):
    def test_dot_mode_labels_follow_cursor_column(self) -> None:
        labels = layout_x_labels([str(i) for i in range(20)], 7, gap=2, mode="dot")
        self.assertEqual([(label.text, label.offset) for label in labels], [("0", 0), ("3", 3), ("6", 6)])

    def test_braille_mode_labels_skip_every_other_sample(self) -> None:
        labels = layout_x_labels([str(i) for i in range(20)], 7, gap=2, mode="braille")
        self.assertEqual([(label.text, label.offset) for label in labels], [("0", 0), ("6", 3)])

    def test_empty_labels_with_zero_gap_still_advance(self) -> None:
        labels = layout_x_labels(["", "a", "b"], 10, gap=0, mode="dot")
        self.assertEqual([(label.text, label.offset) for label in labels], [("", 0), ("a", 1), ("b", 2)])
        labels = layout_x_labels([""] * 50, 10, gap=0, mode="braille")
        self.assertEqual([label.offset for label in labels], list(range(10)))

    def test_wide_characters_count_two_cells(self) -> None:
        self.assertEqual(text_width("日本"), 4)
        labels = layout_x_labels(["日本"] * 10, 5, gap=1, mode="dot")
        self.assertEqual(len(labels), 1)
        self.assertEqual(labels[0].width, 4)

    def test_y_labels_use_gap_spacing(self) -> None:
        labels = layout_y_labels(0.0, 10.0, 8, gap=1)
        self.assertEqual([label.text for label in labels], ["0.00", "2.50", "5.00", "7.50"])
        self.assertEqual([label.offset for label in labels], [0, 2, 4, 6])

    def test_synthesized_labels_come_from_first_non_empty_series(self) -> None:
        labels = synthesize_data_labels(_series(a=[], b=[1.0, 2.0], c=[1.0, 2.0, 3.0]))
        self.assertEqual(labels, ("0", "1"))

    def test_infinite_limits_default(self) -> None:
        vr = ValueRange()
        compute_layout(_series(a=[1.0, 2.0]), 20, 8, mode="dot", value_range=vr, y_floor=-math.inf, y_ceil=math.inf)
        self.assertTrue(math.isfinite(vr.bottom) and math.isfinite(vr.top))


if __name__ == "__main__":
    unittest.main()
