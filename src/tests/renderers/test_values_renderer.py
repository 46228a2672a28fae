import unittest
from PySide6.QtGui import QColor

from valueaxis.renderers.values import build_ticks, display_as_minutes, format_time, label_position, tick_color, RenderedTick
from valueaxis.rulers.range import AxisConfig
from valueaxis.ticks.source import DetailLevel


class TestTimeFormat(unittest.TestCase):
    def test_minutes(self):
        self.assertEqual("1:30", format_time(90, True))
        self.assertEqual("-1:30", format_time(-90, True))
        self.assertEqual("0:00", format_time(0, True))
        self.assertEqual("10:05", format_time(605, True))

    def test_seconds(self):
        self.assertEqual("45.00", format_time(45, False))
        self.assertEqual("-0.50", format_time(-0.5, False))
        self.assertEqual("90.00", format_time(90, False))
        self.assertEqual("0.00", format_time(-0.0, False))
        self.assertEqual("0:00", format_time(-0.0, True))

    def test_minutes_threshold(self):
        self.assertTrue(display_as_minutes(90))
        self.assertTrue(display_as_minutes(60))
        self.assertFalse(display_as_minutes(59.99))
        self.assertFalse(display_as_minutes(45))
        self.assertFalse(display_as_minutes(0))

    def test_minutes_component_only(self):
        # Whole hours have no minutes component
        self.assertFalse(display_as_minutes(3600))
        self.assertTrue(display_as_minutes(3660))


class TestBuildTicks(unittest.TestCase):
    def setUp(self):
        self.config = AxisConfig(20, 20)
        self.color = QColor(200, 200, 200, 128)
        self.levels = [
            DetailLevel((-1.0, 0.0, 1.0), 1.0),
            DetailLevel((-0.5, 0.5), 0.5),
            DetailLevel((), 0.2),
        ]

    def test_draw_order_and_positions(self):
        ticks = build_ticks(self.config, self.levels, self.color)
        self.assertEqual([-0.5, 0.5, -1.0, 0.0, 1.0], [t.value for t in ticks])
        self.assertEqual([15, 5, 20, 10, 0], [t.y for t in ticks])

    def test_line_length_follows_strength(self):
        ticks = build_ticks(self.config, self.levels, self.color)
        self.assertEqual([10, 10, 20, 20, 20], [t.line_length for t in ticks])
        hidden = build_ticks(self.config, [DetailLevel((0.0,), 0.0)], self.color)
        self.assertEqual(0, hidden[0].line_length)

    def test_line_length_rounds_half_to_even(self):
        half = [DetailLevel((0.0,), 0.5)]
        self.assertEqual(2, build_ticks(AxisConfig(5, 20), half, self.color)[0].line_length)
        self.assertEqual(4, build_ticks(AxisConfig(7, 20), half, self.color)[0].line_length)

    def test_alpha_follows_strength(self):
        weak, strong = build_ticks(self.config, self.levels, self.color)[1:3]
        self.assertAlmostEqual(self.color.alphaF() * 0.5, weak.color.alphaF(), places=2)
        self.assertAlmostEqual(self.color.alphaF(), strong.color.alphaF(), places=2)
        self.assertEqual(128, self.color.alpha())

    def test_only_strongest_level_is_labeled(self):
        ticks = build_ticks(self.config, self.levels, self.color)
        self.assertEqual([None, None, "-1.00", "0.00", "1.00"], [t.label for t in ticks])

    def test_minute_labels(self):
        config = AxisConfig(40, 200).with_range(-300, 300)
        ticks = build_ticks(config, [DetailLevel((-240.0, -120.0, 0.0, 120.0, 240.0), 1.0)], self.color)
        self.assertEqual(["-4:00", "-2:00", "0:00", "2:00", "4:00"], [t.label for t in ticks])

    def test_zero_span(self):
        config = self.config.with_range(3, 3)
        ticks = build_ticks(config, [DetailLevel((3.0, 4.0), 1.0)], self.color)
        self.assertEqual([10, 10], [t.y for t in ticks])
        self.assertEqual(["3.00", "4.00"], [t.label for t in ticks])

    def test_no_levels(self):
        self.assertEqual([], build_ticks(self.config, [], self.color))


class TestLabelPosition(unittest.TestCase):
    def test_non_positive_values_above(self):
        tick = RenderedTick(20, 20, tick_color(QColor(0, 0, 0), 1.0), -1.0, "-1.00")
        self.assertEqual((8, 10), label_position(tick, 20, (12, 10)))
        tick = RenderedTick(10, 20, QColor(0, 0, 0), 0.0, "0.00")
        self.assertEqual((8, 0), label_position(tick, 20, (12, 10)))

    def test_positive_values_below(self):
        tick = RenderedTick(0, 20, QColor(0, 0, 0), 1.0, "1.00")
        self.assertEqual((8, 3), label_position(tick, 20, (12, 10)))


if __name__ == '__main__':
    unittest.main()
