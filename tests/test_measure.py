"""Tests for the timing helpers"""

import unittest

from list_bench.measure import (
    OPERATIONS_COUNT,
    Sample,
    fill_list,
    format_result,
    measure_add_time,
    measure_delete_time,
    measure_get_time,
)
from tests.test_base import BaseTestCase, FakeClock


class TestListsComparison(BaseTestCase):
    """Add, Get and Remove complete with a measurable duration on every variant"""

    def test_add_performance(self):
        for variant in self.variants:
            with self.subTest(variant=variant.name):
                self.assert_elapsed(measure_add_time(variant.create()))

    def test_get_performance(self):
        for variant in self.variants:
            with self.subTest(variant=variant.name):
                container = fill_list(variant.create())
                self.assert_elapsed(measure_get_time(container))

    def test_delete_performance(self):
        for variant in self.variants:
            with self.subTest(variant=variant.name):
                container = fill_list(variant.create())
                self.assert_elapsed(measure_delete_time(container))


class TestMeasureSemantics(BaseTestCase):

    def test_fill_then_read_reproduces_sequence(self):
        for variant in self.variants:
            with self.subTest(variant=variant.name):
                container = variant.create()
                measure_add_time(container, OPERATIONS_COUNT)
                self.assert_sequence(container, OPERATIONS_COUNT)

    def test_read_does_not_modify(self):
        for variant in self.variants:
            with self.subTest(variant=variant.name):
                container = fill_list(variant.create(), 100)
                measure_get_time(container, 100)
                self.assert_sequence(container, 100)

    def test_drain_empties_container(self):
        for variant in self.variants:
            with self.subTest(variant=variant.name):
                container = fill_list(variant.create(), OPERATIONS_COUNT)
                measure_delete_time(container, OPERATIONS_COUNT)
                self.assertEqual(len(container), 0)

    def test_zero_operations_is_noop(self):
        for variant in self.variants:
            with self.subTest(variant=variant.name):
                container = variant.create()
                self.assert_elapsed(measure_add_time(container, 0))
                self.assert_elapsed(measure_get_time(container, 0))
                self.assert_elapsed(measure_delete_time(container, 0))
                self.assertEqual(len(container), 0)

    def test_read_past_end_propagates(self):
        for variant in self.variants:
            with self.subTest(variant=variant.name):
                container = fill_list(variant.create(), 5)
                with self.assertRaises(IndexError):
                    measure_get_time(container, 6)

    def test_drain_of_short_container_propagates(self):
        for variant in self.variants:
            with self.subTest(variant=variant.name):
                container = fill_list(variant.create(), 3)
                with self.assertRaises(IndexError):
                    measure_delete_time(container, 4)

    def test_clock_difference_is_returned(self):
        clock = FakeClock(1_000, 1_500_000 + 1_000)
        elapsed = measure_add_time([], 10, clock=clock)
        self.assertEqual(elapsed, 1_500_000)


class TestFormatting(unittest.TestCase):

    def test_format_result_three_decimals(self):
        self.assertEqual(
            format_result("Add", "ArrayList", 10000, 1_500_000),
            "Add | ArrayList | 10000 | 1.500 ms",
        )

    def test_format_result_rounds(self):
        self.assertEqual(
            format_result("Get", "LinkedList", 10, 123_456_789),
            "Get | LinkedList | 10 | 123.457 ms",
        )

    def test_format_zero(self):
        self.assertEqual(
            format_result("Remove", "LinkedList", 0, 0),
            "Remove | LinkedList | 0 | 0.000 ms",
        )

    def test_sample_format_and_ms(self):
        sample = Sample("Remove", "ArrayList", 10000, 1_500_000)
        self.assertEqual(sample.elapsed_ms, 1.5)
        self.assertEqual(sample.format(), "Remove | ArrayList | 10000 | 1.500 ms")


if __name__ == "__main__":
    unittest.main()
