"""Tests for the circular word layout engine.

Uses the eight-word cloud fixture as the integration case and
deterministic stub minimizers to pin down the search logic.

Validates:
  - add_word rejects empty sizes and duplicates without side effects
  - The first word is centered exactly on the build center
  - Placed rectangles never overlap and keep their input sizes
  - Ties between candidates resolve to the first candidate added
  - A failed build names the word and returns no partial result
  - The time budget aborts a build
  - clear() returns the builder to its initial state
  - Serialization round-trips correctly
"""

from __future__ import annotations

import json
import math
import unittest

from tagcloud.config import LayoutRules
from tagcloud.geometry import Point, Rectangle, Size, cloud_bounds
from tagcloud.pipeline.layout import (
    CircularLayoutBuilder,
    DuplicateWordError,
    EmptySizeError,
    LayoutError,
    LayoutResult,
    LayoutTimeoutError,
    PlacementFailedError,
    WordEntry,
    WordRectangle,
    layout_to_dict,
    parse_layout,
)
from tests.cloud_fixture import make_cloud_words


def stay_put(objective, start):
    """Stub minimizer that never moves."""
    return start


def push_out(objective, start):
    """Stub minimizer that moves every start point 3× further from the origin."""
    return Point(start.x * 3, start.y * 3)


def assert_no_overlaps(test: unittest.TestCase, words: list[WordRectangle]) -> None:
    for i in range(len(words)):
        a = words[i]
        for b in words[i + 1:]:
            area = a.rectangle.box.intersection(b.rectangle.box).area
            test.assertFalse(
                a.rectangle.intersects_with(b.rectangle),
                f"'{a.word}' and '{b.word}' overlap",
            )
            test.assertLess(
                area, 1e-9,
                f"'{a.word}' and '{b.word}' share {area:.3g}px² of interior",
            )


class TestAddWord(unittest.TestCase):

    def test_accepts_word(self):
        builder = CircularLayoutBuilder()
        result = builder.add_word("x", Size(10, 10))
        self.assertTrue(result.ok)
        self.assertIsNone(result.value)
        self.assertEqual(builder.words, (WordEntry("x", Size(10, 10)),))

    def test_preserves_add_order(self):
        builder = CircularLayoutBuilder()
        for w in ("c", "a", "b"):
            builder.add_word(w, Size(5, 5))
        self.assertEqual([e.word for e in builder.words], ["c", "a", "b"])

    def test_rejects_zero_width(self):
        builder = CircularLayoutBuilder()
        result = builder.add_word("x", Size(0, 10))
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, EmptySizeError)
        self.assertEqual(result.error.kind, "EmptySize")
        self.assertEqual(len(builder), 0)

    def test_rejects_zero_height(self):
        builder = CircularLayoutBuilder()
        result = builder.add_word("x", Size(10, 0))
        self.assertIsInstance(result.error, EmptySizeError)

    def test_rejects_negative_size(self):
        builder = CircularLayoutBuilder()
        result = builder.add_word("x", Size(-3, 10))
        self.assertIsInstance(result.error, EmptySizeError)

    def test_rejects_duplicate(self):
        """Second add of the same word fails and leaves the pending set alone."""
        builder = CircularLayoutBuilder()
        builder.add_word("x", Size(10, 10))
        result = builder.add_word("x", Size(20, 20))
        self.assertIsInstance(result.error, DuplicateWordError)
        self.assertEqual(result.error.word, "x")
        self.assertEqual(builder.words, (WordEntry("x", Size(10, 10)),))

    def test_unwrap_raises_carried_error(self):
        builder = CircularLayoutBuilder()
        builder.add_word("x", Size(10, 10))
        with self.assertRaises(DuplicateWordError):
            builder.add_word("x", Size(10, 10)).unwrap()


class TestBuildScenarios(unittest.TestCase):

    def test_empty_builder(self):
        """No pending words builds an empty layout."""
        result = CircularLayoutBuilder().build(Point(0, 0))
        self.assertTrue(result.ok)
        self.assertEqual(result.value, [])

    def test_single_word(self):
        builder = CircularLayoutBuilder()
        builder.add_word("x", Size(10, 10))
        result = builder.build(Point(0, 0))
        self.assertTrue(result.ok)
        self.assertEqual(result.value, [
            WordRectangle("x", Rectangle(Point(-5, -5), Size(10, 10))),
        ])

    def test_first_word_centered(self):
        builder = CircularLayoutBuilder()
        builder.add_word("first", Size(30, 12))
        builder.add_word("second", Size(8, 8))
        result = builder.build(Point(100, 50))
        self.assertTrue(result.ok)
        self.assertEqual(result.value[0].rectangle.center, Point(100, 50))

    def test_two_words_nearest_position(self):
        """The second word touches the first at distance 10 from the center."""
        builder = CircularLayoutBuilder()
        builder.add_word("x", Size(10, 10))
        builder.add_word("y", Size(10, 10))
        result = builder.build(Point(0, 0))
        self.assertTrue(result.ok)

        x, y = result.value
        self.assertEqual(x.word, "x")
        self.assertEqual(y.word, "y")
        self.assertEqual(x.rectangle.location, Point(-5, -5))
        self.assertFalse(x.rectangle.intersects_with(y.rectangle))

        c = y.rectangle.center
        self.assertAlmostEqual(math.hypot(c.x, c.y), 10.0, delta=0.05)

    def test_dense_cloud_fails(self):
        """A minimizer that cannot move leaves no legal spot for word two."""
        builder = CircularLayoutBuilder(minimizer=stay_put)
        builder.add_word("a", Size(10, 10))
        builder.add_word("b", Size(1, 1))
        result = builder.build(Point(0, 0))

        self.assertFalse(result.ok)
        self.assertIsNone(result.value)
        self.assertIsInstance(result.error, PlacementFailedError)
        self.assertEqual(result.error.kind, "PlacementFailed")
        self.assertEqual(result.error.word, "b")
        self.assertEqual(result.error.candidates, 8)

    def test_failure_keeps_pending_words(self):
        builder = CircularLayoutBuilder(minimizer=stay_put)
        builder.add_word("a", Size(10, 10))
        builder.add_word("b", Size(10, 10))
        builder.build(Point(0, 0))
        self.assertEqual([e.word for e in builder.words], ["a", "b"])

    def test_failure_is_a_layout_error(self):
        builder = CircularLayoutBuilder(minimizer=stay_put)
        builder.add_word("a", Size(10, 10))
        builder.add_word("b", Size(10, 10))
        with self.assertRaises(LayoutError):
            builder.build(Point(0, 0)).unwrap()


class TestBuildWithStubMinimizer(unittest.TestCase):
    """Deterministic search behaviour with a trivially-computed minimizer."""

    def test_ties_resolve_to_first_candidate(self):
        """Edge midpoints (0,-15) and (15,0) tie; the earlier-added one wins.

        Anchors of the first rectangle are added corners first, then the
        top, left, right and bottom midpoints.
        """
        builder = CircularLayoutBuilder(minimizer=push_out)
        builder.add_word("a", Size(10, 10))
        builder.add_word("b", Size(10, 10))
        result = builder.build(Point(0, 0))

        self.assertTrue(result.ok)
        self.assertEqual(result.value[1].rectangle.center, Point(0, -15))

    def test_three_words_do_not_overlap(self):
        """Candidates that would overlap cost more and lose to clear ones."""
        builder = CircularLayoutBuilder(minimizer=push_out)
        builder.add_word("a", Size(10, 10))
        builder.add_word("b", Size(10, 10))
        builder.add_word("c", Size(10, 10))
        result = builder.build(Point(0, 0))

        self.assertTrue(result.ok)
        assert_no_overlaps(self, result.value)

    def test_timeout(self):
        rules = LayoutRules(build_timeout_s=0.0)
        builder = CircularLayoutBuilder(minimizer=push_out, rules=rules)
        builder.add_word("a", Size(10, 10))
        builder.add_word("b", Size(10, 10))
        result = builder.build(Point(0, 0))

        self.assertIsInstance(result.error, LayoutTimeoutError)
        self.assertEqual(result.error.word, "b")

    def test_timeout_skips_first_word(self):
        """Centering the first word involves no search, so it never times out."""
        rules = LayoutRules(build_timeout_s=0.0)
        builder = CircularLayoutBuilder(minimizer=push_out, rules=rules)
        builder.add_word("a", Size(10, 10))
        self.assertTrue(builder.build(Point(0, 0)).ok)


class TestCloudLayout(unittest.TestCase):
    """Integration test using the eight-word cloud fixture."""

    @classmethod
    def setUpClass(cls):
        cls.words = make_cloud_words()
        cls.center = Point(400, 300)
        builder = CircularLayoutBuilder()
        for word, size in cls.words:
            builder.add_word(word, size).unwrap()
        cls.builder = builder
        cls.result = builder.build(cls.center)

    def test_layout_succeeds(self):
        self.assertTrue(self.result.ok, self.result.error)
        self.assertEqual(len(self.result.value), len(self.words))

    def test_order_preserved(self):
        self.assertEqual(
            [w.word for w in self.result.value],
            [w for w, _ in self.words],
        )

    def test_no_overlaps(self):
        assert_no_overlaps(self, self.result.value)

    def test_sizes_preserved(self):
        for (word, size), placed in zip(self.words, self.result.value):
            self.assertEqual(placed.rectangle.size, size, word)

    def test_first_word_centered(self):
        self.assertEqual(self.result.value[0].rectangle.center, self.center)

    def test_compact(self):
        """Words hug the center: the cloud fits in a few times their total area."""
        bounds = cloud_bounds(w.rectangle for w in self.result.value)
        total = sum(s.width * s.height for _, s in self.words)
        self.assertLess(bounds.size.width * bounds.size.height, 5 * total)

    def test_deterministic(self):
        again = self.builder.build(self.center)
        self.assertEqual(again.value, self.result.value)

    def test_build_does_not_consume_words(self):
        self.assertEqual(len(self.builder), len(self.words))


class TestClear(unittest.TestCase):

    def test_clear_empties_pending(self):
        builder = CircularLayoutBuilder()
        builder.add_word("x", Size(10, 10))
        builder.clear()
        self.assertEqual(len(builder), 0)
        self.assertEqual(builder.build(Point(0, 0)).value, [])

    def test_clear_allows_readding(self):
        builder = CircularLayoutBuilder()
        builder.add_word("x", Size(10, 10))
        builder.clear()
        self.assertTrue(builder.add_word("x", Size(10, 10)).ok)

    def test_clear_keeps_previous_result(self):
        builder = CircularLayoutBuilder()
        builder.add_word("x", Size(10, 10))
        result = builder.build(Point(0, 0))
        builder.clear()
        self.assertEqual(len(result.value), 1)


class TestResult(unittest.TestCase):

    def test_success(self):
        result = LayoutResult.success([1])
        self.assertTrue(result.ok)
        self.assertEqual(result.unwrap(), [1])

    def test_failure(self):
        err = DuplicateWordError("x")
        result = LayoutResult.failure(err)
        self.assertFalse(result.ok)
        self.assertIs(result.error, err)
        self.assertIn("'x'", str(err))


class TestLayoutSerialization(unittest.TestCase):

    def test_round_trip_through_json(self):
        builder = CircularLayoutBuilder(minimizer=push_out)
        builder.add_word("a", Size(10, 10))
        builder.add_word("b", Size(6, 4))
        center = Point(0, 0)
        words = builder.build(center).unwrap()

        data = json.loads(json.dumps(layout_to_dict(center, words)))
        self.assertEqual(data["words"][0], {
            "word": "a", "x": -5, "y": -5, "width": 10, "height": 10,
        })
        parsed_center, parsed_words = parse_layout(data)
        self.assertEqual(parsed_center, center)
        self.assertEqual(parsed_words, words)


if __name__ == "__main__":
    unittest.main()
