#!/usr/bin/env python3
"""
Unit tests for specialty, proximity and rating sub-scores.
"""

import unittest
from types import SimpleNamespace

from core.domain import Specialty
from core.scorer.components import (
    calculate_specialty_score,
    calculate_proximity_score,
    calculate_rating_score,
    is_nearby_location,
)


class TestSpecialtyScore(unittest.TestCase):
    """Tests for calculate_specialty_score."""

    def test_exact_match(self):
        self.assertEqual(calculate_specialty_score(Specialty.ROOFING, Specialty.ROOFING), 100)

    def test_different_specialty(self):
        self.assertEqual(calculate_specialty_score(Specialty.PLUMBING, Specialty.ELECTRICAL), 0)

    def test_no_specialty(self):
        """A contractor without specialties scores 0 instead of failing."""
        self.assertEqual(calculate_specialty_score(Specialty.PLUMBING, None), 0)

    def test_category_containing_specialty_is_partial(self):
        """Partial credit when the category name contains the specialty name."""
        category = SimpleNamespace(value="HOME_ADDITION")
        specialty = SimpleNamespace(value="ADDITION")
        self.assertEqual(calculate_specialty_score(category, specialty), 75)

    def test_partial_rule_is_one_directional(self):
        """The reverse containment earns nothing."""
        category = SimpleNamespace(value="ADDITION")
        specialty = SimpleNamespace(value="HOME_ADDITION")
        self.assertEqual(calculate_specialty_score(category, specialty), 0)

    def test_every_specialty_matches_itself(self):
        for specialty in Specialty:
            with self.subTest(specialty=specialty):
                self.assertEqual(calculate_specialty_score(specialty, specialty), 100)


class TestProximityScore(unittest.TestCase):
    """Tests for calculate_proximity_score."""

    def test_exact_zip(self):
        self.assertEqual(calculate_proximity_score("12345", "12345"), 100)

    def test_same_prefix(self):
        self.assertEqual(calculate_proximity_score("55555", "55599"), 75)

    def test_shared_prefix_of_close_zips(self):
        self.assertEqual(calculate_proximity_score("12346", "12399"), 75)

    def test_different_prefix(self):
        self.assertEqual(calculate_proximity_score("12346", "99999"), 0)

    def test_short_codes_never_nearby(self):
        self.assertEqual(calculate_proximity_score("12", "12"), 100)
        self.assertEqual(calculate_proximity_score("12", "123"), 0)
        self.assertFalse(is_nearby_location("12", "12"))

    def test_zip_plus_four(self):
        self.assertEqual(calculate_proximity_score("12345-6789", "12345"), 75)

    def test_missing_contractor_zip(self):
        self.assertEqual(calculate_proximity_score("12345", None), 0)
        self.assertEqual(calculate_proximity_score("12345", ""), 0)

    def test_custom_prefix_length(self):
        self.assertEqual(calculate_proximity_score("12345", "12399", prefix_length=2), 75)
        self.assertEqual(calculate_proximity_score("12345", "12399", prefix_length=4), 0)


class TestRatingScore(unittest.TestCase):
    """Tests for calculate_rating_score tiers."""

    def test_no_rating(self):
        self.assertEqual(calculate_rating_score(None), 0)

    def test_tiers(self):
        cases = [
            (5.0, 100),
            (4.5, 100),
            (4.49, 75),
            (3.5, 75),
            (3.49, 50),
            (2.5, 50),
            (2.49, 25),
            (1.0, 25),
            (0.0, 25),
        ]
        for rating, expected in cases:
            with self.subTest(rating=rating):
                self.assertEqual(calculate_rating_score(rating), expected)


if __name__ == "__main__":
    unittest.main()
