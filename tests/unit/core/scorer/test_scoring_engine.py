#!/usr/bin/env python3
"""
Unit tests for ScoringEngine weighting and truncation.
"""

import itertools
import unittest

from core.config_loader import ScorerConfig
from core.constants import (
    DEFAULT_SPECIALTY_WEIGHT,
    DEFAULT_PROXIMITY_WEIGHT,
    DEFAULT_RATING_WEIGHT,
)
from core.domain import Specialty
from core.scorer import ScoringEngine
from tests.mocks.matcher_mocks import make_job, make_contractor


class TestScoringEngineScenarios(unittest.TestCase):
    """End-to-end scoring of single job/contractor pairs."""

    def setUp(self):
        self.engine = ScoringEngine()

    def test_perfect_match(self):
        """Same specialty, same zip, 4.9 rating scores exactly 100."""
        job = make_job(category=Specialty.ROOFING, zip_code="12345")
        contractor = make_contractor(specialties=[Specialty.ROOFING], zip_code="12345", rating=4.9)

        result = self.engine.score(job, contractor)

        self.assertEqual(result.specialty_score, 100)
        self.assertEqual(result.proximity_score, 100)
        self.assertEqual(result.rating_score, 100)
        self.assertEqual(result.total, 100)
        self.assertIn("Specializes in roofing projects", result.reasons)
        self.assertIn("Located in your area", result.reasons)
        self.assertIn("Highly rated with 4.9 stars", result.reasons)

    def test_no_match(self):
        job = make_job(category=Specialty.PLUMBING, zip_code="12346")
        contractor = make_contractor(specialties=[Specialty.ELECTRICAL], zip_code="99999", rating=None)

        total, reasons = self.engine.score_pair(job, contractor)

        self.assertEqual(total, 0)
        self.assertEqual(reasons, ["Below average rating with 0.0 stars"])

    def test_fractional_total_is_truncated(self):
        """100*0.5 + 75*0.3 + 50*0.2 = 82.5 truncates to 82."""
        job = make_job(category=Specialty.FLOORING, zip_code="55555")
        contractor = make_contractor(specialties=[Specialty.FLOORING], zip_code="55599", rating=3.0)

        result = self.engine.score(job, contractor)

        self.assertEqual(result.components(), {'specialty': 100, 'proximity': 75, 'rating': 50})
        self.assertEqual(result.total, 82)

    def test_truncation_not_rounding(self):
        """75*0.3 + 75*0.2 = 37.5 gives 37, not 38."""
        job = make_job(category=Specialty.PLUMBING, zip_code="12345")
        contractor = make_contractor(specialties=[Specialty.ROOFING], zip_code="12399", rating=4.0)

        self.assertEqual(self.engine.score(job, contractor).total, 37)

    def test_primary_specialty_used(self):
        """Only the primary (first declared) specialty is compared."""
        job = make_job(category=Specialty.ROOFING, zip_code="99999")
        contractor = make_contractor(
            specialties=[Specialty.ROOFING, Specialty.PLUMBING],
            zip_code="12345",
            rating=None
        )

        # PLUMBING is declared before ROOFING, so it is the primary specialty
        self.assertEqual(contractor.primary_specialty, Specialty.PLUMBING)
        self.assertEqual(self.engine.score(job, contractor).total, 0)

    def test_score_pair_matches_breakdown(self):
        job = make_job()
        contractor = make_contractor(rating=3.7)

        breakdown = self.engine.score(job, contractor)
        self.assertEqual(self.engine.score_pair(job, contractor), (breakdown.total, breakdown.reasons))


class TestScoringEngineBounds(unittest.TestCase):
    """Totals stay within 0-100 for every sub-score combination."""

    def test_all_sub_score_combinations(self):
        engine = ScoringEngine()
        specialty_scores = [0, 75, 100]
        proximity_scores = [0, 75, 100]
        rating_scores = [0, 25, 50, 75, 100]

        for s, p, r in itertools.product(specialty_scores, proximity_scores, rating_scores):
            with self.subTest(specialty=s, proximity=p, rating=r):
                total = engine.combine(s, p, r)
                self.assertGreaterEqual(total, 0)
                self.assertLessEqual(total, 100)
                self.assertIsInstance(total, int)

    def test_boundary_totals(self):
        engine = ScoringEngine()
        self.assertEqual(engine.combine(100, 100, 100), 100)
        self.assertEqual(engine.combine(0, 100, 25), 35)
        self.assertEqual(engine.combine(0, 100, 0), 30)
        self.assertEqual(engine.combine(0, 75, 50), 32)
        self.assertEqual(engine.combine(100, 0, 0), 50)


class TestScoringEngineConfig(unittest.TestCase):
    """Tests for configurable weights."""

    def test_default_weights(self):
        self.assertEqual(DEFAULT_SPECIALTY_WEIGHT, 0.5)
        self.assertEqual(DEFAULT_PROXIMITY_WEIGHT, 0.3)
        self.assertEqual(DEFAULT_RATING_WEIGHT, 0.2)

        engine = ScoringEngine(ScorerConfig())
        self.assertEqual(engine.combine(100, 0, 0), 50)
        self.assertEqual(engine.combine(0, 100, 0), 30)
        self.assertEqual(engine.combine(0, 0, 100), 20)

    def test_custom_weights(self):
        config = ScorerConfig(specialty_weight=0.2, proximity_weight=0.2, rating_weight=0.6)
        engine = ScoringEngine(config)
        self.assertEqual(engine.combine(100, 0, 0), 20)
        self.assertEqual(engine.combine(0, 0, 100), 60)

    def test_negative_weight_falls_back_to_default(self):
        config = ScorerConfig(specialty_weight=-1.0)
        with self.assertLogs('core.scorer.service', level='WARNING'):
            engine = ScoringEngine(config)
        self.assertEqual(engine.combine(100, 0, 0), 50)

    def test_total_capped_at_100(self):
        config = ScorerConfig(specialty_weight=1.0, proximity_weight=1.0, rating_weight=1.0)
        engine = ScoringEngine(config)
        with self.assertLogs('core.scorer.service', level='WARNING'):
            self.assertEqual(engine.combine(100, 100, 100), 100)


if __name__ == "__main__":
    unittest.main()
