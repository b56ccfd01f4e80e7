#!/usr/bin/env python3
"""
Unit tests for match reason generation.
"""

import unittest

from core.domain import Specialty
from core.scorer.reasons import generate_match_reasons, rating_reason
from tests.mocks.matcher_mocks import make_job, make_contractor


class TestRatingReason(unittest.TestCase):

    def test_highly_rated(self):
        self.assertEqual(rating_reason(4.9), "Highly rated with 4.9 stars")

    def test_whole_number_rating_keeps_decimal(self):
        self.assertEqual(rating_reason(5.0), "Highly rated with 5.0 stars")
        self.assertEqual(rating_reason(5), "Highly rated with 5.0 stars")

    def test_good(self):
        self.assertEqual(rating_reason(3.5), "Good rating with 3.5 stars")

    def test_average(self):
        self.assertEqual(rating_reason(3.0), "Average rating with 3.0 stars")

    def test_below_average(self):
        self.assertEqual(rating_reason(2.0), "Below average rating with 2.0 stars")

    def test_missing_rating_reads_as_below_average(self):
        """No rating yet still produces the below-average message."""
        self.assertEqual(rating_reason(None), "Below average rating with 0.0 stars")


class TestGenerateMatchReasons(unittest.TestCase):

    def test_all_reasons_in_order(self):
        job = make_job(category=Specialty.ROOFING, zip_code="12345")
        contractor = make_contractor(specialties=[Specialty.ROOFING], zip_code="12345", rating=4.9)

        self.assertEqual(
            generate_match_reasons(job, contractor),
            [
                "Specializes in roofing projects",
                "Located in your area",
                "Highly rated with 4.9 stars",
            ]
        )

    def test_multi_word_category_lowercased(self):
        job = make_job(category=Specialty.HOME_ADDITION)
        contractor = make_contractor(specialties=[Specialty.HOME_ADDITION])

        reasons = generate_match_reasons(job, contractor)
        self.assertEqual(reasons[0], "Specializes in home_addition projects")

    def test_nearby(self):
        job = make_job(category=Specialty.FLOORING, zip_code="55555")
        contractor = make_contractor(specialties=[Specialty.FLOORING], zip_code="55599", rating=3.0)

        self.assertEqual(
            generate_match_reasons(job, contractor),
            [
                "Specializes in flooring projects",
                "Located nearby",
                "Average rating with 3.0 stars",
            ]
        )

    def test_no_specialty_or_location_reason(self):
        """Only the rating reason is left when nothing else lines up."""
        job = make_job(category=Specialty.PLUMBING, zip_code="12346")
        contractor = make_contractor(specialties=[Specialty.ELECTRICAL], zip_code="99999", rating=None)

        self.assertEqual(
            generate_match_reasons(job, contractor),
            ["Below average rating with 0.0 stars"]
        )

    def test_contractor_without_specialties(self):
        job = make_job(category=Specialty.PLUMBING, zip_code="12345")
        contractor = make_contractor(specialties=[], zip_code="12345", rating=4.0)

        self.assertEqual(
            generate_match_reasons(job, contractor),
            ["Located in your area", "Good rating with 4.0 stars"]
        )


if __name__ == "__main__":
    unittest.main()
