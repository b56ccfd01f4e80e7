#!/usr/bin/env python3
"""
Load demo homeowners, contractors, jobs and reviews.

Runs only against an empty users table, so it is safe to call on every
startup.

Usage:
    python -m main_driver.seed_data [--recompute-ratings]
"""

import argparse
import logging
from decimal import Decimal
from typing import List

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from core.domain import JobStatus, Specialty
from database.models import Contractor, Homeowner, Job, Review, User
from database.repositories import ContractorRepository

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Demo accounts cannot log in
UNUSABLE_PASSWORD = "!"

HOMEOWNERS = [
    {
        'first_name': "Sarah", 'last_name': "Johnson", 'email': "sarah.johnson@email.com",
        'phone_number': "5551234567", 'zip_code': "12345",
        'mailing_address': "123 Oak Street, Springfield, IL 62701", 'preferred_contact_method': "Email",
    },
    {
        'first_name': "Michael", 'last_name': "Chen", 'email': "michael.chen@email.com",
        'phone_number': "5552345678", 'zip_code': "12346",
        'mailing_address': "456 Maple Ave, Springfield, IL 62702", 'preferred_contact_method': "Phone",
    },
    {
        'first_name': "Emily", 'last_name': "Rodriguez", 'email': "emily.rodriguez@email.com",
        'phone_number': "5553456789", 'zip_code': "12350",
        'mailing_address': "789 Pine Street, Decatur, IL 62521", 'preferred_contact_method': "Email",
    },
]

CONTRACTORS = [
    {
        'first_name': "David", 'last_name': "Wilson", 'email': "david@kitchenpros.com",
        'phone_number': "5554567890", 'zip_code': "12345", 'company_name': "Kitchen Pros LLC",
        'description': "Specializing in kitchen remodels and cabinet installation for over 15 years.",
        'address': "100 Commercial Drive, Springfield, IL 62701", 'license_number': "IL-KIT-001",
        'specialty': Specialty.REMODELING, 'completed_jobs_count': 45, 'rating': 4.8,
    },
    {
        'first_name': "Lisa", 'last_name': "Thompson", 'email': "lisa@bathdesigns.com",
        'phone_number': "5555678901", 'zip_code': "12346", 'company_name': "Bath Design Solutions",
        'description': "Creating beautiful, functional bathrooms with attention to detail.",
        'address': "200 Design Boulevard, Springfield, IL 62702", 'license_number': "IL-BAT-002",
        'specialty': Specialty.PLUMBING, 'completed_jobs_count': 32, 'rating': 4.6,
    },
    {
        'first_name': "Robert", 'last_name': "Martinez", 'email': "robert@peakroofing.com",
        'phone_number': "5556789012", 'zip_code': "12345", 'company_name': "Peak Roofing Services",
        'description': "Professional roofing installation and repair with 20+ years experience.",
        'address': "300 Industrial Park, Springfield, IL 62701", 'license_number': "IL-ROO-003",
        'specialty': Specialty.ROOFING, 'completed_jobs_count': 78, 'rating': 4.9,
    },
    {
        'first_name': "Amanda", 'last_name': "Davis", 'email': "amanda@floormaster.com",
        'phone_number': "5557890123", 'zip_code': "12346", 'company_name': "FloorMaster Installation",
        'description': "Expert hardwood, tile, and luxury vinyl flooring installation.",
        'address': "400 Craftsman Lane, Springfield, IL 62702", 'license_number': "IL-FLO-004",
        'specialty': Specialty.FLOORING, 'completed_jobs_count': 56, 'rating': 4.7,
    },
    {
        'first_name': "James", 'last_name': "Anderson", 'email': "james@sparkelectric.com",
        'phone_number': "5558901234", 'zip_code': "12350", 'company_name': "Spark Electric Solutions",
        'description': "Licensed electrician providing residential electrical services and upgrades.",
        'address': "500 Electric Avenue, Decatur, IL 62521", 'license_number': "IL-ELE-005",
        'specialty': Specialty.ELECTRICAL, 'completed_jobs_count': 89, 'rating': 4.5,
    },
    {
        'first_name': "Carlos", 'last_name': "Gomez", 'email': "carlos@buildbetter.com",
        'phone_number': "5559012345", 'zip_code': "12345", 'company_name': "Build Better Contracting",
        'description': "Full-service general contracting for home additions and major renovations.",
        'address': "600 Builder Street, Springfield, IL 62701", 'license_number': "IL-GEN-006",
        'specialty': Specialty.GENERAL, 'completed_jobs_count': 67, 'rating': 4.4,
    },
]

# 'homeowner' indexes into HOMEOWNERS
JOBS = [
    {
        'title': "Modern Kitchen Remodel", 'category': Specialty.REMODELING,
        'description': "Complete kitchen renovation including new cabinets, countertops, appliances, and flooring.",
        'budget': Decimal("35000.00"), 'zip_code': "12345", 'homeowner': 0,
    },
    {
        'title': "Master Bathroom Renovation", 'category': Specialty.PLUMBING,
        'description': "Full master bathroom remodel with new tile, fixtures, vanity, and shower.",
        'budget': Decimal("18000.00"), 'zip_code': "12346", 'homeowner': 1,
    },
    {
        'title': "Roof Replacement", 'category': Specialty.ROOFING,
        'description': "Need complete roof replacement due to storm damage. Asphalt shingles preferred.",
        'budget': Decimal("15000.00"), 'zip_code': "12345", 'homeowner': 0,
    },
    {
        'title': "Hardwood Floor Installation", 'category': Specialty.FLOORING,
        'description': "Install hardwood flooring in living room, dining room, and hallway.",
        'budget': Decimal("12000.00"), 'zip_code': "12346", 'homeowner': 1,
    },
    {
        'title': "Electrical Panel Upgrade", 'category': Specialty.ELECTRICAL,
        'description': "Upgrade electrical panel from 100amp to 200amp service.",
        'budget': Decimal("3500.00"), 'zip_code': "12350", 'homeowner': 2,
    },
    {
        'title': "Home Addition Project", 'category': Specialty.GENERAL,
        'description': "Add 400 sq ft family room addition with foundation, framing, electrical, and finishing work.",
        'budget': Decimal("75000.00"), 'zip_code': "12345", 'homeowner': 0,
    },
]

# (homeowner, contractor, job) indexes
REVIEWS = [
    {
        'homeowner': 0, 'contractor': 0, 'job': 0, 'rating': 5,
        'comment': "Outstanding kitchen remodel! Professional, timely, and exceeded our expectations.",
    },
    {
        'homeowner': 1, 'contractor': 1, 'job': 1, 'rating': 4,
        'comment': "Good quality work on our bathroom renovation. Communication could have been better.",
    },
    {
        'homeowner': 0, 'contractor': 2, 'job': 2, 'rating': 5,
        'comment': "Exceptional roofing work! Cleaned up thoroughly and completed ahead of schedule.",
    },
]


def _create_homeowners(db: Session) -> List[Homeowner]:
    logger.info("Creating homeowners...")
    homeowners = [Homeowner(password_hash=UNUSABLE_PASSWORD, **data) for data in HOMEOWNERS]
    db.add_all(homeowners)
    db.flush()
    return homeowners


def _create_contractors(db: Session) -> List[Contractor]:
    logger.info("Creating contractors...")
    contractors = []
    for data in CONTRACTORS:
        fields = dict(data)
        specialty = fields.pop('specialty')
        contractor = Contractor(password_hash=UNUSABLE_PASSWORD, insured=True, **fields)
        contractor.add_specialty(specialty)
        contractor.add_service_area(fields['zip_code'])
        contractors.append(contractor)
    db.add_all(contractors)
    db.flush()
    return contractors


def _create_jobs(db: Session, homeowners: List[Homeowner]) -> List[Job]:
    logger.info("Creating jobs...")
    jobs = []
    for data in JOBS:
        fields = dict(data)
        homeowner = homeowners[fields.pop('homeowner')]
        jobs.append(Job(status=JobStatus.OPEN, homeowner=homeowner, **fields))
    db.add_all(jobs)
    db.flush()
    return jobs


def _create_reviews(
    db: Session,
    homeowners: List[Homeowner],
    contractors: List[Contractor],
    jobs: List[Job]
) -> List[Review]:
    logger.info("Creating reviews...")
    reviews = [
        Review(
            homeowner=homeowners[r['homeowner']],
            contractor=contractors[r['contractor']],
            job=jobs[r['job']],
            rating=r['rating'],
            comment=r['comment'],
        )
        for r in REVIEWS
    ]
    db.add_all(reviews)
    db.flush()
    return reviews


def load_demo_data(db: Session, recompute_ratings: bool = False) -> bool:
    """
    Populate an empty database with demo data.

    Args:
        db: Open session; the caller commits.
        recompute_ratings: Replace the preset contractor ratings with the
            average of their reviews (contractors without reviews lose
            their rating).

    Returns:
        True if data was loaded, False if users already existed.
    """
    existing = db.execute(select(func.count(User.id))).scalar_one()
    if existing:
        logger.info("Demo data already exists, skipping data load.")
        return False

    logger.info("Loading demo data...")
    homeowners = _create_homeowners(db)
    contractors = _create_contractors(db)
    jobs = _create_jobs(db, homeowners)
    _create_reviews(db, homeowners, contractors, jobs)

    if recompute_ratings:
        repo = ContractorRepository(db)
        for contractor in contractors:
            repo.refresh_rating_from_reviews(contractor.id)

    logger.info(
        f"Demo data loaded: {len(homeowners)} homeowners, "
        f"{len(contractors)} contractors, {len(jobs)} jobs"
    )
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(description="Load demo data")
    parser.add_argument(
        "--recompute-ratings",
        action="store_true",
        help="Derive contractor ratings from their reviews"
    )
    args = parser.parse_args(argv)

    from database.database import db_session_scope
    from main_driver.init_db import init_db

    init_db()
    with db_session_scope() as db:
        load_demo_data(db, recompute_ratings=args.recompute_ratings)


if __name__ == "__main__":
    main()
