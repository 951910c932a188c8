#!/usr/bin/env python3
"""
Load a small set of demo advocates into the configured database.

Creates the advocates table if needed, then inserts every record in
ADVOCATES with a single bulk insert.

Usage:
    DATABASE_URL=postgresql+psycopg2://... python scripts/seed_advocates.py
"""

import logging

from advocate_directory.db.engine import dispose_engine, get_engine
from advocate_directory.db.models import Base
from advocate_directory.services.advocates import AdvocateRepository

logger = logging.getLogger("seed_advocates")

ADVOCATES = [
    {
        "first_name": "John",
        "last_name": "Doe",
        "city": "New York",
        "degree": "MD",
        "specialties": ["Bipolar", "LGBTQ", "Medication/Prescribing"],
        "years_of_experience": 10,
        "phone_number": 5551234567,
    },
    {
        "first_name": "Jane",
        "last_name": "Smith",
        "city": "Los Angeles",
        "degree": "PhD",
        "specialties": ["Trauma & PTSD", "Anxiety/Panic Disorder"],
        "years_of_experience": 8,
        "phone_number": 5559876543,
    },
    {
        "first_name": "Alice",
        "last_name": "Johnson",
        "city": "Chicago",
        "degree": "MSW",
        "specialties": ["Relationship Issues", "Grief & Loss"],
        "years_of_experience": 5,
        "phone_number": 5554567890,
    },
    {
        "first_name": "Michael",
        "last_name": "Brown",
        "city": "Houston",
        "degree": "MD",
        "specialties": ["Eating Disorders", "Weight Loss & Nutrition"],
        "years_of_experience": 12,
        "phone_number": 5556543210,
    },
    {
        "first_name": "Emily",
        "last_name": "Davis",
        "city": "Phoenix",
        "degree": "PhD",
        "specialties": ["Depression", "Chronic Pain"],
        "years_of_experience": 7,
        "phone_number": 5553210987,
    },
    {
        "first_name": "Chris",
        "last_name": "Martinez",
        "city": "Philadelphia",
        "degree": "MSW",
        "specialties": ["Substance Use", "Anxiety/Panic Disorder"],
        "years_of_experience": 9,
        "phone_number": 5557890123,
    },
    {
        "first_name": "Jessica",
        "last_name": "Taylor",
        "city": "San Antonio",
        "degree": "MD",
        "specialties": ["Trauma & PTSD", "Personality Disorders"],
        "years_of_experience": 11,
        "phone_number": 5554561234,
    },
    {
        "first_name": "David",
        "last_name": "Harris",
        "city": "San Diego",
        "degree": "PhD",
        "specialties": ["Suicide History/Attempts", "Depression"],
        "years_of_experience": 6,
        "phone_number": 5557896543,
    },
]


def seed() -> None:
    engine = get_engine()
    Base.metadata.create_all(engine)

    try:
        inserted = AdvocateRepository().bulk_insert(ADVOCATES)
        logger.info("Seeded %d advocates", len(inserted))
    finally:
        dispose_engine()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed()
