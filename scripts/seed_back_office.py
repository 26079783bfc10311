#!/usr/bin/env python3
"""
Seed a development database with actors, the filter catalog and listings.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Goes through the repositories, so seeded listings obey the same
  validation and approval rules as submitted ones

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_back_office.py
"""

from __future__ import annotations

import random
import sys
import uuid
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from car_backoffice.adapters.postgres_car_catalog_repository import PostgresCarCatalogRepository
from car_backoffice.adapters.postgres_filter_catalog_repository import (
    PostgresFilterCatalogRepository,
)
from car_backoffice.domain.actors import Role
from car_backoffice.domain.car import (
    Car,
    FuelType,
    ListingDraft,
    ListingStatus,
    Transmission,
    apply_listing_transition,
)
from car_backoffice.domain.filter_catalog import FilterCatalog
from car_backoffice.infra.db.models import ActorRow, CarRow, FilterCatalogRow, InquiryRow
from car_backoffice.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_CARS = 40
SEED_NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)

ACTORS: dict[str, Role] = {
    "admin-1": Role.ADMIN,
    "manager-1": Role.MANAGER,
    "editor-1": Role.CONTENT_EDITOR,
    "editor-2": Role.CONTENT_EDITOR,
    "agent-1": Role.SALES_AGENT,
    "agent-2": Role.SALES_AGENT,
}

# Base prices in the smallest currency unit, before depreciation
MODELS_BY_BRAND: dict[str, dict[str, int]] = {
    "Tata": {"Nexon": 900_000, "Punch": 650_000, "Harrier": 1_700_000},
    "Maruti Suzuki": {"Swift": 650_000, "Baleno": 750_000, "Brezza": 1_000_000},
    "Hyundai": {"i20": 800_000, "Creta": 1_300_000, "Venue": 950_000},
    "Mahindra": {"XUV700": 1_900_000, "Thar": 1_500_000, "Scorpio": 1_600_000},
    "Toyota": {"Innova": 2_000_000, "Glanza": 750_000, "Fortuner": 3_500_000},
}

COLORS = ["White", "Silver", "Grey", "Black", "Red", "Blue"]


# ==============================================================================
# Generation
# ==============================================================================


def build_catalog(current_year: int) -> FilterCatalog:
    return FilterCatalog(
        brands=frozenset(MODELS_BY_BRAND),
        models={brand: frozenset(models) for brand, models in MODELS_BY_BRAND.items()},
        years=tuple(range(2010, current_year + 1)),
    )


def price_for(base_price: int, year: int, current_year: int) -> int:
    """~8% depreciation per year, capped at 60%, +/- 5% noise, rounded to 1000."""
    depreciation = min(0.08 * max(0, current_year - year), 0.60)
    price = base_price * (1 - depreciation) * random.uniform(0.95, 1.05)
    return max(100_000, round(price / 1000) * 1000)


def generate_draft(current_year: int) -> ListingDraft:
    brand = random.choice(sorted(MODELS_BY_BRAND))
    model = random.choice(sorted(MODELS_BY_BRAND[brand]))

    # Weighted toward newer cars
    year = random.choices(
        range(current_year - 9, current_year + 1),
        weights=[1, 1, 2, 2, 3, 3, 4, 5, 6, 7],
        k=1,
    )[0]
    years_old = current_year - year
    km_run = random.randint(1000, max(2000, years_old * 15_000 + 10_000))

    fuel = random.choices(list(FuelType), weights=[6, 3, 1], k=1)[0]
    transmission = random.choice(list(Transmission))
    slug = f"{brand}-{model}-{year}".lower().replace(" ", "-")

    return ListingDraft(
        brand=brand,
        model=model,
        year=year,
        registration_year=year,
        price=price_for(MODELS_BY_BRAND[brand][model], year, current_year),
        km_run=km_run,
        fuel=fuel.value,
        transmission=transmission.value,
        ownership=1 + years_old // 4,
        color=random.choice(COLORS),
        engine_cc=random.choice([1199, 1197, 1497, 2184]),
        images=tuple(
            f"https://cdn.example.com/cars/{slug}-{n}.jpg" for n in range(random.randint(0, 3))
        ),
    )


def seed_back_office(
    session: Session,
    num_cars: int = NUM_CARS,
    seed: int = RANDOM_SEED,
    now: datetime = SEED_NOW,
) -> list[Car]:
    """
    Replace all back office data with a deterministic dataset.

    Listings with images are approved; roughly one in five of those is
    rejected instead, and listings without images stay pending.

    Returns:
        The seeded listings
    """
    random.seed(seed)
    current_year = now.year

    # Inquiries first: they reference cars
    for row_type in (InquiryRow, CarRow, FilterCatalogRow, ActorRow):
        session.execute(delete(row_type))

    session.add_all(ActorRow(id=actor_id, role=role.value) for actor_id, role in ACTORS.items())

    catalog = PostgresFilterCatalogRepository(session).replace(
        build_catalog(current_year), expected_version=0
    )

    cars_repository = PostgresCarCatalogRepository(session)
    editors = [actor_id for actor_id, role in ACTORS.items() if role is Role.CONTENT_EDITOR]
    cars: list[Car] = []
    for n in range(num_cars):
        draft = generate_draft(current_year)
        draft.validate(catalog, current_year=current_year)
        car = Car.from_draft(
            draft,
            car_id=str(uuid.UUID(int=random.getrandbits(128), version=4)),
            submitted_by=random.choice(editors),
            created_at=now - timedelta(hours=n * 7),
        )
        if car.images:
            target = ListingStatus.REJECTED if random.random() < 0.2 else ListingStatus.APPROVED
            car = apply_listing_transition(car, target)
        cars_repository.add(car)
        cars.append(car)

    return cars


# ==============================================================================
# Main
# ==============================================================================


def main() -> None:
    print(f"Seeding back office with {NUM_CARS} listings (seed={RANDOM_SEED})...")
    with get_session() as session:
        cars = seed_back_office(session)

    by_status: dict[str, int] = {}
    for car in cars:
        by_status[car.status.value] = by_status.get(car.status.value, 0) + 1
    print(f"Seeded {len(ACTORS)} actors, the filter catalog and {len(cars)} listings")
    for status, count in sorted(by_status.items()):
        print(f"   {status}: {count}")


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
