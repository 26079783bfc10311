"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only stateless singletons should use lru_cache.

Repositories are provided by their own dependencies so tests can swap the
whole persistence layer through ``app.dependency_overrides``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from car_backoffice.adapters.postgres_actor_directory import PostgresActorDirectory
from car_backoffice.adapters.postgres_car_catalog_repository import (
    PostgresCarCatalogRepository,
)
from car_backoffice.adapters.postgres_filter_catalog_repository import (
    PostgresFilterCatalogRepository,
)
from car_backoffice.adapters.postgres_inquiry_repository import PostgresInquiryRepository
from car_backoffice.adapters.template_car_summarizer import TemplateCarSummarizer
from car_backoffice.infra.db.session import get_session
from car_backoffice.ports.actor_directory import ActorDirectory
from car_backoffice.ports.car_catalog_repository import CarCatalogRepository
from car_backoffice.ports.car_summarizer import CarSummarizer
from car_backoffice.ports.filter_catalog_repository import FilterCatalogRepository
from car_backoffice.ports.inquiry_repository import InquiryRepository
from car_backoffice.use_cases.assign_inquiry import AssignInquiry
from car_backoffice.use_cases.create_inquiry import CreateInquiry
from car_backoffice.use_cases.create_listing import CreateListing
from car_backoffice.use_cases.delete_inquiry import DeleteInquiry
from car_backoffice.use_cases.delete_listing import DeleteListing
from car_backoffice.use_cases.edit_filter_catalog import EditFilterCatalog
from car_backoffice.use_cases.get_filter_catalog import GetFilterCatalog
from car_backoffice.use_cases.get_inquiry import GetInquiry
from car_backoffice.use_cases.get_listing import GetListing
from car_backoffice.use_cases.list_inquiries import ListInquiries
from car_backoffice.use_cases.list_listings import ListListings
from car_backoffice.use_cases.search_listings import SearchListings
from car_backoffice.use_cases.summarize_listing import SummarizeListing
from car_backoffice.use_cases.transition_listing import TransitionListing
from car_backoffice.use_cases.update_filter_catalog import UpdateFilterCatalog
from car_backoffice.use_cases.update_inquiry_notes import UpdateInquiryNotes
from car_backoffice.use_cases.update_inquiry_status import UpdateInquiryStatus
from car_backoffice.use_cases.update_listing import UpdateListing


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    FastAPI will:
    1. Call this function when a request starts
    2. Inject the session into the route
    3. Commit/rollback and close the session when the request ends

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_actor_id(x_actor_id: str | None = Header(default=None)) -> str | None:
    """
    Caller identity as resolved by the upstream authentication layer.

    Read from the ``X-Actor-Id`` header. Absence is allowed here; use cases
    that need an actor reject it with 401.
    """
    return x_actor_id or None


# ==============================================================================
# Repositories and collaborators
# ==============================================================================


def get_car_catalog_repository(db: Session = Depends(get_db)) -> CarCatalogRepository:
    return PostgresCarCatalogRepository(session=db)


def get_inquiry_repository(db: Session = Depends(get_db)) -> InquiryRepository:
    return PostgresInquiryRepository(session=db)


def get_filter_catalog_repository(db: Session = Depends(get_db)) -> FilterCatalogRepository:
    return PostgresFilterCatalogRepository(session=db)


def get_actor_directory(db: Session = Depends(get_db)) -> ActorDirectory:
    return PostgresActorDirectory(session=db)


@lru_cache
def get_car_summarizer() -> CarSummarizer:
    """Stateless, so one instance serves every request."""
    return TemplateCarSummarizer()


# ==============================================================================
# Listing use cases
# ==============================================================================


def get_create_listing_use_case(
    cars: CarCatalogRepository = Depends(get_car_catalog_repository),
    catalog: FilterCatalogRepository = Depends(get_filter_catalog_repository),
    actors: ActorDirectory = Depends(get_actor_directory),
) -> CreateListing:
    return CreateListing(
        car_catalog_repository=cars,
        filter_catalog_repository=catalog,
        actor_directory=actors,
    )


def get_update_listing_use_case(
    cars: CarCatalogRepository = Depends(get_car_catalog_repository),
    catalog: FilterCatalogRepository = Depends(get_filter_catalog_repository),
    actors: ActorDirectory = Depends(get_actor_directory),
) -> UpdateListing:
    return UpdateListing(
        car_catalog_repository=cars,
        filter_catalog_repository=catalog,
        actor_directory=actors,
    )


def get_transition_listing_use_case(
    cars: CarCatalogRepository = Depends(get_car_catalog_repository),
    actors: ActorDirectory = Depends(get_actor_directory),
) -> TransitionListing:
    return TransitionListing(car_catalog_repository=cars, actor_directory=actors)


def get_delete_listing_use_case(
    cars: CarCatalogRepository = Depends(get_car_catalog_repository),
    inquiries: InquiryRepository = Depends(get_inquiry_repository),
    actors: ActorDirectory = Depends(get_actor_directory),
) -> DeleteListing:
    return DeleteListing(
        car_catalog_repository=cars,
        inquiry_repository=inquiries,
        actor_directory=actors,
    )


def get_get_listing_use_case(
    cars: CarCatalogRepository = Depends(get_car_catalog_repository),
    actors: ActorDirectory = Depends(get_actor_directory),
) -> GetListing:
    return GetListing(car_catalog_repository=cars, actor_directory=actors)


def get_list_listings_use_case(
    cars: CarCatalogRepository = Depends(get_car_catalog_repository),
    actors: ActorDirectory = Depends(get_actor_directory),
) -> ListListings:
    return ListListings(car_catalog_repository=cars, actor_directory=actors)


def get_summarize_listing_use_case(
    get_listing: GetListing = Depends(get_get_listing_use_case),
    summarizer: CarSummarizer = Depends(get_car_summarizer),
) -> SummarizeListing:
    return SummarizeListing(get_listing=get_listing, summarizer=summarizer)


def get_search_listings_use_case(
    cars: CarCatalogRepository = Depends(get_car_catalog_repository),
) -> SearchListings:
    """
    Factory function that returns a configured SearchListings use case.

    This function is called per-request, ensuring each request gets:
    - Fresh repository instance
    - Fresh use case instance
    - Isolated database session
    """
    return SearchListings(car_catalog_repository=cars)


# ==============================================================================
# Inquiry use cases
# ==============================================================================


def get_create_inquiry_use_case(
    cars: CarCatalogRepository = Depends(get_car_catalog_repository),
    inquiries: InquiryRepository = Depends(get_inquiry_repository),
) -> CreateInquiry:
    return CreateInquiry(car_catalog_repository=cars, inquiry_repository=inquiries)


def get_assign_inquiry_use_case(
    inquiries: InquiryRepository = Depends(get_inquiry_repository),
    actors: ActorDirectory = Depends(get_actor_directory),
) -> AssignInquiry:
    return AssignInquiry(inquiry_repository=inquiries, actor_directory=actors)


def get_update_inquiry_status_use_case(
    inquiries: InquiryRepository = Depends(get_inquiry_repository),
    actors: ActorDirectory = Depends(get_actor_directory),
) -> UpdateInquiryStatus:
    return UpdateInquiryStatus(inquiry_repository=inquiries, actor_directory=actors)


def get_update_inquiry_notes_use_case(
    inquiries: InquiryRepository = Depends(get_inquiry_repository),
    actors: ActorDirectory = Depends(get_actor_directory),
) -> UpdateInquiryNotes:
    return UpdateInquiryNotes(inquiry_repository=inquiries, actor_directory=actors)


def get_delete_inquiry_use_case(
    inquiries: InquiryRepository = Depends(get_inquiry_repository),
    actors: ActorDirectory = Depends(get_actor_directory),
) -> DeleteInquiry:
    return DeleteInquiry(inquiry_repository=inquiries, actor_directory=actors)


def get_get_inquiry_use_case(
    inquiries: InquiryRepository = Depends(get_inquiry_repository),
    actors: ActorDirectory = Depends(get_actor_directory),
) -> GetInquiry:
    return GetInquiry(inquiry_repository=inquiries, actor_directory=actors)


def get_list_inquiries_use_case(
    inquiries: InquiryRepository = Depends(get_inquiry_repository),
    actors: ActorDirectory = Depends(get_actor_directory),
) -> ListInquiries:
    return ListInquiries(inquiry_repository=inquiries, actor_directory=actors)


# ==============================================================================
# Filter catalog use cases
# ==============================================================================


def get_get_filter_catalog_use_case(
    catalog: FilterCatalogRepository = Depends(get_filter_catalog_repository),
) -> GetFilterCatalog:
    return GetFilterCatalog(filter_catalog_repository=catalog)


def get_update_filter_catalog_use_case(
    catalog: FilterCatalogRepository = Depends(get_filter_catalog_repository),
    actors: ActorDirectory = Depends(get_actor_directory),
) -> UpdateFilterCatalog:
    return UpdateFilterCatalog(filter_catalog_repository=catalog, actor_directory=actors)


def get_edit_filter_catalog_use_case(
    catalog: FilterCatalogRepository = Depends(get_filter_catalog_repository),
    actors: ActorDirectory = Depends(get_actor_directory),
) -> EditFilterCatalog:
    return EditFilterCatalog(filter_catalog_repository=catalog, actor_directory=actors)
