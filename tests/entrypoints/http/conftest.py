"""
HTTP fixtures: the real application wired to in-memory adapters.

Only the repository and actor directory providers are overridden, so every
request still goes through the real use case factories, mappers and
exception handlers. No database session is ever opened.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from car_backoffice.adapters.in_memory_actor_directory import InMemoryActorDirectory
from car_backoffice.adapters.in_memory_car_catalog_repository import (
    InMemoryCarCatalogRepository,
)
from car_backoffice.adapters.in_memory_filter_catalog_repository import (
    InMemoryFilterCatalogRepository,
)
from car_backoffice.adapters.in_memory_inquiry_repository import InMemoryInquiryRepository
from car_backoffice.domain.filter_catalog import FilterCatalog
from car_backoffice.entrypoints.http.app import build_app
from car_backoffice.entrypoints.http.dependencies import (
    get_actor_directory,
    get_car_catalog_repository,
    get_filter_catalog_repository,
    get_inquiry_repository,
)


@pytest.fixture()
def car_repo() -> InMemoryCarCatalogRepository:
    return InMemoryCarCatalogRepository()


@pytest.fixture()
def inquiry_repo() -> InMemoryInquiryRepository:
    return InMemoryInquiryRepository()


@pytest.fixture()
def filter_catalog_repo(catalog: FilterCatalog) -> InMemoryFilterCatalogRepository:
    """Reference catalog as stored after one admin write."""
    return InMemoryFilterCatalogRepository(replace(catalog, version=1))


@pytest.fixture()
def app(
    car_repo: InMemoryCarCatalogRepository,
    inquiry_repo: InMemoryInquiryRepository,
    filter_catalog_repo: InMemoryFilterCatalogRepository,
    actor_directory: InMemoryActorDirectory,
) -> FastAPI:
    test_app = build_app()
    test_app.dependency_overrides[get_car_catalog_repository] = lambda: car_repo
    test_app.dependency_overrides[get_inquiry_repository] = lambda: inquiry_repo
    test_app.dependency_overrides[get_filter_catalog_repository] = lambda: filter_catalog_repo
    test_app.dependency_overrides[get_actor_directory] = lambda: actor_directory
    return test_app


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def as_actor() -> Callable[[str], dict[str, str]]:
    """Headers carrying the caller identity set by the upstream auth layer."""

    def _headers(actor_id: str) -> dict[str, str]:
        return {"X-Actor-Id": actor_id}

    return _headers


@pytest.fixture()
def listing_payload() -> dict[str, object]:
    return {
        "brand": "Tata",
        "model": "Nexon",
        "year": 2021,
        "price": 850000,
        "km_run": 32000,
        "fuel": "Petrol",
        "transmission": "Manual",
        "ownership": 1,
        "color": "White",
        "engine_cc": 1199,
        "images": ["https://cdn.example.com/cars/nexon-1.jpg"],
        "badges": ["featured"],
    }
