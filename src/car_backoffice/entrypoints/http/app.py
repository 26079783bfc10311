from fastapi import FastAPI

from car_backoffice.entrypoints.http.exception_handlers import register_exception_handlers
from car_backoffice.entrypoints.http.routes.filter_catalog import router as filter_catalog_router
from car_backoffice.entrypoints.http.routes.health import router as health_router
from car_backoffice.entrypoints.http.routes.inquiries import router as inquiries_router
from car_backoffice.entrypoints.http.routes.listings import router as listings_router
from car_backoffice.infra.logging_config import configure_logging


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Car Back Office API",
        description="""
        Back office for a used-vehicle marketplace.

        ## Features
        - Listing submission, review and public catalog search
        - Customer inquiries routed to sales agents through to closure
        - Admin-managed brand/model/year filter catalog

        ## Authentication
        Handled upstream. The resolved caller arrives in the `X-Actor-Id`
        header; unknown actors get 401, missing capabilities get 403.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(listings_router, prefix="/v1")
    app.include_router(inquiries_router, prefix="/v1")
    app.include_router(filter_catalog_router, prefix="/v1")

    return app


app = build_app()
