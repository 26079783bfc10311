from __future__ import annotations

from car_backoffice.domain.car import Car
from car_backoffice.ports.car_summarizer import CarSummarizer


class TemplateCarSummarizer(CarSummarizer):
    """
    Deterministic stand-in for the text-generation collaborator.

    Produces a one-paragraph description from the listing fields so the
    summary endpoint works without an external model configured.
    """

    def summarize(self, car: Car) -> str:
        owners = "1 owner" if car.ownership == 1 else f"{car.ownership} owners"
        parts = [
            f"{car.year} {car.brand} {car.model} in {car.color}",
            f"{car.km_run:,} km driven",
            owners,
            f"{car.fuel.value}, {car.transmission.value.lower()} transmission",
            f"{car.engine_cc} cc",
        ]
        if car.registration_year is not None:
            parts.append(f"registered {car.registration_year}")
        summary = "; ".join(parts) + f". Asking price {car.price:,}."
        if car.additional_details:
            summary += f" {car.additional_details.strip()}"
        return summary
