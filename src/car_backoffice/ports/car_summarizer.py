from __future__ import annotations

from abc import ABC, abstractmethod

from car_backoffice.domain.car import Car


class CarSummarizer(ABC):
    """Port to the text-generation collaborator that describes a listing."""

    @abstractmethod
    def summarize(self, car: Car) -> str: ...
