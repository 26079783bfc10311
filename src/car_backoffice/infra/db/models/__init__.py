from car_backoffice.infra.db.models.actor import ActorRow
from car_backoffice.infra.db.models.base import Base
from car_backoffice.infra.db.models.car import CarRow
from car_backoffice.infra.db.models.filter_catalog import FilterCatalogRow
from car_backoffice.infra.db.models.inquiry import InquiryRow

__all__ = ["ActorRow", "Base", "CarRow", "FilterCatalogRow", "InquiryRow"]
