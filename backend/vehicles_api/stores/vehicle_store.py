"""Vehicle storage: a small get/get_all/save/delete interface over SQLAlchemy.

Only the coordinates of a vehicle's location are persisted. Address fields and
the price quote are read-time decorations and never reach the table.
"""

from typing import List, Optional, Protocol, runtime_checkable
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.vehicle_model import Vehicle as VehicleModel
from ..schemas.vehicle_schema import Location, Vehicle

logger = logging.getLogger(__name__)


@runtime_checkable
class VehicleStore(Protocol):
    """Keyed storage of vehicle records."""

    def get_by_id(self, vehicle_id: int) -> Optional[Vehicle]: ...
    def get_all(self) -> List[Vehicle]: ...
    def save(self, vehicle: Vehicle) -> Vehicle: ...
    def delete_by_id(self, vehicle_id: int) -> None: ...


class SqlVehicleStore:
    """VehicleStore backed by a SQLAlchemy session (one per request)."""

    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def _to_schema(row: VehicleModel) -> Vehicle:
        return Vehicle(
            id=row.vehicle_id,
            condition=row.condition,
            details=row.details,
            location=Location(lat=row.lat, lon=row.lon),
            created_at=row.created_at,
            modified_at=row.modified_at,
        )

    @staticmethod
    def _apply(row: VehicleModel, vehicle: Vehicle) -> None:
        row.condition = vehicle.condition.value
        row.details = vehicle.details.model_dump()
        row.lat = vehicle.location.lat
        row.lon = vehicle.location.lon

    def get_by_id(self, vehicle_id: int) -> Optional[Vehicle]:
        row = self.db.get(VehicleModel, vehicle_id)
        if row is None:
            return None
        return self._to_schema(row)

    def get_all(self) -> List[Vehicle]:
        rows = self.db.query(VehicleModel).order_by(VehicleModel.vehicle_id).all()
        return [self._to_schema(row) for row in rows]

    def save(self, vehicle: Vehicle) -> Vehicle:
        """Insert when ``vehicle.id`` is None, otherwise write over that row."""
        row = None
        if vehicle.id is not None:
            row = self.db.get(VehicleModel, vehicle.id)
        if row is None:
            row = VehicleModel(vehicle_id=vehicle.id)
            self.db.add(row)
        self._apply(row, vehicle)

        try:
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            logger.error(f"Failed to save vehicle: {e}", exc_info=True)
            self.db.rollback()
            raise
        return self._to_schema(row)

    def delete_by_id(self, vehicle_id: int) -> None:
        row = self.db.get(VehicleModel, vehicle_id)
        if row is None:
            return

        try:
            self.db.delete(row)
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete vehicle {vehicle_id}: {e}", exc_info=True)
            self.db.rollback()
            raise
