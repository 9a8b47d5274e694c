# backend/vehicles_api/services/vehicle_service.py

"""
Vehicle Service
Creates, reads, updates and deletes vehicle records, and decorates a read
with the current price quote and the resolved address of the vehicle.
"""
import logging
from typing import List

from ..clients.maps_client import MapsClient
from ..clients.price_client import PriceClient
from ..core.exceptions import VehicleNotFound
from ..schemas.vehicle_schema import Location, Vehicle
from ..stores.vehicle_store import VehicleStore

logger = logging.getLogger(__name__)


class VehicleService:

    def __init__(self, store: VehicleStore, price_client: PriceClient, maps_client: MapsClient):
        self.store = store
        self.price_client = price_client
        self.maps_client = maps_client

    def list(self) -> List[Vehicle]:
        """All stored vehicles, without price or address."""
        return self.store.get_all()

    def find_by_id(self, vehicle_id: int) -> Vehicle:
        """
        Get a vehicle by id, with price and location filled in for this call.
        Raises VehicleNotFound if the id is unknown.
        """
        vehicle = self.store.get_by_id(vehicle_id)
        if vehicle is None:
            raise VehicleNotFound(vehicle_id)

        vehicle.price = self.price_client.get_price(vehicle_id)
        vehicle.location = self.maps_client.get_address(
            Location(lat=vehicle.location.lat, lon=vehicle.location.lon)
        )
        return vehicle

    def save(self, vehicle: Vehicle) -> Vehicle:
        """
        Create a vehicle when it has no id, otherwise update the stored one.
        An update only replaces condition, details and location.
        """
        if vehicle.id is None:
            saved = self.store.save(vehicle)
            logger.info(f"Vehicle created: {saved.id}")
            return saved

        existing = self.store.get_by_id(vehicle.id)
        if existing is None:
            raise VehicleNotFound(vehicle.id)

        existing.condition = vehicle.condition
        existing.details = vehicle.details
        existing.location = vehicle.location
        saved = self.store.save(existing)
        logger.info(f"Vehicle {saved.id} updated")
        return saved

    def delete(self, vehicle_id: int) -> None:
        """Delete a vehicle by id. Raises VehicleNotFound if the id is unknown."""
        if self.store.get_by_id(vehicle_id) is None:
            raise VehicleNotFound(vehicle_id)

        self.store.delete_by_id(vehicle_id)
        logger.info(f"Vehicle {vehicle_id} deleted")
