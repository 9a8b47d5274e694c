# backend/vehicles_api/api/v1/vehicles.py
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from typing import List
import logging

from ...schemas.vehicle_schema import Vehicle, VehicleCreate
from ...clients.maps_client import MapsClient
from ...clients.price_client import PriceClient
from ...core.config import settings
from ...core.database import get_db
from ...services.vehicle_service import VehicleService
from ...stores.vehicle_store import SqlVehicleStore

router = APIRouter()


def get_vehicle_service(db: Session = Depends(get_db)) -> VehicleService:
    """Build a VehicleService bound to this request's session"""
    return VehicleService(
        SqlVehicleStore(db),
        PriceClient(settings.PRICING_ENDPOINT, timeout=settings.REQUEST_TIMEOUT_SECONDS),
        MapsClient(settings.MAPS_ENDPOINT, timeout=settings.REQUEST_TIMEOUT_SECONDS),
    )


# ===== VEHICLE CRUD =====

@router.get("", response_model=List[Vehicle])
def list_vehicles(service: VehicleService = Depends(get_vehicle_service)):
    """Get all vehicles (without price or address)"""
    return service.list()


@router.get("/{vehicle_id}", response_model=Vehicle)
def get_vehicle(vehicle_id: int, service: VehicleService = Depends(get_vehicle_service)):
    """Get a specific vehicle by ID, including its price and location"""
    return service.find_by_id(vehicle_id)


@router.post("", response_model=Vehicle, status_code=201)
def create_vehicle(vehicle: VehicleCreate, service: VehicleService = Depends(get_vehicle_service)):
    """Create a new vehicle"""
    logging.info(f"Creating vehicle: {vehicle.details.manufacturer.name} {vehicle.details.model}")
    return service.save(Vehicle(**vehicle.model_dump()))


@router.put("/{vehicle_id}", response_model=Vehicle)
def update_vehicle(
    vehicle_id: int,
    vehicle: VehicleCreate,
    service: VehicleService = Depends(get_vehicle_service)
):
    """Update the condition, details and location of a vehicle"""
    return service.save(Vehicle(id=vehicle_id, **vehicle.model_dump()))


@router.delete("/{vehicle_id}", status_code=204)
def delete_vehicle(vehicle_id: int, service: VehicleService = Depends(get_vehicle_service)):
    """Delete a vehicle"""
    service.delete(vehicle_id)
    return Response(status_code=204)
