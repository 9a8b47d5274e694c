class VehicleNotFound(Exception):
    """Raised when an operation references a vehicle id the store does not hold"""

    def __init__(self, vehicle_id: int):
        super().__init__(f"Vehicle {vehicle_id} not found")
        self.vehicle_id = vehicle_id
