"""
Pricing service client
Fetches a display price for a vehicle from the pricing service
"""
import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class PriceClient:

    def __init__(self, base_url: str, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def get_price(self, vehicle_id: int) -> Optional[str]:
        """
        Get a formatted price quote such as "USD 12345.67".
        Returns None when the pricing service cannot give one.
        """
        try:
            response = requests.get(
                f"{self.base_url}/services/price",
                params={"vehicleId": vehicle_id},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
            currency, price = data["currency"], data["price"]
            if currency is None or price is None:
                raise ValueError(f"missing currency or price in {data}")
            return f"{currency} {price}"
        except requests.exceptions.RequestException as e:
            logger.warning(f"Price service unavailable for vehicle {vehicle_id}: {e}")
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Unexpected price response for vehicle {vehicle_id}: {e}")
        return None
