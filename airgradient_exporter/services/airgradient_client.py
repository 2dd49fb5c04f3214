"""Client for the AirGradient public REST API."""

import logging

import requests
from pydantic import ValidationError

from airgradient_exporter.exceptions import (
    UpstreamMalformedException,
    UpstreamUnavailableException,
)
from airgradient_exporter.schemas.device_reading import DeviceReading, DeviceReadingList

logger = logging.getLogger(__name__)

CURRENT_MEASURES_PATH = "/locations/measures/current"


class AirGradientClient:
    """Fetches the current measures of every device on the account.

    Each call performs exactly one GET request. There are no retries and no
    caching between calls; the request uses the requests library's default
    timeout behavior.
    """

    def __init__(self, base_url: str, api_token: str):
        """Initialize the client.

        Args:
            base_url: API base URL (e.g., "https://api.airgradient.com/public/api/v1")
            api_token: Location token passed as the ``token`` query parameter
        """
        self.measures_url = base_url.rstrip("/") + CURRENT_MEASURES_PATH
        self._api_token = api_token

    def fetch_current_measures(self) -> list[DeviceReading]:
        """Fetch the latest reading of every device.

        Returns:
            Device readings in the order returned by the API

        Raises:
            UpstreamUnavailableException: On transport errors or a non-2xx status
            UpstreamMalformedException: If the body is not a JSON list of readings
        """
        try:
            response = requests.get(
                self.measures_url,
                params={"token": self._api_token},
                headers={"Accept": "application/json"},
            )
        except requests.RequestException as e:
            # The exception text may contain the full URL including the token
            raise UpstreamUnavailableException(None, type(e).__name__) from e

        if not response.ok:
            raise UpstreamUnavailableException(response.status_code, response.reason)

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamMalformedException("response body is not valid JSON") from e

        try:
            readings = DeviceReadingList.validate_python(payload)
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"]) or "<root>"
            raise UpstreamMalformedException(
                f"{e.error_count()} validation error(s), first at {location}: {first['msg']}"
            ) from e

        logger.debug(f"Fetched {len(readings)} device reading(s) from {self.measures_url}")
        return readings
