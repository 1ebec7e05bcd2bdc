"""HTTP client for the plant API."""

from typing import Any

import httpx

from src.plantcare.core.logging import get_logger
from src.plantcare.models.enums import PlantFilter

logger = get_logger(__name__)

API_PREFIX = "/api/v1"
DEFAULT_TIMEOUT_SECONDS = 10.0


class ApiError(Exception):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _error_message(response: httpx.Response) -> str:
    message = response.reason_phrase
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        message = data.get("detail") or data.get("error") or message
    return str(message) if message else "Request failed"


class PlantApiClient:
    """Thin wrapper over the plant endpoints.

    Plants are returned as the decoded JSON dicts (camelCase keys), which is
    what :mod:`src.plantcare.client.display` consumes.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ):
        self._client = httpx.Client(
            base_url=base_url.rstrip("/") + API_PREFIX,
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> "PlantApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch_plants(self, plant_filter: PlantFilter = PlantFilter.ALL) -> list[dict[str, Any]]:
        params = {} if plant_filter is PlantFilter.ALL else {"filter": plant_filter.value}
        return self._request("GET", "/plants", params=params)

    def get_plant(self, plant_id: int) -> dict[str, Any]:
        return self._request("GET", f"/plants/{plant_id}")

    def create_plant(self, payload: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/plants", json=payload)

    def update_plant(self, plant_id: int, payload: dict[str, Any]) -> dict[str, Any]:
        """Partially update a plant (PATCH)."""
        return self._request("PATCH", f"/plants/{plant_id}", json=payload)

    def replace_plant(self, plant_id: int, payload: dict[str, Any]) -> dict[str, Any]:
        """Replace a plant's editable fields (PUT)."""
        return self._request("PUT", f"/plants/{plant_id}", json=payload)

    def mark_watered(self, plant_id: int) -> dict[str, Any]:
        return self._request("POST", f"/plants/{plant_id}/watered")

    def delete_plant(self, plant_id: int) -> None:
        self._request("DELETE", f"/plants/{plant_id}")

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = self._client.request(method, path, **kwargs)
        if response.is_error:
            message = _error_message(response)
            logger.debug(
                "API request failed",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise ApiError(response.status_code, message)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()
