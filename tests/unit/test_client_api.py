"""Tests for the HTTP API client against a mocked transport."""

import json

import httpx
import pytest

from src.plantcare.client.api import ApiError, PlantApiClient
from src.plantcare.models import PlantFilter

pytestmark = pytest.mark.unit

PLANT = {
    "id": 1,
    "name": "Fern",
    "species": "Nephrolepis exaltata",
    "wateringIntervalDays": 3,
    "lastWateredAt": None,
    "notes": "",
    "createdAt": "2026-10-19T12:00:00Z",
    "updatedAt": "2026-10-19T12:00:00Z",
    "nextWateringDueAt": None,
}


class Recorder:
    """Mock transport handler that records requests and replays a response."""

    def __init__(self, response: httpx.Response):
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response


def make_client(response: httpx.Response) -> tuple[PlantApiClient, Recorder]:
    recorder = Recorder(response)
    client = PlantApiClient("http://plants.test/", transport=httpx.MockTransport(recorder))
    return client, recorder


def test_fetch_all_sends_no_filter():
    client, recorder = make_client(httpx.Response(200, json=[PLANT]))
    with client:
        assert client.fetch_plants() == [PLANT]

    request = recorder.requests[0]
    assert request.method == "GET"
    assert request.url.path == "/api/v1/plants"
    assert "filter" not in request.url.params


@pytest.mark.parametrize("plant_filter", [PlantFilter.DUE, PlantFilter.UPCOMING])
def test_fetch_with_filter(plant_filter):
    client, recorder = make_client(httpx.Response(200, json=[]))
    with client:
        assert client.fetch_plants(plant_filter) == []

    assert recorder.requests[0].url.params["filter"] == plant_filter.value


def test_create_posts_payload():
    client, recorder = make_client(httpx.Response(201, json=PLANT))
    payload = {"name": "Fern", "species": "Nephrolepis exaltata", "wateringIntervalDays": 3}
    with client:
        assert client.create_plant(payload) == PLANT

    request = recorder.requests[0]
    assert request.method == "POST"
    assert json.loads(request.content) == payload


@pytest.mark.parametrize(
    ("call", "method", "path"),
    [
        (lambda c: c.get_plant(1), "GET", "/api/v1/plants/1"),
        (lambda c: c.update_plant(1, {"notes": "x"}), "PATCH", "/api/v1/plants/1"),
        (lambda c: c.replace_plant(1, {"name": "x"}), "PUT", "/api/v1/plants/1"),
        (lambda c: c.mark_watered(1), "POST", "/api/v1/plants/1/watered"),
    ],
)
def test_plant_routes(call, method, path):
    client, recorder = make_client(httpx.Response(200, json=PLANT))
    with client:
        assert call(client) == PLANT

    assert recorder.requests[0].method == method
    assert recorder.requests[0].url.path == path


def test_delete_returns_none():
    client, recorder = make_client(httpx.Response(204))
    with client:
        assert client.delete_plant(7) is None

    assert recorder.requests[0].method == "DELETE"


def test_error_uses_detail():
    client, _ = make_client(
        httpx.Response(404, json={"detail": "Plant 9 not found", "request_id": "abc"})
    )
    with client, pytest.raises(ApiError) as exc_info:
        client.get_plant(9)

    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == "Plant 9 not found"


def test_error_uses_error_field():
    client, _ = make_client(httpx.Response(400, json={"error": "Invalid plant id"}))
    with client, pytest.raises(ApiError, match="Invalid plant id"):
        client.get_plant(1)


def test_error_without_json_body():
    client, _ = make_client(httpx.Response(500, text="boom"))
    with client, pytest.raises(ApiError) as exc_info:
        client.fetch_plants()

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Internal Server Error"
