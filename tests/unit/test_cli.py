"""Tests for the command-line client."""

import io
import json
from datetime import UTC, datetime, timedelta

import httpx
import pytest

from src.plantcare.client.api import PlantApiClient
from src.plantcare.client.cli import build_parser, main, render_plants, run_command
from src.plantcare.client.forms import DraftError
from src.plantcare.core.config import Settings

pytestmark = pytest.mark.unit


def plant(**overrides) -> dict:
    data = {
        "id": 4,
        "name": "Pothos",
        "species": "Epipremnum aureum",
        "wateringIntervalDays": 7,
        "lastWateredAt": "2026-10-12T12:00:00Z",
        "notes": "",
        "nextWateringDueAt": "2026-10-19T12:00:00Z",
    }
    data.update(overrides)
    return data


@pytest.fixture
def settings() -> Settings:
    return Settings(care_timezone="UTC", run_migrations_on_startup=False)


def run(argv: list[str], handler, settings: Settings) -> str:
    out = io.StringIO()
    args = build_parser().parse_args(argv)
    with PlantApiClient("http://plants.test", transport=httpx.MockTransport(handler)) as client:
        run_command(args, client, settings, out=out)
    return out.getvalue()


def test_render_empty_list():
    output = render_plants([], datetime(2026, 10, 19, tzinfo=UTC))
    assert output.splitlines() == [
        "Total 0 | Due 0 | Upcoming 0",
        "No plants in this view yet. Add your first plant with `plantcare add`.",
    ]


def test_render_plants_summary_and_badges():
    now = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
    plants = [
        plant(id=1, lastWateredAt=None, nextWateringDueAt=None),
        plant(id=2, nextWateringDueAt=(now + timedelta(days=3)).isoformat(), notes="Bright"),
    ]

    output = render_plants(plants, now)

    assert output.splitlines()[0] == "Total 2 | Due 1 | Upcoming 1"
    assert "#1  Pothos (Epipremnum aureum)  [Needs water]" in output
    assert "#2  Pothos (Epipremnum aureum)  [Due in 3d]" in output
    assert "Every 7 day(s) | Last watered: Never" in output
    assert "    Bright" in output


def test_list_passes_filter(settings):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[plant()])

    output = run(["list", "--filter", "due"], handler, settings)

    assert seen[0].url.params["filter"] == "due"
    assert output.startswith("Total 1 | ")


def test_add_sends_validated_payload(settings):
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(201, json=plant())

    run(
        [
            "add",
            "--name",
            " Pothos ",
            "--species",
            "Epipremnum aureum",
            "--interval",
            "7",
            "--last-watered",
            "2026-10-12",
        ],
        handler,
        settings,
    )

    assert seen == [
        {
            "name": "Pothos",
            "species": "Epipremnum aureum",
            "wateringIntervalDays": 7,
            "lastWateredAt": "2026-10-12T12:00:00Z",
            "notes": "",
        }
    ]


def edit_handler(current: dict, sent: list[dict]):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            return httpx.Response(200, json=current)
        sent.append(json.loads(request.content))
        return httpx.Response(200, json=current)

    return handler


def test_edit_sends_only_given_fields(settings):
    sent: list[dict] = []
    handler = edit_handler(plant(notes="North window"), sent)

    run(["edit", "4", "--interval", "10"], handler, settings)

    assert sent == [{"wateringIntervalDays": 10}]


def test_edit_keeps_last_watered_time():
    """Editing notes must not round the stored watering time to a date."""
    sent: list[dict] = []
    current = plant(lastWateredAt="2026-10-12T08:15:00Z")
    berlin = Settings(care_timezone="Europe/Berlin", run_migrations_on_startup=False)

    run(["edit", "4", "--notes", "repotted"], edit_handler(current, sent), berlin)

    assert sent == [{"notes": "repotted"}]


def test_edit_last_watered(settings):
    sent: list[dict] = []

    run(["edit", "4", "--last-watered", "2026-10-18"], edit_handler(plant(), sent), settings)

    assert sent == [{"lastWateredAt": "2026-10-18T12:00:00Z"}]


def test_edit_clears_last_watered(settings):
    sent: list[dict] = []

    run(["edit", "4", "--last-watered", ""], edit_handler(plant(), sent), settings)

    assert sent == [{"lastWateredAt": None}]


def test_edit_validates_given_fields(settings):
    sent: list[dict] = []

    with pytest.raises(DraftError, match="between 1 and 365 days"):
        run(["edit", "4", "--interval", "0"], edit_handler(plant(), sent), settings)

    assert sent == []


def test_edit_without_changes(settings):
    with pytest.raises(DraftError, match="Nothing to update"):
        run(["edit", "4"], edit_handler(plant(), []), settings)

def test_delete(settings):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "DELETE"
        return httpx.Response(204)

    assert run(["delete", "4"], handler, settings) == "Deleted plant 4\n"


def test_main_reports_validation_errors(capsys):
    exit_code = main(["add", "--name", "Pothos", "--species", "Epipremnum", "--interval", "0"])

    assert exit_code == 1
    assert "Watering interval must be between 1 and 365 days" in capsys.readouterr().err


def test_filter_choices_are_restricted():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["list", "--filter", "soon"])
