"""Command-line client for the plant tracker.

Usage:
    plantcare list [--filter due]
    plantcare add --name "Snake Plant" --species Sansevieria --interval 14
    plantcare edit 3 --interval 10 --last-watered 2026-10-01
    plantcare water 3
    plantcare delete 3
    plantcare serve
"""

import argparse
import sys
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, tzinfo
from typing import Any, TextIO

import httpx
import uvicorn

from src.plantcare.client.api import ApiError, PlantApiClient
from src.plantcare.client.display import (
    due_badge,
    interval_summary,
    last_watered_summary,
    summarize,
)
from src.plantcare.client.forms import DraftError, PlantDraft, draft_from_plant, validate_draft
from src.plantcare.core.config import Settings, get_settings
from src.plantcare.core.logging import setup_logging
from src.plantcare.core.schedule import utc_now
from src.plantcare.models.enums import PlantFilter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="plantcare", description="Plant watering tracker")
    parser.add_argument("--api-url", help="API base URL (default: API_URL setting)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="List plants")
    list_cmd.add_argument(
        "--filter",
        dest="plant_filter",
        choices=[f.value for f in PlantFilter],
        default=PlantFilter.ALL.value,
    )

    add_cmd = commands.add_parser("add", help="Add a plant")
    add_cmd.add_argument("--name", required=True)
    add_cmd.add_argument("--species", required=True)
    add_cmd.add_argument("--interval", default="7", help="Watering interval in days (1-365)")
    add_cmd.add_argument("--last-watered", default="", help="YYYY-MM-DD or ISO timestamp")
    add_cmd.add_argument("--notes", default="")

    edit_cmd = commands.add_parser("edit", help="Edit a plant")
    edit_cmd.add_argument("plant_id", type=int)
    edit_cmd.add_argument("--name")
    edit_cmd.add_argument("--species")
    edit_cmd.add_argument("--interval")
    edit_cmd.add_argument("--last-watered", help="YYYY-MM-DD, ISO timestamp, or '' to clear")
    edit_cmd.add_argument("--notes")

    water_cmd = commands.add_parser("water", help="Mark a plant watered now")
    water_cmd.add_argument("plant_id", type=int)

    delete_cmd = commands.add_parser("delete", help="Delete a plant")
    delete_cmd.add_argument("plant_id", type=int)

    commands.add_parser("serve", help="Run the API server")
    return parser


def render_plant(plant: dict[str, Any], now: datetime) -> str:
    badge = due_badge(plant, now)
    lines = [
        f"#{plant['id']}  {plant['name']} ({plant['species']})  [{badge.text}]",
        f"    {interval_summary(plant)} | {last_watered_summary(plant)}",
    ]
    if plant.get("notes"):
        lines.append(f"    {plant['notes']}")
    return "\n".join(lines)


def render_plants(plants: list[dict[str, Any]], now: datetime) -> str:
    summary = summarize(plants, now)
    lines = [f"Total {summary.total} | Due {summary.due} | Upcoming {summary.upcoming}"]
    if not plants:
        lines.append("No plants in this view yet. Add your first plant with `plantcare add`.")
    lines.extend(render_plant(plant, now) for plant in plants)
    return "\n".join(lines)


# edit flag -> (draft field, payload key)
EDIT_FIELDS = {
    "name": ("name", "name"),
    "species": ("species", "species"),
    "interval": ("watering_interval_days", "wateringIntervalDays"),
    "last_watered": ("last_watered_at", "lastWateredAt"),
    "notes": ("notes", "notes"),
}


def _edit_payload(
    plant: dict[str, Any], args: argparse.Namespace, tz: tzinfo
) -> dict[str, Any]:
    """Validate the edited plant and keep only the fields given on the command line."""
    given = {flag: getattr(args, flag) for flag in EDIT_FIELDS if getattr(args, flag) is not None}
    if not given:
        raise DraftError("Nothing to update")

    draft = replace(
        draft_from_plant(plant),
        **{EDIT_FIELDS[flag][0]: value for flag, value in given.items()},
    )
    payload = validate_draft(draft, tz)
    return {EDIT_FIELDS[flag][1]: payload[EDIT_FIELDS[flag][1]] for flag in given}


def run_command(
    args: argparse.Namespace,
    client: PlantApiClient,
    settings: Settings,
    out: TextIO = sys.stdout,
) -> None:
    now = utc_now()
    if args.command == "list":
        plants = client.fetch_plants(PlantFilter(args.plant_filter))
        print(render_plants(plants, now), file=out)
    elif args.command == "add":
        draft = PlantDraft(
            name=args.name,
            species=args.species,
            watering_interval_days=args.interval,
            last_watered_at=args.last_watered,
            notes=args.notes,
        )
        plant = client.create_plant(validate_draft(draft, settings.tzinfo))
        print(render_plant(plant, now), file=out)
    elif args.command == "edit":
        current = client.get_plant(args.plant_id)
        payload = _edit_payload(current, args, settings.tzinfo)
        plant = client.update_plant(args.plant_id, payload)
        print(render_plant(plant, now), file=out)
    elif args.command == "water":
        plant = client.mark_watered(args.plant_id)
        print(render_plant(plant, now), file=out)
    elif args.command == "delete":
        client.delete_plant(args.plant_id)
        print(f"Deleted plant {args.plant_id}", file=out)


def serve(settings: Settings) -> None:
    uvicorn.run(
        "src.plantcare.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.verbose or settings.debug)

    if args.command == "serve":
        serve(settings)
        return 0

    try:
        with PlantApiClient(args.api_url or settings.api_url) as client:
            run_command(args, client, settings)
    except (ApiError, DraftError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except httpx.HTTPError as e:
        print(f"Error: could not reach the API ({e})", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
