#!/usr/bin/env python3
"""
Interactive local form harness (no HTTP server).

Usage:
  python3 scripts/form_local.py

What it does:
- Mounts one CreatePointForm through the project wiring
- Uses DEFAULT_LAT / DEFAULT_LNG from the environment as the device position
- Lets you type the same events a browser would send and prints the rendered view
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

load_dotenv()

from app.application.dto.form_view import FormView
from app.application.exceptions import (
    MissingRequiredFieldError, SubmissionBlockedError, UnknownCityError, UpstreamServiceError,
)
from app.core.config import settings
from app.infrastructure.geolocation.fixed import FixedGeolocation
from app.wiring.dependencies import build_form

HELP = """Commands:
  /name <text>  /email <text>  /whatsapp <text>
  /state <UF>        select a state (0 clears)
  /city <name>       select a city
  /item <id>         toggle a catalog item
  /click <lat> <lng> map click
  /drag <lat> <lng>  marker drag-end
  /show              print the form
  /submit            send the form
  /quit"""


def _print_view(view: FormView) -> None:
    print("-" * 60)
    print(f"name={view.fields.name!r} email={view.fields.email!r} whatsapp={view.fields.whatsapp!r}")
    print(f"state={view.region.state_code} city={view.region.city_name}")
    print(f"states loaded: {len(view.state_options) - 1}")
    cities = [o.label for o in view.city_options if o.value]
    print(f"cities: {', '.join(cities[1:6])}{' ...' if len(cities) > 6 else ''}" if cities else "cities: ...")
    marker = view.map.marker
    print(f"marker: ({marker.lat}, {marker.lng}) resolved={view.point_resolved}")
    for tile in view.items:
        mark = "x" if tile.selected else " "
        print(f"  [{mark}] {tile.id:>3} {tile.title}")
    if view.missing_fields:
        print(f"missing: {', '.join(view.missing_fields)}")
    if view.notice:
        print(f"notice: {view.notice}")
    print("-" * 60)


def _parse_coordinate(args: list[str]) -> tuple[float, float] | None:
    if len(args) != 2:
        return None
    try:
        return float(args[0]), float(args[1])
    except ValueError:
        return None


async def main() -> None:
    form = build_form(geolocation=FixedGeolocation(settings.DEFAULT_LAT, settings.DEFAULT_LNG))
    await form.mount()
    print("\nLocal Create-Point Harness")
    print(HELP)

    while True:
        try:
            line = (await asyncio.to_thread(input, "\n> ")).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if not line:
            continue
        cmd, _, rest = line.partition(" ")
        cmd = cmd.lower()
        rest = rest.strip()

        if cmd in ("/quit", "/exit"):
            print("Bye!")
            break
        if cmd == "/help":
            print(HELP)
        elif cmd in ("/name", "/email", "/whatsapp"):
            form.handle_input_change(cmd[1:], rest)
        elif cmd == "/state":
            form.handle_select_state_change(rest.upper() or "0")
            await form.wait_idle(timeout=settings.HTTP_TIMEOUT_SECONDS)
            _print_view(form.render())
        elif cmd == "/city":
            try:
                form.handle_select_city_change(rest)
            except UnknownCityError as e:
                print(e)
        elif cmd == "/item":
            try:
                selected = form.handle_item_click(int(rest))
            except ValueError:
                print("Usage: /item <id>")
                continue
            print("selected" if selected else "unselected")
        elif cmd in ("/click", "/drag"):
            coord = _parse_coordinate(rest.split())
            if coord is None:
                print(f"Usage: {cmd} <lat> <lng>")
                continue
            if cmd == "/click":
                form.handle_map_click(*coord)
            else:
                form.handle_marker_dragend(*coord)
        elif cmd == "/show":
            await form.wait_idle(timeout=settings.HTTP_TIMEOUT_SECONDS)
            _print_view(form.render())
        elif cmd == "/submit":
            try:
                payload = await form.handle_submit()
            except MissingRequiredFieldError as e:
                print(f"Missing: {', '.join(e.fields)}")
                continue
            except SubmissionBlockedError as e:
                print(f"Blocked: {e}")
                continue
            except UpstreamServiceError as e:
                print(f"Registration failed: {e}")
                continue
            print(payload.to_dict())
            print(form.state.notice)
        else:
            print("Unknown command. Type /help.")

    form.close()


if __name__ == "__main__":
    asyncio.run(main())
