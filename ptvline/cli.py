#!/usr/bin/env python3
"""Command-line interface for ptvline.

Commands:
  - ptvline routes      : list routes, optionally filtered by name
  - ptvline stops       : stops on a route
  - ptvline departures  : next departures from a stop on a route
  - ptvline directions  : directions a route runs in

Typical usage:
  ptvline routes
  ptvline stops 3 --stop "Flinders" --format "StopID StopName" --delimiter ","
  ptvline departures --route 3 --stop 1071 --direction 1 --count 5 --timezone UTC
"""

import argparse
import logging
import sys
from typing import Any, List, Optional

from . import __version__, settings
from .api import TimetableClient
from .departures import next_departures_towards
from .errors import PtvLineError, UsageError
from .output import print_result, write_json_file
from .setup_logging import setup_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    # flags shared by every command
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--format", default="", help='format the output, e.g. "RouteID RouteName"')
    common.add_argument("--delimiter", default=" ", help="delimiter between format arguments")
    common.add_argument("--timezone", default=settings.DEFAULT_TIMEZONE, help="specify timezone for dates")
    common.add_argument("--save", metavar="PATH", default=None, help="also write the raw records to a JSON file")

    p = argparse.ArgumentParser(prog="ptvline", description="PTV timetable CLI")
    p.add_argument("--version", action="version", version=f"ptvline {__version__}")
    p.add_argument("--log-level", default=settings.LOG_LEVEL, help="DEBUG, INFO, WARNING, ERROR")
    sub = p.add_subparsers(dest="cmd")

    pr = sub.add_parser("routes", parents=[common], help="explore routes")
    pr.add_argument("name", nargs="?", default=None, help="filter routes by name")

    ps = sub.add_parser("stops", parents=[common], help="explore stops")
    ps.add_argument("route_id", nargs="?", default="", help="the route ID")
    ps.add_argument("--stop", default="", help="filter a specific stop by the station name")

    pd = sub.add_parser("departures", parents=[common], help="explore departures")
    pd.add_argument("--count", type=int, default=-1, help="the next N trains departing")
    pd.add_argument("--route", type=int, default=-1, help="the route ID")
    pd.add_argument("--stop", type=int, default=-1, help="the stop ID")
    pd.add_argument("--direction", type=int, default=-1, help="the direction ID")

    pdir = sub.add_parser("directions", parents=[common], help="explore directions")
    pdir.add_argument("route_id", nargs="?", default="", help="the route ID")

    return p.parse_args(argv)


def _route_id(raw: str, missing: str, invalid: str) -> int:
    if not raw:
        raise UsageError(missing)
    try:
        return int(raw)
    except ValueError:
        raise UsageError(invalid) from None


def _emit(records: List[Any], args: argparse.Namespace) -> None:
    if args.save:
        write_json_file(records, args.save)
    print_result(records, args.format, args.delimiter, args.timezone)


# -----------------------------
# commands
# -----------------------------
def routes_action(client: TimetableClient, args: argparse.Namespace) -> int:
    _emit(client.get_routes(args.name), args)
    return 0


def stops_action(client: TimetableClient, args: argparse.Namespace) -> int:
    route_id = _route_id(args.route_id, "please specify a route ID", "please specify a valid route ID number")
    _emit(client.get_stops(route_id, stop_name=args.stop), args)
    return 0


def departures_action(client: TimetableClient, args: argparse.Namespace) -> int:
    if args.route == -1 or args.stop == -1:
        raise UsageError("please specify both --route and --stop")
    departures = client.get_departures(args.stop, args.route)
    _emit(next_departures_towards(departures, args.direction, args.count), args)
    return 0


def directions_action(client: TimetableClient, args: argparse.Namespace) -> int:
    route_id = _route_id(args.route_id, "route ID not provided", "failed to parse route ID")
    _emit(client.get_directions(route_id), args)
    return 0


COMMANDS = {
    "routes": routes_action,
    "stops": stops_action,
    "departures": departures_action,
    "directions": directions_action,
}


def main(argv: Optional[List[str]] = None, client: Optional[TimetableClient] = None) -> int:
    """Run the CLI with the given arguments."""
    args = _parse_args(argv)
    setup_logging(args.log_level)

    if not args.cmd:
        print("Error: Command required. Use --help for usage info.", file=sys.stderr)
        return 1

    try:
        return COMMANDS[args.cmd](client or TimetableClient(), args)
    except PtvLineError as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
