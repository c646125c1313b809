#!/usr/bin/env python3
"""
Size a room AC from the command line

Examples:
    python scripts/size_room.py --city Mumbai --length 15 --breadth 12 --height 10
    python scripts/size_room.py --json room.json
"""

import os
import sys
import json
import logging
import argparse
from typing import Any, Dict, List, Optional

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pydantic import ValidationError as PydanticValidationError

from models.enums import DifficultyTier, RoofCondition
from models.schemas import CalculationResponse, CalculatorRequest
from services.error_types import ValidationError
from services.load_calculator import run_calculation
from utils.logging_utils import timed_operation

logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(levelname)s - %(message)s'
)


def _parse_elements(values: Optional[List[str]]) -> Optional[List[Dict[str, Any]]]:
    """Parse AREA:DIRECTION pairs, e.g. 20:S"""
    if values is None:
        return None
    elements = []
    for value in values:
        area, _, direction = value.partition(":")
        elements.append({"area": float(area), "direction": direction or None})
    return elements


def _parse_appliances(values: Optional[List[str]]) -> Optional[Dict[str, int]]:
    """Parse NAME=COUNT pairs, e.g. Fridge=1"""
    if values is None:
        return None
    appliances = {}
    for value in values:
        name, _, count = value.rpartition("=")
        appliances[name] = int(count)
    return appliances


def build_request(args: argparse.Namespace) -> CalculatorRequest:
    if args.json:
        with open(args.json, 'r', encoding='utf-8') as f:
            return CalculatorRequest.model_validate(json.load(f))

    return CalculatorRequest(
        difficulty_tier=args.tier,
        room={"length": args.length, "breadth": args.breadth, "height": args.height},
        city=args.city,
        windows=_parse_elements(args.window),
        walls=_parse_elements(args.wall),
        roof_condition=args.roof,
        occupants=args.occupants,
        appliances=_parse_appliances(args.appliance),
        ventilation_cfm=args.ventilation_cfm,
    )


def format_report(result: CalculationResponse) -> str:
    b = result.breakdown
    s, lat, o, g = b.room_sensible, b.room_latent, b.outside_air, b.grand_total
    lines = [
        "Room sensible heat (BTU/hr)",
        f"  Glass:        {s.glass:10.2f}",
        f"  Wall:         {s.wall:10.2f}",
        f"  Floor:        {s.floor:10.2f}",
        f"  Roof:         {s.roof:10.2f}",
        f"  People:       {s.people:10.2f}",
        f"  Equipment:    {s.equipment:10.2f}",
        f"  Lighting:     {s.lighting:10.2f}",
        f"  Duct gain:    {s.duct_gain:10.2f}",
        f"  Fan heat:     {s.fan_heat:10.2f}",
        f"  Total:        {s.total:10.2f}",
        "Room latent heat (BTU/hr)",
        f"  People:       {lat.people:10.2f}",
        f"  Infiltration: {lat.infiltration:10.2f}",
        f"  Total:        {lat.total:10.2f}",
        "Outside air heat (BTU/hr)",
        f"  Sensible:     {o.sensible:10.2f}",
        f"  Latent:       {o.latent:10.2f}",
        f"  Total:        {o.total:10.2f}",
        "Grand total (BTU/hr)",
        f"  Subtotal:     {g.subtotal:10.2f}",
        f"  Safety:       {g.safety_margin:10.2f}",
        f"  Final:        {g.final:10.2f}",
        "",
        f"Ventilation: {result.ventilation_cfm:.2f} CFM",
        f"Tonnage: {b.tonnage:.3f} tons",
        f"Recommended AC size: {result.recommended_tons} tons ({result.equipment_match.rating})",
    ]
    if result.ignored_appliances:
        lines.append(f"Ignored appliances (not in catalog): {', '.join(result.ignored_appliances)}")
    return "\n".join(lines)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Estimate the AC tonnage a room needs')
    parser.add_argument('--json', help='Read the full request from a JSON file')
    parser.add_argument('--tier', choices=[t.value for t in DifficultyTier], default='low')
    parser.add_argument('--city', default='Mumbai')
    parser.add_argument('--length', type=float, default=15, help='Room length (ft)')
    parser.add_argument('--breadth', type=float, default=12, help='Room breadth (ft)')
    parser.add_argument('--height', type=float, default=10, help='Ceiling height (ft)')
    parser.add_argument('--window', action='append', metavar='AREA:DIR', help='Window, repeatable')
    parser.add_argument('--wall', action='append', metavar='AREA:DIR', help='Wall, repeatable')
    parser.add_argument('--roof', choices=[c.value for c in RoofCondition])
    parser.add_argument('--occupants', type=int)
    parser.add_argument('--appliance', action='append', metavar='NAME=COUNT', help='Appliance, repeatable')
    parser.add_argument('--ventilation-cfm', type=float, help='Ventilation override (CFM)')
    parser.add_argument('--output-json', action='store_true', help='Print the raw JSON response')
    return parser


@timed_operation("size_room")
def main(argv: Optional[List[str]] = None) -> int:
    args = create_parser().parse_args(argv)

    try:
        request = build_request(args)
    except PydanticValidationError as e:
        error = e.errors()[0]
        location = ".".join(str(part) for part in error["loc"]) or "request"
        print(f"Invalid input: {location}: {error['msg']}", file=sys.stderr)
        return 1
    except (ValueError, OSError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1

    try:
        result = run_calculation(request)
    except ValidationError as e:
        print(f"Invalid input: {e.message}", file=sys.stderr)
        return 1

    if args.output_json:
        print(result.model_dump_json(indent=2))
    else:
        print(format_report(result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
