from delivery_zones.dataio import load_zones
from delivery_zones.eligibility import explain_delivery, get_delivery_info
from delivery_zones.geocoding import geocode_address
from delivery_zones.config import ZONES_PATH
from delivery_zones.logging_utils import get_logger

import argparse
import json
import sys

logger = get_logger("CheckAddress")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Check whether an address is inside a delivery zone.")
    parser.add_argument("address", help="Street address to geocode")
    parser.add_argument("--date", help="Delivery date (YYYY-MM-DD) or weekday name; omit for the whole week")
    parser.add_argument("--zones", default=str(ZONES_PATH), help="Zone JSON export")
    parser.add_argument("--explain", action="store_true", help="Show why each zone did or did not match")
    args = parser.parse_args()

    # 1. Load zones and geocode the address
    zones = load_zones(args.zones, active_only=True)
    geocoded = geocode_address(args.address)
    if geocoded is None:
        logger.error("Address could not be geocoded.")
        sys.exit(1)

    # 2. Check eligibility
    info = get_delivery_info(geocoded.point, zones, weekday=args.date)
    if info.is_eligible:
        print(f"Deliverable: {geocoded.display_name} (zone: {info.primary_zone.name})")
    else:
        print(f"Sorry, we don't deliver to {geocoded.display_name} yet.")
    print(json.dumps(info.to_dict()["mergedWindows"], indent=2))

    # 3. Optional per-zone diagnostics
    if args.explain:
        for match in explain_delivery(geocoded.point, zones):
            status = "match" if match.matched else match.reason.value
            print(f"  {match.zone.id:>8}  {match.zone.name:<30} {status} {match.detail}")
