from delivery_zones.dataio import load_deliveries, load_zones
from delivery_zones.utils import assign_deliveries_to_zones
from delivery_zones.config import DELIVERIES_PATH, OUTPUTS_DIR, ZONES_PATH

import pandas as pd
import os

if __name__ == "__main__":
    # Load zones and delivery points
    zones = load_zones(ZONES_PATH, active_only=True)
    deliveries = load_deliveries(DELIVERIES_PATH)

    # Tag each delivery with its primary zone
    deliveries_zoned = assign_deliveries_to_zones(deliveries, zones)

    # Save the tagged deliveries to outputs
    os.makedirs(OUTPUTS_DIR, exist_ok=True)
    output_path = os.path.join(OUTPUTS_DIR, "deliveries_zoned.gpkg")
    deliveries_zoned.to_file(output_path, driver="GPKG")

    # Save per-zone summary as CSV
    names = {z.id: z.name for z in zones}
    summary_df = (
        deliveries_zoned.assign(zone_id=deliveries_zoned["zone_id"].fillna("none"))
        .groupby("zone_id")
        .size()
        .rename("deliveries")
        .reset_index()
    )
    summary_df["zone_name"] = summary_df["zone_id"].map(names).fillna("outside all zones")
    summary_csv = os.path.join(OUTPUTS_DIR, "zone_summary.csv")
    summary_df.to_csv(summary_csv, index=False)
    print(summary_df.to_string(index=False))
