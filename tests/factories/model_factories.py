"""
Randomized model factories: anti-overfitting design.

Every factory call generates randomized non-identity fields
(names, coordinates, voltages, timestamps) so tests cannot
rely on specific default values.
"""

import random
import string
import uuid
from datetime import datetime, timezone, timedelta


def _random_suffix(length: int = 6) -> str:
    """Generate random alphanumeric suffix."""
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=length))


def _random_timestamp() -> datetime:
    """Generate random timestamp within last 30 days."""
    offset = random.randint(0, 30 * 24 * 3600)
    return datetime.now(timezone.utc) - timedelta(seconds=offset)


def make_asset_fields(**overrides):
    """
    Build a create payload (wire names) with randomized values.

    Returns:
        dict suitable for POST /api/grid-assets
    """
    suffix = _random_suffix()
    base = {
        "name": f"Substation {suffix}",
        "type": random.choice(["substation", "transformer", "feeder"]),
        "status": "normal",
        "latitude": round(random.uniform(3.0, 15.0), 4),
        "longitude": round(random.uniform(33.0, 48.0), 4),
        "address": f"Kebele {random.randint(1, 40)}, {suffix}",
        "voltage": float(random.choice([15, 33, 66, 132, 230])),
        "load": float(random.randint(0, 500)),
        "capacity": float(random.randint(500, 2000)),
        "site": f"site-{suffix}",
        "zone": f"zone-{random.randint(1, 9)}",
        "woreda": None,
        "category": random.choice(["distribution", "transmission"]),
        "nameLink": None,
    }
    base.update(overrides)
    return base


def make_grid_asset(asset_id: str = None, deleted: bool = False, **overrides):
    """
    Build a stored GridAsset record with randomized non-identity fields.

    Returns:
        dict suitable for GridAsset.model_validate(result)
    """
    base = make_asset_fields()
    base.update({
        "id": asset_id or uuid.uuid4().hex,
        "deleted": deleted,
        "lastUpdate": _random_timestamp(),
    })
    base.update(overrides)
    return base


def make_processed_record(asset_id: str = None, name: str = None, **overrides):
    """
    Build a raw record as a supplementary source might deliver it.

    Uses alternate names (plant_type, site) instead of type/address.
    """
    suffix = _random_suffix()
    base = {
        "id": asset_id or f"pp-{suffix}",
        "name": name or f"Plant {suffix}",
        "plant_type": random.choice(["hydro", "solar", "wind"]),
        "site": f"Site {suffix}",
        "status": "normal",
        "elevation": random.randint(500, 3000),
    }
    base.update(overrides)
    return base
