"""Snapshot the configured backend into a JSON seed file.

Usage: python scripts/export_seed.py [output.json]

The file can be served read-only with GATEWAY_MODE=seed SEED_PATH=<file>.
"""

from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_portal.attendance_portal.container import GatewaySettings, build_gateway
from src.attendance_portal.attendance_portal.gateway.codec import attendance_to_json, inventory_to_json, user_to_json


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    gateway_settings = GatewaySettings.from_dict(dict(settings.GATEWAY_CONFIG))
    gateway = build_gateway(gateway_settings)
    try:
        payload = {
            "users": [user_to_json(u) for u in gateway.fetch_users()],
            "attendance": [attendance_to_json(a) for a in gateway.fetch_attendance()],
            "inventory": [inventory_to_json(i) for i in gateway.fetch_inventory()],
        }
    finally:
        gateway.close()

    out_path = Path(sys.argv[1]) if len(sys.argv) > 1 else REPO_ROOT / "seed.json"
    out_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    print(
        f"OK: Exported {len(payload['users'])} users, {len(payload['attendance'])} attendance records, "
        f"{len(payload['inventory'])} items from {gateway_settings.mode.value} gateway -> {out_path}"
    )


if __name__ == "__main__":
    main()
