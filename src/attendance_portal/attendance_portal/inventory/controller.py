from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import capability_required, current_session
from ..container import Container
from ..core.enums import Capability


def register(app: Flask, container: Container) -> None:
    inventory = container.inventory_service

    @app.route("/inventory", methods=["GET"], endpoint="inventory")
    @capability_required(Capability.MANAGE_INVENTORY)
    def inventory_page():
        items = inventory.list_items(current_session())
        return jsonify({"success": True, "items": [inventory.to_ui(i) for i in items]})
