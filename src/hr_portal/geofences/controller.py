from __future__ import annotations

from flask import Flask, request

from ..common.web import admin_required, current_role, handle_errors, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/geofences", endpoint="geofences")
    @login_required
    @handle_errors("Failed to load geofences")
    def geofences():
        return ok(geofences=[f.to_dict() for f in container.geofence_service.list_fences()])

    @app.route("/api/geofences/<fence_id>", endpoint="geofence_detail")
    @login_required
    @handle_errors("Failed to load geofence")
    def geofence_detail(fence_id: str):
        return ok(geofence=container.geofence_service.get_fence(fence_id).to_dict())

    @app.route("/api/admin/geofences", methods=["POST"], endpoint="create_geofence")
    @admin_required
    @handle_errors("Failed to create geofence")
    def create_geofence():
        fence = container.geofence_service.save_fence(
            current_role=current_role(),
            data=request.get_json(silent=True) or {},
        )
        return ok("Geofence created", 201, geofence=fence.to_dict())

    @app.route("/api/admin/geofences/<fence_id>", methods=["PUT"], endpoint="update_geofence")
    @admin_required
    @handle_errors("Failed to update geofence")
    def update_geofence(fence_id: str):
        fence = container.geofence_service.save_fence(
            current_role=current_role(),
            data=request.get_json(silent=True) or {},
            fence_id=fence_id,
        )
        return ok("Geofence updated", geofence=fence.to_dict())

    @app.route("/api/admin/geofences/<fence_id>", methods=["DELETE"], endpoint="delete_geofence")
    @admin_required
    @handle_errors("Failed to delete geofence")
    def delete_geofence(fence_id: str):
        container.geofence_service.delete_fence(current_role=current_role(), fence_id=fence_id)
        return ok("Geofence deleted")

    @app.route("/api/geofences/check-location", methods=["POST"], endpoint="check_location")
    @login_required
    @handle_errors("Failed to check location")
    def check_location():
        data = request.get_json(silent=True) or {}
        location = container.geofence_service.check_location(data.get("latitude"), data.get("longitude"))
        nearest = container.geofence_service.nearest(location)
        return ok(
            isWithinFence=bool(location.is_within_fence),
            nearestFence=nearest[0].name if nearest else None,
            distanceMeters=round(nearest[1]) if nearest else None,
        )
