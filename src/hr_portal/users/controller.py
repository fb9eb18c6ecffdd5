from __future__ import annotations

from flask import Flask, request, session

from ..common.web import (
    admin_required,
    current_role,
    current_user_id,
    handle_errors,
    login_required,
    ok,
)
from ..container import Container


def _store_login(result) -> None:
    session.clear()
    session["auth_token"] = result.token
    session["user_id"] = result.user.user_id
    session["name"] = result.user.full_name
    session["role"] = result.user.role.value
    session["is_wfh_enabled"] = result.user.is_wfh_enabled


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    @handle_errors("Login failed")
    def login():
        data = request.get_json(silent=True) or {}
        result = container.auth_service.login(data.get("email", ""), data.get("password", ""))
        _store_login(result)
        session.permanent = bool(data.get("remember"))
        return ok(result.message or "Login successful", user=result.user.to_dict())

    @app.route("/api/auth/register", methods=["POST"], endpoint="register")
    @handle_errors("Registration failed")
    def register_user():
        data = request.get_json(silent=True) or {}
        user = container.auth_service.register(
            first_name=data.get("firstName", ""),
            last_name=data.get("lastName", ""),
            email=data.get("email", ""),
            password=data.get("password", ""),
            mobile=data.get("mobile", ""),
            department=data.get("department", ""),
            designation=data.get("designation", ""),
        )
        return ok("Registration successful", 201, user=user.to_dict())

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok("Logged out")

    @app.route("/api/auth/profile", endpoint="profile")
    @login_required
    @handle_errors("Failed to load profile")
    def profile():
        user = container.auth_service.profile()
        session["name"] = user.full_name
        session["role"] = user.role.value
        session["is_wfh_enabled"] = user.is_wfh_enabled
        return ok(user=user.to_dict())

    @app.route("/api/me/password", methods=["PUT"], endpoint="change_password")
    @login_required
    @handle_errors("Failed to change password")
    def change_password():
        data = request.get_json(silent=True) or {}
        container.user_service.change_password(
            user_id=current_user_id(),
            old_password=data.get("oldPassword", ""),
            new_password=data.get("newPassword", ""),
        )
        return ok("Password changed")

    @app.route("/api/admin/users", endpoint="admin_users")
    @admin_required
    @handle_errors("Failed to load employees")
    def admin_users():
        users = container.user_service.list_users()
        return ok(users=[u.to_dict() for u in users])

    @app.route("/api/admin/users/<user_id>", methods=["PUT"], endpoint="update_user")
    @admin_required
    @handle_errors("Failed to update employee")
    def update_user(user_id: str):
        user = container.user_service.update_user(
            current_role=current_role(),
            user_id=user_id,
            fields=request.get_json(silent=True) or {},
        )
        return ok("Employee updated", user=user.to_dict())

    @app.route("/api/admin/users/<user_id>/role", methods=["PUT"], endpoint="update_user_role")
    @admin_required
    @handle_errors("Failed to update role")
    def update_user_role(user_id: str):
        data = request.get_json(silent=True) or {}
        container.user_service.update_role(current_role=current_role(), user_id=user_id, role=data.get("role", ""))
        return ok("Role updated")

    @app.route("/api/admin/users/<user_id>/wfh", methods=["PUT"], endpoint="toggle_wfh")
    @admin_required
    @handle_errors("Failed to update Work From Home status")
    def toggle_wfh(user_id: str):
        data = request.get_json(silent=True) or {}
        enabled = bool(data.get("enabled"))
        user = container.user_service.set_wfh(current_role=current_role(), user_id=user_id, enabled=enabled)
        message = "Work From Home status enabled" if enabled else "Work From Home status disabled"
        return ok(message, user=user.to_dict())

    @app.route("/api/admin/users/<user_id>", methods=["DELETE"], endpoint="delete_user")
    @admin_required
    @handle_errors("Failed to delete employee")
    def delete_user(user_id: str):
        container.user_service.delete_user(
            current_role=current_role(),
            current_user_id=current_user_id(),
            user_id=user_id,
        )
        return ok("Employee deleted")
