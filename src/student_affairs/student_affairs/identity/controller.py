from __future__ import annotations

from datetime import timedelta
from functools import wraps

from flask import Flask, jsonify, request, session

from ..accounts.model import Account
from ..common.log import get_logger
from ..core.constants import DEFAULT_REVIEW_LIMIT, DEFAULT_SESSION_DAYS, NOT_LINKED_MESSAGE
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, StoreError, ValidationError
from ..container import Container

logger = get_logger(__name__)

REVIEW_ROLES = frozenset({Role.ADMIN, Role.WAKA_KESISWAAN})


def _error(message: str, status: int, **extra):
    return jsonify({"status": "error", "message": message, **extra}), status


def register(app: Flask, container: Container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "account_id" not in session:
                return _error("Silakan login terlebih dahulu", 401)
            return view(*args, **kwargs)

        return wrapper

    def current_account() -> Account:
        return Account(id=session["account_id"], email=session.get("email"))

    @app.errorhandler(StoreError)
    def handle_store_error(exc: StoreError):
        logger.error("Store failure on %s: %s", request.path, exc)
        return _error("Layanan data sedang tidak tersedia, coba lagi nanti", 503)

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        payload = request.get_json(silent=True) or {}
        try:
            account = container.auth_service.authenticate(payload.get("email", ""), payload.get("password", ""))
        except (AuthenticationError, ValidationError) as e:
            return _error(str(e), 401)

        session.clear()
        session.permanent = bool(payload.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)
        session["account_id"] = account.id
        session["email"] = account.email
        return jsonify({"status": "ok", "account": {"id": account.id, "email": account.email}})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"status": "ok"})

    @app.route("/api/me/student", methods=["GET"], endpoint="my_student")
    @login_required
    def my_student():
        try:
            resolution = container.identity_resolver.resolve(current_account())
        except ValidationError as e:
            return _error(str(e), 400)

        if not resolution.found:
            return jsonify({"status": resolution.status.value, "message": NOT_LINKED_MESSAGE}), 404
        return jsonify(resolution.to_dict())

    @app.route("/api/admin/identity-reviews", methods=["GET"], endpoint="identity_reviews")
    @login_required
    def identity_reviews():
        profile = container.profile_service.get(session["account_id"])
        if not profile or profile.role not in REVIEW_ROLES:
            return _error("Anda tidak memiliki akses", 403)

        try:
            limit = int(request.args.get("limit", DEFAULT_REVIEW_LIMIT))
        except ValueError:
            return _error("limit harus berupa angka", 400)
        limit = max(1, min(limit, 500))

        entries = container.reviews_repo.list_recent(limit=limit)
        return jsonify({"status": "ok", "items": [e.to_dict() for e in entries]})
