# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from flask import Blueprint, Response, jsonify
from sqlalchemy.exc import SQLAlchemyError

from notebox.shared.logging import logger


class MiscController:
    def __init__(self, *, check_database: Callable[[], bool]) -> None:
        self._check_database = check_database

    def health(self) -> tuple[Response, int]:
        try:
            self._check_database()
        except SQLAlchemyError as exc:
            logger.error(f"health: database unavailable ({type(exc).__name__})")
            return jsonify({"ok": False, "database": f"error: {exc}"}), 503
        return jsonify({"ok": True, "database": "ok"}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__, url_prefix="/api")
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp
