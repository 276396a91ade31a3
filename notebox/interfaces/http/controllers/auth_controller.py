# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from notebox.application.use_cases.users.login_user import LoginUserUseCase
from notebox.application.use_cases.users.register_user import \
    RegisterUserUseCase
from notebox.interfaces.http.auth_guard import AuthGuard, current_user
from notebox.interfaces.http.dto.auth import (AuthSuccessDTO, LoginRequestDTO,
                                              MessageDTO, RegisterRequestDTO,
                                              UserDTO)
from notebox.shared.errors.validation import raise_validation_error
from notebox.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        guard: AuthGuard,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._guard = guard

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, "All fields are required")

        user, token = self._register_use_case.execute(dto.name, dto.email, dto.password)

        payload = AuthSuccessDTO(user=UserDTO.from_entity(user), token=token)
        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify(payload.model_dump(mode="json", by_alias=True)), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, "Email and password are required")

        user, token = self._login_use_case.execute(dto.email, dto.password)

        payload = AuthSuccessDTO(user=UserDTO.from_entity(user), token=token)
        logger.info(f"auth.login: ok user_id={user.id}")
        return jsonify(payload.model_dump(mode="json", by_alias=True)), 200

    def logout(self) -> tuple[Response, int]:
        # Tokens are stateless: the client discards it, the server keeps nothing.
        logger.info(f"auth.logout: ok user_id={current_user().id}")
        payload = MessageDTO(message="Logged out successfully")
        return jsonify(payload.model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule(
            "/logout",
            view_func=self._guard.required(self.logout),
            methods=["POST"],
            endpoint="logout",
        )
        return bp
