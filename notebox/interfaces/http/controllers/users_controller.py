# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from notebox.application.use_cases.users.update_profile import \
    UpdateProfileUseCase
from notebox.interfaces.http.auth_guard import AuthGuard, current_user
from notebox.interfaces.http.dto.auth import UpdateProfileRequestDTO, UserDTO
from notebox.shared.errors.validation import raise_validation_error
from notebox.shared.logging import logger


class UsersController:
    def __init__(
        self,
        *,
        update_profile_use_case: UpdateProfileUseCase,
        guard: AuthGuard,
    ) -> None:
        self._update_profile_use_case = update_profile_use_case
        self._guard = guard

    def me(self) -> tuple[Response, int]:
        return jsonify(UserDTO.from_entity(current_user()).model_dump(mode="json", by_alias=True)), 200

    def update_me(self) -> tuple[Response, int]:
        try:
            dto = UpdateProfileRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, "Invalid profile fields")

        user = self._update_profile_use_case.execute(
            current_user().id,
            name=dto.name,
            theme=dto.theme,
            password=dto.password,
        )
        logger.info(
            f"users.update: ok user_id={user.id} "
            f"fields={sorted(dto.model_dump(exclude_none=True))}"
        )
        return jsonify(UserDTO.from_entity(user).model_dump(mode="json", by_alias=True)), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/api")
        bp.add_url_rule(
            "/me",
            view_func=self._guard.required(self.me),
            methods=["GET"],
            endpoint="me_get",
        )
        bp.add_url_rule(
            "/me",
            view_func=self._guard.required(self.update_me),
            methods=["PATCH"],
            endpoint="me_update",
        )
        return bp
