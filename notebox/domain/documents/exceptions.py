# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from notebox.shared.errors.base import DomainError


class DocumentNotFoundError(DomainError):
    code = "File not found"
    status = HTTPStatus.NOT_FOUND
