"""ProjectUserRequest payload for ``POST organization/projects/{id}/users``."""
from __future__ import annotations

from typing import Literal

from ..payload import Payload


ProjectRole = Literal["owner", "member"]


class ProjectUserRequest(Payload):
    user_id: str
    role: ProjectRole


__all__ = ["ProjectUserRequest", "ProjectRole"]
