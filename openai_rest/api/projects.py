"""
Organization projects endpoint facade.

Covers projects (list, create, retrieve, modify, archive) and their users
(list, create, retrieve, modify role, delete). These endpoints require an
admin credential.
"""
from __future__ import annotations

from typing import Any, Optional

from ..base.models import ProjectRequest, ProjectRole, ProjectUserRequest
from .resource import ApiResource

PROJECTS_PATH = "organization/projects"


class ProjectsApi(ApiResource):
    async def list(
        self,
        limit: Optional[int] = None,
        after: Optional[str] = None,
        include_archived: Optional[bool] = None,
    ) -> Any:
        """List projects; archived ones only with ``include_archived=True``."""
        params = {"limit": limit, "after": after, "include_archived": include_archived}
        return await self._client.fetch(PROJECTS_PATH, params=params)

    async def create(
        self,
        name: str,
        app_use_case: Optional[str] = None,
        business_website: Optional[str] = None,
    ) -> Any:
        request = ProjectRequest(name=name, app_use_case=app_use_case, business_website=business_website)
        return await self._client.submit_json(PROJECTS_PATH, request)

    async def retrieve(self, project_id: str) -> Any:
        return await self._client.fetch(f"{PROJECTS_PATH}/{project_id}")

    async def modify(
        self,
        project_id: str,
        name: str,
        app_use_case: Optional[str] = None,
        business_website: Optional[str] = None,
    ) -> Any:
        request = ProjectRequest(name=name, app_use_case=app_use_case, business_website=business_website)
        return await self._client.submit_json(f"{PROJECTS_PATH}/{project_id}", request)

    async def archive(self, project_id: str) -> Any:
        """Archive a project; archived projects cannot be used or updated."""
        return await self._client.submit_json(f"{PROJECTS_PATH}/{project_id}/archive")

    # ------------------------------------------------------------------ users

    async def list_users(self, project_id: str, limit: Optional[int] = None, after: Optional[str] = None) -> Any:
        return await self._client.fetch(
            f"{PROJECTS_PATH}/{project_id}/users",
            params={"limit": limit, "after": after},
        )

    async def create_user(self, project_id: str, user_id: str, role: ProjectRole) -> Any:
        """Add an organization member to the project as ``owner`` or ``member``."""
        request = ProjectUserRequest(user_id=user_id, role=role)
        return await self._client.submit_json(f"{PROJECTS_PATH}/{project_id}/users", request)

    async def retrieve_user(self, project_id: str, user_id: str) -> Any:
        return await self._client.fetch(f"{PROJECTS_PATH}/{project_id}/users/{user_id}")

    async def modify_user(self, project_id: str, user_id: str, role: ProjectRole) -> Any:
        return await self._client.submit_json(f"{PROJECTS_PATH}/{project_id}/users/{user_id}", {"role": role})

    async def delete_user(self, project_id: str, user_id: str) -> Any:
        return await self._client.remove(f"{PROJECTS_PATH}/{project_id}/users/{user_id}")


__all__ = ["ProjectsApi", "PROJECTS_PATH"]
