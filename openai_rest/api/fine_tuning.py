"""Fine-tuning jobs endpoint facade."""
from __future__ import annotations

from typing import Any, Optional

from ..base.models import FineTuningJobRequest
from .resource import ApiResource

JOBS_PATH = "fine_tuning/jobs"


class FineTuningApi(ApiResource):
    async def create_job(self, request: FineTuningJobRequest) -> Any:
        """Start a fine-tuning job from an uploaded training file."""
        return await self._client.submit_json(JOBS_PATH, request)

    async def list_jobs(self, limit: Optional[int] = None, after: Optional[str] = None) -> Any:
        return await self._client.fetch(JOBS_PATH, params={"limit": limit, "after": after})

    async def retrieve_job(self, job_id: str) -> Any:
        return await self._client.fetch(f"{JOBS_PATH}/{job_id}")

    async def cancel_job(self, job_id: str) -> Any:
        """Cancel a running job; the body is an empty JSON object."""
        return await self._client.submit_json(f"{JOBS_PATH}/{job_id}/cancel")

    async def list_events(self, job_id: str, limit: Optional[int] = None, after: Optional[str] = None) -> Any:
        return await self._client.fetch(f"{JOBS_PATH}/{job_id}/events", params={"limit": limit, "after": after})


__all__ = ["FineTuningApi"]
