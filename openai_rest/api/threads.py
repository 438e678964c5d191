"""
Threads endpoint facade: threads, messages, runs and run steps.

Every call carries the ``OpenAI-Beta: assistants=v2`` header. Modify calls
send a subset of the create body: threads keep ``tool_resources`` and
``metadata``; messages and runs only accept ``metadata``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from ..base.models import MessageRequest, RunRequest, ThreadRequest, ToolOutputsRequest
from .resource import ApiResource


def _page(
    limit: Optional[int],
    order: Optional[str],
    after: Optional[str],
    before: Optional[str],
) -> Dict[str, Any]:
    return {"limit": limit, "order": order, "after": after, "before": before}


class ThreadsApi(ApiResource):
    beta = True

    # ---------------------------------------------------------------- threads

    async def create(self, request: Optional[ThreadRequest] = None) -> Any:
        """Create a thread; without a request the thread starts empty."""
        return await self._client.submit_json("threads", request or ThreadRequest(), headers=self._headers())

    async def retrieve(self, thread_id: str) -> Any:
        return await self._client.fetch(f"threads/{thread_id}", headers=self._headers())

    async def modify(self, thread_id: str, request: ThreadRequest) -> Any:
        return await self._client.submit_json(
            f"threads/{thread_id}",
            request.to_dict(exclude=["messages"]),
            headers=self._headers(),
        )

    async def delete(self, thread_id: str) -> Any:
        return await self._client.remove(f"threads/{thread_id}", headers=self._headers())

    # --------------------------------------------------------------- messages

    async def create_message(
        self,
        thread_id: str,
        role: str,
        content: Union[str, List[Dict[str, Any]]],
        attachments: Optional[List[Dict[str, Any]]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Any:
        request = MessageRequest(role=role, content=content, attachments=attachments, metadata=metadata)
        return await self._client.submit_json(f"threads/{thread_id}/messages", request, headers=self._headers())

    async def list_messages(
        self,
        thread_id: str,
        limit: Optional[int] = None,
        order: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> Any:
        return await self._client.fetch(
            f"threads/{thread_id}/messages",
            params=_page(limit, order, after, before),
            headers=self._headers(),
        )

    async def retrieve_message(self, thread_id: str, message_id: str) -> Any:
        return await self._client.fetch(f"threads/{thread_id}/messages/{message_id}", headers=self._headers())

    async def modify_message(self, thread_id: str, message_id: str, metadata: Dict[str, Any]) -> Any:
        return await self._client.submit_json(
            f"threads/{thread_id}/messages/{message_id}",
            {"metadata": metadata},
            headers=self._headers(),
        )

    async def delete_message(self, thread_id: str, message_id: str) -> Any:
        return await self._client.remove(f"threads/{thread_id}/messages/{message_id}", headers=self._headers())

    # ------------------------------------------------------------------- runs

    async def create_run(self, thread_id: str, request: RunRequest) -> Any:
        """Start ``request.assistant_id`` on the thread.

        ``stream=True`` is forwarded but event streams are not decoded.
        """
        return await self._client.submit_json(f"threads/{thread_id}/runs", request, headers=self._headers())

    async def list_runs(
        self,
        thread_id: str,
        limit: Optional[int] = None,
        order: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> Any:
        return await self._client.fetch(
            f"threads/{thread_id}/runs",
            params=_page(limit, order, after, before),
            headers=self._headers(),
        )

    async def retrieve_run(self, thread_id: str, run_id: str) -> Any:
        return await self._client.fetch(f"threads/{thread_id}/runs/{run_id}", headers=self._headers())

    async def modify_run(self, thread_id: str, run_id: str, metadata: Dict[str, Any]) -> Any:
        return await self._client.submit_json(
            f"threads/{thread_id}/runs/{run_id}",
            {"metadata": metadata},
            headers=self._headers(),
        )

    async def delete_run(self, thread_id: str, run_id: str) -> Any:
        return await self._client.remove(f"threads/{thread_id}/runs/{run_id}", headers=self._headers())

    async def cancel_run(self, thread_id: str, run_id: str) -> Any:
        return await self._client.submit_json(f"threads/{thread_id}/runs/{run_id}/cancel", headers=self._headers())

    async def submit_tool_outputs(
        self,
        thread_id: str,
        run_id: str,
        tool_outputs: List[Dict[str, Any]],
        stream: Optional[bool] = None,
    ) -> Any:
        """Send tool call results for a run waiting in ``requires_action``."""
        request = ToolOutputsRequest(tool_outputs=tool_outputs, stream=stream)
        return await self._client.submit_json(
            f"threads/{thread_id}/runs/{run_id}/submit_tool_outputs",
            request,
            headers=self._headers(),
        )

    # -------------------------------------------------------------- run steps

    async def list_run_steps(
        self,
        thread_id: str,
        run_id: str,
        limit: Optional[int] = None,
        order: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> Any:
        return await self._client.fetch(
            f"threads/{thread_id}/runs/{run_id}/steps",
            params=_page(limit, order, after, before),
            headers=self._headers(),
        )

    async def retrieve_run_step(self, thread_id: str, run_id: str, step_id: str) -> Any:
        return await self._client.fetch(
            f"threads/{thread_id}/runs/{run_id}/steps/{step_id}",
            headers=self._headers(),
        )


__all__ = ["ThreadsApi"]
