"""ProjectRequest payload for creating and modifying organization projects."""
from __future__ import annotations

from typing import Optional

from ..payload import Payload


class ProjectRequest(Payload):
    """Request body describing a project.

    Attributes:
        name: Friendly project name.
        app_use_case: Description of the business, project or use case.
        business_website: Business URL or social media link.
    """

    name: str
    app_use_case: Optional[str] = None
    business_website: Optional[str] = None


__all__ = ["ProjectRequest"]
