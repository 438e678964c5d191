"""
Images endpoint facade.

``generate`` posts JSON; ``edit`` and ``variation`` upload the source image
(and mask) as multipart file parts, followed by the present text fields.
"""
from __future__ import annotations

from typing import Any, Optional

from ..base.http import MultipartForm
from ..base.models import ImageEditRequest, ImageGenerationRequest, ImageVariationRequest
from ..config.defaults import IMAGE_DEFAULT_CONTENT_TYPE
from .resource import ApiResource


class ImagesApi(ApiResource):
    async def generate(
        self,
        prompt: str,
        model: str,
        size: Optional[str] = None,
        response_format: Optional[str] = None,
        n: Optional[int] = None,
        user: Optional[str] = None,
        quality: Optional[str] = None,
        style: Optional[str] = None,
    ) -> Any:
        """Create images from a text prompt."""
        request = ImageGenerationRequest(
            prompt=prompt,
            model=model,
            size=size,
            response_format=response_format,
            n=n,
            user=user,
            quality=quality,
            style=style,
        )
        return await self._client.submit_json("images/generations", request)

    async def edit(
        self,
        model: str,
        image_path: str,
        mask_path: str,
        prompt: str,
        size: Optional[str] = None,
        response_format: Optional[str] = None,
        n: Optional[int] = None,
        user: Optional[str] = None,
    ) -> Any:
        """Edit the image at ``image_path`` where ``mask_path`` is transparent.

        Both files are read before the request is sent; a missing file raises
        :class:`LocalIOError`.
        """
        request = ImageEditRequest(
            model=model,
            prompt=prompt,
            size=size,
            response_format=response_format,
            n=n,
            user=user,
        )
        form = (
            MultipartForm()
            .text("model", request.model)
            .file("image", image_path, default_type=IMAGE_DEFAULT_CONTENT_TYPE)
            .file("mask", mask_path, default_type=IMAGE_DEFAULT_CONTENT_TYPE)
            .texts(**request.to_dict(exclude=["model"]))
        )
        return await self._client.submit_multipart("images/edits", form)

    async def variation(
        self,
        model: str,
        image_path: str,
        size: Optional[str] = None,
        response_format: Optional[str] = None,
        n: Optional[int] = None,
        user: Optional[str] = None,
    ) -> Any:
        """Create variations of the image at ``image_path``."""
        request = ImageVariationRequest(
            model=model,
            size=size,
            response_format=response_format,
            n=n,
            user=user,
        )
        form = (
            MultipartForm()
            .text("model", request.model)
            .file("image", image_path, default_type=IMAGE_DEFAULT_CONTENT_TYPE)
            .texts(**request.to_dict(exclude=["model"]))
        )
        return await self._client.submit_multipart("images/variations", form)


__all__ = ["ImagesApi"]
