"""Endpoint facades over the shared transport."""

from .assistants import AssistantsApi
from .audio import AudioApi
from .client import OpenAI
from .completions import CompletionsApi
from .embeddings import EmbeddingsApi
from .fine_tuning import FineTuningApi
from .images import ImagesApi
from .models import ModelsApi
from .moderations import ModerationsApi
from .projects import ProjectsApi
from .resource import ApiResource
from .threads import ThreadsApi
from .vector_stores import VectorStoresApi

__all__ = [
    "OpenAI",
    "ApiResource",
    "AssistantsApi",
    "AudioApi",
    "CompletionsApi",
    "EmbeddingsApi",
    "FineTuningApi",
    "ImagesApi",
    "ModelsApi",
    "ModerationsApi",
    "ProjectsApi",
    "ThreadsApi",
    "VectorStoresApi",
]
