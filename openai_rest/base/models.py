"""Request payload DTOs public surface.

Re-exports the one-class-per-file payloads under ``openai_rest.base.models_parts``
to keep a stable import path.
"""

from .models_parts.assistant_request import AssistantRequest
from .models_parts.chat_completion_request import ChatCompletionRequest
from .models_parts.embedding_request import EmbeddingRequest
from .models_parts.fine_tuning_job_request import FineTuningJobRequest
from .models_parts.image_edit_request import ImageEditRequest
from .models_parts.image_generation_request import ImageGenerationRequest
from .models_parts.image_variation_request import ImageVariationRequest
from .models_parts.message_request import MessageRequest
from .models_parts.moderation_request import ModerationRequest
from .models_parts.project_request import ProjectRequest
from .models_parts.project_user_request import ProjectRole, ProjectUserRequest
from .models_parts.run_request import RunRequest
from .models_parts.thread_request import ThreadRequest
from .models_parts.tool_outputs_request import ToolOutputsRequest
from .models_parts.transcription_request import TranscriptionRequest
from .models_parts.translation_request import TranslationRequest
from .models_parts.vector_store_request import VectorStoreRequest

__all__ = [
    "AssistantRequest",
    "ChatCompletionRequest",
    "EmbeddingRequest",
    "FineTuningJobRequest",
    "ImageEditRequest",
    "ImageGenerationRequest",
    "ImageVariationRequest",
    "MessageRequest",
    "ModerationRequest",
    "ProjectRequest",
    "ProjectRole",
    "ProjectUserRequest",
    "RunRequest",
    "ThreadRequest",
    "ToolOutputsRequest",
    "TranscriptionRequest",
    "TranslationRequest",
    "VectorStoreRequest",
]
