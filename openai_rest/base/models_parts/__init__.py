"""Request payload parts package.

One payload class per module; import from ``openai_rest.base.models`` for the
stable surface.
"""

from .assistant_request import AssistantRequest
from .chat_completion_request import ChatCompletionRequest
from .embedding_request import EmbeddingRequest
from .fine_tuning_job_request import FineTuningJobRequest
from .image_edit_request import ImageEditRequest
from .image_generation_request import ImageGenerationRequest
from .image_variation_request import ImageVariationRequest
from .message_request import MessageRequest
from .moderation_request import ModerationRequest
from .project_request import ProjectRequest
from .project_user_request import ProjectRole, ProjectUserRequest
from .run_request import RunRequest
from .thread_request import ThreadRequest
from .tool_outputs_request import ToolOutputsRequest
from .transcription_request import TranscriptionRequest
from .translation_request import TranslationRequest
from .vector_store_request import VectorStoreRequest

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
