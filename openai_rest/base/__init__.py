"""
Client Base Package

Exports the building blocks shared by every endpoint facade:
- Payload: selective-field request bodies with a fluent builder
- Models (DTOs): one request payload class per remote request body
- HTTP: the authenticated transport and the multipart form builder
- Errors: the Transport / Encoding / LocalIO taxonomy
"""

from .errors import (
    ApiStatusError,
    EncodingError,
    ErrorCategory,
    LocalIOError,
    OpenAIError,
    TransportError,
)
from .http import MultipartForm, RequestClient, query_params
from .models import (
    AssistantRequest,
    ChatCompletionRequest,
    EmbeddingRequest,
    FineTuningJobRequest,
    ImageEditRequest,
    ImageGenerationRequest,
    ImageVariationRequest,
    MessageRequest,
    ModerationRequest,
    ProjectRequest,
    ProjectUserRequest,
    RunRequest,
    ThreadRequest,
    ToolOutputsRequest,
    TranscriptionRequest,
    TranslationRequest,
    VectorStoreRequest,
)
from .payload import Payload

__all__ = [
    # Payloads
    "Payload",
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
    "ProjectUserRequest",
    "RunRequest",
    "ThreadRequest",
    "ToolOutputsRequest",
    "TranscriptionRequest",
    "TranslationRequest",
    "VectorStoreRequest",
    # HTTP
    "RequestClient",
    "MultipartForm",
    "query_params",
    # Errors
    "ErrorCategory",
    "OpenAIError",
    "TransportError",
    "EncodingError",
    "LocalIOError",
    "ApiStatusError",
]
