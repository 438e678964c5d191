"""openai_rest: typed asynchronous client for the OpenAI HTTP/JSON API.

Build a request payload, hand it to an endpoint facade of :class:`OpenAI`,
and get back the decoded JSON body or a typed :class:`OpenAIError`.
"""

from .api import OpenAI
from .base.errors import (
    ApiStatusError,
    EncodingError,
    ErrorCategory,
    LocalIOError,
    OpenAIError,
    TransportError,
)
from .base.http import MultipartForm, RequestClient
from .base.models import (
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
from .base.payload import Payload

__version__ = "0.1.0"

__all__ = [
    "OpenAI",
    "RequestClient",
    "MultipartForm",
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
    "ErrorCategory",
    "OpenAIError",
    "TransportError",
    "EncodingError",
    "LocalIOError",
    "ApiStatusError",
    "__version__",
]
