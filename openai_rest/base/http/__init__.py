"""HTTP utilities package for the client.

Exposes the authenticated transport, the multipart form builder and the query
helper.
"""

from .client import RequestClient, encode_json_body
from .multipart import DEFAULT_BINARY_TYPE, FormPart, MultipartForm
from .query import query_params

__all__ = [
    "RequestClient",
    "encode_json_body",
    "MultipartForm",
    "FormPart",
    "DEFAULT_BINARY_TYPE",
    "query_params",
]
