"""
Decoders: JSON decoding combinators over HTTP.

raw bytes -> status check -> JSON tree -> typed domain object, with a
kungfu Result short-circuiting on the first failing stage.

Architecture:
- chain      - bind / fmap / apply over Result and Option
- schema     - field extraction and the JSONDecodable capability
- pipeline   - decode(bytes, status, Target) -> Result[Target, ErrorInfo]
- transport  - httpx adapter, single request helpers, fan-out batch fetch
- images     - image fetch behind an explicit in-memory cache
- writer     - *_w variants return the stage log next to the Result
"""

# Core types
from ._types import JSON, LCR, Decoder, JSONArray, JSONObject, NoError

# Errors
from ._errors import ErrorInfo, ErrorKind, decode_error, parse_error, transport_error

# Configuration
from .config import BatchPolicy, ClientConfig

# Lift helpers
from . import lift

# Writer monad
from . import writer
from .writer import LazyCoroResultWriter, Log, WriterResult

# Chaining
from .chain import apply, bind, build, chain, curry, fmap, pure, sequence, traverse

# Schema
from .schema import (
    JSONDecodable,
    as_array,
    as_object,
    cast,
    decoder_for,
    list_of,
    nullable,
    optional,
    required,
)

# Pipeline
from .pipeline import (
    SUCCESS_RANGE,
    Response,
    decode,
    decode_json,
    decode_object,
    decode_w,
    parse_response,
    parse_result,
)

# Transport
from .transport import (
    BatchResults,
    HttpTransport,
    Request,
    Transport,
    decode_all,
    fetch_all,
    perform_request,
    perform_request_w,
)

# Images
from .images import Image, ImageCache, ImageFormat, decode_image, fetch_image

__version__ = "0.1.0"

__all__ = (
    # Types
    "JSON",
    "JSONArray",
    "JSONObject",
    "Decoder",
    "LCR",
    "NoError",
    # Errors
    "ErrorInfo",
    "ErrorKind",
    "decode_error",
    "parse_error",
    "transport_error",
    # Config
    "BatchPolicy",
    "ClientConfig",
    # Lift module
    "lift",
    # Writer
    "writer",
    "LazyCoroResultWriter",
    "Log",
    "WriterResult",
    # Chaining
    "bind",
    "chain",
    "pure",
    "fmap",
    "apply",
    "curry",
    "build",
    "sequence",
    "traverse",
    # Schema
    "JSONDecodable",
    "cast",
    "decoder_for",
    "as_object",
    "as_array",
    "list_of",
    "required",
    "optional",
    "nullable",
    # Pipeline
    "Response",
    "SUCCESS_RANGE",
    "parse_response",
    "decode_json",
    "decode_object",
    "decode",
    "parse_result",
    "decode_w",
    # Transport
    "HttpTransport",
    "Request",
    "Transport",
    "perform_request",
    "perform_request_w",
    "BatchResults",
    "fetch_all",
    "decode_all",
    # Images
    "Image",
    "ImageCache",
    "ImageFormat",
    "decode_image",
    "fetch_image",
    "__version__",
)
