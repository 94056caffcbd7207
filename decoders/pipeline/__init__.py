from .decode import decode, decode_json, decode_object, decode_w, parse_result
from .response import SUCCESS_RANGE, Response, parse_response

__all__ = (
    # Envelope
    "Response",
    "SUCCESS_RANGE",
    "parse_response",
    # Stages
    "decode_json",
    "decode_object",
    # Pipeline
    "decode",
    "parse_result",
    "decode_w",
)
