from .batch import BatchResults, decode_all, fetch_all
from .http import HttpTransport, Request, Transport
from .request import perform_request, perform_request_w

__all__ = (
    # Transport
    "HttpTransport",
    "Request",
    "Transport",
    # Single request
    "perform_request",
    "perform_request_w",
    # Batch
    "BatchResults",
    "fetch_all",
    "decode_all",
)
