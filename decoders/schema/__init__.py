from .cast import as_array, as_object, cast, decoder_for, list_of
from .fields import nullable, optional, required
from .protocol import JSONDecodable

__all__ = (
    # Protocol
    "JSONDecodable",
    # Casts
    "cast",
    "decoder_for",
    "as_object",
    "as_array",
    "list_of",
    # Fields
    "required",
    "optional",
    "nullable",
)
