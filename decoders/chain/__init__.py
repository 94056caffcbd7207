from .applicative import apply, build, curry, fmap, pure
from .bind import bind, chain
from .traverse import sequence, traverse

__all__ = (
    # Bind
    "bind",
    "chain",
    # Applicative
    "pure",
    "fmap",
    "apply",
    "curry",
    "build",
    # Traverse
    "sequence",
    "traverse",
)
