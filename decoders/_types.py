"""
Core type definitions for decoders.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import LazyCoroResult, Option

# ============================================================================
# JSON tree
# ============================================================================

# JSON = untyped tree node produced by the parser
type JSON = dict[str, JSON] | list[JSON] | str | int | float | bool | None

# JSONObject / JSONArray = the two container shapes of the tree
type JSONObject = dict[str, JSON]
type JSONArray = list[JSON]

# ============================================================================
# Type aliases
# ============================================================================

# Decoder = function that tries to build a value from a JSON node
type Decoder[T] = Callable[[JSON], Option[T]]

# NoError = type representing "never fails" semantic
# NOTE: Never (bottom type) вместо None: значение ошибки не может быть создано.
type NoError = typing.Never

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

__all__ = (
    # JSON tree
    "JSON",
    "JSONObject",
    "JSONArray",
    # Type aliases
    "Decoder",
    "NoError",
    # Concrete shortcuts
    "LCR",
)
