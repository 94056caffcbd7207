"""
Writer Monad
============

Стадийный лог рядом с Result:
- Log[A] - моноидный аккумулятор
- WriterResult - Result + Log (sync pipeline)
- LazyCoroResultWriter - ленивая async версия (request helpers)
"""

from .log import Log
from .result import WriterResult
from .monad import LazyCoroResultWriter

__all__ = (
    "Log",
    "WriterResult",
    "LazyCoroResultWriter",
)
