from __future__ import annotations


class LottoError(Exception):
    """Base class for fatal run errors."""


class InvalidArgument(LottoError, ValueError):
    pass


class ResourceExhaustion(LottoError, MemoryError):
    pass
