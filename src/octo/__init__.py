"""Cayley and Klein (split) octonions."""

from .algebra import DEFAULT_TOLERANCE
from .algebra import Cayley
from .algebra import Klein
from .algebra import ZeroDivisorError
from .algebra import associator
from .algebra import commutator

__all__ = [
    "DEFAULT_TOLERANCE",
    "Cayley",
    "Klein",
    "ZeroDivisorError",
    "associator",
    "commutator",
]
