"""Many ways to compute a factorial, all behind one contract."""

from .errors import ArithmeticOverflow, ConfigurationError, FactorialError, InvalidArgument
from .lazy import FactorialSequence, lazy_sequence
from .models import FactorialRequest, Strategy
from .strategies import PARTITIONED, STRATEGIES, factorial

__all__ = [
    "ArithmeticOverflow",
    "ConfigurationError",
    "FactorialError",
    "FactorialRequest",
    "FactorialSequence",
    "InvalidArgument",
    "PARTITIONED",
    "STRATEGIES",
    "Strategy",
    "factorial",
    "lazy_sequence",
]
