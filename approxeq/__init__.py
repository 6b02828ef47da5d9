from approxeq import compare, decimals, floats, testing
from approxeq.compare import DEFAULT_ABS_TOL, DEFAULT_REL_TOL, approximately_equal
from approxeq.config import ToleranceConfig
from approxeq.exceptions import InvalidToleranceError

__all__ = [
    "DEFAULT_ABS_TOL",
    "DEFAULT_REL_TOL",
    "InvalidToleranceError",
    "ToleranceConfig",
    "approximately_equal",
    "compare",
    "decimals",
    "floats",
    "testing",
]
