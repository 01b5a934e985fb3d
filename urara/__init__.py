from .exceptions import InvalidArgument, PreconditionViolation
from .increment import increment, increment_by
from .iterator import RangeIterator, PostIncrement, Slot
from .numeric_range import NumericRange, Direction
from .factory import range
from .logging import trace
from .profile import profile

__version__ = "0.1"
