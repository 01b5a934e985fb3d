from urara.numeric_range import NumericRange, Direction
from urara.increment import increment_by
from urara.exceptions import InvalidArgument

def range(*args):
    """
        range(to), range(start, to), range(start, to, delta)

        without a delta the range ascends by the unit step from start, or from the zero of to's type.
        the sign of delta picks the direction.
        range(to) needs a type whose default value can be stepped, so strings need an explicit start
    """
    if len(args) == 1:
        to, = args
        if isinstance(to, str):
            raise InvalidArgument("range(to) has no start for str, use range(start, to)")
        return NumericRange(type(to)(), to)
    if len(args) == 2:
        start, to = args
        return NumericRange(start, to)
    if len(args) == 3:
        start, to, delta = args
        if not delta:
            raise InvalidArgument("step must be non-zero")
        direction = Direction.increasing if delta > type(delta)() else Direction.decreasing
        return NumericRange(start, to, increment_by(delta), direction)
    raise TypeError("range expected 1 to 3 arguments, got {}".format(len(args)))
