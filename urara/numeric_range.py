import enum
from urara.increment import increment as unit_increment
from urara.iterator import RangeIterator

class Direction(enum.Enum):
    increasing = "increasing"
    decreasing = "decreasing"

class NumericRange:
    """
        lazy progression from start towards final, single pass

        the range owns its position: iterating mutates current in place,
        so only one iterator should drive a given range at a time
    """
    Direction = Direction
    def __init__(self, start, final, increment=None, direction=Direction.increasing):
        if increment is None: increment = unit_increment
        self.current = start
        self.final = final
        self.increment = increment
        self.direction = direction
    def begin(self):
        return RangeIterator(self)
    def end(self):
        return RangeIterator(None)
    def is_end(self):
        if self.direction is Direction.increasing:
            return self.current >= self.final
        else:
            return self.current <= self.final
    def step(self):
        self.current = self.increment(self.current)
    def __iter__(self):
        return self.begin()
    def __repr__(self):
        return "NumericRange({}, {}, {})".format(repr(self.current), repr(self.final), self.direction.value)
