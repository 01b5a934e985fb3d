from urara.exceptions import PreconditionViolation

class RangeIterator:
    """
        cursor over a NumericRange

        active while it holds the range, ended (past-the-end) once the back-reference is None.
        the range is borrowed, not owned: copies of an iterator share its position
        and the range has to outlive them
    """
    def __init__(self, range):
        self.range = range
        self.check_done()
    def check_done(self):
        if self.range is not None and self.range.is_end():
            self.range = None
    @property
    def ended(self):
        return self.range is None

    # ++it
    def increment(self):
        if self.range is None:
            raise PreconditionViolation("increment a past-the-end iterator")
        self.range.step()
        self.check_done()
        return self
    # it++
    def post_increment(self):
        if self.range is None:
            raise PreconditionViolation("increment a past-the-end iterator")
        temp = PostIncrement(self.get())
        self.increment()
        return temp

    # *it
    def get(self):
        """only valid while active; whatever an ended iterator raises here is not part of the interface"""
        return self.range.current
    # it->
    def slot(self):
        """only valid while active, like get"""
        return Slot(self.range)

    def __eq__(self, other):
        if not isinstance(other, RangeIterator):
            return NotImplemented
        return self.range is other.range
    def __ne__(self, other):
        if not isinstance(other, RangeIterator):
            return NotImplemented
        return not self == other
    def __hash__(self):
        return id(self.range)

    def __iter__(self):
        return self
    def __next__(self):
        if self.range is None:
            raise StopIteration
        return self.post_increment().get()

    def __repr__(self):
        if self.range is None:
            return "RangeIterator(end)"
        return "RangeIterator({})".format(repr(self.range.current))

class PostIncrement:
    EMPTY = object()
    def __init__(self, value):
        self.value = value
    def get(self):
        # moves the value out, the holder is empty afterwards
        value, self.value = self.value, PostIncrement.EMPTY
        if value is PostIncrement.EMPTY:
            raise PreconditionViolation("read a consumed post-increment value")
        return value
    def __repr__(self):
        if self.value is PostIncrement.EMPTY:
            return "PostIncrement(empty)"
        return "PostIncrement({})".format(repr(self.value))

class Slot:
    # live view of a range's current value
    def __init__(self, range):
        self.range = range
    @property
    def value(self):
        return self.range.current
    @value.setter
    def value(self, value):
        self.range.current = value
    def __repr__(self):
        return "Slot({})".format(repr(self.range.current))
