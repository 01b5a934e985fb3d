# increment policies
# - a policy maps a value to its successor, the range stores the result back into its slot

def increment(value):
    succ = getattr(value, "succ", None)
    if callable(succ):
        return succ()
    if isinstance(value, str) and len(value) == 1:
        return chr(ord(value) + 1)
    return value + 1

class increment_by:
    def __init__(self, delta):
        self.delta = delta
    def __call__(self, value):
        return value + self.delta
    def __repr__(self):
        return "increment_by({})".format(repr(self.delta))
