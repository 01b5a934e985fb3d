from urara import utils
from urara.numeric_range import NumericRange
from urara.iterator import RangeIterator
import functools
import inspect
import sys
import re

DELIM = ".\t".replace("\t", " " * (4 - 1))

class suspend(utils.Context):
    def __init__(self, tracer):
        self.tracer = tracer
    def __enter__(self):
        self.tracer.suspended += 1
        return self
    def __exit__(self, exc_type, exc, tb):
        self.tracer.suspended -= 1

class trace(utils.Context):
    """
        prints the range and iterator calls made inside the block, nested calls indented

            with trace():
                list(range(2))

        ~tracer suspends tracing for a nested block
    """
    TYPES = [NumericRange, RangeIterator]
    SUPPRESS = "is_end check_done".split()
    MAX_OBJ_LEN = 60
    def __init__(self, file=None):
        if file is None: file = sys.stderr
        self.file = file
        self.stack_size = 0
        self.suspended = 0
        self.patched = []
    def print(self, msg):
        print(DELIM * self.stack_size + msg, file=self.file)
    def __enter__(self):
        for type in self.TYPES:
            for name, attr in list(vars(type).items()):
                if name.startswith("_") or name in self.SUPPRESS or not inspect.isfunction(attr):
                    continue
                self.patched.append((type, name, attr))
                setattr(type, name, self.wrap(attr))
        return self
    def __exit__(self, exc_type, exc, tb):
        for type, name, attr in reversed(self.patched):
            setattr(type, name, attr)
        self.patched = []
    def __invert__(self):
        return suspend(self)
    def wrap(self, f):
        @functools.wraps(f)
        def wrapped(obj, *args, **kwargs):
            return self.func(f, obj, *args, **kwargs)
        return wrapped
    def func(self, f, obj, *args, **kwargs):
        if self.suspended:
            return f(obj, *args, **kwargs)
        args_str = []
        for arg in args:
            args_str.append(self.obj_str(arg))
        for key, arg in kwargs.items():
            args_str.append("{}={}".format(key, self.obj_str(arg)))
        msg = "{}.{}({})".format(self.obj_str(obj), f.__name__, ", ".join(args_str))
        self.print(msg)
        try:
            self.stack_size += 1
            return f(obj, *args, **kwargs)
        finally:
            self.stack_size -= 1
    def obj_str(self, obj):
        with suspend(self):
            s = repr(obj)
        s = s.strip()
        s = re.sub(r'(\r\n|\r|\n)+', "\\n", s)
        s = re.sub(r"\s+", " ", s)
        if len(s) > self.MAX_OBJ_LEN:
            wrap = "{}<{{}}..>".format(type(obj).__name__)
            s = wrap.format(s[:self.MAX_OBJ_LEN - len(wrap) + len("{}")])
        return s
