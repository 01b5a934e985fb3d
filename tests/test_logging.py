import io
import urara
import pytest

def test_trace_calls():
    buf = io.StringIO()
    rng = urara.range(0, 2)
    with urara.trace(buf):
        it = rng.begin()
        it.increment()
    assert buf.getvalue().splitlines() == [
        "NumericRange(0, 2, increasing).begin()",
        "RangeIterator(0).increment()",
        ".   NumericRange(0, 2, increasing).step()",
    ]

def test_trace_postfix():
    buf = io.StringIO()
    it = urara.range(3).begin()
    with urara.trace(buf):
        it.post_increment().get()
    assert buf.getvalue().splitlines() == [
        "RangeIterator(0).post_increment()",
        ".   RangeIterator(0).get()",
        ".   RangeIterator(0).increment()",
        ".   .   NumericRange(0, 3, increasing).step()",
    ]

def test_trace_restores():
    begin, increment = urara.NumericRange.begin, urara.RangeIterator.increment
    with urara.trace(io.StringIO()):
        assert urara.NumericRange.begin is not begin
    assert urara.NumericRange.begin is begin
    assert urara.RangeIterator.increment is increment

def test_trace_restores_on_error():
    buf = io.StringIO()
    increment = urara.RangeIterator.increment
    it = urara.range(0).end()
    with pytest.raises(urara.PreconditionViolation):
        with urara.trace(buf):
            it.increment()
    assert urara.RangeIterator.increment is increment
    assert buf.getvalue() == "RangeIterator(end).increment()\n"

def test_trace_suspend():
    buf = io.StringIO()
    rng = urara.range(0, 2)
    with urara.trace(buf) as tracer:
        with ~tracer:
            rng.begin()
        rng.end()
    assert buf.getvalue().splitlines() == ["NumericRange(0, 2, increasing).end()"]

def test_trace_long_repr():
    buf = io.StringIO()
    rng = urara.NumericRange("x" * 100, "y")
    with urara.trace(buf):
        rng.end()
    line = buf.getvalue().rstrip("\n")
    assert line.startswith("NumericRange<NumericRange('xxx")
    assert line.endswith("..>.end()")
    assert len(line) == urara.trace.MAX_OBJ_LEN + len(".end()")

def test_trace_default_stream(capsys):
    with urara.trace():
        urara.range(1).end()
    assert capsys.readouterr().err == "NumericRange(0, 1, increasing).end()\n"

def test_trace_nested():
    outer, inner = io.StringIO(), io.StringIO()
    rng = urara.range(0, 3)
    with urara.trace(outer):
        with urara.trace(inner):
            it = rng.begin()
            it.increment()
            it.increment()
    lines = [
        "NumericRange(0, 3, increasing).begin()",
        "RangeIterator(0).increment()",
        ".   NumericRange(0, 3, increasing).step()",
        "RangeIterator(1).increment()",
        ".   NumericRange(1, 3, increasing).step()",
    ]
    assert inner.getvalue().splitlines() == lines
    assert outer.getvalue().splitlines() == lines

def test_trace_nested_restores():
    begin = urara.NumericRange.begin
    with urara.trace(io.StringIO()):
        outer_begin = urara.NumericRange.begin
        with urara.trace(io.StringIO()):
            pass
        assert urara.NumericRange.begin is outer_begin
    assert urara.NumericRange.begin is begin

def test_trace_suspend_keeps_patches():
    buf = io.StringIO()
    with urara.trace(buf) as tracer:
        begin = urara.NumericRange.begin
        with ~tracer:
            assert urara.NumericRange.begin is begin
