import humanize

def value_str(value):
    if isinstance(value, int) and not isinstance(value, bool):
        return humanize.intcomma(value)
    return str(value)

def profile(rng, limit=None):
    # drains the range
    count, first, last = 0, None, None
    it, end = rng.begin(), rng.end()
    while it != end:
        if limit is not None and count >= limit:
            break
        value = it.post_increment().get()
        if not count:
            first = value
        last = value
        count += 1
    if not count:
        return "0 values"
    return " ".join(str(item) for item in [
        humanize.intcomma(count), "value," if count == 1 else "values,",
        "first", value_str(first) + ",",
        "last", value_str(last),
    ])
