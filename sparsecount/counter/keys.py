def merge_keys(a, b):
    """Yield the union of two key sequences without duplicates.

    Every key of `a` comes first, in `a`'s order, then each key of `b` that
    was not already seen. The generator is lazy and stops after the last key
    of `b`; callers that mutate the counter owning `a` must pass a snapshot.
    """
    seen = set()

    for k in a:
        if k not in seen:
            seen.add(k)
            yield k

    for k in b:
        if k not in seen:
            seen.add(k)
            yield k
