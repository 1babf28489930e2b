"""Small helpers for building component trees."""


def chain(obj, fn):
    """Apply fn to obj and return obj itself, for configuring inline."""
    fn(obj)
    return obj