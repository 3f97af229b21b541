"""Small helpers shared by the tile layout modules.

This module holds the verbose printing switch used by the command line
and the numeric coercion applied to configuration values before they
reach the layout computation.
"""
import math

VERBOSE = False


def vprint(text):
    """Print text if verbose mode is enabled.

    Parameters
    ----------
    text : str
        Text to print.
    """
    if VERBOSE:
        print(text)


def to_number(value, name, error=ValueError):
    """Coerce a configuration value to a finite float.

    Parameters
    ----------
    value : object
        Number, numeric string, boolean or any object implementing
        ``__float__``.
    name : str
        Option name used in the error message.
    error : type, optional
        Exception class raised on failure, by default ValueError.

    Returns
    -------
    float
        The coerced value.

    Raises
    ------
    error
        If the value cannot be converted or is not finite.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise error(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise error(f"{name} must be finite, got {value!r}")
    return number


def to_pair(value, name, error=ValueError):
    """Coerce a two-item sequence to a tuple of finite floats."""
    try:
        items = tuple(value)
    except TypeError:
        raise error(f"{name} must be a pair of numbers, got {value!r}") from None
    if len(items) != 2:
        raise error(f"{name} must have exactly two items, got {len(items)}")
    return tuple(to_number(item, name, error) for item in items)
