"""
Functions for moving numeric values between types without losing
information.  These are used throughout the units and equivalence code
so that an `int` or `Fraction` input gives an `int` or `Fraction`
result wherever the arithmetic allows it.
"""

import numbers

__all__ = ['coax_type', 'force_type']


# ======================================================================


def coax_type(x, *types, default=None):
    """
    Try converting `x` into each of `types` in turn, returning the first
    result that represents exactly the same number, i.e. where
    ``new_type(x) - x == 0``.

    Examples
    --------
    >>> coax_type(3.5, int, float)  # float result.
    3.5
    >>> coax_type(3.0, int, str)  # int result.
    3
    >>> coax_type("3.0", int, float)  # Error: 3.0 != "3.0".
    Traceback (most recent call last):
    ...
    ValueError: Couldn't coax '3.0' to <class 'int'> or <class 'float'>.
    >>> xa = 3 + 2j
    >>> coax_type(xa, int, float, default=xa)  # Can't conv., gives default.
    (3+2j)

    Parameters
    ----------
    x :
        Value to be converted.
    types : type
        Target types, tried in the order given.
    default :
        Value to return if no conversion was exact.

    Returns
    -------
    x_converted :
        `x` converted to the first exact type, otherwise `default`.

    Raises
    ------
    ValueError
        If `default` is None and no conversion was exact.
    """
    for this_type in types:
        try:
            res = this_type(x)
            # Only numeric values can be checked for an exact match.
            if isinstance(x, numbers.Number) and res - x == 0:
                return res

        except (TypeError, ValueError, OverflowError):
            pass

    if default is not None:
        return default

    raise ValueError(f"Couldn't coax {repr(x)} to "
                     f"{' or '.join(str(t) for t in types)}.")


def force_type(x, *types):
    """
    Convert `x` into the first of `types` that accepts it, with no
    check on whether the conversion loses information.

    Examples
    --------
    >>> force_type(3.5, int, float)  # int(3.5) truncates.
    3
    >>> force_type("3.5+4j", float, complex)
    (3.5+4j)

    Raises
    ------
    ValueError
        If no conversion was possible.
    """
    for this_type in types:
        try:
            return this_type(x)
        except (TypeError, ValueError):
            pass

    raise ValueError(f"Couldn't force {repr(x)} to "
                     f"{' or '.join(str(t) for t in types)}.")
