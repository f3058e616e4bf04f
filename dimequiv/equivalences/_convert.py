from __future__ import annotations

import numpy as np

from dimequiv.types import coax_type
from dimequiv.units import Dim, dimension, to_absolute_temp
from ._base import Equivalence
from ._resolve import check_equivalence, edconvert

__all__ = ['uconvert', 'ustrip']


# ======================================================================


def uconvert(units: str, x, equiv: Equivalence):
    """
    Convert `x` to `units` using equivalence `equiv` where the dimensions
    differ.  If `x` already has the same dimension as `units` it is
    converted directly and `equiv` is not used.

    Offset total temperatures (°C, °F) are converted to an absolute scale
    before any equivalence rule is applied.

    Examples
    --------
    >>> from dimequiv.equivalences import MassEnergy
    >>> from dimequiv.units import dim
    >>> e = uconvert('keV', dim(1, 'me'), MassEnergy())
    >>> print(f"{e:.2f}")
    511.00 keV

    Parameters
    ----------
    units : str
        Target units.  If ``''`` a plain value is returned.
    x : Dim, number, array, or list / tuple of these
        Value(s) to convert.  A list or tuple gives a list or tuple of
        results.
    equiv : Equivalence
        Equivalence instance.

    Returns
    -------
    result : Dim, number or list / tuple
        `x` in `units`.

    Raises
    ------
    CapabilityMismatchError
        If `equiv` is not an `Equivalence` instance.
    NoRelationError
        If `equiv` does not relate the dimensions involved.
    ZeroDivisionError
        If an inverse relation (e.g. E = hc/λ) is applied to a zero
        value.
    """
    if _is_batch(x):
        return type(x)(uconvert(units, xi, equiv) for xi in x)

    res = _to_units(units, _resolve(units, x, equiv))
    if not units:
        return res.value
    return res


def ustrip(units: str, x, equiv: Equivalence, dtype: type = None):
    """
    Same as `uconvert` but returns the plain value in `units`,
    optionally converted to `dtype`.

    Parameters
    ----------
    units : str
        Units of the returned value.
    x : Dim, number, array, or list / tuple of these
        Value(s) to convert.
    equiv : Equivalence
        Equivalence instance.
    dtype : type, optional
        Type for the result, e.g. ``float`` or ``Fraction``.  An ``int``
        result must be exact, otherwise ``ValueError`` is raised.  NumPy
        arrays are converted using ``astype``.

    Returns
    -------
    result : number, array or list / tuple
    """
    if _is_batch(x):
        return type(x)(ustrip(units, xi, equiv, dtype) for xi in x)

    value = _to_units(units, _resolve(units, x, equiv)).value
    if dtype is None:
        return value

    if isinstance(value, np.ndarray):
        return value.astype(dtype)
    if dtype is int:
        return coax_type(value, int)
    return dtype(value)


# ----------------------------------------------------------------------

def _is_batch(x) -> bool:
    return isinstance(x, (list, tuple)) and not isinstance(x, Dim)


def _resolve(units: str, x, equiv: Equivalence):
    """
    Normalise `x` and convert to the dimension of `units`, using `equiv`
    only if the dimensions differ.
    """
    check_equivalence(equiv)
    if isinstance(x, Dim) and x.is_total_temp():
        x = to_absolute_temp(x)

    to_dim = dimension(units)
    if dimension(x) == to_dim:
        return x

    return edconvert(to_dim, x, equiv)


def _to_units(units: str, x) -> Dim:
    if not isinstance(x, Dim):
        x = Dim(x, '')
    return x.convert(units)
