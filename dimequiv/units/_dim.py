from __future__ import annotations

import operator
import warnings
from fractions import Fraction
from typing import Callable, Generic, NamedTuple, TypeVar

import numpy as np

from ._base import (Dimension, DIMENSIONLESS, _KNOWN_UNITS, _Units,
                    _check_units, _exact_pow, _scale, _tidy_num, convert,
                    to_absolute_temp)

T = TypeVar('T')


# ======================================================================


class Dim(NamedTuple, Generic[T]):
    """
    ``Dim`` represents a dimensioned quantity, consisting of a value and
    a string giving the associated units.  A ``Dim`` object can be used
    in mathematical expressions and the units conversions are
    automatically done to make the result 'units aware'.

    ``Dim`` objects are implemented as a namedtuple and are thus
    immutable, so their `value` and `units` fields cannot be changed
    once they are created.

    .. note:: ``Dim`` objects are not normally created by the user.
       Refer to factory function ``dim()`` for normal construction.
    """
    value: T
    units: str

    # NumPy defers to the reflected Dim operators.
    __array_ufunc__ = None

    # -- Unary Operators -----------------------------------------------

    def __abs__(self) -> Dim[T]:
        return Dim(abs(self.value), self.units)

    def __complex__(self) -> complex:
        """
        Returns complex(self.value).

        .. note:: Units are removed and checking ability is lost.
        """
        return complex(self.value)

    def __float__(self) -> float:
        """
        Returns float(self.value).

        .. note:: Units are removed and checking ability is lost.
        """
        return float(self.value)

    def __int__(self) -> int:
        """
        Returns int(self.value).

        .. note:: Units are removed and checking ability is lost.
        """
        return int(self.value)

    def __neg__(self) -> Dim[T]:
        return Dim(-self.value, self.units)

    def __round__(self, n: int = None) -> Dim[T]:
        return Dim(round(self.value, n), self.units)

    # -- Binary Operators ----------------------------------------------

    def __add__(self, rhs: Dim[T] | T) -> Dim[T]:
        r"""
        Add two dimensioned values.  If `rhs` is an ordinary value, it is
        promoted to a dimensionless ``Dim`` before addition.

        Addition of isolated temperatures depends on the combination of
        total temperatures (e.g. K, °C) and temperature changes (e.g. K,
        Δ°C) involved:

            +-----------------+---------------+-----------------+
            |                 |             (+) RHS             |
            +       LHS       +---------------+-----------------+
            |                 | Total (K/°C)  | Change (K/Δ°C)  |
            +=================+===============+=================+
            |   Total (K/°C)  | Not Permitted |      Total      |
            +-----------------+---------------+-----------------+
            | Change (K/Δ°C)  |     Total     |     Change      |
            +-----------------+---------------+-----------------+
        """
        if not isinstance(rhs, Dim):
            rhs = Dim(rhs, '')

        if self.is_total_temp() and not self.is_temp_change():
            # Offset scale total, e.g. °C.
            if not rhs.is_temp_change():
                raise ValueError(f"Addition '{self.units}' + '{rhs.units}' "
                                 f"is not allowed.")
            rhs = rhs.convert('Δ' + self.units)
            return Dim(self.value + rhs.value, self.units)

        if (self.is_temp_change() and rhs.is_total_temp() and
                not rhs.is_temp_change()):
            # Δ + Total -> Total.  Units come from the total version of
            # the LHS, e.g. Δ°F + °C -> °F.
            total_units = self.units.lstrip('Δ')
            rhs = rhs.convert(total_units)
            return Dim(self.value + rhs.value, total_units)

        return Dim(self.value + rhs.convert(self.units).value, self.units)

    def __sub__(self, rhs: Dim[T] | T) -> Dim[T]:
        r"""
        Subtract two dimensioned values.  Follows the same rules as
        ``__add__``, except for the temperature cases:

            +-----------------+---------------+-----------------+
            |                 |           \- RHS                |
            +       LHS       +---------------+-----------------+
            |                 | Total (K/°C)  | Change (K/Δ°C)  |
            +=================+===============+=================+
            |   Total (K/°C)  |  Change (\*)  |     Total       |
            +-----------------+---------------+-----------------+
            | Change (K/Δ°C)  | Not Permitted |     Change      |
            +-----------------+---------------+-----------------+

            (*) Both temperatures are required to already be on the
            same scale, as an absolute temperature can also be a change
            and the conversion target would otherwise be ambiguous.
        """
        if not isinstance(rhs, Dim):
            rhs = Dim(rhs, '')

        if self.is_total_temp() and not self.is_temp_change():
            # Offset scale total, e.g. °C.
            if rhs.is_total_temp():
                if rhs.units != self.units:
                    raise ValueError(f"Total temperatures must be on the "
                                     f"same scale for subtraction, got: "
                                     f"'{self.units}' - '{rhs.units}'")

                # Total - Total -> Δ, done on the absolute scale.
                diff = to_absolute_temp(self) - to_absolute_temp(rhs)
                return diff.convert('Δ' + self.units)

            if not rhs.is_temp_change():
                raise ValueError(f"Subtraction '{self.units}' - "
                                 f"'{rhs.units}' is not allowed.")
            rhs = rhs.convert('Δ' + self.units)
            return Dim(self.value - rhs.value, self.units)

        if (self.is_total_temp() and rhs.is_total_temp() and
                self.units != rhs.units):
            raise ValueError(f"Total temperatures must be on the same "
                             f"scale for subtraction, got: '{self.units}' "
                             f"- '{rhs.units}'")

        return Dim(self.value - rhs.convert(self.units).value, self.units)

    def __mul__(self, rhs: Dim[T] | T) -> Dim[T] | T:
        """
        Multiply two dimensioned values.   Rules are as follows:

            - ``Dim`` * ``Dim``:  Typical case, see general procedure
              below.
            - ``Dim`` * ``Scalar``:  Returns a ``Dim`` object retaining
              the units string of the LHS argument, with the value
              multiplied by the scalar.  If there are no actual units
              (i.e. units = '') then a plain value is returned.
            - ``Scalar`` * ``Dim``:  ``__rmul__`` case.  The LHS argument
              is promoted to a ``Dim`` object, so any resulting radians
              or steradians are dropped.

        .. note:: Offset temperature base units (°C, °F) are converted to
           an absolute scale before multiplying.

        General procedure:  Unit bases are multiplied together, giving
        priority to the LHS where the units of a base dimension differ.
        Any `k` factor in the result is multiplied into `value` leaving
        `k` = 1.  If the result has no remaining dimensions a plain value
        is returned.
        """
        return _dim_mul_generic(self, rhs, operator.mul)

    def __truediv__(self, rhs: Dim[T] | T) -> Dim[T] | T:
        """
        Divide a dimensioned value.  The same rules as ``__mul__`` apply,
        and exact values (``int``, ``Fraction``) give exact results.
        """
        if not isinstance(rhs, Dim):
            if _exact(self.value) and _exact(rhs):
                res = Fraction(self.value) / rhs
                if not any(isinstance(x, Fraction) for x in (self.value,
                                                             rhs)):
                    res = _tidy_num(res)
                return Dim(res, self.units)

            return Dim(self.value / rhs, self.units)

        return self * (rhs ** -1)

    def __matmul__(self, rhs: Dim[T] | T) -> Dim[T] | T:
        """
        Matrix multiply operator, handled in the same fashion as
        ``__mul__``.  Note that this applies to an array wrapped in a
        ``Dim`` object, not an array *of* ``Dim`` objects.
        """
        return _dim_mul_generic(self, rhs, operator.matmul)

    def __pow__(self, pwr: int | float) -> Dim[T] | T:
        """
        Raise dimensioned value to a power.  Any `k` multiplier in
        `self.units` is multiplied out and becomes part of the result
        value.
        """
        value = self.value
        if isinstance(value, np.ndarray):
            if value.dtype.kind in 'iu' and pwr < 0:
                value = value.astype(float)
            res = value ** pwr
        else:
            if pwr < 0 and value == 0:
                raise ZeroDivisionError(f"Cannot raise zero value "
                                        f"'{self}' to a negative power.")
            res = _exact_pow(value, pwr)

        pwr_basis = _Units(self.units) ** pwr
        res_value = _scale(res, pwr_basis.k)
        if not isinstance(value, Fraction):
            res_value = _tidy_num(res_value)
        res_basis = pwr_basis._replace(k=1)

        if not res_basis.is_dimless():
            return Dim(res_value, str(res_basis))
        else:
            return res_value  # Units disappeared.

    def __radd__(self, lhs: T) -> Dim[T]:
        """See ``__add__`` for addition rules."""
        return Dim(lhs, '') + self

    def __rsub__(self, lhs: T) -> Dim[T]:
        """See ``__sub__`` for subtraction rules."""
        return Dim(lhs, '') - self

    def __rmul__(self, lhs: T) -> Dim[T] | T:
        """See ``__mul__`` for multiplication rules."""
        return Dim(lhs, '') * self

    def __rtruediv__(self, lhs: T) -> Dim[T] | T:
        """See ``__truediv__`` for division rules."""
        return Dim(lhs, '') / self

    # -- Comparison Operators ------------------------------------------

    def __lt__(self, rhs) -> bool:
        return _common_cmp(self, rhs, operator.lt)

    def __le__(self, rhs) -> bool:
        return _common_cmp(self, rhs, operator.le)

    def __eq__(self, rhs) -> bool:
        return _common_cmp(self, rhs, operator.eq)

    def __ne__(self, rhs) -> bool:
        return _common_cmp(self, rhs, operator.ne)

    def __ge__(self, rhs) -> bool:
        return _common_cmp(self, rhs, operator.ge)

    def __gt__(self, rhs) -> bool:
        return _common_cmp(self, rhs, operator.gt)

    # -- String Magic Methods ------------------------------------------

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec) + f" {self.units}"

    def __repr__(self) -> str:
        # Lowercase dim() used so that __repr__ builds use factory.
        return f"dim({self.value}, '{self.units}')"

    def __str__(self) -> str:
        return self.__format__('')

    # -- Normal Methods ------------------------------------------------

    def convert(self, to_units: str) -> Dim[T]:
        """
        Generate new ``Dim`` object converted to requested units.
        """
        return Dim(convert(self.value, from_units=self.units,
                           to_units=to_units), to_units)

    def dimension(self) -> Dimension:
        """
        Returns the ``Dimension`` of this value, e.g. ``dim(3, 'N')``
        gives ``Dimension(M=1, L=1, T=-2)``.
        """
        return _Units(self.units).dimension()

    def is_absolute_temp(self) -> bool:
        """
        Returns ``True`` if this is a base temperature on an absolute
        scale (i.e. K, °R, not on an offset scale such as °C, °F).
        Otherwise returns ``False``.
        """
        return _Units(self.units).is_absolute_temp()

    def is_base_temp(self) -> bool:
        """
        Returns ``True`` if this is a 'standalone' temperature, i.e. the
        only field in the units signature is θ¹ (of any temperature type)
        and multiplier `k` = 1.  Otherwise returns ``False``.
        """
        return _Units(self.units).is_base_temp()

    def is_dimless(self) -> bool:
        """Return ``True`` if the value has no effective dimensions."""
        return _Units(self.units).is_dimless()

    def is_temp_change(self) -> bool:
        """
        Returns ``True`` if this is a base temperature and can represent
        a temperature change, e.g. K, °R, Δ°C, Δ°F.  Otherwise returns
        ``False``.

        .. note:: This is *not* the opposite of `is_total_temp()`.  For
           example ``dim(300, 'K')`` is both a temperature change and a
           total temperature.
        """
        return _Units(self.units).is_temp_change()

    def is_total_temp(self) -> bool:
        """
        Returns ``True`` if this is a base temperature as well as a total
        temperature (on either absolute or offset scales), i.e. K, °R,
        °C, °F.  Otherwise returns ``False``.
        """
        return _Units(self.units).is_total_temp()

    def to_real(self, to_units: str = None) -> T:
        """
        Remove dimensions and return a plain value, optionally converting
        to `to_units` first.  Equivalent to ``self.convert(to_units).value``.

        .. note:: Unit information is lost.
        """
        if to_units is not None:
            return self.convert(to_units).value
        else:
            return self.value


# ----------------------------------------------------------------------

def dim(value: Dim[T] | T | str = 1, units: str = None) -> Dim[T]:
    """
    This factory function is the preferred way to construct a
    dimensioned quantity (``Dim`` object).  The following argument
    combinations are possible:

        - ``dim(value, units)``: Normal construction.
        - ``dim()``: Value = 1 (integer) and dimensionless.
        - ``dim(units)``: If a string is passed as the first argument,
          this is transferred to the ``units`` argument and value = 1 is
          assumed.
        - ``dim(value)``: Dimensionless, i.e. a plain value is promoted
          to ``Dim``.
        - ``dim(Dim)``: Returns the ``Dim`` argument directly.
        - ``dim(Dim, units)``: Returns a ``Dim`` object after converting
          the ``Dim`` argument to the given `units`.

    The `units` string has the following format:

        - Unit labels can include characters from the alphabet as well
          as ``_ Δ ° μ Å``.
        - Individual units can be separated by the operators ``. * ×``
          (multiply) and ``/`` (divide).
        - A numerical leading constant may be included, along with an
          operator if required, e.g. ``1000m³``, ``12.0E-02.ft²``.
        - Unit power can be indicated using ``^`` or unicode superscript
          characters, e.g. ``m³`` or ``m^3``.
        - Dividing units can be indicated by the division operator or
          negative powers, e.g. ``kg.m⁻³`` or ``kg/m^3``.

    Parameters
    ----------
    value :
        Non-dimensional value.
    units : str, optional
        String representing the combination of units associated with
        this value.

    Returns
    -------
    Dim

    Raises
    ------
    ValueError
        If the unit string is invalid.
    """
    if units is None:
        if isinstance(value, Dim):
            return value

        if isinstance(value, str):
            value, units = 1, value
            if units not in _KNOWN_UNITS:
                _check_units(_Units(units))
            return Dim(value, units)

        return Dim(value, '')

    if isinstance(value, str):
        warnings.warn("dim() received a string where a numeric value was "
                      "expected.")

    if isinstance(value, Dim):
        return value.convert(units)

    if units not in _KNOWN_UNITS:
        _check_units(_Units(units))
    return Dim(value, units)


def dimension(x) -> Dimension:
    """
    Returns the ``Dimension`` of `x`, which may be:

        - A ``Dim`` object.
        - A unit string, e.g. ``'kg.m/s^2'``.
        - A ``Dimension`` (returned unchanged).
        - Any other value (plain number or array), which is dimensionless.

    Offset temperatures and temperature changes all have the temperature
    dimension, e.g. ``dimension('°C') == dimension('Δ°F')``.

    Examples
    --------
    >>> dimension('J') == dimension(dim(1, 'eV'))
    True
    >>> dimension(3.0) is DIMENSIONLESS
    True
    """
    if isinstance(x, Dim):
        return x.dimension()
    if isinstance(x, Dimension):
        return x
    if isinstance(x, str):
        return _Units(x).dimension()
    return DIMENSIONLESS


# ======================================================================


def _common_cmp(lhs: Dim[T], rhs, op: Callable[[T, T], bool]) -> bool:
    """
    Common method used for comparison of a ``Dim`` object and another
    object, called by all comparison magic methods.  If ``rhs`` is not a
    ``Dim`` object it is promoted before comparison.
    """
    if not isinstance(rhs, Dim):
        rhs = Dim(rhs, '')

    if lhs.units == rhs.units:
        return op(lhs.value, rhs.value)
    else:
        return op(lhs.value, rhs.convert(lhs.units).value)


def _dim_mul_generic(lhs: Dim[T], rhs: Dim[T] | T,
                     mult_op: Callable[[T, T], T]) -> Dim[T] | T:
    """
    Multiply two dimensioned values using multiplication operator
    `mult_op`.  This is the generic version used by ``Dim.__mul__``,
    ``Dim.__matmul__``, etc.  See ``Dim.__mul__`` for rules.
    """
    if not isinstance(rhs, Dim):
        l_value, r_value = _operands(lhs.value, rhs)
        if lhs.units:
            return Dim(mult_op(l_value, r_value), lhs.units)
        else:
            return mult_op(l_value, r_value)

    # Total temperatures are allowed as multiplication arguments however
    # they are converted to absolute scales first.
    if lhs.is_total_temp():
        lhs = to_absolute_temp(lhs)
    if rhs.is_total_temp():
        rhs = to_absolute_temp(rhs)

    # Build final basis and factor out 'k' into result.
    res_basis = _Units(lhs.units) * _Units(rhs.units)
    res_value = _scale(mult_op(*_operands(lhs.value, rhs.value)),
                       res_basis.k)
    if not any(isinstance(x, Fraction) for x in (lhs.value, rhs.value)):
        res_value = _tidy_num(res_value)

    res_basis = res_basis._replace(k=1)

    # Radians and steradians are dimensionless and drop out.
    if res_basis.A[0] == 'rad':
        res_basis = res_basis._replace(A=('', 0))
    if res_basis.Ω[0] == 'sr':
        res_basis = res_basis._replace(Ω=('', 0))

    if not res_basis.is_dimless():
        return Dim(res_value, str(res_basis))
    else:
        return res_value  # Units fell off.


def _exact(x) -> bool:
    return isinstance(x, (int, Fraction))


def _operands(a, b) -> tuple:
    """Exact `Fraction` values are given to NumPy as floats."""
    if isinstance(a, np.ndarray) and isinstance(b, Fraction):
        return a, float(b)
    if isinstance(b, np.ndarray) and isinstance(a, Fraction):
        return float(a), b
    return a, b
