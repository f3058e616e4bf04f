from __future__ import annotations

import operator
import re
import warnings
from collections import deque, namedtuple
from fractions import Fraction
from functools import reduce
from numbers import Number
from typing import NamedTuple, Optional

import numpy as np

from dimequiv.types import coax_type, force_type
from . import _opts

__all__ = ['Dimension', 'DIMENSIONLESS', 'add_base_unit', 'add_unit',
           'add_named_dimension', 'block_conversion', 'convert',
           'named_dimension', 'set_conversion']


# ======================================================================

# Base dimensions in signature order:
#   - M:  Mass.
#   - L:  Length.
#   - T:  Time.
#   - θ:  Temperature.
#   - N:  Amount of substance.
#   - I:  Electric current.
#   - J:  Luminous intensity.
#   - A:  Plane angle.
#   - Ω:  Solid angle.
_BASE_DIMS = ('M', 'L', 'T', 'θ', 'N', 'I', 'J', 'A', 'Ω')


class Dimension(NamedTuple):
    """
    The physical dimension of a quantity, stored as the power of each
    base dimension and independent of any particular units, i.e. ``kg``,
    ``g`` and ``lbm`` all have ``Dimension(M=1)``.

    ``Dimension`` objects are hashable and compare equal only when every
    power is the same, so they are used as lookup keys when deciding
    whether two quantities can be converted directly or need an
    equivalence.  Multiplication, division and powers combine dimensions
    in the normal way:

    >>> from dimequiv.units import dimension
    >>> str(dimension('N') / dimension('m^2'))
    'M·L⁻¹·T⁻²'
    """
    M: int | float = 0
    L: int | float = 0
    T: int | float = 0
    θ: int | float = 0
    N: int | float = 0
    I: int | float = 0
    J: int | float = 0
    A: int | float = 0
    Ω: int | float = 0

    def __mul__(self, rhs: Dimension) -> Dimension:
        return Dimension(*(_tidy_pwr(a + b) for a, b in zip(self, rhs)))

    def __truediv__(self, rhs: Dimension) -> Dimension:
        return Dimension(*(_tidy_pwr(a - b) for a, b in zip(self, rhs)))

    def __pow__(self, pwr: int | float) -> Dimension:
        return Dimension(*(_tidy_pwr(a * pwr) for a in self))

    def __str__(self):
        parts = []
        for field, pwr in zip(self._fields, self):
            if pwr == 0:
                continue
            parts.append(field + (_to_ucode_super(f'{pwr}')
                                  if pwr != 1 else ''))
        return '·'.join(parts) if parts else 'dimensionless'

    def is_dimless(self) -> bool:
        """Returns ``True`` if all powers are zero."""
        return not any(self)


DIMENSIONLESS = Dimension()
"""The ``Dimension`` of plain numbers and dimensionless quantities."""


# ----------------------------------------------------------------------


class _Units(namedtuple('_Units', ['k', *_BASE_DIMS],
                       defaults=[1, *(('', 0),) * len(_BASE_DIMS)])):
    """
    ``_Units`` is the internal representation of a specific unit: a
    leading multiplier `k` followed by a ``(label, power)`` pair for each
    base dimension, e.g. ``N`` is ``k=1, M=('kg', 1), L=('m', 1),
    T=('s', -2)``.  Units are hashable so that conversions between them
    can be looked up and cached.

    .. note:: Radians and steradians are retained as units so that
       angular quantities can be checked and converted, but they drop
       out of the result when multiplied with other units (see
       `Dim.__mul__`).
    """

    def __new__(cls, *args, **kwargs) -> _Units:
        """
        Either parse a single unit string argument, or construct
        directly as a namedtuple (including the blank case ``_Units()``).
        Either way the result is sanity checked before it is returned.
        """
        if len(args) == 1 and not kwargs and isinstance(args[0], str):
            return _parse_units(args[0])

        res = super().__new__(cls, *args, **kwargs)
        _check_units(res)
        return res

    # -- Binary Operators ----------------------------------------------

    def __mul__(self, rhs: _Units) -> _Units:
        """
        Multiply two units, combining the labels / powers of each base
        dimension and the `k` values.  Where both sides use different
        labels for the same base dimension, the RHS is converted to the
        LHS label and the factor is folded into `k`.
        """
        res_k = self.k * rhs.k
        res_bases = []
        for (l_label, l_pwr), (r_label, r_pwr) in zip(self[1:], rhs[1:]):
            if l_label and r_label and l_label != r_label:
                factor = _conversion_factor(_KNOWN_UNITS[r_label],
                                            _KNOWN_UNITS[l_label])
                if factor is None:
                    raise TypeError(f"No conversion available for "
                                    f"{r_label} -> {l_label}.")
                res_k *= _exact_pow(factor, r_pwr)

            res_pwr = _tidy_pwr(l_pwr + r_pwr)
            if res_pwr != 0:
                res_bases.append((l_label or r_label, res_pwr))
            else:
                res_bases.append(('', 0))

        return _Units(_tidy_num(res_k), *res_bases)

    def __pow__(self, pwr: int | float) -> _Units:
        """Raise units to a power, including the leading factor `k`."""
        res_bases = [(label, _tidy_pwr(p * pwr)) for label, p in self[1:]]
        return _Units(_tidy_num(_exact_pow(self.k, pwr)), *res_bases)

    # -- String Magic Methods ------------------------------------------

    def __str__(self):
        """
        Returns the registered label if exactly one exists for these
        units, otherwise a generic string is built from the parts.
        """
        labels = _UNIT_LABELS.get(self, [])
        if len(labels) == 1:
            return labels[0]

        unicode_str = _opts._unit_options.unicode_str
        parts = []
        for label, pwr in self[1:]:
            if not label or pwr == 0:
                continue
            if pwr != 1:
                label += (_to_ucode_super(f'{pwr}') if unicode_str
                          else f'^{pwr}')
            parts.append(label)
        res = '.'.join(parts)

        if self.k != 1:
            k = float(self.k) if isinstance(self.k, Fraction) else self.k
            res = f'{k}*' + res

        return res

    # -- Public Methods ------------------------------------------------

    def dimension(self) -> Dimension:
        """Returns the ``Dimension`` (powers only) of these units."""
        return Dimension(*(pwr for _, pwr in self[1:]))

    def is_absolute_temp(self) -> bool:
        """Refer to `Dim.is_absolute_temp` for documentation."""
        return self.is_base_temp() and self.θ[0] in _ABS_SCALE_TEMPS

    def is_base_temp(self) -> bool:
        """Refer to `Dim.is_base_temp` for documentation."""
        if self.θ[0] not in _ALL_TEMPS or self.θ[1] != 1 or self.k != 1:
            return False

        # θ¹ present, k == 1.  All other powers must be zero.
        return all(pwr == 0 for field, (_, pwr) in
                   zip(self._fields[1:], self[1:]) if field != 'θ')

    def is_dimless(self) -> bool:
        """
        Returns ``True`` if all powers are zero and `k` = 1.  Note that
        units such as ``mm/m`` have no powers but `k` != 1.
        """
        return self.k == 1 and self.dimension().is_dimless()

    def is_temp_change(self) -> bool:
        """Refer to `Dim.is_temp_change` for documentation."""
        return self.is_base_temp() and self.θ[0] in _DELTA_TEMPS

    def is_total_temp(self) -> bool:
        """Refer to `Dim.is_total_temp` for documentation."""
        return self.is_base_temp() and self.θ[0] in _TOTAL_TEMPS


# == Public Functions ==================================================


def add_base_unit(labels: list[str], base_dim: str):
    """
    Register new base units, i.e. units with `k` = 1 and a single base
    dimension of power 1, e.g. ``add_base_unit(['kg', 'g', 'mg'], 'M')``
    creates the mass base units of kg, g, mg.  Conversions between them
    are then given using `set_conversion`.

    Parameters
    ----------
    labels : list[str]
        New base units to make.
    base_dim : str
        Base dimension for all new units, e.g. mass ``'M'`` or length
        ``'L'``.
    """
    if base_dim not in _BASE_DIMS:
        raise ValueError(f"Unknown base dimension '{base_dim}'.")

    for label in labels:
        _add_unit(label, _Units(**{base_dim: (label, 1)}))


def add_unit(label: str, basis: str):
    """
    Register a new derived unit associated with the given label, e.g.
    ``add_unit('kN', '1000*N')``.

    Parameters
    ----------
    label : str
        Case-sensitive label for the new units.
    basis : str
        A unit string defining the new units in terms of existing ones.
        See `dim` for details on unit string format.

    Raises
    ------
    ValueError
        Invalid / already defined label or invalid basis.
    """
    _add_unit(label, _Units(basis))


def add_named_dimension(name: str, units: str):
    """
    Give a name (e.g. ``'Energy'``) to the dimension of the given units
    (e.g. ``'J'``).  Named dimensions are used when writing relations
    between dimensions (see `dimequiv.equivalences.eqrelation`).

    Raises
    ------
    ValueError
        If `name` is not an identifier or is already defined.
    """
    if not name.isidentifier():
        raise ValueError(f"Invalid dimension name: '{name}'.")
    if name in _NAMED_DIMS:
        raise ValueError(f"Dimension '{name}' already defined.")

    _NAMED_DIMS[name] = _Units(units).dimension()


def block_conversion(label: str):
    """
    Prevent any automatic factor conversion to / from the given units.
    This is used for offset temperatures (°C, °F) which are converted
    separately, and makes sure a conversion isn't accidentally added
    for these later.
    """
    _BLOCKED_CONVS.add(_KNOWN_UNITS[label])


def convert(value, from_units: str, to_units: str):
    """
    Convert `value` currently in `from_units` to `to_units`.  This is
    used for doing conversions without using ``Dim`` objects.  Integer
    values remain integers where the result is a whole number.

    Examples
    --------
    >>> convert(288, 'in^2', 'ft^2')  # Convert sq. in to sq. ft.
    2

    Parameters
    ----------
    value : scalar or array-like
        Value (not ``Dim`` object) for conversion.
    from_units, to_units : str
        Units of `value` and target units.

    Returns
    -------
    result : scalar or array-like
        Converted value.
    """
    if to_units == from_units:
        return value

    return _convert(value, _Units(from_units), _Units(to_units))


def named_dimension(name: str) -> Dimension:
    """
    Returns the ``Dimension`` registered under `name` using
    `add_named_dimension`.

    Raises
    ------
    KeyError
        If no dimension has this name.
    """
    try:
        return _NAMED_DIMS[name]
    except KeyError:
        raise KeyError(f"Unknown dimension name '{name}'.") from None


def set_conversion(from_label: str, to_label: str, *, fwd: Number,
                   rev: Number | str | None = 'auto'):
    """
    Set a conversion factor between two base units in the graph of
    conversions.

    Parameters
    ----------
    from_label, to_label : str
        Existing base unit labels.
    fwd : Number
        Multiplier to convert from -> to.
    rev : Number or str, optional
        Multiplier for the reverse conversion to -> from:

        - If `rev` is None, no reverse conversion is added.
        - If `rev` == 'auto' the reverse conversion is deduced exactly
          where possible; `int` and `Fraction` factors give a
          `Fraction` (or `int`) reverse factor, others give ``1 / fwd``.

    Raises
    ------
    KeyError
        If either unit does not exist.
    ValueError
        If the conversion is already defined.
    """
    from_unit, to_unit = _KNOWN_UNITS[from_label], _KNOWN_UNITS[to_label]
    if to_unit in _CONVERSIONS.get(from_unit, {}):
        raise ValueError(f"Conversion '{from_label}' -> '{to_label}' "
                         f"already defined.")

    _CONVERSIONS.setdefault(from_unit, {})[to_unit] = fwd
    _CONVERSIONS.setdefault(to_unit, {})

    if rev is None:
        return

    if rev == 'auto':
        if isinstance(fwd, (int, Fraction)):
            rev = _tidy_num(1 / Fraction(fwd))
        else:
            rev = coax_type(1 / fwd, int, default=1 / fwd)

    _CONVERSIONS[to_unit][from_unit] = rev


def to_absolute_temp(x):
    """
    Convert an isolated total temperature to an absolute scale.

        - If `x` is on an offset scale the equivalent on an absolute
          scale is used (°C → K or °F → °R).
        - If `x` is already on an absolute scale it is returned
          directly.

    Parameters
    ----------
    x : Dim
        Value with base temperature dimensions only.

    Returns
    -------
    result : Dim
        `x` converted as required.

    Raises
    ------
    ValueError
        If `x` is not a total temperature, i.e. is mixed units or is a
        temperature change / Δ.
    """
    if x.is_absolute_temp():
        return x

    if not x.is_total_temp():
        raise ValueError(f"'{x.units}' is not a total temperature.")

    try:
        abs_units = _OFF_ABS_MAP[x.units]
    except KeyError:
        raise ValueError(f"No absolute temperature mapping for "
                         f"'{x.units}'.") from None

    return x.convert(abs_units)


# == Private Attributes & Functions ====================================

_BLOCKED_CONVS: set[_Units] = set()  # Rejected by _convert().
_COMP_CONV_CACHE: dict[tuple[_Units, _Units], Number] = {}
_CONVERSIONS: dict[_Units, dict[_Units, Number]] = {}  # Directed graph.
_KNOWN_BASE_UNITS: set[_Units] = set()
_KNOWN_UNITS: dict[str, _Units] = {}  # All units, base and derived.
_MADE_UNITS: dict[str, _Units] = {}  # Parsed at runtime.
_NAMED_DIMS: dict[str, Dimension] = {}
_UNIT_LABELS: dict[_Units, list[str]] = {}  # Inverse of _KNOWN_UNITS.

# Unicode superscripts.
_UCODE_SS_CHARS = ('⁺⁻ᐧ⁰¹²³⁴⁵⁶⁷⁸⁹', '+-.0123456789')
_UC_SGN = _UCODE_SS_CHARS[0][0:2]
_UC_DOT = _UCODE_SS_CHARS[0][2]
_UC_DIG = _UCODE_SS_CHARS[0][3:]
_UC_PWR_PATTERN = fr'''[{_UC_SGN}]?[{_UC_DIG}]+(?:[{_UC_DOT}][{_UC_DIG}]+)?'''

# noinspection RegExpUnnecessaryNonCapturingGroup
_UNIT_RX = re.compile(fr'''
    ([.*×/])?                                               # Operator.
    (?:([+-]?\d+(?:\.\d*)?(?:[eE][+-]?\d+)?)(?:[.*×]?))?    # Mult w/ sep
    ([a-zA-Z_Δ°μÅ]+)                                        # Unit
    ((?:\^[+-]?\d+(?:\.\d+)?)|                              # Pwr (ascii), or
    (?:{_UC_PWR_PATTERN}))?                                 # Pwr (ucode)
    |(.+)                                                   # OR mismatch.
''', flags=re.DOTALL | re.VERBOSE)

# Temperature units are listed so that special rules can be applied.
_ABS_SCALE_TEMPS = ('K', '°R')
_OFF_SCALE_TEMPS = ('°C', '°F')
_OFF_ABS_MAP = {'°C': 'K', '°F': '°R'}
_TOTAL_TEMPS = _ABS_SCALE_TEMPS + _OFF_SCALE_TEMPS
_DELTA_TEMPS = ('K', '°R', 'Δ°C', 'Δ°F')
_ALL_TEMPS = _TOTAL_TEMPS + _DELTA_TEMPS

# Total temperature scales as (scale, offset) relative to Kelvin, i.e.
# T[K] = (T + offset) * scale.
_TEMP_SCALES = {'K': (1, 0),
                '°C': (1, Fraction('273.15')),
                '°R': (Fraction(5, 9), 0),
                '°F': (Fraction(5, 9), Fraction('459.67'))}


# ----------------------------------------------------------------------

def _add_unit(label: str, basis: _Units):
    """Register a new ``_Units`` entry under `label`."""
    if not label or any(not c.isalpha() and c not in '_°Δ' for c in label):
        raise ValueError(f"Invalid unit string: '{label}'.")

    if label in _KNOWN_UNITS:
        raise ValueError(f"Unit '{label}' already defined.")

    _check_units(basis)
    _KNOWN_UNITS[label] = basis
    _UNIT_LABELS.setdefault(basis, []).append(label)

    # Base units are also recorded separately.  Labels must match.
    base_label = _base_unit(basis)
    if base_label is None:
        return

    if base_label != label:
        raise ValueError(f"Basis unit string must match supplied basis, "
                         f"got: '{label}' != '{base_label}'")

    _KNOWN_BASE_UNITS.add(basis)


def _base_unit(unit: _Units) -> Optional[str]:
    """
    If `unit` is a base unit (`k` = 1 and only one base dimension with
    power 1) return its label, otherwise return None.
    """
    used = [(label, pwr) for label, pwr in unit[1:] if pwr != 0]
    if len(used) != 1 or used[0][1] != 1 or unit.k != 1:
        return None
    return used[0][0]


def _check_units(unit: _Units):
    """
    Sanity checks applied to every ``_Units`` on construction.  Blank
    labels cannot have non-zero powers (the reverse is permitted and is
    used during conversion).
    """
    if any((not label and pwr != 0) for label, pwr in unit[1:]):
        raise ValueError("Blank units must have no power.")

    if unit.k == 0:
        raise ValueError("k must be non-zero.")

    # Offset temperatures can't be part of derived units.  Note that
    # K, °R can represent absolute temperatures as well as changes.
    if unit.θ[0] in _OFF_SCALE_TEMPS and not unit.is_base_temp():
        raise ValueError(f"Offset temperatures are only permitted as "
                         f"base units, got: {str(unit)}")


def _conversion_factor(from_units: _Units,
                       to_units: _Units) -> Optional[Number]:
    """
    Compute the factor for converting between two units, or None if
    no conversion exists.  Not used for total temperatures, which are
    handled separately.
    """
    if from_units == to_units:
        return 1

    opts = _opts._unit_options
    if opts.cache_conversions:
        try:
            return _COMP_CONV_CACHE[from_units, to_units]
        except KeyError:
            pass

    # Step 1: Trace a path through the graph of conversions (base units
    # will take this path only).
    factor = None
    if from_units in _CONVERSIONS and to_units in _CONVERSIONS:
        path = _trace(from_units, to_units)
        if path is not None:
            if len(path) > opts.conversion_length_warning:
                warnings.warn(f"Converting '{from_units}' -> '{to_units}' "
                              f"gives overlong path: " +
                              ' -> '.join(str(x) for x in path))

            factor = reduce(operator.mul, (_CONVERSIONS[a][b] for a, b in
                                           zip(path, path[1:])))

    if factor is None:
        # Two base units can only be joined by the graph, and Step 2
        # would recurse indefinitely.  A scaled unit (e.g. 'me' = k*kg)
        # converting to or from a base unit carries its factor in k.
        if (from_units in _KNOWN_BASE_UNITS and
                to_units in _KNOWN_BASE_UNITS):
            return None

        # Step 2: Compute the factor from the base units.  A 'power-zero'
        # version of the target multiplied on the LHS leaves the factor
        # in k, i.e. (1/k_to)*to_units^0 * from_units.
        zero_bases = []
        for (f_label, f_pwr), (t_label, t_pwr) in zip(from_units[1:],
                                                      to_units[1:]):
            if bool(f_label) != bool(t_label):
                raise ValueError(f"Inconsistent base units converting "
                                 f"'{from_units}' -> '{to_units}'")
            if f_pwr != t_pwr:
                raise ValueError(f"Inconsistent indices converting "
                                 f"'{from_units}' -> '{to_units}': "
                                 f"'{f_label}^{f_pwr}' and "
                                 f"'{t_label}^{t_pwr}'")
            zero_bases.append((t_label, 0))

        zero_units = _Units(_tidy_num(_exact_pow(to_units.k, -1)),
                            *zero_bases)
        factor = (zero_units * from_units).k

    factor = _tidy_num(factor)
    if opts.cache_conversions:
        _COMP_CONV_CACHE[from_units, to_units] = factor
    return factor


def _convert(value, from_units: _Units, to_units: _Units):
    """Convert `value` between two ``_Units``."""
    if from_units.is_total_temp() and to_units.is_total_temp():
        return _convert_total_temp(value, from_units.θ[0], to_units.θ[0])

    if from_units in _BLOCKED_CONVS:
        raise ValueError(f"Automatic conversion from unit '{from_units}' "
                         f"is prevented.")
    if to_units in _BLOCKED_CONVS:
        raise ValueError(f"Automatic conversion to unit '{to_units}' is "
                         f"prevented.")

    factor = _conversion_factor(from_units, to_units)
    if factor is None:
        raise ValueError(f"No conversion found: '{from_units}' -> "
                         f"'{to_units}'")

    return _like(_scale(value, factor), value)


def _convert_total_temp(x, from_label: str, to_label: str):
    """
    Convert a total temperature, allowing for the offset of the °C and
    °F scales.  The value passes through Kelvin on the way.
    """
    try:
        from_scale, from_offset = _TEMP_SCALES[from_label]
        to_scale, to_offset = _TEMP_SCALES[to_label]
    except KeyError:
        raise ValueError(f"Cannot convert total temperature: {from_label} "
                         f"-> {to_label}") from None

    if from_label == to_label:
        return x

    # This style (instead of +=) allows for NumPy ufunc.
    x_k = _scale(x + _as_operand(from_offset, x), from_scale)
    res = _scale(x_k, 1 / Fraction(to_scale)) - _as_operand(to_offset, x)
    return _like(res, x)


def _as_operand(c, like):
    """Exact constants are given to NumPy as floats."""
    if isinstance(like, np.ndarray) and isinstance(c, Fraction):
        return float(c)
    return c


def _exact_pow(x, pwr):
    """Raise to a power, keeping negative integer powers of ints exact."""
    if (isinstance(x, int) and isinstance(pwr, int) and pwr < 0 and
            x != 0):
        return Fraction(x) ** pwr
    return x ** pwr


def _like(res, orig):
    """Whole number results are returned as `int` if `orig` was `int`."""
    if isinstance(orig, int) and isinstance(res, (float, Fraction)):
        return coax_type(res, int, default=res)
    return res


def _parse_units(label: str) -> _Units:
    """Parse a unit string into ``_Units``, see `dim` for format."""
    if not label:
        return _Units()

    try:
        return _KNOWN_UNITS[label]  # Known units are pre-checked.
    except KeyError:
        pass

    cache = _opts._unit_options.cache_made_units
    if cache:
        try:
            return _MADE_UNITS[label]
        except KeyError:
            pass

    tokens = _UNIT_RX.findall(''.join(label.split()))
    if not tokens:
        raise ValueError(f"Invalid unit definition '{label}'.")
    if tokens[0][0]:
        raise ValueError("Invalid leading operator in unit definition.")

    # Build result by multiplying sub-parts.
    res = _Units()
    for op_str, mult_str, sub_label, pwr_str, mismatch in tokens:
        if mismatch:
            raise ValueError(f"Invalid term '{mismatch}' in unit "
                             f"definition.")

        if mult_str:
            mult = coax_type(float(mult_str), int, default=float(mult_str))
        else:
            mult = 1

        try:
            sub_basis = _KNOWN_UNITS[sub_label]
        except KeyError:
            raise ValueError(f"Unknown component '{sub_label}' in unit "
                             f"definition.") from None

        pwr_str = _from_ucode_super(pwr_str.lstrip('^'))
        pwr = force_type(pwr_str, int, float) if pwr_str else 1
        if op_str == '/':
            mult = _tidy_num(_exact_pow(mult, -1))
            pwr = -pwr

        res = res * sub_basis ** pwr * _Units(k=mult)

    _check_units(res)
    if cache:
        _MADE_UNITS[label] = res
    return res


def _scale(value, factor):
    """Multiply `value` by a unit factor, keeping NumPy arrays numeric."""
    if isinstance(value, np.ndarray) and isinstance(factor, Fraction):
        factor = float(factor)
    return value * factor


def _tidy_num(x):
    """Whole `Fraction` values are returned as `int`."""
    if isinstance(x, Fraction) and x.denominator == 1:
        return x.numerator
    return x


def _tidy_pwr(p):
    """Powers are kept as `int` wherever possible."""
    return coax_type(p, int, default=p) if isinstance(p, float) else p


def _trace(from_units: _Units, to_units: _Units) -> Optional[list[_Units]]:
    """
    Breadth-first search for the shortest path between two units in the
    graph of conversions.  Returns the list of units visited including
    both ends, or None if there is no path.
    """
    came_from = {from_units: None}
    frontier = deque([from_units])
    while frontier:
        at = frontier.popleft()
        if at == to_units:
            break
        for nxt in _CONVERSIONS.get(at, {}):
            if nxt not in came_from:
                came_from[nxt] = at
                frontier.append(nxt)

    if to_units not in came_from:
        return None

    path = [to_units]
    while path[-1] != from_units:
        path.append(came_from[path[-1]])
    return path[::-1]


# -- Unicode Functions -------------------------------------------------

def _from_ucode_super(ss: str) -> str:
    """Convert unicode superscript characters in `ss` to plain text."""
    return ss.translate(_FROM_UCODE)


def _to_ucode_super(ss: str) -> str:
    """Convert numeric characters in `ss` to unicode superscripts."""
    return ss.translate(_TO_UCODE)


_FROM_UCODE = str.maketrans(*_UCODE_SS_CHARS)
_TO_UCODE = str.maketrans(_UCODE_SS_CHARS[1], _UCODE_SS_CHARS[0])
