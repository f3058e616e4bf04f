"""
Units (:mod:`dimequiv.units`)
=============================

.. currentmodule:: dimequiv.units

Units-aware calculations, objects and associated functions.

Examples
--------

Creation of dimensioned values is done using the factory function
``dim()`` in a natural way, and gives a ``Dim`` object as a result.  See
documentation for ``dim()`` for details on valid formats for the unit
string.

>>> r = dim(10, 'ft')
>>> ω = dim(30, 'rad/s')
>>> r * ω  # Centripetal motion v_t = r.ω
dim(300, 'fps')

Dimensions drop out in normal calculations:

>>> 6 * 7 * dim()
42

The ``convert`` function can be used with plain numeric inputs.  The
type of the input argument is preserved where possible (int to int):

>>> convert(288, 'in^2', 'ft^2')  # Convert sq. in to sq. ft.
2

Every quantity has a ``Dimension`` which is independent of the units
used.  Quantities with the same dimension can be converted directly,
otherwise an equivalence is needed (see :mod:`dimequiv.equivalences`):

>>> dimension(dim(1, 'eV')) == dimension('J')
True
>>> named_dimension('Energy') == dimension('kg.m²/s²')
True

Temperature values are a special case because different temperatures
can have offset scales or represent different quantities:

    - `Absolute` or `Offset` scales:  `Absolute` temperatures have their
      zero values located at absolute zero whereas `offset` temperatures
      use some other reference point for zero.
    - Represent `Total` values or `Change`/`Δ`:  `Total` temperatures
      represent the actual temperature state of a body, whereas `Δ`
      values represent the change in temperature.

    +------------------+----------+--------+-------+--------+
    |                  |     Total Scale   | Can Represent  |
    | Temperature Unit +-------------------+----------------+
    |                  | Absolute | Offset | Total | Change |
    +==================+==========+========+=======+========+
    |        K         |    Yes   |   No   |  Yes  |   Yes  |
    +------------------+----------+--------+-------+--------+
    |        °R        |    Yes   |   No   |  Yes  |   Yes  |
    +------------------+----------+--------+-------+--------+
    |        °C        |    No    |   Yes  |  Yes  |   No   |
    +------------------+----------+--------+-------+--------+
    |        °F        |    No    |   Yes  |  Yes  |   No   |
    +------------------+----------+--------+-------+--------+
    |       Δ°C        |    ---   |   ---  |   No  |   Yes  |
    +------------------+----------+--------+-------+--------+
    |       Δ°F        |    ---   |   ---  |   No  |   Yes  |
    +------------------+----------+--------+-------+--------+

>>> dim(25, '°C') + dim(5, 'Δ°C')
dim(30, '°C')
>>> to_absolute_temp(dim(25, '°C'))
dim(5963/20, 'K')

Total temperatures on offset scales are not allowed in derived units:

>>> dim('km.°F')  # doctest: +ELLIPSIS, +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
...
ValueError: Offset temperatures are only permitted as base units.
"""

from ._base import (Dimension, DIMENSIONLESS, add_base_unit, add_unit,
                    add_named_dimension, block_conversion, convert,
                    named_dimension, set_conversion, to_absolute_temp)
from ._dim import dim, dimension, Dim
from ._opts import (UnitOptions, get_unit_options, set_unit_options,
                    unit_options)
from . import _defs  # Sets up standard units.
from ._consts import C0, E_CHARGE, H, HBAR, K_B, M_E, M_P

__all__ = ['Dim', 'Dimension', 'DIMENSIONLESS', 'UnitOptions',
           'add_base_unit', 'add_named_dimension', 'add_unit',
           'block_conversion', 'convert', 'dim', 'dimension',
           'get_unit_options', 'named_dimension', 'set_conversion',
           'set_unit_options', 'to_absolute_temp', 'unit_options',
           'C0', 'E_CHARGE', 'H', 'HBAR', 'K_B', 'M_E', 'M_P']
