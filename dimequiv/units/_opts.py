from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator


# ======================================================================


@dataclass(frozen=True, kw_only=True)
class UnitOptions:
    """
    Dataclass that holds option flags for handling units.  See
    `set_unit_options` for full details.
    """
    cache_conversions: bool
    cache_made_units: bool
    conversion_length_warning: int
    unicode_str: bool

    def __post_init__(self):
        if self.conversion_length_warning <= 1:
            raise ValueError("Require 'conversion_length_warning' > 1.")


# Single shared instance holding the defaults.
_unit_options = UnitOptions(
    cache_conversions=True,
    cache_made_units=True,
    conversion_length_warning=4,
    unicode_str=True
)


# ----------------------------------------------------------------------

def get_unit_options() -> UnitOptions:
    """
    Returns
    -------
    unit_options : UnitOptions
        A copy of the current options.  For a full description of each
        option, see `set_unit_options`.
    """
    return replace(_unit_options)


# noinspection PyIncorrectDocstring
def set_unit_options(**kwargs):
    """
    Set the current unit options.  Options not given are left unchanged.

    Parameters
    ----------
    cache_conversions : bool, default = True
        If `True`, computed conversion factors are cached for faster
        repeat access.  Only the requested direction is cached; the
        reverse conversion is cached separately when it is first used.

    cache_made_units : bool, default = True
        If `True`, cache the unit bases generated by parsing unit
        strings at runtime so that repeated use of the same string is
        not parsed again.

    conversion_length_warning : int, default = 4
        Issue a warning if a unit conversion traces a path longer than
        this value to determine the final conversion factor.  It usually
        means that a direct conversion for these units should be added.

    unicode_str : bool, default = True
        Generate unicode superscript characters for powers when unit
        strings are generated, e.g. ``m²`` instead of ``m^2``.

    Raises
    ------
    TypeError
        If an unknown option is given.
    ValueError
        If an option value is not allowed.
    """
    global _unit_options
    _unit_options = replace(_unit_options, **kwargs)


@contextmanager
def unit_options(**kwargs) -> Iterator[UnitOptions]:
    """
    Context manager that applies `set_unit_options` for the duration
    of a ``with`` block and restores the previous options afterwards.

    Examples
    --------
    >>> from dimequiv.units import dim, unit_options
    >>> with unit_options(unicode_str=False):
    ...     print(dim(4, 'ft') ** 2)
    16 ft^2
    """
    global _unit_options
    saved = _unit_options
    set_unit_options(**kwargs)
    try:
        yield get_unit_options()
    finally:
        _unit_options = saved
