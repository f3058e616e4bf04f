from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Any

from .exception import RegistrationError


# ======================================================================


@dataclass(frozen=True)
class Equivalence:
    """
    Base class for equivalences.  An equivalence is a named physical
    relation that allows quantities of one dimension to be converted
    into another, e.g. ``MassEnergy`` relates mass and energy by
    E = mc².

    Equivalences are frozen dataclasses.  Simple (stateless)
    equivalences are empty subclasses::

        class MyEquiv(Equivalence):
            pass

    Parameterised equivalences are declared as frozen dataclasses
    themselves, with each field being a tag that selects a variant of the
    relation, or run-time data used by the conversion rules::

        @dataclass(frozen=True)
        class Scaled(Equivalence):
            factor: int = 1

    The class together with the field values determines how a conversion
    is done.  Instances are immutable and hashable.

    .. note:: Conversions themselves are defined separately using
       `eqrelation`, `add_rule` or `rule`.
    """

    @classmethod
    def where(cls, **tags) -> EquivalenceFamily:
        """
        Returns an `EquivalenceFamily` containing the instances of this
        class that have the given field values, e.g.
        ``PhotonEnergy.where(frequency='angular')``.  Fields not given
        are unconstrained.

        Raises
        ------
        RegistrationError
            If a tag is not a field of this class.
        """
        names = {f.name for f in fields(cls)}
        unknown = set(tags) - names
        if unknown:
            raise RegistrationError(f"{cls.__name__} has no tag(s): "
                                    f"{', '.join(sorted(unknown))}")

        return EquivalenceFamily(cls, frozenset(tags.items()))


@dataclass(frozen=True)
class EquivalenceFamily:
    """
    A set of equivalence instances: all instances of `cls` (including
    subclasses) whose fields match `tags`.  Families are partially
    ordered by specificity, with ``A <= B`` meaning that every member of
    `A` is also a member of `B`.
    """
    cls: type
    tags: frozenset[tuple[str, Any]] = frozenset()

    def __contains__(self, equiv: Equivalence) -> bool:
        if not isinstance(equiv, self.cls):
            return False
        return all(getattr(equiv, name) == value for name, value in self.tags)

    def __le__(self, other: EquivalenceFamily) -> bool:
        return (issubclass(self.cls, other.cls) and
                self.tags >= other.tags)

    def __str__(self):
        tag_str = ', '.join(f'{name}={value!r}'
                            for name, value in sorted(self.tags))
        return f"{self.cls.__name__}({tag_str})" if tag_str else \
            self.cls.__name__


class ExtendedEquivalence(Equivalence, ABC):
    """
    An equivalence defined entirely by a single proportionality constant
    `k` given by `prop_constant`.  Any two dimensions `A` and `B` where
    `A` = `B` · dim(`k`) are related, i.e. converting `x` gives either
    ``x * k`` or ``x / k``, whichever has the target dimension.  This
    applies unless a more specific rule has been registered for the
    subclass.

    Subclasses must be frozen dataclasses if they have fields.
    """

    @abstractmethod
    def prop_constant(self):
        """Returns the proportionality constant (``Dim`` or number)."""
        raise NotImplementedError


def as_family(family) -> EquivalenceFamily:
    """
    Convert an `Equivalence` subclass to its unconstrained family.
    `EquivalenceFamily` objects are returned directly.
    """
    if isinstance(family, EquivalenceFamily):
        return family
    if isinstance(family, type) and issubclass(family, Equivalence):
        return EquivalenceFamily(family)

    raise RegistrationError(f"Expected an Equivalence subclass or family, "
                            f"got: {family!r}")


def equivalence(name: str, doc: str = None, *,
                module: str = None) -> type[Equivalence]:
    """
    Declare a new stateless equivalence in one step.  This is the same as
    writing an empty subclass of `Equivalence`::

        MyEquiv = equivalence('MyEquiv', "Relates X and Y.")

    Parameters
    ----------
    name : str
        Class name.
    doc : str, optional
        Class docstring.
    module : str, optional
        Module name recorded on the class (default is the caller's
        module).

    Returns
    -------
    type[Equivalence]
    """
    if not name.isidentifier():
        raise ValueError(f"Invalid equivalence name: '{name}'.")

    if module is None:
        module = sys._getframe(1).f_globals.get('__name__', '__main__')

    return type(name, (Equivalence,), {'__doc__': doc,
                                       '__module__': module})
