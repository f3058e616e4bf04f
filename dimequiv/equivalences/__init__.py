"""
Equivalences (:mod:`dimequiv.equivalences`)
===========================================

.. currentmodule:: dimequiv.equivalences

Conversion of quantities between different dimensions where a physical
relation allows it, e.g. mass and energy (E = mc²) or photon energy and
wavelength (E = hc/λ).  The relation used is given by an equivalence
instance.

Examples
--------

>>> from dimequiv.units import dim
>>> print(f"{uconvert('eV', dim(589, 'nm'), PhotonEnergy()):.5f}")
2.10499 eV

Conversions within the same dimension don't use the equivalence at all:

>>> uconvert('km', dim(1500, 'm'), MassEnergy())
dim(3/2, 'km')

New equivalences are declared as subclasses of `Equivalence` (or using
`equivalence`), and the conversions they allow are registered using
`eqrelation` for (inverse) proportional relations, or `add_rule` /
`rule` for anything else:

>>> Hooke = equivalence('Hooke', "Linear spring, F = k.x")
>>> eqrelation(Hooke, 'Force/Length', dim(50, 'N/mm'))
>>> uconvert('N', dim(2, 'mm'), Hooke())
dim(100, 'N')

Relations are registered once (normally when a module is imported).
The registry is not protected against concurrent registration, so
registration from different threads once conversions have started is
not supported.

Available equivalences:

    - `MassEnergy`: E = mc².
    - `PhotonEnergy`: E = hf = hc/λ = hcν̃, with linear or angular
      frequency, wavelength and wavenumber.
    - `Spectral`: Linear-only E = hf = hc/λ.
    - `Thermal`: E = k_B·T.
"""

from ._base import (Equivalence, EquivalenceFamily, ExtendedEquivalence,
                    equivalence)
from ._resolve import add_rule, edconvert, eqrelation, relations, rule
from ._convert import uconvert, ustrip
from ._defs import MassEnergy, PhotonEnergy, Spectral, Thermal
from .exception import (AmbiguousRelationError, CapabilityMismatchError,
                        NoRelationError, RegistrationError)

__all__ = ['Equivalence', 'EquivalenceFamily', 'ExtendedEquivalence',
           'equivalence', 'add_rule', 'edconvert', 'eqrelation',
           'relations', 'rule', 'uconvert', 'ustrip', 'MassEnergy',
           'PhotonEnergy', 'Spectral', 'Thermal', 'AmbiguousRelationError',
           'CapabilityMismatchError', 'NoRelationError',
           'RegistrationError']
