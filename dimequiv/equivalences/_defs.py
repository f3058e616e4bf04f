import math
from dataclasses import dataclass, fields
from itertools import product

from dimequiv.units import C0, H, HBAR, K_B
from ._base import Equivalence
from ._resolve import add_rule, eqrelation

__all__ = ['MassEnergy', 'PhotonEnergy', 'Spectral', 'Thermal']


# ======================================================================


class MassEnergy(Equivalence):
    """
    Equivalence between the rest mass of a body and its energy, E = mc².

    >>> from dimequiv.equivalences import uconvert
    >>> from dimequiv.units import dim
    >>> print(f"{uconvert('MeV', dim(1, 'mp'), MassEnergy()):.3f}")
    938.272 MeV
    """
    pass


eqrelation(MassEnergy, 'Energy/Mass', C0 ** 2)


# ----------------------------------------------------------------------


_CONVENTIONS = ('linear', 'angular')


@dataclass(frozen=True)
class PhotonEnergy(Equivalence):
    """
    Equivalence between the energy, frequency, wavelength and wavenumber
    of a photon:  E = hf = hc/λ = hcν̃.

    Each of the frequency, wavelength and wavenumber can be either
    ``'linear'`` (the default) or ``'angular'``:

        - ``frequency='angular'``: Angular frequency ω = 2πf, E = ħω.
        - ``wavelength='angular'``: Reduced wavelength ƛ = λ/2π,
          E = ħc/ƛ.
        - ``wavenumber='angular'``: Angular wavenumber k = 2πν̃, E = ħck.

    Examples
    --------
    >>> from dimequiv.equivalences import uconvert
    >>> from dimequiv.units import dim
    >>> print(f"{uconvert('eV', dim(589, 'nm'), PhotonEnergy()):.3f}")
    2.105 eV
    """
    frequency: str = 'linear'
    wavelength: str = 'linear'
    wavenumber: str = 'linear'

    def __post_init__(self):
        for f in fields(self):
            if getattr(self, f.name) not in _CONVENTIONS:
                raise ValueError(f"PhotonEnergy {f.name} must be 'linear' "
                                 f"or 'angular', got: "
                                 f"{getattr(self, f.name)!r}")


# Energy relations.
for _kind, _rel in (('frequency', 'Energy/Frequency'),
                    ('wavelength', 'Energy*Length'),
                    ('wavenumber', 'Energy/Wavenumber')):
    _k = H if _kind == 'frequency' else H * C0
    _k_ang = HBAR if _kind == 'frequency' else HBAR * C0
    eqrelation(PhotonEnergy.where(**{_kind: 'linear'}), _rel, _k)
    eqrelation(PhotonEnergy.where(**{_kind: 'angular'}), _rel, _k_ang)


# Relations between frequency, wavelength and wavenumber.  Each has its
# own linear / angular convention, so there is a rule for every
# combination.  Angular frequency and wavenumber are 2π times the linear
# value, angular (reduced) wavelength is the linear value / 2π.

_ANGULAR_SIGN = {'frequency': 1, 'wavelength': -1, 'wavenumber': 1}
_DIM_NAMES = {'frequency': 'Frequency', 'wavelength': 'Length',
              'wavenumber': 'Wavenumber'}


def _two_pi(pwr: int):
    return 1 if pwr == 0 else (2 * math.pi) ** pwr


def _times(k):
    def times(d, x, e):
        return x * k
    return times


def _into(k):
    def into(d, x, e):
        return k / x
    return into


def _photon_rules(kind_a: str, kind_b: str, k, inverse: bool):
    """
    Add rules for every convention of quantities `kind_a` and `kind_b`,
    based on the linear relation a = k·b or (if `inverse`) a = k / b.
    """
    a_dim, b_dim = _DIM_NAMES[kind_a], _DIM_NAMES[kind_b]
    for conv_a, conv_b in product(_CONVENTIONS, repeat=2):
        family = PhotonEnergy.where(**{kind_a: conv_a, kind_b: conv_b})
        s_a = _ANGULAR_SIGN[kind_a] if conv_a == 'angular' else 0
        s_b = _ANGULAR_SIGN[kind_b] if conv_b == 'angular' else 0

        if inverse:
            k_ab = k * _two_pi(s_a + s_b)
            add_rule(a_dim, b_dim, family, _into(k_ab))
            add_rule(b_dim, a_dim, family, _into(k_ab))
        else:
            add_rule(a_dim, b_dim, family, _times(k * _two_pi(s_a - s_b)))
            add_rule(b_dim, a_dim, family, _times(_two_pi(s_b - s_a) / k))


_photon_rules('frequency', 'wavelength', C0, inverse=True)  # f = c/λ
_photon_rules('frequency', 'wavenumber', C0, inverse=False)  # f = cν̃
_photon_rules('wavelength', 'wavenumber', 1, inverse=True)  # λ = 1/ν̃


# ----------------------------------------------------------------------


class Spectral(Equivalence):
    """
    Linear-only equivalence between photon energy, frequency and
    wavelength:  E = hf = hc/λ and f = c/λ.  Use `PhotonEnergy` for
    angular conventions or wavenumbers.
    """
    pass


eqrelation(Spectral, 'Energy/Frequency', H)
eqrelation(Spectral, 'Energy*Length', H * C0)
eqrelation(Spectral, 'Frequency*Length', C0)


# ----------------------------------------------------------------------


class Thermal(Equivalence):
    """
    Equivalence between temperature and the characteristic thermal
    energy E = k_B·T.  Offset temperatures are first converted to an
    absolute scale.

    >>> from dimequiv.equivalences import uconvert
    >>> from dimequiv.units import dim
    >>> print(f"{uconvert('meV', dim(20, '°C'), Thermal()):.2f}")
    25.26 meV
    """
    pass


eqrelation(Thermal, 'Energy/Temperature', K_B)
