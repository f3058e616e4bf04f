#!/usr/bin/env python3

# Examples of conversions between equivalent dimensions.

from dataclasses import dataclass

from dimequiv.equivalences import (Equivalence, MassEnergy, PhotonEnergy,
                                   Thermal, eqrelation, uconvert, ustrip)
from dimequiv.units import dim


# ----------------------------------------------------------------------

@dataclass(frozen=True)
class Spring(Equivalence):
    """Linear spring, F = k.x where k is given in N/mm."""
    rate: float = 1.0


eqrelation(Spring, 'Force/Length', lambda e: dim(e.rate, 'N/mm'))


def main():
    electron = uconvert('keV', dim(1, 'me'), MassEnergy())
    print(f"Electron rest energy = {electron:.3f}")

    sodium = dim(589, 'nm')
    print(f"Sodium D line {sodium} = "
          f"{uconvert('eV', sodium, PhotonEnergy()):.4f} = "
          f"{uconvert('THz', sodium, PhotonEnergy()):.1f} = "
          f"{uconvert('cm^-1', sodium, PhotonEnergy()):.1f}")
    print(f"Angular frequency = "
          f"{uconvert('fs^-1', sodium, PhotonEnergy(frequency='angular')):.4f}")

    room = dim(20, '°C')
    print(f"Thermal energy at {room} = "
          f"{uconvert('meV', room, Thermal()):.2f}")

    stretch = ustrip('mm', [dim(10, 'N'), dim(25, 'N')], Spring(rate=5.0))
    print(f"Spring deflections (5 N/mm): {stretch} mm")


# ----------------------------------------------------------------------

if __name__ == "__main__":
    main()
