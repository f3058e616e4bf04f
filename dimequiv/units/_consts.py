"""
Physical constants used by the built-in equivalences, as ``Dim`` values.
Constants that are exact by the 2019 SI definitions are given their
exact values; the speed of light is an `int` so that mass-energy
conversions of exact values stay exact.
"""
import math

from ._dim import dim

C0 = dim(299792458, 'm/s')  # Speed of light in vacuum (exact).
H = dim(6.62607015e-34, 'J.s')  # Planck constant (exact).
HBAR = H / (2 * math.pi)  # Reduced Planck constant.
K_B = dim(1.380649e-23, 'J/K')  # Boltzmann constant (exact).
E_CHARGE = dim(1.602176634e-19, 'C')  # Elementary charge (exact).

# CODATA 2018.
M_E = dim(9.1093837015e-31, 'kg')  # Electron rest mass.
M_P = dim(1.67262192369e-27, 'kg')  # Proton rest mass.
