from fractions import Fraction
import math

from ._base import (add_unit, add_base_unit, add_named_dimension,
                    set_conversion, block_conversion)
from ._opts import get_unit_options, set_unit_options

# == Base Unit Definitions =============================================

# -- Mass --------------------------------------------------------------

add_base_unit(['t', 'kg', 'g', 'mg', 'μg'], 'M')  # Note: t = Metric tonne.
add_base_unit(['slug', 'lbm'], 'M')

set_conversion('t', 'kg', fwd=1000)
set_conversion('kg', 'g', fwd=1000)
set_conversion('g', 'mg', fwd=1000)
set_conversion('g', 'μg', fwd=10 ** 6)
set_conversion('lbm', 'kg', fwd=0.45359237)  # Intl & US Standard Pound.
set_conversion('slug', 'lbm', fwd=32.17404855643045)  # G in ft/s^2.

# -- Length ------------------------------------------------------------

add_base_unit(['km', 'm', 'cm', 'mm', 'μm', 'nm', 'Å', 'pm'], 'L')
add_base_unit(['NM', 'mi', 'yd', 'ft', 'in'], 'L')

set_conversion('km', 'm', fwd=1000)
set_conversion('m', 'cm', fwd=100)
set_conversion('m', 'mm', fwd=1000)
set_conversion('mm', 'μm', fwd=1000)
set_conversion('μm', 'nm', fwd=1000)
set_conversion('nm', 'Å', fwd=10)
set_conversion('Å', 'pm', fwd=100)

# Direct conversions from metres so that spectroscopic lengths don't
# give overlong paths.
set_conversion('m', 'μm', fwd=10 ** 6)
set_conversion('m', 'nm', fwd=10 ** 9)
set_conversion('m', 'Å', fwd=10 ** 10)
set_conversion('m', 'pm', fwd=10 ** 12)

set_conversion('NM', 'm', fwd=1852)  # International NM.
set_conversion('mi', 'yd', fwd=1760)  # International mile.
set_conversion('yd', 'ft', fwd=3)
set_conversion('yd', 'in', fwd=36)  # To shorten conv. path.
set_conversion('ft', 'in', fwd=12)
set_conversion('in', 'mm', fwd=Fraction(127, 5))  # 25.4 mm exactly.
set_conversion('in', 'cm', fwd=Fraction(127, 50))  # To shorten conv. path.
set_conversion('m', 'ft', fwd=1000 / 25.4 / 12)  # To shorten conv. path.

# -- Time --------------------------------------------------------------

add_base_unit(['day', 'hr', 'min', 's', 'ms', 'μs', 'ns', 'ps', 'fs'], 'T')

set_conversion('day', 'hr', fwd=24)
set_conversion('hr', 'min', fwd=60)
set_conversion('min', 's', fwd=60)
set_conversion('s', 'ms', fwd=1000)
set_conversion('ms', 'μs', fwd=1000)
set_conversion('μs', 'ns', fwd=1000)
set_conversion('ns', 'ps', fwd=1000)
set_conversion('ps', 'fs', fwd=1000)

set_conversion('s', 'μs', fwd=10 ** 6)  # To shorten conv. paths.
set_conversion('s', 'ns', fwd=10 ** 9)
set_conversion('s', 'ps', fwd=10 ** 12)
set_conversion('s', 'fs', fwd=10 ** 15)

# -- Temperature -------------------------------------------------------

add_base_unit(['°C', 'Δ°C', 'K'], 'θ')
add_base_unit(['°F', 'Δ°F', '°R'], 'θ')

block_conversion('°C')  # Automatic conversions for these offset units ...
block_conversion('°F')  # ... are prohibited; they are handled separately.

# Only conversions for temperature changes are given here.  Total
# temperatures are handled separately because of the offset scales used
# by °C and °F.
set_conversion('K', 'Δ°C', fwd=1)
set_conversion('K', 'Δ°F', fwd=Fraction(9, 5))
set_conversion('°R', 'Δ°F', fwd=1)

# -- Amount of Substance -----------------------------------------------

add_base_unit(['kmol', 'mol', 'mmol'], 'N')

set_conversion('kmol', 'mol', fwd=1000)
set_conversion('mol', 'mmol', fwd=1000)

# -- Electric Current --------------------------------------------------

add_base_unit(['A', 'mA'], 'I')

set_conversion('A', 'mA', fwd=1000)

# -- Luminous Intensity ------------------------------------------------

add_base_unit(['cd'], 'J')

# -- Plane Angle -------------------------------------------------------

add_base_unit(['deg', 'rad', 'rev'], 'A')

set_conversion('rev', 'rad', fwd=2 * math.pi)
set_conversion('rev', 'deg', fwd=360)
set_conversion('rad', 'deg', fwd=180 / math.pi)

# -- Solid Angle -------------------------------------------------------

add_base_unit(['sp', 'sr'], 'Ω')

set_conversion('sp', 'sr', fwd=4 * math.pi)  # 1 spat = 4π steradians.

# == Derived Unit Definitions ==========================================

# Notes:
# - A variety of operators / unicode (*, /, ×, ², etc) are used, which
#   acts as a check on the parser.
# - Physical constants used to define units are CODATA 2018 values.

# Prevent shorthand RHS expressions below from cluttering the cache.
_restore_caching = get_unit_options().cache_made_units
set_unit_options(cache_made_units=False)

# -- Area / Volume -----------------------------------------------------

add_unit('ha', '10000*m^2')
add_unit('cc', 'cm^3')
add_unit('L', '1000×cm^3')

# -- Mass --------------------------------------------------------------

add_unit('me', '9.1093837015e-31*kg')  # Electron rest mass.
add_unit('mp', '1.67262192369e-27*kg')  # Proton rest mass.
add_unit('u', '1.66053906660e-27*kg')  # Unified atomic mass unit.

# -- Frequency ---------------------------------------------------------

add_unit('Hz', 's⁻¹')
add_unit('kHz', '1000*Hz')
add_unit('MHz', '1e6*Hz')
add_unit('GHz', '1e9*Hz')
add_unit('THz', '1e12*Hz')
add_unit('RPM', 'rev/min')

# -- Speed / Acceleration ----------------------------------------------

add_unit('fps', 'ft/s')
add_unit('kt', 'NM/hr')
add_unit('kph', 'km/hr')
add_unit('G', '9.80665 m/s^2')  # WGS-84 definition

# -- Force -------------------------------------------------------------

add_unit('N', 'kg.m.s⁻²')
add_unit('kN', '1000×N')
add_unit('lbf', 'slug.ft/s²')

# -- Pressure ----------------------------------------------------------

add_unit('Pa', 'N/m²')
add_unit('kPa', '1000*Pa')
add_unit('MPa', 'N/mm²')
add_unit('bar', '100000*Pa')
add_unit('atm', '101325 Pa')  # ISO 2533-1975
add_unit('psi', 'lbf/in²')
add_unit('ksi', '1000*psi')

# -- Energy ------------------------------------------------------------

add_unit('J', 'N.m')
add_unit('kJ', '1000.J')
add_unit('MJ', '1000.kJ')
add_unit('Wh', '3600.J')
add_unit('kWh', '1e3.Wh')
add_unit('cal', '4.184×J')  # ISO Thermochemical calorie.
add_unit('kcal', '1000.cal')

add_unit('eV', '1.602176634e-19*J')  # Exact by SI definition of e.
add_unit('meV', '1e-3*eV')
add_unit('keV', '1000*eV')
add_unit('MeV', '1e6*eV')
add_unit('GeV', '1e9*eV')

# -- Power -------------------------------------------------------------

add_unit('W', 'J/s')
add_unit('kW', '1000*W')
add_unit('MW', '1e6*W')
add_unit('hp', '550×ft.lbf/s')

# -- Electrical --------------------------------------------------------

add_unit('C', 'A.s')
add_unit('V', 'W/A')
add_unit('mV', '1e-3*V')
add_unit('kV', '1000*V')

# -- Luminous ----------------------------------------------------------

add_unit('lm', 'cd.sr')  # Lumen.

set_unit_options(cache_made_units=_restore_caching)

# == Named Dimensions ==================================================

add_named_dimension('Dimensionless', '')
add_named_dimension('Mass', 'kg')
add_named_dimension('Length', 'm')
add_named_dimension('Time', 's')
add_named_dimension('Temperature', 'K')
add_named_dimension('Amount', 'mol')
add_named_dimension('Current', 'A')
add_named_dimension('Angle', 'rad')
add_named_dimension('Area', 'm^2')
add_named_dimension('Volume', 'm^3')
add_named_dimension('Frequency', 'Hz')
add_named_dimension('Wavenumber', 'm⁻¹')
add_named_dimension('Velocity', 'm/s')
add_named_dimension('Acceleration', 'm/s^2')
add_named_dimension('Force', 'N')
add_named_dimension('Pressure', 'Pa')
add_named_dimension('Energy', 'J')
add_named_dimension('Power', 'W')
add_named_dimension('Charge', 'C')
add_named_dimension('Voltage', 'V')
