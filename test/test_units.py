from fractions import Fraction
from unittest import TestCase


# noinspection PyUnusedLocal
class TestDim(TestCase):
    def test___init__(self):
        from dimequiv.units import dim

        # Test no arguments:  Value = 1, no units.
        x = dim()
        self.assertEqual(x.value, 1)
        self.assertIsInstance(x.value, int)
        self.assertEqual(x.units, '')

        # Test one positional argument: Units only.
        x = dim('ft')
        self.assertEqual(x.value, 1)
        self.assertEqual(x.units, 'ft')

        # Test two positional arguments: Value and units given.
        x, y = dim(3, 'ft'), dim(5 + 6j, 's')
        self.assertEqual(x.value, 3)
        self.assertIsInstance(x.value, int)
        self.assertIsInstance(y.value, complex)

        # Test dim(Dim, units) converts.
        x = dim(dim(2, 'km'), 'm')
        self.assertEqual(x.value, 2000)
        self.assertEqual(x.units, 'm')

        # Test a string value gives a warning.
        with self.assertWarns(UserWarning):
            x = dim('5', 'm')

        # Test cannot use derived units with offset temperature.
        with self.assertRaises(ValueError):
            x = dim(1, '°C/day')

        # Test unknown units.
        with self.assertRaises(ValueError):
            x = dim(1, 'furlong')

    def test___add__(self):
        from dimequiv.units import dim

        # Test addition of like units, preserving character.
        x = dim('ft') + dim(12, 'in')
        self.assertEqual(x.value, 2)
        self.assertIsInstance(x.value, int)
        self.assertEqual(x.units, 'ft')

        # Test addition of incompatible units disallowed.
        with self.assertRaises(ValueError):
            x = dim(10, 'kg') + dim(5, 'm')

        with self.assertRaises(ValueError):
            x = 2 + dim(2, 'kg')  # __radd__ check.

        # Test total temperature addition (special case).
        x = dim(25, '°C') + dim(5, 'Δ°C')
        self.assertEqual(x.units, '°C')
        self.assertEqual(x.value, 30)

        x = dim(9, 'Δ°F') + dim(10, '°C')
        self.assertEqual(x.units, '°F')
        self.assertAlmostEqual(x.value, 59)

        with self.assertRaises(ValueError):
            x = dim(32, '°C') + dim(32, '°F')  # Not allowed.

    def test___sub__(self):
        from dimequiv.units import dim

        with self.assertRaises(ValueError):
            x = (1 * dim('mol')) - (2 * dim('kg'))

        with self.assertRaises(ValueError):
            x = 3 - dim(2, 'mmol')  # __rsub__ check

        # Test offset temperature subtraction.
        x = dim(25, '°C') - dim(5, 'Δ°C')
        self.assertEqual(x.units, '°C')
        self.assertEqual(x.value, 20)

        x = dim(30, '°C') - dim(10, '°C')
        self.assertEqual(x.units, 'Δ°C')
        self.assertEqual(x.value, 20)

        with self.assertRaises(ValueError):
            x = dim(32, '°F') - dim(0, '°C')  # Must be same scale.

        with self.assertRaises(ValueError):
            x = dim(300, 'K') - dim(0, '°C')

    def test___mul__(self):
        from dimequiv.units import dim

        # Check multiply by plain units gives Dim result.
        x = 7.5 * dim('km')
        self.assertEqual(x.value, 7.5)
        self.assertEqual(x.units, 'km')

        # Check value type follows multiply rules.
        x = 4 * 3 * dim('N')
        self.assertEqual(x.value, 12)
        self.assertIsInstance(x.value, int)

        x = dim(4, 'm') * dim(2.0, 'm')
        self.assertEqual(x.value, 8.0)
        self.assertIsInstance(x.value, float)

        # Check multiply gives correct final units from LHS.
        x = dim(1, 'kg') * dim('G')
        self.assertAlmostEqual(x.value, 9.80665, places=5)
        self.assertEqual(x.units, 'N')

        x = dim(10, 'kg') / dim(5, 'mol')
        self.assertAlmostEqual(x.value, 2)
        self.assertEqual(x.units, 'kg.mol⁻¹')

        # Check radians / steradians disappear automatically when
        # multiplied by other units.
        r, omega = dim(10, 'ft'), dim(30, 'rad/s')
        v_t = r * omega
        self.assertEqual(v_t.value, 300)
        self.assertIsInstance(v_t.value, int)
        self.assertEqual(v_t.units, 'fps')

        x = 1 * dim('sr')
        self.assertEqual(x, 1)
        self.assertIsInstance(x, int)

        # LHS multiplication by a scalar retains units.
        x = dim('rad') * 2
        self.assertEqual(x.value, 2)
        self.assertEqual(x.units, 'rad')

        # Check multiply giving no units results in plain value.
        x = 5.0 * dim()
        self.assertIsInstance(x, float)
        self.assertEqual(x, 5)

        x = dim(6, 'km') * dim(2, 'km^-1')
        self.assertIsInstance(x, int)
        self.assertEqual(x, 12)

        # Exact unit factors give exact results.
        x = dim(1, 'ft') * dim(6, 'in')
        self.assertEqual(x.units, 'ft²')
        self.assertEqual(x.value, Fraction(1, 2))

    def test___truediv__(self):
        from dimequiv.units import dim

        x = dim(4.0, 'm') / 2
        self.assertEqual(x.value, 2.0)
        self.assertIsInstance(x.value, float)
        self.assertEqual(x.units, 'm')

        # Exact values stay exact.
        x = dim(4, 'm') / 2
        self.assertEqual(x.value, 2)
        self.assertIsInstance(x.value, int)

        x = dim(3, 'm') / 2
        self.assertEqual(x.value, Fraction(3, 2))

        x = dim(6, 'J') / dim(3, 'm^2/s^2')
        self.assertEqual(x.value, 2)
        self.assertIsInstance(x.value, int)
        self.assertEqual(x.units, 'kg')

        x = dim(9.80665, 'N') / dim(1, 'G').convert('ft/s^2')
        self.assertAlmostEqual(x.value, 1, places=5)
        self.assertEqual(x.units, 'kg')

        x = 2 / dim(4, 's')
        self.assertEqual(x.value, 0.5)
        self.assertEqual(x.units, 'Hz')

    def test___matmul__(self):
        import numpy as np
        from dimequiv.units import dim

        a = dim(np.array([[1, -1, 2], [0, -3, 1]]), 'J/K')
        b = dim(np.array([-271.15, -272.15, -273.15]), '°C')  # 2, 1, 0 K.
        x = a @ b
        self.assertTrue(np.allclose(x.value, [1, -3]))
        self.assertEqual(x.units, 'J')

    def test___pow__(self):
        import numpy as np
        from dimequiv.units import dim

        x = dim(3, 'm') ** 2
        self.assertEqual(x.value, 9)
        self.assertEqual(x.units, 'm²')

        x = dim(np.array([1, 2, 4]), 's') ** -1
        self.assertTrue(np.allclose(x.value, [1, 0.5, 0.25]))
        self.assertEqual(x.units, 'Hz')

        x = dim(4, 'km') ** 0.5
        self.assertEqual(x.value, 2)
        self.assertEqual(x.units, 'km⁰ᐧ⁵')

        x = dim(4, 's') ** -1
        self.assertEqual(x.value, Fraction(1, 4))
        self.assertEqual(x.units, 'Hz')

        x = dim(Fraction(2, 3), 'm') ** -2
        self.assertEqual(x.value, Fraction(9, 4))

        with self.assertRaises(ZeroDivisionError):
            dim(0, 'nm') ** -1

    def test_array_scaling(self):
        import numpy as np
        from dimequiv.units import dim

        # Exact factors don't give object arrays.
        x = dim(np.array([127, 254]), 'mm').convert('in')
        self.assertEqual(x.value.dtype.kind, 'f')
        self.assertTrue(np.allclose(x.value, [5, 10]))

        x = dim(np.array([1.0, 2.0]), 'm') * dim(Fraction(1, 2), 's')
        self.assertEqual(x.value.dtype.kind, 'f')
        self.assertTrue(np.allclose(x.value, [0.5, 1.0]))

    def test_compare(self):
        from dimequiv.units import dim

        self.assertEqual(dim(1, 'Δ°C'), dim(1, 'K'))
        self.assertTrue(dim(1, 'km') > dim(999, 'm'))
        self.assertTrue(dim(1, 'in') < dim(3, 'cm'))
        self.assertEqual(dim(5), 5)

    def test_convert_operations(self):
        from dimequiv.units import dim

        x = dim(3, 'kg').convert('kg')
        self.assertEqual(x.value, 3)
        self.assertEqual(x.units, 'kg')

        # Test integer conserved during whole-number conversion.
        x = dim(144, 'in^2').convert('ft^2')
        self.assertEqual(x.value, 1)
        self.assertIsInstance(x.value, int)

        # Test float conserved when integer is possible.
        x = dim(1.0, 'mol').convert('mmol')
        self.assertIsInstance(x.value, float)

        # Test exact inch definition.
        x = dim(1, 'in').convert('mm')
        self.assertEqual(x.value, Fraction(127, 5))
        self.assertAlmostEqual(float(x), 25.4)

        # Test unit multipliers are carried correctly.
        x = dim(1, 'L').convert('cm^3')
        self.assertEqual(x.value, 1000)

    def test_convert_physics(self):
        from dimequiv.units import E_CHARGE, M_E, M_P, dim

        x = dim(1, 'eV').convert('J')
        self.assertEqual(x.value, 1.602176634e-19)

        x = dim(1, 'keV').convert('eV')
        self.assertAlmostEqual(x.value, 1000)

        x = dim(1, 's').convert('fs')
        self.assertEqual(x.value, 10 ** 15)

        x = dim(1, 'm').convert('Å')
        self.assertEqual(x.value, 10 ** 10)

        x = dim(1, 'nm').convert('Å')
        self.assertEqual(x.value, 10)

        x = dim(1, 'THz').convert('Hz')
        self.assertEqual(x.value, 10 ** 12)

        x = dim(1, 'me').convert('kg')
        self.assertAlmostEqual(x.value / 9.1093837015e-31, 1)

        # Scaled units convert to and from base units.
        x = dim(M_E.value * 1000, 'kg').convert('me')
        self.assertAlmostEqual(x.value, 1000)
        self.assertAlmostEqual(M_P.convert('u').value, 1.007276467,
                               places=8)
        self.assertAlmostEqual(dim(1, 'mp').to_real('me'), 1836.152673,
                               places=5)

        x = E_CHARGE * dim(1, 'V')
        self.assertAlmostEqual(x.to_real('eV'), 1)

        x = dim(2, 'cm^-1').convert('m^-1')
        self.assertEqual(x.value, 200)

        x = dim(1, 'kV').convert('W/A')
        self.assertEqual(x.value, 1000)

    def test_convert_derived(self):
        from dimequiv.units import dim

        x = (9.80665 * dim('m.s⁻²')).convert('ft/s/s')
        self.assertAlmostEqual(x.value, 32.17404856, places=8)

        x = dim(1, 'atm')
        self.assertAlmostEqual(x.convert('kPa').value, 101.325)
        self.assertAlmostEqual(x.convert('bar').value, 1.01325)
        self.assertAlmostEqual(x.convert('psi').value, 14.696, places=3)

        omega = dim(2500, 'RPM').convert('rad/s')
        self.assertAlmostEqual(omega.value, 261.799388, places=5)
        self.assertEqual(omega.units, 'rad/s')  # Radians should be here.

        v_t = dim(3, 'ft') * omega  # Radians should fall off here.
        self.assertAlmostEqual(v_t.value, 785.398163, places=5)
        self.assertEqual(v_t.units, 'fps')

        x = dim(100, 'hp').convert('kW')
        self.assertAlmostEqual(x.value, 74.56999, places=3)

        k_ic_metric = dim(51.3, 'MPa.m⁰ᐧ⁵')  # Fract. toughness 7039-T6351.
        k_ic_imp = k_ic_metric.convert('ksi.in^0.5')
        self.assertAlmostEqual(k_ic_imp.value, 46.7, places=1)

    def test_convert_temperature(self):
        from dimequiv.units import dim

        # Temperatures °C, °F, require thorough checks.
        x = dim(32, '°F').convert('°C')
        self.assertEqual(x.value, 0)
        self.assertIsInstance(x.value, int)

        x = dim(-40, '°C').convert('°F')
        self.assertEqual(x.value, -40)

        x = dim(373.15, 'K').convert('°F')
        self.assertAlmostEqual(x.value, 212)

        x = dim(0, '°R').convert('°C')
        self.assertAlmostEqual(x.value, -273.15)

        x = dim(15, '°C').convert('K')
        self.assertAlmostEqual(x.value, 288.15)

        # Only °C^1 allowed.
        with self.assertRaises(ValueError):
            x = dim('°C^2')

        # Offset not allowed in derived units.
        with self.assertRaises(ValueError):
            x = dim('km.°F')

        # Conversion from offset total to difference not allowed.
        with self.assertRaises(ValueError):
            x = dim(65, '°F').convert('Δ°F')

        # Test temperature components convert, including denominator.
        air_const_metric = dim(287.05287, 'J/kg/K')
        air_const_imp_slug = air_const_metric.convert('ft.lbf/slug/°R')
        self.assertAlmostEqual(air_const_imp_slug.value, 1716.56188,
                               places=5)

        check_delta = air_const_metric.convert('J/kg/Δ°C')
        self.assertAlmostEqual(air_const_metric.value, check_delta.value,
                               places=5)

        # Test total offset temperatures cancel (°C / K).
        a_ssl_c = (1.4 * air_const_metric * dim(15.0, '°C')) ** 0.5
        self.assertEqual(a_ssl_c.units, 'm.s⁻¹')
        self.assertAlmostEqual(a_ssl_c.to_real('m/s'), 340.29399, places=3)

    def test_to_absolute_temp(self):
        import numpy as np
        from dimequiv.units import dim, to_absolute_temp

        x = to_absolute_temp(dim(25, '°C'))
        self.assertEqual(x.units, 'K')
        self.assertEqual(x.value, Fraction(5963, 20))

        x = to_absolute_temp(dim(32.0, '°F'))
        self.assertEqual(x.units, '°R')
        self.assertAlmostEqual(x.value, 491.67)

        x = dim(300, 'K')
        self.assertIs(to_absolute_temp(x), x)

        x = to_absolute_temp(dim(np.array([0, 100]), '°C'))
        self.assertEqual(x.value.dtype.kind, 'f')
        self.assertTrue(np.allclose(x.value, [273.15, 373.15]))

        with self.assertRaises(ValueError):
            to_absolute_temp(dim(5, 'Δ°C'))

        with self.assertRaises(ValueError):
            to_absolute_temp(dim(5, 'm'))

    def test_temp_predicates(self):
        from dimequiv.units import dim

        self.assertTrue(dim('K').is_total_temp())
        self.assertTrue(dim('K').is_temp_change())
        self.assertTrue(dim('K').is_absolute_temp())
        self.assertTrue(dim('°C').is_total_temp())
        self.assertFalse(dim('°C').is_temp_change())
        self.assertFalse(dim('°C').is_absolute_temp())
        self.assertFalse(dim('Δ°F').is_total_temp())
        self.assertTrue(dim('Δ°F').is_base_temp())
        self.assertFalse(dim('J/K').is_base_temp())

    def test_format(self):
        from dimequiv.units import dim

        x = dim(1716.56188, 'ft.lbf/slug/°R')
        self.assertEqual(f"{x:.2f}", "1716.56 ft.lbf/slug/°R")
        self.assertEqual(repr(dim(3, 'kg')), "dim(3, 'kg')")


class TestConvert(TestCase):
    def test_convert(self):
        from dimequiv.units import convert

        x = convert(288, 'in^2', 'ft^2')
        self.assertEqual(x, 2)
        self.assertIsInstance(x, int)

        x = convert(1000, 'g', 'kg')
        self.assertEqual(x, 1)

        with self.assertRaises(ValueError):
            convert(1, 'kg', 'm')

    def test_long_path_warning(self):
        from dimequiv.units import convert, unit_options

        with unit_options(cache_conversions=False,
                          conversion_length_warning=2):
            with self.assertWarns(UserWarning):
                convert(1, 'km', 'mm')  # km -> m -> mm.


class TestDimension(TestCase):
    def test_dimension(self):
        import numpy as np
        from dimequiv.units import (dim, dimension, Dimension,
                                    DIMENSIONLESS)

        self.assertEqual(dimension('N'), Dimension(M=1, L=1, T=-2))
        self.assertEqual(dimension(dim(3, 'eV')), dimension('J'))
        self.assertEqual(dimension('°C'), dimension('K'))
        self.assertEqual(dimension('Δ°F'), dimension('K'))
        self.assertIs(dimension(5), DIMENSIONLESS)
        self.assertIs(dimension(np.array([1.0, 2.0])), DIMENSIONLESS)
        self.assertEqual(dimension(dim(5, 'mm/m')), DIMENSIONLESS)
        self.assertEqual(dimension(dimension('m')), dimension('m'))

        with self.assertRaises(ValueError):
            dimension('m^')

    def test_algebra(self):
        from dimequiv.units import dimension, DIMENSIONLESS

        self.assertEqual(dimension('J') / dimension('s'), dimension('W'))
        self.assertEqual(dimension('N') * dimension('m'), dimension('J'))
        self.assertEqual(dimension('m') ** 3, dimension('L'))
        self.assertEqual(dimension('m^0.5') ** 2, dimension('m'))
        self.assertTrue(DIMENSIONLESS.is_dimless())
        self.assertFalse(dimension('Hz').is_dimless())

    def test_str(self):
        from dimequiv.units import dimension, DIMENSIONLESS

        self.assertEqual(str(dimension('N')), 'M·L·T⁻²')
        self.assertEqual(str(dimension('J/K')), 'M·L²·T⁻²·θ⁻¹')
        self.assertEqual(str(DIMENSIONLESS), 'dimensionless')

    def test_named_dimension(self):
        from dimequiv.units import (add_named_dimension, dimension,
                                    named_dimension, DIMENSIONLESS)

        self.assertEqual(named_dimension('Energy'), dimension('eV'))
        self.assertEqual(named_dimension('Frequency'), dimension('s^-1'))
        self.assertEqual(named_dimension('Wavenumber'),
                         named_dimension('Length') ** -1)
        self.assertEqual(named_dimension('Dimensionless'), DIMENSIONLESS)

        with self.assertRaises(KeyError):
            named_dimension('Flux')

        with self.assertRaises(ValueError):
            add_named_dimension('Energy', 'J')  # Already defined.

        with self.assertRaises(ValueError):
            add_named_dimension('not a name', 'J')


class TestUnitRegistry(TestCase):
    def test_add_unit(self):
        from dimequiv.units import add_unit, dim

        add_unit('mil_test', '0.001*in')
        x = dim(1000, 'mil_test').convert('in')
        self.assertAlmostEqual(x.value, 1)

        # Scaled version of a base unit, both directions.
        add_unit('slug_test', '14.59390294*kg')
        x = dim(2, 'slug_test').convert('kg')
        self.assertAlmostEqual(x.value, 29.18780588)
        x = dim(14.59390294, 'kg').convert('slug_test')
        self.assertAlmostEqual(x.value, 1)
        x = dim(1, 'slug_test').convert('lbm')
        self.assertAlmostEqual(x.value, 32.174049, places=5)

        with self.assertRaises(ValueError):
            add_unit('eV', 'J')  # Already defined.

        with self.assertRaises(ValueError):
            add_unit('bad-label', 'J')

    def test_set_conversion(self):
        from dimequiv.units import set_conversion

        with self.assertRaises(ValueError):
            set_conversion('km', 'm', fwd=1000)  # Already defined.

        with self.assertRaises(KeyError):
            set_conversion('league', 'm', fwd=4828)


class TestUnitOptions(TestCase):
    def test_unit_options(self):
        from dimequiv.units import (dim, get_unit_options,
                                    set_unit_options, unit_options)

        with unit_options(unicode_str=False) as opts:
            self.assertFalse(opts.unicode_str)
            self.assertEqual(str(dim(4, 'ft') ** 2), '16 ft^2')

        self.assertTrue(get_unit_options().unicode_str)
        self.assertEqual(str(dim(4, 'ft') ** 2), '16 ft²')

        # Options are restored after an exception.
        with self.assertRaises(RuntimeError):
            with unit_options(cache_conversions=False):
                raise RuntimeError
        self.assertTrue(get_unit_options().cache_conversions)

        with self.assertRaises(ValueError):
            set_unit_options(conversion_length_warning=1)

        with self.assertRaises(TypeError):
            set_unit_options(no_such_option=True)

