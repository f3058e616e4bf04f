"""
.. This module acts as the top-level API documentation.

.. module: dimequiv

Units-aware values and conversions between physically equivalent
dimensions:

    - :mod:`dimequiv.units`: Dimensioned values (``Dim``) and unit
      conversion.
    - :mod:`dimequiv.equivalences`: Conversions across dimensions using
      equivalences such as mass-energy or photon energy.
    - :mod:`dimequiv.types`: Exact numeric type conversion helpers.
"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 12)
