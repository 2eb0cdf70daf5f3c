"""
Sizes of digital data in human-readable units.

There are three standards for prefixing bit and byte units:

   SI     decimal, k = 1000
   IEC    binary, Ki = 1024
   JEDEC  binary, K = 1024, up to T

see https://en.wikipedia.org/wiki/Binary_prefix

>>> from sizehuman import SI, IEC
>>> SI.from_bits(8192)
(1.02, Unit(SI, kB))
>>> IEC.to_bits(1, "KiB")
8192
"""

from importlib import metadata

__version__ = metadata.version("sizehuman")

from .errors import (
    ConfigError,
    InvalidOptionError,
    InvalidValueError,
    SizeError,
    UnknownStandardError,
    UnknownUnitError,
)
from .options import Options
from .size import Size
from .standard import (
    IEC,
    JEDEC,
    SI,
    Standard,
    from_bits,
    from_bytes,
    get,
    to_bits,
    to_bytes,
)
from .unit import Unit, Units

__all__ = [
    "SI",
    "IEC",
    "JEDEC",
    "Standard",
    "Size",
    "Unit",
    "Units",
    "Options",
    "get",
    "to_bits",
    "to_bytes",
    "from_bits",
    "from_bytes",
    "SizeError",
    "UnknownUnitError",
    "InvalidOptionError",
    "InvalidValueError",
    "UnknownStandardError",
    "ConfigError",
]
