"""
The SI, IEC and JEDEC standards.

Each is a Size engine built once at import:

   SI     base 1000, prefixes k M G T P E Z Y R Q
   IEC    base 1024, prefixes Ki Mi Gi Ti Pi Ei Zi Yi
   JEDEC  base 1024, prefixes K M G T
"""

from enum import Enum

from .config import iec_config, jedec_config, si_config
from .errors import UnknownStandardError
from .size import Size

SI = Size(si_config)
IEC = Size(iec_config)
JEDEC = Size(jedec_config)


class Standard(Enum):
    SI = "SI"
    IEC = "IEC"
    JEDEC = "JEDEC"

    @property
    def size(self):
        return _sizes[self]


_sizes = {
    Standard.SI: SI,
    Standard.IEC: IEC,
    Standard.JEDEC: JEDEC,
}


def get(standard=Standard.SI):
    """
    Return Size engine for a Standard, its name, or a Size.
    """
    if isinstance(standard, Size):
        return standard
    if isinstance(standard, Standard):
        return standard.size
    if isinstance(standard, str):
        try:
            return Standard(standard.upper()).size
        except ValueError:
            pass
    raise UnknownStandardError(standard, tuple(s.value for s in Standard))


def to_bits(value, unit=None, *, standard=Standard.SI):
    return get(standard).to_bits(value, unit)


def to_bytes(value, unit=None, *, standard=Standard.SI):
    return get(standard).to_bytes(value, unit)


def from_bits(bits, options=None, /, *, standard=Standard.SI, **kwargs):
    return get(standard).from_bits(bits, options, **kwargs)


def from_bytes(bytes, options=None, /, *, standard=Standard.SI, **kwargs):
    return get(standard).from_bytes(bytes, options, **kwargs)
