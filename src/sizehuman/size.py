"""
Conversion between bit/byte counts and (value, unit) pairs.

A Size object is bound to one standard; see sizehuman.standard for
the SI, IEC and JEDEC instances.
"""

import logging

from .config import Config
from .logged import Logged
from .options import Options
from .unit import BITS_PER_BYTE, Units
from .util import as_number, exponent, maybe_integer, round_half_up


class Size(Logged):
    """
    Conversion engine over the unit table of one standard.

    All methods are pure; the unit table is not modified after
    construction.
    """

    def __init__(self, config, /, silent=True):
        if not isinstance(config, Config):
            config = Config(config)
        self.config = config
        self.name = config.name
        with self.logenv(silent=silent) as logger:
            self.units = Units(
                config.base,
                config.prefixes,
                name=config.name,
                bit_suffix=config.bit_suffix,
                byte_suffix=config.byte_suffix,
            )
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    f"{self.name}: base {self.base}, {len(self.units)} units, "
                    f"up to {self.units.bytes[-1]}"
                )

    @property
    def base(self):
        return self.units.base

    @property
    def exponent_limit(self):
        return self.units.exponent_limit

    @property
    def bit_units(self):
        return self.units.bits

    @property
    def byte_units(self):
        return self.units.bytes

    def unit(self, unit):
        """
        Return table unit for a Unit or a unit name.
        """
        return self.units.resolve(unit)

    @staticmethod
    def _split(value, unit):
        if unit is None and isinstance(value, tuple) and len(value) == 2:
            return value
        return value, unit

    def to_bits(self, value, unit=None):
        """
        Convert `value` in `unit` to number of bits.

        Also accepts a (value, unit) tuple as the only argument.

        >>> SI.to_bits(1, "kB")
        8000
        """
        value, unit = self._split(value, unit)
        unit = self.units.resolve(unit)
        return maybe_integer(as_number(value) * unit.to_bits)

    def to_bytes(self, value, unit=None):
        """
        Convert `value` in `unit` to number of bytes.

        Also accepts a (value, unit) tuple as the only argument.

        >>> SI.to_bytes(1, "kb")
        125
        """
        value, unit = self._split(value, unit)
        unit = self.units.resolve(unit)
        return maybe_integer(as_number(value) * unit.to_bytes)

    def from_bits(self, bits, options=None, /, **kwargs):
        """
        Return (coefficient, unit) for a number of bits.

        options:
           as - "bits" or "bytes" [default], kind of unit returned
           precision - decimals of coefficient [2]

        >>> SI.from_bits(8192, as_="bits")
        (8.19, Unit(SI, kb))
        """
        options = Options(options, **kwargs)
        bits = as_number(bits)
        if options.as_bits:
            return self._humanize(bits, self.units.bits, options.precision)
        return self._humanize(
            bits / BITS_PER_BYTE, self.units.bytes, options.precision
        )

    def from_bytes(self, bytes, options=None, /, **kwargs):
        """
        Return (coefficient, unit) for a number of bytes.

        options:
           as - "bits" or "bytes" [default], kind of unit returned
           precision - decimals of coefficient [2]

        >>> IEC.from_bytes(8192)
        (8, Unit(IEC, KiB))
        """
        options = Options(options, **kwargs)
        bytes = as_number(bytes)
        if options.as_bits:
            return self._humanize(
                bytes * BITS_PER_BYTE, self.units.bits, options.precision
            )
        return self._humanize(bytes, self.units.bytes, options.precision)

    def _humanize(self, n, units, precision):
        # below ordinal 0 there are no prefixes, above the limit the
        # coefficient grows instead
        i = min(max(exponent(n, self.base), 0), self.exponent_limit)
        unit = units[i]
        value = round_half_up(n / unit.prefix, precision)
        return maybe_integer(value), unit

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name})"
