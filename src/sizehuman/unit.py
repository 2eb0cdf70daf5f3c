"""
Units of a standard and the unit table built from (base, prefixes).

One byte is 8 bits in every standard.
"""

from .errors import ConfigError, UnknownUnitError
from .prefix import prefixes as make_prefixes

BIT = "bit"
BYTE = "byte"
BITS_PER_BYTE = 8


class Unit(object):
    """
    A prefixed bit or byte unit, e.g. "kB" or "Mib".

    Units are created by Units only and compare by identity.
    """

    __slots__ = (
        "name",
        "prefix",
        "kind",
        "to_bits",
        "to_bytes",
        "standard",
    )

    def __init__(self, name, prefix, kind, to_bits, to_bytes, standard=None):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "prefix", prefix)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "to_bits", to_bits)
        object.__setattr__(self, "to_bytes", to_bytes)
        object.__setattr__(self, "standard", standard)

    def __setattr__(self, name, value):
        raise AttributeError(f"[{self.__class__.__name__}] is immutable.")

    def __delattr__(self, name):
        raise AttributeError(f"[{self.__class__.__name__}] is immutable.")

    @property
    def ordinal(self):
        return self.prefix.power

    @property
    def is_bit(self):
        return self.kind == BIT

    @property
    def is_byte(self):
        return self.kind == BYTE

    def __str__(self):
        return self.name

    def __repr__(self):
        if self.standard is None:
            return f"{self.__class__.__name__}({self.name})"
        return f"{self.__class__.__name__}({self.standard}, {self.name})"


class Units(object):
    """
    Unit table of one standard.

    Ratio of prefix ordinal i is base**i; a byte unit is 8 times the
    bit unit of the same ordinal.
    """

    def __init__(
        self,
        base,
        prefixes,
        *,
        name=None,
        bit_suffix="b",
        byte_suffix="B",
    ):
        self.name = name
        self.base = base
        self.prefixes = make_prefixes(prefixes, base)
        self.exponent_limit = len(self.prefixes) - 1

        self.bits = tuple(
            Unit(
                p.name + bit_suffix,
                p,
                BIT,
                p * 1,
                p.value / BITS_PER_BYTE,
                name,
            )
            for p in self.prefixes
        )
        self.bytes = tuple(
            Unit(
                p.name + byte_suffix,
                p,
                BYTE,
                p * BITS_PER_BYTE,
                p * 1,
                name,
            )
            for p in self.prefixes
        )
        self.data = self.bits + self.bytes
        self.lookup = {u.name: u for u in self.data}
        if len(self.lookup) != len(self.data):
            raise ConfigError(f"[{name}] Duplicate unit names.")

    def unit(self, kind, ordinal):
        """
        Return unit of given kind ("bit" | "byte") and prefix ordinal.
        """
        if isinstance(ordinal, int) and 0 <= ordinal <= self.exponent_limit:
            if kind == BIT:
                return self.bits[ordinal]
            if kind == BYTE:
                return self.bytes[ordinal]
        raise UnknownUnitError(f"{kind}[{ordinal}]", self.name)

    def resolve(self, unit):
        """
        Return table unit for a Unit object or a unit name.
        """
        if isinstance(unit, Unit):
            if self.lookup.get(unit.name) is unit:
                return unit
        elif isinstance(unit, str):
            try:
                return self.lookup[unit]
            except KeyError:
                pass
        raise UnknownUnitError(unit, self.name)

    @property
    def names(self):
        return tuple(u.name for u in self.data)

    def __getitem__(self, index):
        if isinstance(index, (str, Unit)):
            return self.resolve(index)
        return self.data[index]

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.__dict__["lookup"][name]
        except KeyError:
            raise AttributeError(
                f"[{self.__class__.__name__}] unit {name!r} not found."
            ) from None

    def __contains__(self, unit):
        try:
            self.resolve(unit)
        except UnknownUnitError:
            return False
        return True

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        for x in self.data:
            yield x

    def __repr__(self):
        s = ", ".join(u.name for u in self.data)
        return f"{self.__class__.__name__}({s})"
