"""
Defines prefix class used to scale bit and byte units

A prefix is base**power, power >= 0; the neutral prefix has power 0.
"""

from numbers import Real


class Prefix(object):
    def __init__(
        self,
        name,
        base,
        power=1,
    ):
        self._name = name
        self._base = base
        self._power = power

    @property
    def name(self):
        return self._name

    @property
    def base(self):
        return self._base

    @property
    def power(self):
        return self._power

    @property
    def value(self):
        if self._power == 0:
            return 1
        return self._base**self._power

    def __mul__(self, other):
        if hasattr(other, "value"):
            other = getattr(other, "value")
        if isinstance(other, Real):
            if self._power == 0:
                return other
            return other * self._base**self._power
        return NotImplemented

    __rmul__ = __mul__

    def __rtruediv__(self, other):
        if hasattr(other, "value"):
            other = getattr(other, "value")
        if isinstance(other, Real):
            if self._power == 0:
                return other
            return other / self._base**self._power
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Prefix):
            return NotImplemented
        return (self._name, self.value) == (other._name, other.value)

    def __hash__(self):
        return hash((self._name, self.value))

    def __repr__(self):
        if self._name == "":
            name = ""
        else:
            name = f"{self.name}, "
        if self._power == 0:
            base = "1"
        else:
            base = f"{self._base}"
        if self._power in (0, 1):
            power = ""
        else:
            power = f"**{self._power}"
        if self._power == 0 and name == "":
            base = ""
        return f"{self.__class__.__name__}({name}{base}{power})"


Prefix.neutral = Prefix("", 1, 0)


def prefixes(names, base):
    """
    Return tuple of Prefix objects, ordinal i being base**i.

    The first name has to be the empty prefix.
    """
    return tuple(
        Prefix.neutral if i == 0 else Prefix(name, base, i)
        for i, name in enumerate(names)
    )
