"""
Options for humanizing a bit or byte count.
"""

from collections.abc import Mapping
from numbers import Integral

from .errors import InvalidOptionError

BITS = "bits"
BYTES = "bytes"

AS_DEFAULT = BYTES
PRECISION_DEFAULT = 2


def _normalize(options):
    options = dict(options)
    if "as_" in options:
        if "as" in options:
            raise InvalidOptionError("as", options["as_"], "given twice")
        options["as"] = options.pop("as_")
    return options


class Options(object):
    """
    Immutable set of from_bits/from_bytes options.

    as:
       "bits" | "bytes" [default]: kind of the unit returned
    precision:
       non-negative integer [2]: decimals of the returned coefficient

    `as` is a Python keyword; as keyword argument it is spelled `as_`.
    """

    __slots__ = ("_as", "_precision")

    def __init__(self, options=None, /, **kwargs):
        if options is None:
            options = dict()
        elif isinstance(options, Options):
            options = options.asdict()
        elif isinstance(options, Mapping):
            options = _normalize(options)
        else:
            raise InvalidOptionError("options", options, "expected a mapping")
        options.update(_normalize(kwargs))

        unknown = set(options) - {"as", "precision"}
        if len(unknown) > 0:
            key = sorted(unknown)[0]
            raise InvalidOptionError(key, options[key], "unknown option")

        as_ = options.get("as", AS_DEFAULT)
        if as_ not in (BITS, BYTES):
            raise InvalidOptionError("as", as_, f'expected "{BITS}" or "{BYTES}"')

        precision = options.get("precision", PRECISION_DEFAULT)
        if (
            isinstance(precision, bool)
            or not isinstance(precision, Integral)
            or precision < 0
        ):
            raise InvalidOptionError(
                "precision", precision, "expected a non-negative integer"
            )

        object.__setattr__(self, "_as", as_)
        object.__setattr__(self, "_precision", int(precision))

    @property
    def as_(self):
        return self._as

    @property
    def as_bits(self):
        return self._as == BITS

    @property
    def precision(self):
        return self._precision

    def asdict(self):
        return {"as": self._as, "precision": self._precision}

    def __setattr__(self, name, value):
        raise AttributeError(f"[{self.__class__.__name__}] is immutable.")

    def __eq__(self, other):
        if not isinstance(other, Options):
            return NotImplemented
        return self.asdict() == other.asdict()

    def __hash__(self):
        return hash((self._as, self._precision))

    def __repr__(self):
        s = f"as={self._as!r}, precision={self._precision}"
        return f"{self.__class__.__name__}({s})"


Options.default = Options()
