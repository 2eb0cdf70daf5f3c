"""
define configurations of the standards

The definitions are read once from the packaged standards.yaml.
"""

from collections import OrderedDict
from collections.abc import Mapping
from numbers import Integral
from pathlib import Path

import yaml

from .errors import ConfigError, UnknownStandardError

STANDARDS_FILE = Path(__file__).parent / "standards.yaml"


def load_standards(filename=STANDARDS_FILE):
    """
    Return ordered mapping of standard name to definition.
    """
    with open(filename, "rt") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, Mapping):
        raise ConfigError(f'Could not load standards from "{filename}".')
    return OrderedDict((name.upper(), dict(d)) for name, d in data.items())


standards = load_standards()


class Config(object):
    """
    Definition of one standard.

    fields:

    name:
       name of the standard
    base:
       integer base of the prefixes, > 1
    prefixes:
       prefix names by ordinal, first one empty
    bit_suffix, byte_suffix:
       appended to the prefix to form unit names ["b", "B"]
    """

    def __init__(self, config=None, /, **kwargs):
        if isinstance(config, Config):
            config = config._config
        elif isinstance(config, str):
            try:
                config = standards[config.upper()]
            except KeyError:
                raise UnknownStandardError(config, tuple(standards)) from None
        elif config is not None and not isinstance(config, Mapping):
            raise ConfigError(f"Invalid configuration {config!r}.")
        if config is None:
            self._config = OrderedDict()
        else:
            self._config = OrderedDict(config)
        self._config.update(kwargs)

        # some defaults
        self._config.setdefault("name", "custom")
        self._config.setdefault("doc", "")
        self._config.setdefault("bit_suffix", "b")
        self._config.setdefault("byte_suffix", "B")

        base = self._config.get("base", None)
        if isinstance(base, bool) or not isinstance(base, Integral) or base <= 1:
            raise ConfigError(f'[{self.name}] Invalid base "{base}".')

        prefixes = self._config.get("prefixes", None)
        if prefixes is None or isinstance(prefixes, str):
            raise ConfigError(f'[{self.name}] Invalid prefixes "{prefixes}".')
        prefixes = tuple("" if p is None else str(p) for p in prefixes)
        if len(prefixes) == 0 or prefixes[0] != "":
            raise ConfigError(f"[{self.name}] First prefix has to be empty.")
        if len(set(prefixes)) != len(prefixes):
            raise ConfigError(f"[{self.name}] Duplicate prefixes.")
        self._config["prefixes"] = prefixes

    def __getitem__(self, index):
        return self._config[index]

    def __len__(self):
        return len(self._config)

    def __iter__(self):
        return iter(self._config)

    def __getattr__(self, key):
        if key.startswith("_"):
            raise AttributeError(key)
        try:
            return self._config[key]
        except KeyError:
            raise AttributeError(key) from None

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name})"


si_config = Config("SI")
iec_config = Config("IEC")
jedec_config = Config("JEDEC")
