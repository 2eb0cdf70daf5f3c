"""
Exceptions raised by sizehuman.
"""


class SizeError(Exception):
    pass


class UnknownUnitError(SizeError, ValueError):
    def __init__(self, unit, standard):
        super().__init__(f'Unknown unit "{unit}" for standard "{standard}".')
        self.unit = unit
        self.standard = standard


class InvalidOptionError(SizeError, ValueError):
    def __init__(self, option, value, expected):
        super().__init__(
            f'Invalid value {value!r} for option "{option}", {expected}.'
        )
        self.option = option
        self.value = value


class InvalidValueError(SizeError, TypeError):
    def __init__(self, value, reason="not a real number"):
        super().__init__(f"Invalid quantity {value!r}: {reason}.")
        self.value = value


class UnknownStandardError(SizeError, ValueError):
    def __init__(self, standard, known=()):
        s = f'Unknown standard "{standard}".'
        if len(known) > 0:
            s += " Known: " + ", ".join(known) + "."
        super().__init__(s)
        self.standard = standard


class ConfigError(SizeError, ValueError):
    pass
