"""
Scanner configuration.

The only knob is how numbers are scanned. MathLang has always produced one
number token per digit ("x=42" is x, =, 4, 2), and parsers written against
it depend on that, so it stays the default. Greedy scanning is there for
compatibility testing against a corrected parser.
"""

import os
from enum import Enum
from dataclasses import dataclass
from typing import Mapping, Optional

NUMERIC_MODE_ENV = "MATHLANG_NUMERIC_MODE"


class NumericMode(Enum):
    SINGLE_DIGIT = "single-digit"   # one digit per number token
    GREEDY = "greedy"               # the whole leading digit run


@dataclass(frozen=True)
class ScannerConfig:
    numeric_mode: NumericMode = NumericMode.SINGLE_DIGIT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ScannerConfig':
        """
        Build a config from the environment.

        MATHLANG_NUMERIC_MODE selects the numeric mode by its value
        ("single-digit" or "greedy"). Unset or empty means the default.

        Raises:
            ValueError: If the mode is not recognized
        """
        if environ is None:
            environ = os.environ

        raw = environ.get(NUMERIC_MODE_ENV, "").strip().lower()
        if not raw:
            return cls()

        try:
            mode = NumericMode(raw)
        except ValueError:
            choices = ", ".join(m.value for m in NumericMode)
            raise ValueError(
                f"{NUMERIC_MODE_ENV}={raw!r} is not a numeric mode (expected one of: {choices})"
            ) from None
        return cls(numeric_mode=mode)


DEFAULT_CONFIG = ScannerConfig()
