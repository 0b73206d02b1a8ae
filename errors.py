# errors.py
from __future__ import annotations


class EnigmaError(Exception):
    """Root of everything this machine raises."""


# ── configuration time ───────────────────────────────────────────
class ConfigError(EnigmaError, ValueError):
    """The machine cannot be built from the requested settings."""


class DuplicateRotorError(ConfigError):
    pass


class UnknownRotorError(ConfigError):
    pass


class UnknownReflectorError(ConfigError):
    pass


class InvalidPositionError(ConfigError):
    pass


class InvalidWiringError(ConfigError):
    pass


class PlugboardError(ConfigError):
    pass


# ── conversion boundary ──────────────────────────────────────────
class InvalidLetterError(EnigmaError, ValueError):
    """A character or number has no place in the 26-letter alphabet."""


# ── internal consistency ─────────────────────────────────────────
class DomainError(EnigmaError, LookupError):
    """A table lookup was handed an index outside 0–25.

    Valid Letters can never produce this; seeing it means something
    bypassed the Letter type.
    """
