"""Custom exceptions for the Modulator library"""


class ModulatorError(Exception):
    """Base exception for all Modulator errors"""
    pass


class InvalidSourceError(ModulatorError, ValueError):
    """A modulation source reference is missing or not a source"""
    pass


class PatchError(ModulatorError):
    """Patch file could not be read or validated"""
    pass


class UnknownExampleError(ModulatorError, KeyError):
    """No example is registered under the requested key"""

    def __str__(self) -> str:
        # KeyError repr-quotes its message; keep it readable
        return str(self.args[0]) if self.args else ""
