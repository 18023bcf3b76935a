"""Errors raised while building a launch command line."""


class CantRunError(Exception):
    """The process cannot be launched with the given parameters."""


class UnresolvableRuntimeError(CantRunError):
    """No runtime was given, or it cannot produce a VM executable."""


class MissingEntryPointError(CantRunError):
    """No main class was given."""
