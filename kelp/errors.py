# Host-level faults. Language-level errors are Error values
# (kelp.types.values.Error) and never raised.


class KelpError(Exception):
    """ Base class for all Kelp host errors"""
    pass

class KelpSyntaxError(KelpError):
    """ Raised by the reader when source text cannot be parsed"""

class KelpConfigError(KelpError):
    """ Raised when a configuration value is invalid"""
