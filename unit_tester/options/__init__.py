"""Options module - command line option parsing."""

from .parser import Options, ParamValue

__all__ = [
    "Options",
    "ParamValue",
]
