#!/usr/bin/env python
import logging
import os
from typing import Optional

from calresponse import __version__

## Environmental variables prepended with "PYTHON_CALRESPONSE" are used for debug purposes
## one of DEBUG_PDB, DEBUG, DEVELOPMENT, PRODUCTION
debugmode = os.environ.get("PYTHON_CALRESPONSE_DEBUGMODE")
if not debugmode:
    if "dev" in __version__ or __version__ == "(unknown)":
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("calresponse")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)


def weirdness(*reasons):
    from calresponse.lib.debug import xmlstring

    reason = " : ".join([xmlstring(x) for x in reasons])
    log.warning(f"Deviation from expectations found: {reason}")
    if debugmode == "DEBUG_PDB":
        log.error(f"Dropping into debugger due to {reason}")
        import pdb

        pdb.set_trace()


class CalResponseError(Exception):
    reason: str = "no reason"

    def __init__(self, reason: Optional[str] = None) -> None:
        if reason:
            self.reason = reason
        super().__init__(self.reason)

    def __str__(self) -> str:
        return "%s, reason %s" % (self.__class__.__name__, self.reason)


class InvalidArgumentError(CalResponseError, ValueError):
    """
    An argument was rejected locally, before anything was sent to the
    service.  The param_name property names the offending parameter.
    """

    param_name: Optional[str] = None

    def __init__(
        self, param_name: Optional[str] = None, reason: Optional[str] = None
    ) -> None:
        self.param_name = param_name
        if not reason and param_name:
            reason = "%s must not be None" % param_name
        super().__init__(reason)

    def __str__(self) -> str:
        return "%s for parameter '%s', reason %s" % (
            self.__class__.__name__,
            self.param_name,
            self.reason,
        )


class InvalidOperationError(CalResponseError):
    pass


class RemoteOperationError(CalResponseError):
    """
    Base class for failures reported by a service implementation.
    calresponse never catches, wraps or retries these, they reach the
    caller exactly as raised.
    """

    pass


def validate_param(value: object, param_name: str) -> None:
    """Raise InvalidArgumentError if value is None"""
    if value is None:
        raise InvalidArgumentError(param_name)
