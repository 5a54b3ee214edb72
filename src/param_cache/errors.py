"""Failures raised by parameter fetchers.

The cache engine never raises these itself; it only lets them through.
"""

from __future__ import annotations

import typing as t


class ParameterFetchError(Exception):
    """Any failure reported by the remote parameter lookup."""

    def __init__(self, message: str, parameter_name: t.Optional[str] = None) -> None:
        super().__init__(message)
        self.parameter_name = parameter_name


class ParameterNotFoundError(ParameterFetchError):
    """The parameter does not exist at the source of truth."""


class ParameterTransportError(ParameterFetchError):
    """The lookup service could not be reached or the call did not complete."""


class ParameterAccessDeniedError(ParameterTransportError):
    """The lookup service rejected the caller's credentials."""


class CircuitOpenError(ParameterFetchError):
    """A circuit breaker refused the call without contacting the service."""
