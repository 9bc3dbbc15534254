"""Job domain errors.

``JobError`` variants are values carried on the left side of an ``Either``.
The exception classes below are raised by helpers and folded into a ``Result``
by whoever composes them.
"""
from __future__ import annotations
from dataclasses import dataclass

from jobservice.domain.job.models import JobId


class JobError:
    """Closed set of failures for the discriminated channel: JobNotFound | GenericError."""


@dataclass(frozen=True)
class JobNotFound(JobError):
    id: JobId


@dataclass(frozen=True)
class GenericError(JobError):
    cause: str


class JobServiceError(Exception):
    """Base exception for the job service."""


class InvalidArgumentError(JobServiceError, ValueError):
    """Raised when an argument is missing or outside its allowed range."""


class NoJobsPresentError(JobServiceError, LookupError):
    """Raised when an aggregation receives an empty collection."""
