"""Job domain models: pure Python, no I/O. Value wrappers keep ids, names and amounts apart."""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class JobId:
    value: int


@dataclass(frozen=True)
class Company:
    name: str


@dataclass(frozen=True)
class Role:
    name: str


@dataclass(frozen=True, order=True)
class Salary:
    value: float  # not validated here; the currency converter rejects negatives


@dataclass(frozen=True)
class Job:
    id: JobId
    company: Company
    role: Role
    salary: Salary
