"""Seed job records: built once at import and never mutated."""
from __future__ import annotations
from types import MappingProxyType
from typing import Mapping

from jobservice.domain.job.models import Company, Job, JobId, Role, Salary


def _seed() -> Mapping[JobId, Job]:
    jobs = [
        Job(JobId(1), Company("Apple, Inc."), Role("Software Engineer"), Salary(70_000.00)),
        Job(JobId(2), Company("Microsoft"), Role("Software Engineer"), Salary(80_000.00)),
        Job(JobId(3), Company("Google"), Role("Software Engineer"), Salary(90_000.00)),
    ]
    return MappingProxyType({job.id: job for job in jobs})


JOBS_DATABASE: Mapping[JobId, Job] = _seed()
