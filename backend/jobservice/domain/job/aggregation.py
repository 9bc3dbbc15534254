"""Aggregations over job collections, in both result flavors."""
from __future__ import annotations
from typing import Sequence

from jobservice.domain.common.either import Either
from jobservice.domain.common.result import Result
from jobservice.domain.job.errors import GenericError, JobError, NoJobsPresentError
from jobservice.domain.job.models import Job, Salary

NO_JOBS_PRESENT = "No jobs present"


def _highest_paid(jobs: Sequence[Job]) -> Job:
    # Salary orders by value; max() keeps the first of equal keys
    return max(jobs, key=lambda job: job.salary)


def max_salary(jobs: Sequence[Job]) -> Result[Salary]:
    def compute() -> Salary:
        if not jobs:
            raise NoJobsPresentError(NO_JOBS_PRESENT)
        return _highest_paid(jobs).salary

    return Result.catching(compute)


def max_salary_e(jobs: Sequence[Job]) -> Either[JobError, Salary]:
    if not jobs:
        return Either.left(GenericError(NO_JOBS_PRESENT))
    return Either.right(_highest_paid(jobs).salary)
