"""Application service: composes repository lookups, aggregation and conversion."""
from __future__ import annotations
import logging
from typing import Optional

from jobservice.domain.common.either import Either
from jobservice.domain.common.result import Result
from jobservice.domain.currency.converter import CurrencyConverter
from jobservice.domain.job.aggregation import max_salary, max_salary_e
from jobservice.domain.job.errors import JobError
from jobservice.domain.job.models import Job, JobId, Salary
from jobservice.persistence.interfaces.job_repository import Jobs

logger = logging.getLogger(__name__)

NO_SALARY = Salary(0.0)


class JobAppService:
    def __init__(self, jobs: Jobs, currency_converter: CurrencyConverter):
        self._jobs = jobs
        self._currency_converter = currency_converter

    # ------------------------------------------------------------------
    # PRINT
    # ------------------------------------------------------------------
    def maybe_print_job(self, job_id: JobId) -> None:
        maybe_job = self._jobs.find_by_id(job_id)
        if maybe_job.is_success:
            job = maybe_job.get_or_none()
            if job is not None:
                print(f"Job found: {job}")
            else:
                print("Job not found")
        else:
            logger.error("Lookup of %s failed: %r", job_id, maybe_job.error)
            print(f"Error: {maybe_job.error}")

    # ------------------------------------------------------------------
    # CONVERSION
    # ------------------------------------------------------------------
    def get_salary_in_eur(self, job_id: JobId) -> Result[float]:
        result = (
            self._jobs.find_by_id(job_id)
            .map(lambda job: job.salary if job is not None else None)
            .map_catching(
                lambda salary: self._currency_converter.convert_to_eur(salary.value if salary is not None else None)
            )
        )
        if result.is_failure:
            logger.warning("Salary of %s could not be converted to EUR: %s", job_id, result.error)
        return result

    # ------------------------------------------------------------------
    # SALARY GAP
    # ------------------------------------------------------------------
    def get_salary_gap_vs_max_salary_non_idiomatic(self, job_id: JobId) -> Result[float]:
        def compute() -> float:
            maybe_job = self._jobs.find_by_id(job_id).get_or_throw()
            job_salary = maybe_job.salary if maybe_job is not None else NO_SALARY
            all_jobs = self._jobs.find_all().get_or_throw()
            highest = max_salary(all_jobs).get_or_throw()
            return highest.value - job_salary.value

        return Result.catching(compute)

    def get_salary_gap_vs_max_salary(self, job_id: JobId) -> Result[float]:
        def gap_for(maybe_job: Optional[Job]) -> Result[float]:
            salary = maybe_job.salary if maybe_job is not None else NO_SALARY
            return self._jobs.find_all().flat_map(
                lambda job_list: max_salary(job_list).map(lambda highest: highest.value - salary.value)
            )

        return self._jobs.find_by_id(job_id).flat_map(gap_for)

    def get_salary_gap_vs_max_salary_e(self, job_id: JobId) -> Either[JobError, float]:
        # Unlike the Result variants, a missing job is a JobNotFound here, not a zero salary.
        def gap_for(job: Job) -> Either[JobError, float]:
            return self._jobs.find_all_e().flat_map(
                lambda job_list: max_salary_e(job_list).map(lambda highest: highest.value - job.salary.value)
            )

        return self._jobs.find_by_id_e(job_id).flat_map(gap_for)
