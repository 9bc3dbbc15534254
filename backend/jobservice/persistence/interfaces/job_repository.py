"""Abstract repository interface for the Job aggregate."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional

from jobservice.domain.common.either import Either
from jobservice.domain.common.result import Result
from jobservice.domain.job.errors import JobError
from jobservice.domain.job.models import Job, JobId


class Jobs(ABC):

    @abstractmethod
    def find_by_id(self, job_id: JobId) -> Result[Optional[Job]]:
        """Return ok(job), ok(None) when absent, or fail(cause) if the lookup raised."""
        ...

    @abstractmethod
    def find_by_id_e(self, job_id: JobId) -> Either[JobError, Job]:
        """Return right(job), left(JobNotFound) when absent, or left(GenericError) if the lookup raised."""
        ...

    @abstractmethod
    def find_all(self) -> Result[List[Job]]:
        """Return every job in store order."""
        ...

    @abstractmethod
    def find_all_e(self) -> Either[JobError, List[Job]]:
        """Return every job in store order."""
        ...
