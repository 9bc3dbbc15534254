"""In-memory implementation of the Jobs repository over a read-only mapping."""
from __future__ import annotations
import logging
from typing import List, Mapping, Optional

from jobservice.domain.common.either import Either
from jobservice.domain.common.result import Result
from jobservice.domain.job.errors import GenericError, JobError, JobNotFound
from jobservice.domain.job.models import Job, JobId
from jobservice.persistence.dataset import JOBS_DATABASE
from jobservice.persistence.interfaces.job_repository import Jobs

logger = logging.getLogger(__name__)


def _to_generic_error(e: Exception) -> JobError:
    return GenericError(str(e) or "Unknown error")


class LiveJobs(Jobs):

    def __init__(self, store: Mapping[JobId, Job] = JOBS_DATABASE):
        self._store = store

    def find_by_id(self, job_id: JobId) -> Result[Optional[Job]]:
        logger.debug("find_by_id %s", job_id)
        return Result.catching(lambda: self._store.get(job_id))

    def find_by_id_e(self, job_id: JobId) -> Either[JobError, Job]:
        logger.debug("find_by_id_e %s", job_id)
        return (
            Either.catch(lambda: self._store.get(job_id))
            .map_left(_to_generic_error)
            .flat_map(lambda job: Either.right(job) if job is not None else Either.left(JobNotFound(job_id)))
        )

    def find_all(self) -> Result[List[Job]]:
        return Result.catching(lambda: list(self._store.values()))

    def find_all_e(self) -> Either[JobError, List[Job]]:
        return Either.catch(lambda: list(self._store.values())).map_left(_to_generic_error)

    def find_by_id_old_style(self, job_id: JobId) -> Result[Optional[Job]]:
        """Same contract as ``find_by_id``, spelled out with try/except."""
        try:
            return Result.ok(self._store.get(job_id))
        except Exception as e:
            return Result.fail(e)
