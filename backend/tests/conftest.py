"""Shared fixtures for the job service tests."""
from collections.abc import Mapping

import pytest

from jobservice import container
from jobservice.application.job_app_service import JobAppService
from jobservice.domain.currency.converter import CurrencyConverter
from jobservice.domain.job.models import Company, Job, JobId, Role, Salary
from jobservice.persistence.repositories.memory.live_jobs import LiveJobs


class BrokenStore(Mapping):
    """A store whose every read raises, to exercise the fault paths."""

    def __init__(self, message: str = "store offline"):
        self.message = message

    def __getitem__(self, key):
        raise RuntimeError(self.message)

    def __iter__(self):
        raise RuntimeError(self.message)

    def __len__(self):
        return 0

    def get(self, key, default=None):
        raise RuntimeError(self.message)

    def values(self):
        raise RuntimeError(self.message)


@pytest.fixture
def jobs() -> LiveJobs:
    return LiveJobs()


@pytest.fixture
def converter() -> CurrencyConverter:
    return CurrencyConverter(rate=0.85)


@pytest.fixture
def service(jobs, converter) -> JobAppService:
    return JobAppService(jobs=jobs, currency_converter=converter)


@pytest.fixture
def make_broken_jobs():
    def _make(message: str = "store offline") -> LiveJobs:
        return LiveJobs(store=BrokenStore(message))

    return _make


@pytest.fixture
def broken_jobs(make_broken_jobs) -> LiveJobs:
    return make_broken_jobs()


@pytest.fixture
def broken_service(broken_jobs, converter) -> JobAppService:
    return JobAppService(jobs=broken_jobs, currency_converter=converter)


@pytest.fixture
def empty_service(converter) -> JobAppService:
    return JobAppService(jobs=LiveJobs(store={}), currency_converter=converter)


@pytest.fixture
def make_job():
    def _make(job_id: int, salary: float, company: str = "Acme") -> Job:
        return Job(JobId(job_id), Company(company), Role("Software Engineer"), Salary(salary))

    return _make


@pytest.fixture(autouse=True)
def clear_container():
    container.get_job_repo.cache_clear()
    container.get_currency_converter.cache_clear()
    container.get_job_app_service.cache_clear()
    yield
