"""Dependency injection container — wires implementations to interfaces."""
from __future__ import annotations
from functools import lru_cache

from jobservice.application.job_app_service import JobAppService
from jobservice.domain.currency.converter import CurrencyConverter
from jobservice.persistence.repositories.memory.live_jobs import LiveJobs


@lru_cache(maxsize=1)
def get_job_repo() -> LiveJobs:
    return LiveJobs()


@lru_cache(maxsize=1)
def get_currency_converter() -> CurrencyConverter:
    return CurrencyConverter()


@lru_cache(maxsize=1)
def get_job_app_service() -> JobAppService:
    return JobAppService(jobs=get_job_repo(), currency_converter=get_currency_converter())
