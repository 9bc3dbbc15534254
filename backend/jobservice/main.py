"""Console entry point: runs the job service and prints each outcome."""
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from jobservice.container import get_job_app_service
from jobservice.core.config import LOG_FILE, LOG_LEVEL
from jobservice.core.logging_config import setup_logging
from jobservice.domain.job.errors import InvalidArgumentError
from jobservice.domain.job.models import JobId

logger = logging.getLogger(__name__)


def _recover_invalid_amount(error: Exception) -> float:
    if isinstance(error, InvalidArgumentError):
        return 0.0
    raise error


def _on_failure(error: Exception) -> str:
    if isinstance(error, InvalidArgumentError):
        print("Amount must be present and non-negative")
    else:
        print(f"Error: {error}")
    return "Job not found so we have to pay you 0.0 EUR"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jobservice-demo", description="Run the job service examples.")
    parser.add_argument("--job-id", type=int, default=42, help="job to print and convert (default: 42)")
    parser.add_argument("--gap-job-id", type=int, default=2, help="job to compare against the max salary (default: 2)")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="logging level (default: %(default)s)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, LOG_FILE)

    service = get_job_app_service()
    job_id = JobId(args.job_id)
    logger.info("Running examples for %s", job_id)

    service.maybe_print_job(job_id)

    # recover from an invalid amount, re-raise anything else
    recovered = service.get_salary_in_eur(job_id).recover(_recover_invalid_amount)
    final_statement = recovered.fold(
        on_success=lambda amount: f"Salary in EUR: {amount}",
        on_failure=_on_failure,
    )
    print(recovered)
    print(final_statement)

    print("---- salary gap Either ------")
    service.get_salary_gap_vs_max_salary_e(JobId(args.gap_job_id)).fold(
        lambda error: print(f"Error: {error}"),
        lambda gap: print(f"Salary gap: {gap}"),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
