"""Tests for the console entry point, wiring and ambient setup."""
import logging

import pytest

from jobservice import container, main
from jobservice.core import logging_config
from jobservice.application.job_app_service import JobAppService


@pytest.fixture
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(main, "setup_logging", lambda *args, **kwargs: None)


def test_container_returns_singletons():
    assert container.get_job_app_service() is container.get_job_app_service()
    assert isinstance(container.get_job_app_service(), JobAppService)
    assert container.get_job_repo() is container.get_job_repo()


def test_main_with_defaults(no_logging_setup, capsys):
    assert main.main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Job not found",
        "Result.ok(0.0)",
        "Salary in EUR: 0.0",
        "---- salary gap Either ------",
        "Salary gap: 10000.0",
    ]


def test_main_with_known_job(no_logging_setup, capsys):
    main.main(["--job-id", "1", "--gap-job-id", "7"])
    out = capsys.readouterr().out
    assert "Job found: " in out
    assert f"Salary in EUR: {70_000.00 * 0.85}" in out
    assert "Error: JobNotFound(id=JobId(value=7))" in out


def test_on_failure_reports_other_errors(capsys):
    statement = main._on_failure(RuntimeError("boom"))
    assert capsys.readouterr().out == "Error: boom\n"
    assert statement == "Job not found so we have to pay you 0.0 EUR"


def test_setup_logging_configures_package_logger_once(monkeypatch, tmp_path):
    package_logger = logging.getLogger(logging_config.PACKAGE_LOGGER)
    monkeypatch.setattr(package_logger, "handlers", [])
    monkeypatch.setattr(package_logger, "level", package_logger.level)
    logfile = tmp_path / "jobservice.log"

    assert logging_config.setup_logging("debug", str(logfile)) is package_logger
    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 2
    assert package_logger.propagate

    logging_config.setup_logging("error")
    assert package_logger.level == logging.ERROR
    assert len(package_logger.handlers) == 2

    logging.getLogger("jobservice.main").error("written to file")
    for handler in package_logger.handlers:
        handler.flush()
        handler.close()
    assert "written to file" in logfile.read_text(encoding="utf-8")
