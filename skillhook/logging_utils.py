"""Structured logging for catalog loading, skill matching and formatter dispatch."""
import logging
import sys
from pathlib import Path

import structlog


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structlog and stdlib logging. Call once at startup.

    Output goes to stderr: hook stdout is read by the host assistant.
    """
    level = getattr(logging, log_level, logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=True)
            if log_level == "DEBUG"
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# Convenience: log events with consistent names and fields
def log_catalog_loaded(
    logger: structlog.stdlib.BoundLogger,
    skills_dir: Path,
    skill_names: list[str],
) -> None:
    logger.info(
        "catalog_loaded",
        skills_dir=str(skills_dir),
        skill_count=len(skill_names),
        skill_names=skill_names,
    )


def log_skills_matched(
    logger: structlog.stdlib.BoundLogger,
    intent: str,
    scores: dict[str, int],
) -> None:
    msg = intent[:200] + "..." if len(intent) > 200 else intent
    if scores:
        logger.info("skill_matched", intent=msg, scores=scores)
    else:
        logger.info("no_skill_matched", intent=msg)


def log_formatter_invoked(
    logger: structlog.stdlib.BoundLogger,
    path: str,
    extension: str,
    argv: list[str],
) -> None:
    logger.info("formatter_invoked", path=path, extension=extension, argv=argv)


def log_formatter_skipped(
    logger: structlog.stdlib.BoundLogger,
    path: str,
    extension: str,
) -> None:
    logger.debug("formatter_skipped", path=path, extension=extension)


def log_formatter_failed(
    logger: structlog.stdlib.BoundLogger,
    path: str,
    error: str,
    formatter: str,
    returncode: int | None = None,
) -> None:
    logger.error("formatter_failed", path=path, formatter=formatter, error=error, returncode=returncode)
