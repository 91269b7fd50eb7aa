"""
Logging setup with contextvars-based metadata injection.

- Adds a short tree-source tag and the current CLI command into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
- Tunes noisy third-party library loggers.
"""

import contextvars
import hashlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_source_tag = contextvars.ContextVar("source_tag", default="-")
cv_command = contextvars.ContextVar("command", default="-")

# Full source kept for metadata (not printed every line)
cv_source_full = contextvars.ContextVar("source_full", default="-")


def make_source_tag(source: str, length: int = 8) -> str:
    """
    Stable short tag derived from the tree source (file path or "default").
    Uses BLAKE2s so the same file always gets the same tag across runs.
    """
    h = hashlib.blake2s(source.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.src = cv_source_tag.get() or "-"
        record.cmd = cv_command.get() or "-"
        return True


def set_log_context(*, source: str | None = None, command: str | None = None) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if source is not None:
        cv_source_full.set(str(source))
        cv_source_tag.set(make_source_tag(str(source)))
    if command is not None:
        cv_command.set(str(command))


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form (e.g. for export metadata)."""
    return {
        "source_tag": str(cv_source_tag.get() or "-"),
        "source": str(cv_source_full.get() or "-"),
        "command": str(cv_command.get() or "-"),
    }


def clear_log_context() -> None:
    """Reset all context fields to their defaults."""
    cv_source_tag.set("-")
    cv_source_full.set("-")
    cv_command.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file (console only when None)
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] src=%(src)s cmd=%(cmd)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | src=%(src)s cmd=%(cmd)s | %(message)s"

    console_formatter = logging.Formatter(console_fmt, datefmt="%H:%M:%S")
    file_formatter = logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S")

    ctx_filter = ContextInjectFilter()

    # Console handler (stderr keeps stdout clean for JSON results)
    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(console_formatter)
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(file_formatter)
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    # Third-party library log levels
    logging.getLogger("openpyxl").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
