# md_to_html/config.py

import os

DEFAULT_ENVIRONMENT = "development"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_settings(environ=None):
    """
    Runtime settings read from the environment.

    LOG_LEVEL        one of DEBUG, INFO, WARNING, ERROR, CRITICAL
    MD_TO_HTML_ENV   "development" (default) or "production"; only changes
                     the log format and the default log level
    MMDC_PATH        explicit location of the Mermaid CLI binary
    """
    environ = os.environ if environ is None else environ

    environment = environ.get("MD_TO_HTML_ENV", DEFAULT_ENVIRONMENT).strip().lower()
    development = environment != "production"

    log_level = (environ.get("LOG_LEVEL") or "").strip().upper()
    if log_level not in LOG_LEVELS:
        log_level = "DEBUG" if development else "INFO"

    return {
        "environment": environment,
        "development": development,
        "log_level": log_level,
        "mmdc_path": environ.get("MMDC_PATH") or None,
    }
