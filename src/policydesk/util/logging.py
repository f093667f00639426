import logging
import re
from typing import Literal

from policydesk.util.config import PolicydeskSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Loggers that see client ID and phone numbers
VALIDATOR_LOGGERS = ("policydesk-id", "policydesk-phone")

# Runs of 9 or more digits, optionally split by spaces, dashes or brackets, which covers ID numbers and phone numbers
_PERSONAL_NUMBER = re.compile(r"\+?\(?[0-9](?:[\s()-]{0,2}[0-9]){8,}")

REDACTED = "<redacted>"


class LoggingSettings(PolicydeskSettings):
    log_level: LogLevel = "WARNING"
    validator_log_level: LogLevel = "INFO"


log_settings = LoggingSettings()


def redact(text: str) -> str:
    """
    Replace anything that looks like an ID or phone number so it does not end up in logs or error reports
    """
    return _PERSONAL_NUMBER.sub(REDACTED, text)


class RedactingFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = redact(record.getMessage())
        record.args = None
        return True


def setup_logging() -> None:
    """
    Initial logging setup.

    Sets default format and level to that specified by `APP_LOG_LEVEL`, or `WARNING` if not set. The ID and phone
    validators log every rejection at DEBUG, so they are held at `APP_VALIDATOR_LOG_LEVEL` separately. Personal
    numbers are redacted from everything that reaches the console.
    """
    default_handler = logging.StreamHandler()
    default_handler.setLevel(logging.getLevelName(log_settings.log_level))
    default_handler.setFormatter(logging.Formatter("%(asctime)s %(name)-12s %(levelname)-8s %(message)s"))
    default_handler.addFilter(RedactingFilter())

    for name in VALIDATOR_LOGGERS:
        logging.getLogger(name).setLevel(logging.getLevelName(log_settings.validator_log_level))

    # The root logger receives everything so that other handlers can pick up messages below the console level.
    logging.basicConfig(
        level=logging.NOTSET,
        handlers=[default_handler],
    )
