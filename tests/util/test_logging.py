import logging
from unittest.mock import patch

from policydesk.util.logging import LoggingSettings, RedactingFilter, redact, setup_logging


def test_redact() -> None:
    assert redact("Bad ID 8909185800088") == "Bad ID <redacted>"
    assert redact("ID 890918 5800 08 8 rejected") == "ID <redacted> rejected"
    assert redact("Rejected phone number '+27 72 123 4567'") == "Rejected phone number '<redacted>'"
    assert redact("Rejected phone number '(072) 123-4567'") == "Rejected phone number '<redacted>'"
    # Dates, reasons and short numbers are left alone
    assert redact("Invalid birth date 1992-04-31") == "Invalid birth date 1992-04-31"
    assert redact("Checksum mismatch on policy 12345") == "Checksum mismatch on policy 12345"


def test_redacting_filter() -> None:
    record = logging.LogRecord(
        "policydesk-phone", logging.DEBUG, __file__, 1, "Rejected phone number %r", ("0912345678",), None
    )
    assert RedactingFilter().filter(record)
    assert record.getMessage() == "Rejected phone number '<redacted>'"


def test_setup_logging_default_level() -> None:
    """The console gets WARNING and the validator loggers are held at INFO."""
    with patch("logging.StreamHandler") as mock_handler:
        with patch("logging.basicConfig") as mock_basic_config:
            setup_logging()
            mock_handler.return_value.setLevel.assert_called_with(logging.WARNING)
            filters = [c.args[0] for c in mock_handler.return_value.addFilter.call_args_list]
            assert any(isinstance(f, RedactingFilter) for f in filters)
            mock_basic_config.assert_called_once_with(level=logging.NOTSET, handlers=[mock_handler.return_value])

    assert logging.getLogger("policydesk-id").level == logging.INFO
    assert logging.getLogger("policydesk-phone").level == logging.INFO
    logging.getLogger("policydesk-id").setLevel(logging.NOTSET)
    logging.getLogger("policydesk-phone").setLevel(logging.NOTSET)


def test_setup_logging_custom_level() -> None:
    """Validator rejections can be let through for debugging."""
    with patch("policydesk.util.logging.log_settings", LoggingSettings(log_level="DEBUG", validator_log_level="DEBUG")):
        with patch("logging.StreamHandler") as mock_handler:
            with patch("logging.basicConfig"):
                setup_logging()
                mock_handler.return_value.setLevel.assert_called_with(logging.DEBUG)

    assert logging.getLogger("policydesk-id").level == logging.DEBUG
    logging.getLogger("policydesk-id").setLevel(logging.NOTSET)
    logging.getLogger("policydesk-phone").setLevel(logging.NOTSET)
