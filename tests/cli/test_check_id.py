import json
from unittest import mock

import pytest

from policydesk.cli.check_id import CheckIdArgs, main
from policydesk.service.id import InvalidIDNumber, parse_rsa_id


def test_check_valid_id(capsys: pytest.CaptureFixture[str]) -> None:
    with mock.patch("sys.argv", ["policydesk-check-id", "890918 5800 08 8", "--reference-date", "2026-10-19"]):
        assert CheckIdArgs.run() == 0

    assert json.loads(capsys.readouterr().out) == {
        "id_number": "8909185800088",
        "date_of_birth": "1989-09-18",
        "gender": "male",
        "citizenship": "citizen",
    }


def test_check_invalid_id(capsys: pytest.CaptureFixture[str]) -> None:
    with mock.patch("sys.argv", ["policydesk-check-id", "8909185800089"]):
        assert CheckIdArgs.run() == 1

    assert capsys.readouterr().out.strip() == "RSA ID not valid: Checksum mismatch"


def test_check_id_parity(capsys: pytest.CaptureFixture[str]) -> None:
    with mock.patch("sys.argv", ["policydesk-check-id", "7104134800187", "--parity", "odd"]):
        assert CheckIdArgs.run() == 0

    assert json.loads(capsys.readouterr().out)["citizenship"] == "permanent_resident"


def test_main_exit_status() -> None:
    with mock.patch("policydesk.cli.check_id.setup") as mock_setup:
        with mock.patch("sys.argv", ["policydesk-check-id", "8909185800088"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
            assert exc_info.value.code == 0

        with mock.patch("sys.argv", ["policydesk-check-id", "9213204720082"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
            assert exc_info.value.code == 1

    assert mock_setup.call_count == 2
    mock_setup.assert_called_with(expected_exceptions=[InvalidIDNumber])


def test_check_id_parses_once(capsys: pytest.CaptureFixture[str]) -> None:
    with mock.patch("policydesk.cli.check_id.parse_rsa_id", wraps=parse_rsa_id) as mock_parse:
        with mock.patch("sys.argv", ["policydesk-check-id", "8909185800088"]):
            assert CheckIdArgs.run() == 0
        mock_parse.assert_called_once()

        mock_parse.reset_mock()
        with mock.patch("sys.argv", ["policydesk-check-id", "8909185800089"]):
            assert CheckIdArgs.run() == 1
        mock_parse.assert_called_once()
