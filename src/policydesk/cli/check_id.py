"""
Check a South African ID number from the command line:

    policydesk-check-id "890918 5800 08 8"
    policydesk-check-id 9307035489087 --parity odd --reference-date 2024-01-01

Prints the encoded details as JSON and exits 0 if the number is valid, otherwise prints the reason and exits 1.
"""

import sys
from datetime import date

from pydantic import PrivateAttr
from pydantic_settings import CliPositionalArg

from policydesk.service.id import ChecksumParity, IDDetails, InvalidIDNumber, parse_rsa_id
from policydesk.util.argparse import PydanticArguments
from policydesk.util.cmd import setup


class CheckIdArgs(PydanticArguments):
    id_number: CliPositionalArg[str]
    reference_date: date | None = None
    parity: ChecksumParity | None = None

    _result = PrivateAttr(default=None)

    def details(self) -> IDDetails | str:
        """
        Parse the ID number once, so that the output and the exit status agree on the reference date
        """
        if self._result is None:
            try:
                self._result = parse_rsa_id(self.id_number, self.reference_date, self.parity)
            except InvalidIDNumber as e:
                self._result = str(e)
        return self._result

    def cli_cmd(self) -> None:
        result = self.details()
        if isinstance(result, str):
            print(result)
        else:
            print(result.model_dump_json(indent=2))

    def exit_status(self) -> int:
        return 0 if isinstance(self.details(), IDDetails) else 1


def main() -> None:
    setup(expected_exceptions=[InvalidIDNumber])
    sys.exit(CheckIdArgs.run())


if __name__ == "__main__":
    main()
