import argparse

from pydantic import ValidationError
from pydantic_settings import CliApp, CliSettingsSource

from policydesk.util.config import PolicydeskSettings


class PydanticArguments(PolicydeskSettings, cli_parse_args=True, cli_kebab_case=True):
    """
    Command-line arguments described as a settings model. Subclasses implement `cli_cmd` to do the work and may
    override `exit_status` to report failure to the shell.
    """

    def exit_status(self) -> int:
        return 0

    @classmethod
    def run(cls) -> int:
        css: CliSettingsSource[argparse.ArgumentParser] = CliSettingsSource(cls)
        try:
            args = CliApp.run(cls, cli_settings_source=css)
        except ValidationError as e:
            msg = ""
            for err in e.errors():
                msg += f"\nargument {err['loc'][0]}: {err['msg']}"
            css.root_parser.error(msg)
            return 2
        return args.exit_status()
