import os

from policydesk.util.config import PolicydeskSettings


class BearSettings(PolicydeskSettings):
    use_beartype: bool = False
    # Set as JSON, eg APP_BEARTYPE_PACKAGES='["policydesk", "app"]'
    beartype_packages: list[str] = ["policydesk"]


def maybe_setup_beartype(packages: list[str] | None = None) -> None:
    """
    Type-check the given packages, or those in APP_BEARTYPE_PACKAGES, at runtime while under pytest or when
    APP_USE_BEARTYPE is set. Only modules imported after this call are checked.
    """
    settings = BearSettings()
    if os.environ.get("PYTEST_VERSION") is None and not settings.use_beartype:
        return

    from beartype.claw import beartype_packages

    beartype_packages(packages if packages is not None else settings.beartype_packages)
