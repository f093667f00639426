from pydantic import BaseModel  # noqa: F401 For reexporting
from pydantic_settings import BaseSettings, SettingsConfigDict


class PolicydeskSettings(BaseSettings):
    """
    Base for all policydesk settings. Values come from APP_ prefixed environment variables, falling back to a .env
    file in the working directory as written by the deployment scripts. The .env file is shared with other tools, so
    unknown keys in it are ignored.
    """

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        # Nested models can have individual fields set, eg APP_NESTED__FOO
        env_nested_delimiter="__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        # Settings objects are immutable and hashable
        frozen=True,
    )
