import typing as t

import sentry_sdk

from policydesk.util.config import PolicydeskSettings
from policydesk.util.logging import redact


class SentrySettings(PolicydeskSettings):
    environment: t.Optional[str] = "dev"
    commit_tag: str = "dev"
    sentry_dsn: t.Optional[str] = None


sentry_settings = SentrySettings()


def scrub_event(event: dict[str, t.Any]) -> dict[str, t.Any]:
    """
    Redact personal numbers from exception values and log messages of a sentry event. Exceptions raised while
    validating ID numbers usually quote the number.
    """
    for exc in event.get("exception", {}).get("values", []):
        if isinstance(exc.get("value"), str):
            exc["value"] = redact(exc["value"])

    logentry = event.get("logentry")
    if logentry is not None:
        if isinstance(logentry.get("message"), str):
            logentry["message"] = redact(logentry["message"])
        logentry.pop("params", None)

    return event


def init(ignore_exceptions: t.Sequence[t.Type[Exception]] = ()) -> None:
    """
    Initialize sentry; should be done as soon as possible in the program.

    :param ignore_exceptions: Exception types which are never reported, typically bad user input.
    """
    if not sentry_settings.sentry_dsn:
        return

    def sentry_before_send(event: t.Any, hint: t.Any) -> t.Any:
        if "exc_info" in hint:
            _, exc_value, _ = hint["exc_info"]
            if any(isinstance(exc_value, ex) for ex in ignore_exceptions):
                return None

        return scrub_event(event)

    sentry_sdk.init(
        dsn=sentry_settings.sentry_dsn,
        environment=sentry_settings.environment,
        release=sentry_settings.commit_tag,
        traces_sample_rate=0,
        send_default_pii=False,
        before_send=sentry_before_send,
    )
