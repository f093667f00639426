"Tools for running policydesk command-line processes"

import typing as t

from policydesk.util.logging import setup_logging
from policydesk.util.sentry import init as setup_sentry


def setup(expected_exceptions: t.Sequence[t.Type[Exception]] = ()) -> None:
    """
    Standard process setup; error reporting first so that problems setting up logging get reported.

    :param expected_exceptions: errors caused by user input, which are handled and not worth reporting to sentry
    """
    setup_sentry(ignore_exceptions=expected_exceptions)
    setup_logging()
