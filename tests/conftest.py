from policydesk.util.beartype import maybe_setup_beartype

# Has to happen before any of the package under test is imported
maybe_setup_beartype()
