class ConfigurationError(RuntimeError):
    """The integration is wired wrong, e.g. flash messages used without a session."""
