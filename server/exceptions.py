class ConfigurationError(Exception):
    """Raised when the configured target service address is unusable."""
