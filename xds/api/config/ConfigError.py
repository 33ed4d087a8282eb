"""Configuration error raised while loading or bootstrapping settings."""


class ConfigError(ValueError):
    """Invalid configuration file or unusable configured directories."""
