from .config_reader import ConfigReader, DEFAULT_CONFIG_FILE  # noqa: F401
