from .logger import setup_logger  # noqa: F401
