"""Process-wide logging setup."""
import logging

from quizflip.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    if settings.debug:
        level_name = "DEBUG"

    logging.basicConfig(format=LOG_FORMAT, level=level_name)
    logging.getLogger().setLevel(level_name)
    # passlib probes bcrypt's version attribute and logs a spurious traceback otherwise
    logging.getLogger("passlib").setLevel(logging.ERROR)
