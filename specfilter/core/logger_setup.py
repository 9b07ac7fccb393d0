import logging
from pathlib import Path

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(config_manager) -> logging.Logger:
    """Configure the 'specfilter' logger from config settings.

    Args:
        config_manager: ConfigManager instance with logging settings

    Returns:
        The configured package logger
    """
    log_level = str(config_manager.get_param('logging.level', 'WARNING')).upper()
    log_file = config_manager.get_param('logging.file')

    logger = logging.getLogger('specfilter')
    logger.setLevel(log_level)

    # Re-running setup replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = Path(log_file).parent
        if not log_dir.exists():
            log_dir.mkdir(parents=True)
        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
