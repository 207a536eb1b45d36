import logging
import colorlog

from config.settings import settings


def setup_logger(name: str):
    """
    Configures the logger with a colored console format.

    Parameters
    ----------
    name : str
        Name of the logger to configure.

    Returns
    -------
    logger : logging.Logger
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(settings.LOG_LEVEL)

    # loggers are shared per name, only attach the console handler once
    if logger.handlers:
        return logger

    formatter = colorlog.ColoredFormatter(
        '%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(filename)s:%(lineno)-4d %(white)s%(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        reset=True,
        log_colors={
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'bold_yellow',
            'ERROR': 'red',
            'CRITICAL': 'red,bg_white',
        }
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    return logger
