import logging
import os
from typing import Optional

def getQuickLogger(name: str, debug_folder: Optional[str] = None,
                   level: int = logging.DEBUG) -> logging.Logger:
    """
    Lazy method to get a logger for a solve, e.g. to pass as
    `MullerConfig.logger`.

    Parameters
    ----------
    name : str
        logger name
    debug_folder : str, optional
        path to the folder for the log file. Without one, records go to
        stderr.
    level : int, default=logging.DEBUG

    Returns
    -------
    Logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if debug_folder:
        handler = logging.FileHandler(os.path.join(debug_folder, f"{name}.log"))
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s")
    )
    logger.addHandler(handler)
    return logger

def clearLoggers(*names: str):
    """
    Close and remove the handlers of the named loggers, or of the root logger
    if no names are given.
    """
    loggers = [logging.getLogger(n) for n in names] or [logging.getLogger()]

    for logger in loggers:
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)
