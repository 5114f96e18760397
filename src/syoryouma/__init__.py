"""syo-ryo-uma: a cucumber horse and an eggplant cow scrolling across the terminal."""

import logging

__version__ = "0.1.0"

# Records only reach a handler when --debug-log attaches one to the root logger
logging.getLogger(__name__).addHandler(logging.NullHandler())
