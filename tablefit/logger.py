"""Loggers of TableFit.

Modules log through :data:`LOGGER` and :data:`PROGRESS_LOGGER` imported
from here, so that the default level and handler are always set.

``LOGGER`` warns about fonts that can't be read or found, cells dropped
from rows longer than the column keys and tables that can't be fitted to
a width. ``PROGRESS_LOGGER`` gives information about measuring and fitting
steps.

"""

import contextlib
import logging

LOGGER = logging.getLogger('tablefit')
if not LOGGER.handlers:  # pragma: no cover
    LOGGER.setLevel(logging.WARNING)
    LOGGER.addHandler(logging.NullHandler())

PROGRESS_LOGGER = logging.getLogger('tablefit.progress')


class MessagesHandler(logging.Handler):
    """Keep ``'LEVEL: message'`` strings of records, progress excluded."""
    def __init__(self, level=logging.INFO):
        super().__init__(level)
        self.messages = []
        self.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        self.addFilter(lambda record: record.name != PROGRESS_LOGGER.name)

    def emit(self, record):
        self.messages.append(self.format(record))


@contextlib.contextmanager
def capture_logs(logger='tablefit', level=None):
    """Collect the messages of ``logger`` instead of emitting them.

    The context manager gives the list of messages, filled while the block
    runs.

    """
    handler = MessagesHandler(logging.INFO if level is None else level)
    logger = logging.getLogger(logger)
    previous_handlers, previous_level = logger.handlers, logger.level
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG)
    try:
        yield handler.messages
    finally:
        logger.handlers = previous_handlers
        logger.setLevel(previous_level)
