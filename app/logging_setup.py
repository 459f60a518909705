import logging

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s - %(message)s'

_handler = None


def setup_logging(level='INFO'):
    """Attach a single stream handler to the root logger.

    Safe to call once per app; later calls only adjust the level.
    """
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
