import logging, sys

from country_lookup.settings import LOG_FORMAT, LOG_LEVEL

# HTTP client internals; only their warnings are worth seeing
QUIET_LOGGERS = ("urllib3", "requests")

def setup_logging(level: str = LOG_LEVEL) -> logging.Handler:
    """
    Send log records to stdout, once per process.

    `level` applies to this package's loggers only, so cache hit/miss lines
    can be turned on with DEBUG without also getting connection-pool chatter.
    Returns the handler in use (the existing one on repeated calls).
    """
    root = logging.getLogger()
    pkg = logging.getLogger("country_lookup")
    pkg.setLevel(getattr(logging, level.upper(), logging.INFO))

    if root.handlers:  # uvicorn reload / repeated import: keep what's there
        return root.handlers[0]

    root.setLevel(logging.INFO)
    for noisy in QUIET_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(h)
    return h
