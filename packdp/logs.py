import logging

#
# VERBOSE sits just below INFO: phase timings and option summaries that are
# too chatty for INFO but far less than DEBUG.
#
VERBOSE = logging.INFO - 1
logging.VERBOSE = VERBOSE
logging.addLevelName(VERBOSE, "VERBOSE")


def _log_verbose(self, message, *args, **kws):
    if self.isEnabledFor(VERBOSE):
        self._log(VERBOSE, message, args, **kws)


logging.Logger.verbose = _log_verbose

DEFAULT_FORMAT = "%(levelname)s - %(message)s"
DEBUGGING_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("packdp")
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
logger.addHandler(handler)


def use_debugging_formatter(enable=True):
    """
    Add timestamps and the logger name to every message, or drop them again
    with enable=False.
    """
    handler.setFormatter(logging.Formatter(DEBUGGING_FORMAT if enable else DEFAULT_FORMAT))


def set_loglevel(loglevel):
    use_debugging_formatter(loglevel in ("DEBUG", "VERBOSE"))
    logger.setLevel(loglevel)
