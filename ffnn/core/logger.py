import logging

from ffnn.config import LOG_DATE_FORMAT, LOG_FORMAT


def log_progress(logger, msg, i, n):
    """ Log `msg` at INFO level, prefixed by a zero-padded counter,
    e.g., "(0042 / 1000) training steps"
    """
    msg = "(%%0%dd / %d) %s" % (len(str(n)), n, msg)
    logger.info(msg % i)


class TrainingLogger(logging.Logger):
    """ A logger that writes formatted records to a file and/or stdout.
    Pass an instance as the `logger` argument of
    :class:`ffnn.core.network.Network` to capture training progress.
    """
    def __init__(self, filename=None, stdout=True, level=logging.DEBUG):
        """
        Parameters
        ----------
        filename: str, default=None
            If given, records are written to this file (overwritten).

        stdout: bool, default=True
            If True, records are also written to the standard stream.

        level: int, default=logging.DEBUG
            The logging level.
        """
        logging.Logger.__init__(self, 'Feed-forward network logger')
        self.setLevel(level)

        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        self.file = filename
        self.stdout = stdout

        if self.file is not None:
            fhandler = logging.FileHandler(filename, mode='w')
            fhandler.setFormatter(formatter)
            self.addHandler(fhandler)

        if self.stdout:
            shandler = logging.StreamHandler()
            shandler.setFormatter(formatter)
            self.addHandler(shandler)

    def progress(self, msg, i, n):
        log_progress(self, msg, i, n)

    def close(self):
        """ Close and detach all handlers """
        for handler in list(self.handlers):
            handler.close()
            self.removeHandler(handler)
