import sys
from logging import getLogger, DEBUG as level, StreamHandler, Formatter, Logger


class StderrHandler(StreamHandler):
    """Writes to whatever sys.stderr is at emit time; stdout is kept for command output."""

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


handler = StderrHandler()
log: Logger = getLogger("designernews")


handler.setFormatter(Formatter('[%(asctime)s] %(message)s'))
log.addHandler(handler)
log.setLevel(level)
