"""
log.py

A module for setting up logging.
"""

import logging
import pathlib
import sys

from typing_extensions import Optional, Union


class Log:
    def __init__(
        self,
        log_level: Union[int, str],
        logdir: Optional[str] = None,
        logtype: str = 'stream',
        logfilename: str = 'petnamer-log.txt',
    ):
        """
        Creates logging formatting and structure

        :param log_level: Logging level, either a name ('INFO') or a number.
        :param logdir: Directory for log files, defaults to None (stream).
        :param logtype: 'stream' or 'file', defaults to 'stream'.
        :param logfilename: Log file name inside logdir.
        """

        # need to be careful not to pull logging from previous runs
        self.logger = logging.getLogger('petnamer')
        self.logdir = logdir
        if logdir:
            self.logtype = 'file'
        else:
            self.logtype = logtype
        self.logfilename = logfilename

        # do not recreate handlers if they're already present
        if self.logger.handlers:
            self.log_level = self.logger.level
            return

        self.log_level = log_level
        self.logger.setLevel(log_level)

        log_format = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d'
            ' - %(message)s'
        )

        # We only use a file handler if user specified a logdir
        if self.logdir:
            logpath = pathlib.Path(self.logdir)

            if not logpath.exists():
                logpath.mkdir(parents=True)

            logfilename = str(logpath / self.logfilename)
            file_handler = logging.FileHandler(logfilename)

            file_handler.setLevel(self.log_level)
            file_handler.setFormatter(log_format)
            self.logger.addHandler(file_handler)
        else:
            # names go to stdout, so logs stay on stderr
            log_handler = logging.StreamHandler(stream=sys.stderr)
            log_handler.setFormatter(log_format)
            self.logger.addHandler(log_handler)

    def to_json(self):
        return {
            'logdir': self.logdir,
            'log_level': self.log_level,
            'logtype': self.logtype,
            'logfilename': self.logfilename,
        }

    def __eq__(self, other):
        return self.to_json() == other.to_json()

    def set_level(self, log_level: Union[int, str]):
        """Change the level of the shared logger and its handlers"""
        self.log_level = log_level
        self.logger.setLevel(log_level)
        for h in self.logger.handlers:
            h.setLevel(log_level)

    def debug(self, msg: str):
        """Forward debug messages down to logger"""
        self.logger.debug(msg)

    def info(self, msg: str):
        """Forward info messages down to logger"""
        self.logger.info(msg)

    def __repr__(self):
        """Print out where our logs are going"""

        if self.logdir:
            logstring = f'{self.logfilename}'
        else:
            logstring = 'stderr'

        return f"petnamer logging {id(self)} @ '{logstring}'"
