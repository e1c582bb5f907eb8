## logging setup for yapSCAD

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""route the ``yapscad`` loggers to the console and, optionally, a file

Library modules only call ``logging.getLogger(__name__)``; nothing is
printed until an application calls ``setup_logging()``.
"""

import logging
import sys

LOGGER_NAME = 'yapscad'
LOG_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'
DATE_FORMAT = '%H:%M:%S'

## marks handlers installed here, so a second call replaces them
_OWNED = '_yapscad_handler'


def _level(level):
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f'unknown logging level: {level}')
        return value
    return level


def setup_logging(level=logging.INFO, log_file=None, stream=None):
    """attach a console handler (``stream``, default stdout) and, if
    ``log_file`` is given, a file handler to the ``yapscad`` logger.

    ``level`` may be a number or a name such as ``'debug'``.  Calling
    this again replaces the handlers from the previous call.  Returns
    the logger.
    """
    level = _level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for h in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(h)
        h.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(formatter)
        setattr(h, _OWNED, True)
        logger.addHandler(h)

    logger.debug('logging to %d handler(s) at level %s',
                 len(handlers), logging.getLevelName(level))
    return logger
