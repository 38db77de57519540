"""
psfont.scripting - frame for command-line scripts

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import os
import sys
import logging
from contextlib import contextmanager


@contextmanager
def wrap_main(debug=False):
    """Main script context."""
    # set log level
    if debug:
        loglevel = logging.DEBUG
    else:
        loglevel = logging.WARNING
    logging.basicConfig(level=loglevel, format='%(levelname)s: %(message)s', force=True)
    # run main script
    try:
        yield
    except BrokenPipeError:
        # happens e.g. when piping to `head`
        # further output, including the flush at exit, goes nowhere
        sys.stdout = open(os.devnull, 'w')
    except Exception as exc:
        logging.error(exc)
        if debug:
            raise
        sys.exit(1)
