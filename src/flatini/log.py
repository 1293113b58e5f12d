"""Logging for flatini.

Parse progress, section reopening and overridden keys are reported at debug
level; open and read failures at error level before the exception is raised.
"""

__all__ = ("logger",)

import logging

# Make sure something handles messages sent to our non-root logger. If the
# root logger already has handlers this is a noop.
logging.basicConfig()

logger = logging.getLogger('flatini')
