"""
公共对象
"""

import logging

__all__ = [
    "LOGGER"
]

LOGGER = logging.getLogger("metasequoia_classfile")
