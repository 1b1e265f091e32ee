"""
Utilities for all kinds of needs (funcs, colors, dates, fonts, etc...)
"""
import logging
from functools import cache

from .func import *

log_error = logging.error
log_error_once = cache(log_error)
