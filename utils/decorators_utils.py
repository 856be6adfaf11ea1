"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of Design Overlay, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Decorators shared by the overlay services
"""

from functools import wraps

from utils import logging_utils

logger = logging_utils.get_logger("overlay.decorators")


def fallback_on_error(default=None):
    """
    Return `default` instead of raising when the wrapped call fails.
    The failure is logged with its full stack trace.
    """

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except Exception as exc:
                logger.error(
                    f"{fn.__qualname__} failed, returning fallback: {str(exc)}",
                    exc_info=True,
                )
                return default() if callable(default) else default

        return wrapper

    return decorator
