# clparams — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package-wide logger for clparams."""
import logging

logger: logging.Logger = logging.getLogger("clparams")
