"""
clparams

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .parameter import UNLIMITED, Parameter
from .parameter_action import Action, ParameterAction
from .parameter_name import ParameterName
from .parameters import Parameters
from .tokenizer import is_parameter_token

logger = logging.getLogger("clparams")


__all__ = [
    "Action",
    "Parameter",
    "ParameterAction",
    "ParameterName",
    "Parameters",
    "UNLIMITED",
    "is_parameter_token",
]
