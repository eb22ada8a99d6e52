# clparams — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by clparams.

Parsing itself never raises: unknown flags and surplus values degrade into
positional arguments. These exceptions cover the developer-facing mistakes made
while building a parameter table (bad names, duplicates, invalid actions) and
malformed configuration files.

All exceptions inherit from `ClParamsError`, the base exception for the package.

Exception Hierarchy:
- ClParamsError
    ├── ParameterError
    │   ├── InvalidParameterNameError
    │   └── ParameterAlreadyExistsError
    ├── InvalidActionError
    ├── ActionAlreadyExistsError
    └── ConfigError
"""


class ClParamsError(Exception):
    """Base exception for clparams."""


class ParameterError(ClParamsError):
    """Exception raised when a parameter is configured incorrectly."""


class InvalidParameterNameError(ParameterError):
    """Exception raised when a long or short parameter name is malformed."""


class ParameterAlreadyExistsError(ParameterError):
    """Exception raised when a long or short name is already registered."""


class InvalidActionError(ClParamsError):
    """Exception raised when an action key or action object is invalid."""


class ActionAlreadyExistsError(ClParamsError):
    """Exception raised when an action with the same key already exists."""


class ConfigError(ClParamsError):
    """Exception raised when a configuration file cannot be turned into parameters."""
