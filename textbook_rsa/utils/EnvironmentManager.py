"""Utility class for environment variable management."""

import os
from enum import Enum
from typing import Any, cast

from ..protocol_constants import DEFAULT_KEY_LENGTH, DEFAULT_MESSAGE


class EnvVarType(Enum):
    """Types of environment variables."""
    INT = "int"
    STRING = "str"
    BOOL = "bool"


class EnvironmentVariables(Enum):
    """
    Enum of known environment variables used in the application.

    Each enum value is a tuple of (env_var_name, default_value, type).
    """
    KEY_LENGTH = ("RSA_KEY_LENGTH", DEFAULT_KEY_LENGTH, EnvVarType.INT)
    MESSAGE = ("RSA_MESSAGE", DEFAULT_MESSAGE, EnvVarType.STRING)
    PUBLIC_EXPONENT = ("RSA_PUBLIC_EXPONENT", None, EnvVarType.INT)
    MAX_ATTEMPTS = ("RSA_MAX_ATTEMPTS", None, EnvVarType.INT)
    MAX_PRIME_ATTEMPTS = ("RSA_MAX_PRIME_ATTEMPTS", None, EnvVarType.INT)
    SEED = ("RSA_SEED", None, EnvVarType.INT)
    VALIDATE_RANGE = ("RSA_VALIDATE_RANGE", True, EnvVarType.BOOL)

    def __init__(self, env_name: str, default_value: Any, var_type: EnvVarType):
        self.env_name = env_name
        self.default_value = default_value
        self.var_type = var_type


class EnvironmentManager:
    """Static utility class for environment variable management."""

    @staticmethod
    def get_value(env_var: EnvironmentVariables, override_default: Any = None) -> Any:
        """
        Get a value from an environment variable with appropriate type conversion.

        Args:
            env_var: The environment variable to retrieve
            override_default: Optional value to override the default defined in the enum

        Returns:
            The value of the environment variable or the default with appropriate type
        """
        default = override_default if override_default is not None else env_var.default_value

        value = os.environ.get(env_var.env_name)
        if value is None or value == "":
            return default

        if env_var.var_type == EnvVarType.INT:
            try:
                return int(value)
            except ValueError:
                return default
        elif env_var.var_type == EnvVarType.BOOL:
            return value.lower() in ('true', 'yes', '1', 'y')
        else:  # STRING or any other type
            return value

    @staticmethod
    def get_int(env_var: EnvironmentVariables, default = None) -> int | None:
        """
        Get an integer value from an environment variable.

        Args:
            env_var: The environment variable to retrieve
            default: Optional value to override the default defined in the enum

        Returns:
            int | None: The value of the environment variable or the default
        """
        return cast(int | None, EnvironmentManager.get_value(env_var, default))

    @staticmethod
    def get_string(env_var: EnvironmentVariables, default = None) -> str:
        """
        Get a string value from an environment variable.

        Args:
            env_var: The environment variable to retrieve
            default: Optional value to override the default defined in the enum

        Returns:
            str: The value of the environment variable or the default
        """
        return cast(str, EnvironmentManager.get_value(env_var, default))

    @staticmethod
    def get_bool(env_var: EnvironmentVariables, default = None) -> bool:
        """
        Get a boolean value from an environment variable.

        Only true, yes, 1 and y (any case) count as true.

        Args:
            env_var: The environment variable to retrieve
            default: Optional value to override the default defined in the enum

        Returns:
            bool: The value of the environment variable or the default
        """
        return cast(bool, EnvironmentManager.get_value(env_var, default))
