"""Utility modules for the RSA demo."""

from .EnvironmentManager import EnvironmentManager, EnvironmentVariables, EnvVarType

__all__ = ["EnvironmentManager", "EnvironmentVariables", "EnvVarType"]
