"""Core types: results, errors, the config store and settings."""

from .errors import CheckAborted, ErrorCode
from .result import Err, Ok, Result, is_err, is_ok
from .settings import CandidateSetting, Settings, SettingsError, load_settings
from .store import ConfigStore, StoreError, load_store

__all__ = [
    # errors
    "CheckAborted",
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    # settings
    "CandidateSetting",
    "Settings",
    "SettingsError",
    "load_settings",
    # store
    "ConfigStore",
    "StoreError",
    "load_store",
]
