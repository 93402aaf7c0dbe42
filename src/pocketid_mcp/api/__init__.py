"""Pocket ID API access layer.

:mod:`.client` holds the shared HTTP access layer and the verb facade;
:mod:`.resources` maps each Pocket ID resource onto those verbs.
"""

from .client import (
    DEFAULT_TIMEOUT_MS,
    PocketIdClient,
    get_pocketid_client,
    reset_pocketid_client,
    set_pocketid_client,
)
from .resources import PocketIdApi, pocketid_api

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "PocketIdClient",
    "get_pocketid_client",
    "set_pocketid_client",
    "reset_pocketid_client",
    "PocketIdApi",
    "pocketid_api",
]
