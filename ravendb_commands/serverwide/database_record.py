from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class DatabaseDocument(object):
    __slots__ = ["database_id", "settings", "secured_settings", "disabled"]

    def __init__(
        self,
        database_id: str,
        settings: Optional[Dict[str, str]] = None,
        secured_settings: Optional[Dict[str, str]] = None,
        disabled: bool = False,
    ):
        self.database_id = database_id
        self.settings = settings if settings is not None else {}
        self.secured_settings = secured_settings if secured_settings is not None else {}
        self.disabled = disabled

    def to_json(self) -> dict:
        return {"Disabled": self.disabled, "SecuredSettings": self.secured_settings, "Settings": self.settings}


class AccessMode(Enum):
    NONE = "None"
    READ_ONLY = "ReadOnly"
    READ_WRITE = "ReadWrite"
    ADMIN = "Admin"

    def __str__(self):
        return self.value


class ApiKeyDefinition(object):
    def __init__(
        self,
        enabled: bool = True,
        secret: Optional[str] = None,
        server_admin: bool = False,
        resources_access_mode: Optional[Dict[str, AccessMode]] = None,
    ):
        """
        @param enabled: whether the api key is enabled
        @param secret: the secret part of the key
        @param server_admin: whether the key grants server-wide admin rights
        @param resources_access_mode: maps a resource ("db/<database name>") to its AccessMode
        """
        self.enabled = enabled
        self.secret = secret
        self.server_admin = server_admin
        self.resources_access_mode = resources_access_mode if resources_access_mode is not None else {}

    def to_json(self) -> dict:
        return {
            "Enabled": self.enabled,
            "ResourcesAccessMode": {resource: str(mode) for resource, mode in self.resources_access_mode.items()},
            "Secret": self.secret,
            "ServerAdmin": self.server_admin,
        }
