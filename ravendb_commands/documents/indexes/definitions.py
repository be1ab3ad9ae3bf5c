from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Optional, Set, Union


class IndexPriority(Enum):
    LOW = "Low"
    NORMAL = "Normal"
    HIGH = "High"

    def __str__(self):
        return self.value


class IndexLockMode(Enum):
    UNLOCK = "Unlock"
    LOCKED_IGNORE = "LockedIgnore"
    LOCKED_ERROR = "LockedError"

    def __str__(self):
        return self.value


class IndexDefinition:
    def __init__(self, name: Optional[str] = None, maps: Union[None, str, Iterable[str]] = None, **kwargs):
        self.name = name
        self.priority: Optional[IndexPriority] = None
        self.lock_mode: Optional[IndexLockMode] = None
        self.fields: Dict[str, dict] = {}
        self.reduce: Optional[str] = None
        self.configuration: Dict[str, str] = {}
        self.output_reduce_to_collection: Optional[str] = None
        self.maps = maps
        self.__dict__.update(kwargs)

    @property
    def maps(self) -> Set[str]:
        return self.__maps

    @maps.setter
    def maps(self, value: Union[None, str, Iterable[str]]):
        if value is None:
            self.__maps = set()
        elif isinstance(value, str):
            self.__maps = {value}
        else:
            self.__maps = set(value)

    @classmethod
    def from_json(cls, json_dict: dict) -> IndexDefinition:
        result = cls(json_dict["Name"], json_dict.get("Maps"))
        priority = json_dict.get("Priority")
        if priority is not None:
            result.priority = IndexPriority(priority)
        lock_mode = json_dict.get("LockMode")
        if lock_mode is not None:
            result.lock_mode = IndexLockMode(lock_mode)
        result.fields = json_dict.get("Fields") or {}
        result.reduce = json_dict.get("Reduce")
        result.configuration = json_dict.get("Configuration") or {}
        result.output_reduce_to_collection = json_dict.get("OutputReduceToCollection")
        return result

    def to_json(self) -> dict:
        return {
            "Name": self.name,
            "Maps": sorted(self.maps),
            "Reduce": self.reduce,
            "Fields": self.fields,
            "Configuration": self.configuration,
            "Priority": str(self.priority) if self.priority else None,
            "LockMode": str(self.lock_mode) if self.lock_mode else None,
            "OutputReduceToCollection": self.output_reduce_to_collection,
        }
