from __future__ import annotations

from typing import Dict, Optional


class PatchRequest:
    def __init__(self, script: Optional[str] = "", values: Optional[Dict[str, object]] = None):
        self.values: Dict[str, object] = values or {}
        self.script = script

    @classmethod
    def for_script(cls, script: str) -> PatchRequest:
        request = cls()
        request.script = script
        return request

    def to_json(self) -> dict:
        return {"Script": self.script, "Values": self.values}
