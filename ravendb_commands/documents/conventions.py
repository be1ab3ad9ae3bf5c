from __future__ import annotations

import datetime
from enum import Enum
from typing import Callable, Optional

from ravendb_commands import constants
from ravendb_commands.tools.utils import Utils


class DocumentConventions(object):
    def __init__(self):
        self._frozen = False

        # Configuration
        self.json_default_method: Callable[[object], object] = DocumentConventions.json_default

        # Timeouts
        self.request_timeout: Optional[datetime.timedelta] = None

    def freeze(self) -> None:
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def __setattr__(self, key, value):
        if getattr(self, "_frozen", False) and key != "_frozen":
            raise RuntimeError(
                f"Conventions has been frozen after the request executor was created, cannot change '{key}'"
            )
        super().__setattr__(key, value)

    @staticmethod
    def json_default(o):
        if o is None:
            return None
        if isinstance(o, datetime.datetime):
            return Utils.datetime_to_string(o)
        elif isinstance(o, datetime.timedelta):
            return Utils.timedelta_to_str(o)
        elif isinstance(o, Enum):
            return o.value
        elif callable(getattr(o, constants.json_serialize_method_name, None)):
            return getattr(o, constants.json_serialize_method_name)()
        elif isinstance(o, (set, tuple)):
            return list(o)
        else:
            raise TypeError(repr(o) + " is not JSON serializable (Try add a json default method to convention)")
