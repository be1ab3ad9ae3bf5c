from __future__ import annotations

import re
import urllib.parse
from datetime import datetime, timedelta
from enum import Enum
from typing import Dict, List, Tuple

from ravendb_commands import constants
from ravendb_commands.exceptions import exceptions


class Utils(object):
    collections_no_str = (list, set, tuple)

    @staticmethod
    def param_to_str(value) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, timedelta):
            return Utils.timedelta_to_str(value)
        if isinstance(value, Enum):
            return str(value.value)
        return str(value)

    @staticmethod
    def encode_params(params: Dict[str, object]) -> str:
        """
        Encodes query parameters preserving their insertion order.
        Collections expand to one pair per item, e.g. {"id": ["a", "b"]} -> id=a&id=b
        """
        pairs: List[Tuple[str, str]] = []
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, Utils.collections_no_str):
                pairs.extend((key, Utils.param_to_str(item)) for item in value)
            else:
                pairs.append((key, Utils.param_to_str(value)))
        return urllib.parse.urlencode(pairs)

    @staticmethod
    def database_name_validation(name: str) -> None:
        if not name:
            raise exceptions.InvalidOperationException("Empty name is not valid")
        if re.fullmatch(constants.Database.NAME_PATTERN, name) is None:
            raise exceptions.InvalidOperationException(
                'Database name can only contain only A-Z, a-z, "_", "." or "-" but was: ' + name
            )

    @staticmethod
    def strip_database_prefix(database_id: str) -> str:
        return database_id.replace(constants.Database.ID_PREFIX, "") if database_id else database_id

    @staticmethod
    def datetime_to_string(datetime_obj: datetime):
        add_suffix = "0" if datetime_obj != datetime.max else "9"
        return datetime_obj.strftime(f"%Y-%m-%dT%H:%M:%S.%f{add_suffix}") if datetime_obj else ""

    @staticmethod
    def timedelta_to_str(timedelta_obj: timedelta):
        timedelta_str = None
        if isinstance(timedelta_obj, timedelta):
            timedelta_str = ""
            total_seconds = timedelta_obj.seconds
            days = timedelta_obj.days
            hours = total_seconds // 3600
            minutes = (total_seconds // 60) % 60
            seconds = (total_seconds % 3600) % 60
            microseconds = timedelta_obj.microseconds
            if days > 0:
                timedelta_str += "{0}.".format(days)
            timedelta_str += "{:02}:{:02}:{:02}".format(hours, minutes, seconds)
            if microseconds > 0:
                timedelta_str += f".{str(microseconds).rjust(6, '0')}"
        return timedelta_str
