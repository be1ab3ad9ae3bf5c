from __future__ import annotations

import datetime
from typing import Dict, Optional, Union

from ravendb_commands import constants
from ravendb_commands.documents.queries.utils import HashCalculator
from ravendb_commands.tools.utils import Utils


class Parameters(dict):
    def __init__(self, m: Optional[Union[Parameters, Dict[str, object]]] = None):
        super().__init__(m or {})


class IndexQuery:
    def __init__(self, query: Optional[str] = None, query_parameters: Optional[Dict[str, object]] = None):
        self.__page_size = constants.int_max
        self.__page_size_set = False
        self.query = query
        self.query_parameters: Optional[Parameters] = (
            Parameters(query_parameters) if query_parameters is not None else None
        )
        self.start: Optional[int] = None
        self.wait_for_non_stale_results: Optional[bool] = None
        self.wait_for_non_stale_results_timeout: Optional[datetime.timedelta] = None
        self.skip_duplicate_checking: Optional[bool] = None
        self.disable_caching: Optional[bool] = None

    def __str__(self):
        return self.query

    @property
    def is_page_size_set(self) -> bool:
        return self.__page_size_set

    @property
    def page_size(self) -> int:
        return self.__page_size

    @page_size.setter
    def page_size(self, page_size: int):
        self.__page_size = page_size
        self.__page_size_set = True

    @property
    def query_hash(self) -> str:
        hasher = HashCalculator()
        hasher.write(self.query)
        hasher.write(self.wait_for_non_stale_results)
        hasher.write(self.skip_duplicate_checking)
        hasher.write(
            (self.wait_for_non_stale_results_timeout.total_seconds() * 1000)
            if self.wait_for_non_stale_results_timeout
            else 0
        )
        hasher.write(self.start)
        hasher.write(self.__page_size)
        hasher.write_parameters(self.query_parameters)
        return hasher.hash

    def to_json(self) -> dict:
        json_dict = {"Query": self.query}
        if self.__page_size_set and self.__page_size >= 0:
            json_dict["PageSize"] = self.__page_size
        if self.start:
            json_dict["Start"] = self.start
        if self.query_parameters is not None:
            json_dict["QueryParameters"] = dict(self.query_parameters)
        if self.wait_for_non_stale_results:
            json_dict["WaitForNonStaleResults"] = True
        if self.wait_for_non_stale_results_timeout is not None:
            json_dict["WaitForNonStaleResultsTimeout"] = Utils.timedelta_to_str(
                self.wait_for_non_stale_results_timeout
            )
        if self.skip_duplicate_checking:
            json_dict["SkipDuplicateChecking"] = True
        if self.disable_caching:
            json_dict["DisableCaching"] = True
        return json_dict
