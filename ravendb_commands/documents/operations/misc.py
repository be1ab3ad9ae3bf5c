import datetime


class QueryOperationOptions(object):
    """
    :param allow_stale: Indicates whether operations are allowed on stale indexes.
    :param stale_timeout: If allow_stale is False and the index is stale, the maximum time to wait
        for it to become non-stale. None means fail immediately.
    :param max_ops_per_sec: Limits the amount of base operations per second allowed.
    :param retrieve_details: Whether the server returns details about each affected document.
    """

    def __init__(
        self,
        allow_stale: bool = True,
        stale_timeout: datetime.timedelta = None,
        max_ops_per_sec: int = None,
        retrieve_details: bool = False,
    ):
        self.allow_stale = allow_stale
        self.stale_timeout = stale_timeout
        self.retrieve_details = retrieve_details
        self.max_ops_per_sec = max_ops_per_sec
