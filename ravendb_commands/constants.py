int_max = 0x7FFFFFF
json_serialize_method_name = "to_json"

# Summed length of raw ids above which a multi-document load is sent as POST.
MAX_IDS_LENGTH_FOR_GET_URL = 1024


class Documents:
    class Metadata:
        METADATA = "@metadata"


class Database:
    ID_PREFIX = "Raven/Databases/"
    DATA_DIR_SETTING = "Raven/DataDir"
    NAME_PATTERN = r"[A-Za-z0-9_\-\.]+"


class Headers:
    IF_MATCH = "If-Match"
    CONTENT_TYPE = "Content-Type"
    CLIENT_VERSION = "Raven-Client-Version"
