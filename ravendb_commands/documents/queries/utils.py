import hashlib
import json
from typing import Dict, Optional


class HashCalculator:
    def __init__(self):
        self.__buffer = []

    @property
    def hash(self) -> str:
        return self.flush_md5()

    def write(self, obj: object):
        if obj is None:
            self.__buffer.append("null-object")
        elif isinstance(obj, (bool, int, float, str)):
            self.__buffer.append(str(obj))
        elif isinstance(obj, (bytes, bytearray)):
            self.__buffer.append(obj.hex())
        elif isinstance(obj, (list, tuple, dict)):
            self.__buffer.append(json.dumps(obj, sort_keys=True, default=str))
        else:
            self.__buffer.append(str(obj))

    def write_parameters(self, qp: Optional[Dict[str, object]]) -> None:
        if qp is None:
            self.write("null-params")
        else:
            self.write(len(qp))
            for key, value in qp.items():
                self.write(key)
                self.write(value)

    def flush_md5(self) -> str:
        md5 = hashlib.md5()
        for item in self.__buffer:
            md5.update(item.encode("utf-8"))
            md5.update(b"\x00")
        return md5.hexdigest()
