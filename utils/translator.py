""" Translation lookup over a JSON catalog """
from typing import Any, Dict

from utils.file_loader import load_json_file


class Translator:
    """Resolves dotted keys such as ``firefly.today`` in a nested catalog.

    Unknown keys translate to themselves.
    """

    def __init__(self, catalog: Dict[str, Any]):
        self.catalog = catalog

    @classmethod
    def from_file(cls, path: str) -> "Translator":
        return cls(load_json_file(path, "translations"))

    def translate(self, key: str) -> str:
        node = self.catalog
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return key
            node = node[part]
        return node if isinstance(node, str) else key
