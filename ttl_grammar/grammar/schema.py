import json
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator

from ttl_grammar.errors import GrammarSchemaError

_SCHEMA_CACHE: dict[str, dict[str, Any]] = {}

DEFAULT_SCHEMA_PATH = Path(__file__).resolve().parent / "schema.json"


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


class GrammarSchemaRepository:
    def __init__(self, schema_path: Path = DEFAULT_SCHEMA_PATH) -> None:
        self.schema_path = schema_path
        self._validator: Draft7Validator | None = None

    def load_schema(self) -> dict[str, Any]:
        key = str(self.schema_path.resolve())
        cached = _SCHEMA_CACHE.get(key)
        if cached is not None:
            return cached
        schema = json.loads(self.schema_path.read_text(encoding="utf-8"))
        _SCHEMA_CACHE[key] = schema
        return schema

    @property
    def validator(self) -> Draft7Validator:
        if self._validator is None:
            self._validator = Draft7Validator(self.load_schema())
        return self._validator

    def validate(self, payload: dict[str, Any]) -> None:
        error = next(iter(self.validator.iter_errors(payload)), None)
        if error is not None:
            raise GrammarSchemaError(format_schema_error(error))
