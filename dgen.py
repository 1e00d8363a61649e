r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

schema-driven fixture records for the loqy test suites.
'''

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import numpy as np
from faker import Faker

from loqy import from_iterable, Enumerable

# fixed anchor so generated timestamps are reproducible for a given seed
_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_provider"]
        if provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        if provider == "timestamp":
            # minutes after the fixed epoch, within [0, span_minutes)
            offset = int(self._rng.integers(0, config.get("span_minutes", 60 * 24 * 30)))
            return _EPOCH + timedelta(minutes=offset)

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_provider" in schema:
                return self._resolve_provider(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    """
    records built from a schema: faker provider names ('word'), (provider, kwargs)
    tuples, {'_provider': ...} dicts (choice, timestamp, literal) and nested dicts.
    """
    return _SchemaProvider(schema, seed)
