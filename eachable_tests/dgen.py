'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from eachable import generate, Enumerable
from typing import Any, Dict, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        elif provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        else:
            raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # build the record field by field so refs can see earlier siblings
            generated_obj = {}
            for k, v in schema.items():
                merged_context = {**current_context, **generated_obj}
                generated_obj[k] = self.create(v, merged_context)
            return generated_obj

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

    def records(self) -> Enumerable:
        """an unbounded enumerable of generated records"""
        return generate(lambda: self._generator.create(self._schema))

    def take(self, count: int) -> list:
        """the next count records; stops the unbounded source early"""
        return self.records().take(count)


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
