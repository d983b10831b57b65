'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

schema-driven record generation for the lazyseq tests.
'''

import numpy as np
from faker import Faker
from lazyseq import LazySequence
from typing import Any, Dict, Iterator, Optional


class Generator:
    """schema interpreter. one instance per pass, so a seeded pass is reproducible."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)
        self._counters: Dict[str, int] = {}

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            value = context[key]
            if "format" in config:
                return config["format"].format(value)
            return value

        elif provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "sequence":
            # a running counter shared by every record of this pass
            name = config.get("name", "_qen_sequence")
            self._counters[name] = self._counters.get(name, config.get("start", 0) - 1) + 1
            return self._counters[name]

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        else:
            raise ValueError(f"unknown _qen_provider: '{provider}'")

    def records(self, schema: Any, count: int) -> Iterator[Any]:
        """yield `count` records, one at a time."""
        self._counters = {}
        for _ in range(count):
            yield self.create(schema)

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # build the record key by key so refs can see earlier siblings
            generated_obj = {}
            for k, v in schema.items():
                merged_context = {**current_context, **generated_obj}
                generated_obj[k] = self.create(v, merged_context)
            return generated_obj

        if isinstance(schema, list):
            if not schema: return []
            item_schema = schema[0]
            count = self._get_count(item_schema)
            actual_item_schema = item_schema.get('_qen_items', item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual_item_schema, current_context) for _ in range(count)]

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    def _get_count(self, item_schema: Any) -> int:
        count = 5 # default count
        if isinstance(item_schema, dict) and "_qen_count" in item_schema:
            count_config = item_schema["_qen_count"]
            if isinstance(count_config, int):
                count = count_config
            elif isinstance(count_config, (list, tuple)) and len(count_config) == 2:
                low, high = count_config
                count = int(self._rng.integers(low, high, endpoint=True))
        return count


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._seed = seed

    def take(self, count: int) -> LazySequence:
        """
        a sequence of `count` generated records. nothing is generated until it
        is iterated; with a seed, every iteration regenerates the same records.
        """
        def data_func():
            return Generator(self._seed).records(self._schema, count)

        return LazySequence(data_func)


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
