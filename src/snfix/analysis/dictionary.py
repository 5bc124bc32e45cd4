"""ServiceNow API dictionary used as the source of valid names.

The dictionary maps context keys (class names and global objects such as
``gs`` or ``g_form``) to the method names valid on them, and keeps a flattened
union of every method as the fallback when no context can be inferred.
"""

from dataclasses import dataclass, field
from functools import lru_cache
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
BUNDLED_DICTIONARY = DATA_DIR / "servicenow_dictionary.json"


@dataclass(frozen=True)
class ApiDictionary:
    """Immutable set of valid class names, global objects and methods.

    Attributes:
        class_names: Known class names (``GlideRecord``, ``GlideAjax``, ...)
        global_objects: Always-available global names (``gs``, ``current``, ...)
        context_methods: Context key -> ordered method names valid on it
        all_methods: Ordered union of every method name (fallback dictionary)
    """

    class_names: tuple[str, ...]
    global_objects: tuple[str, ...]
    context_methods: Mapping[str, tuple[str, ...]]
    all_methods: tuple[str, ...]
    _class_set: frozenset[str] = field(init=False, repr=False, compare=False)
    _method_sets: Mapping[str, frozenset[str]] = field(init=False, repr=False, compare=False)
    _all_method_set: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        context_methods = MappingProxyType(
            {key: tuple(methods) for key, methods in self.context_methods.items()}
        )
        all_method_set = frozenset(self.all_methods)

        for key, methods in context_methods.items():
            missing = set(methods) - all_method_set
            if missing:
                raise ValueError(
                    f"Methods of context '{key}' missing from all_methods: {sorted(missing)}"
                )

        object.__setattr__(self, "class_names", tuple(self.class_names))
        object.__setattr__(self, "global_objects", tuple(self.global_objects))
        object.__setattr__(self, "context_methods", context_methods)
        object.__setattr__(self, "all_methods", tuple(self.all_methods))
        object.__setattr__(self, "_class_set", frozenset(self.class_names))
        object.__setattr__(
            self,
            "_method_sets",
            MappingProxyType({key: frozenset(m) for key, m in context_methods.items()}),
        )
        object.__setattr__(self, "_all_method_set", all_method_set)

    @classmethod
    def from_mapping(
        cls,
        class_names: list[str] | tuple[str, ...],
        context_methods: Mapping[str, list[str] | tuple[str, ...]],
        global_objects: list[str] | tuple[str, ...] = (),
        extra_methods: list[str] | tuple[str, ...] = (),
    ) -> "ApiDictionary":
        """Build a dictionary, deriving all_methods from the context method lists.

        Args:
            class_names: Known class names
            context_methods: Context key -> method names
            global_objects: Global object names
            extra_methods: Methods valid somewhere but not bound to a context

        Returns:
            ApiDictionary whose all_methods is the ordered union of every list
        """
        all_methods: dict[str, None] = {}
        for methods in context_methods.values():
            all_methods.update(dict.fromkeys(methods))
        all_methods.update(dict.fromkeys(extra_methods))

        return cls(
            class_names=tuple(dict.fromkeys(class_names)),
            global_objects=tuple(dict.fromkeys(global_objects)),
            context_methods={k: tuple(dict.fromkeys(v)) for k, v in context_methods.items()},
            all_methods=tuple(all_methods),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApiDictionary":
        """Create from the JSON data file layout.

        Expected keys: ``class_names``, ``global_objects``, ``method_sets``
        (set name -> methods) and ``contexts`` (context key -> set name).

        Raises:
            ValueError: If a required key is missing or a context refers to an
                unknown method set.
        """
        missing_keys = {"class_names", "method_sets", "contexts"} - set(data)
        if missing_keys:
            raise ValueError(f"Dictionary data missing keys: {sorted(missing_keys)}")

        method_sets: dict[str, list[str]] = data["method_sets"]
        context_methods = {}
        for context, set_name in data["contexts"].items():
            if set_name not in method_sets:
                raise ValueError(f"Context '{context}' refers to unknown method set '{set_name}'")
            context_methods[context] = method_sets[set_name]

        # Sets not bound to any context still belong to the fallback dictionary
        extra_methods = [m for methods in method_sets.values() for m in methods]

        return cls.from_mapping(
            class_names=data["class_names"],
            context_methods=context_methods,
            global_objects=data.get("global_objects", []),
            extra_methods=extra_methods,
        )

    def is_class(self, name: str) -> bool:
        return name in self._class_set

    def has_context(self, key: str | None) -> bool:
        return key is not None and key in self._method_sets

    def methods_for(self, context: str | None) -> tuple[str, ...]:
        """Method dictionary for a context, or the flattened fallback."""
        if self.has_context(context):
            return self.context_methods[context]
        return self.all_methods

    def is_valid_method(self, method: str, context: str | None = None) -> bool:
        if self.has_context(context):
            return method in self._method_sets[context]
        return method in self._all_method_set


def load_dictionary(path: Path | None = None) -> ApiDictionary:
    """Load an API dictionary from JSON.

    Args:
        path: Dictionary file. If None, the bundled ServiceNow dictionary is used.

    Returns:
        ApiDictionary instance

    Raises:
        FileNotFoundError: If path does not exist
        ValueError: If the file content is not a valid dictionary
    """
    if path is None:
        path = BUNDLED_DICTIONARY
    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {path}")

    text = path.read_text(encoding="utf-8")
    source = path.name

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid dictionary JSON in {source}: {e}") from e

    dictionary = ApiDictionary.from_dict(data)
    logger.debug(
        f"Loaded dictionary from {source}: {len(dictionary.class_names)} classes, "
        f"{len(dictionary.context_methods)} contexts, {len(dictionary.all_methods)} methods"
    )
    return dictionary


@lru_cache(maxsize=1)
def default_dictionary() -> ApiDictionary:
    """Return the bundled ServiceNow dictionary (loaded once per process)."""
    return load_dictionary()
