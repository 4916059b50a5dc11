"""Reading and writing the persisted fields of a module."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Type, Union

from .exceptions import ConfigTypeError

logger = logging.getLogger(__name__)

_JSON_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
    type(None): "null",
}


def json_type_name(value: Any) -> str:
    """Name of the JSON type of a decoded value."""
    return _JSON_NAMES.get(type(value), type(value).__name__)


@dataclass
class PersistedField:
    """One entry of a module's persistence schema.

    Args:
        name: Key in the module's JSON object
        type: Expected JSON-decoded type (or tuple of types) of the stored value
        getter: Reads the current value from the module (defaults to ``attr``)
        setter: Writes a value to the module (defaults to ``attr``)
        attr: Attribute backing the field, when it differs from ``name``
        nullable: Whether ``null`` is an accepted stored value
        encode: Converts the runtime value to its JSON form
        decode: Converts the JSON form back to the runtime value
    """
    name: str
    type: Union[Type, Tuple[Type, ...]]
    getter: Optional[Callable[[Any], Any]] = None
    setter: Optional[Callable[[Any, Any], None]] = None
    attr: Optional[str] = None
    nullable: bool = False
    encode: Optional[Callable[[Any], Any]] = None
    decode: Optional[Callable[[Any], Any]] = None

    @property
    def types(self) -> Tuple[Type, ...]:
        return self.type if isinstance(self.type, tuple) else (self.type,)

    def get(self, module) -> Any:
        if self.getter is not None:
            return self.getter(module)
        return getattr(module, self.attr or self.name)

    def set(self, module, value: Any):
        if self.setter is not None:
            self.setter(module, value)
        else:
            setattr(module, self.attr or self.name, value)

    def check(self, value: Any) -> Any:
        """Validate a stored value against the declared type.

        Returns the value, with ints widened for float fields.
        Raises ConfigTypeError on mismatch.
        """
        types = self.types

        if value is None:
            if self.nullable:
                return None
        elif isinstance(value, bool):
            # bool is an int subclass; only bool fields take it
            if bool in types:
                return value
        elif isinstance(value, int) and int not in types and float in types:
            return float(value)
        elif isinstance(value, types):
            return value

        expected = " or ".join(sorted({_JSON_NAMES.get(t, t.__name__) for t in types}))
        raise ConfigTypeError(
            f"Field {self.name!r} expects {expected}, got {json_type_name(value)}"
        )


def apply_config(module, data: Dict[str, Any], fields: Iterable[PersistedField]):
    """
    Apply a persisted JSON object to a module.

    Fields are applied in schema order. Keys missing from ``data`` leave the
    field at its default. A value of the wrong type raises ConfigTypeError;
    fields applied before it keep their new values.

    Args:
        module: Module receiving the configuration
        data: Decoded JSON object for this module
        fields: The module's persistence schema
    """
    module_id = getattr(module, "id", type(module).__name__)

    if not isinstance(data, dict):
        raise ConfigTypeError(
            f"Configuration for {module_id} must be an object, got {json_type_name(data)}"
        )

    known = set()
    for field in fields:
        known.add(field.name)
        if field.name not in data:
            continue

        try:
            value = field.check(data[field.name])
            if value is not None and field.decode is not None:
                value = field.decode(value)
        except (TypeError, ValueError) as e:
            raise ConfigTypeError(f"Could not configure {module_id}: {e}") from e

        field.set(module, value)

    unknown = [key for key in data if key not in known]
    if unknown:
        logger.debug(f"Ignoring unknown keys for {module_id}: {unknown}")


def dump_config(module, fields: Iterable[PersistedField]) -> Dict[str, Any]:
    """Serialize the persisted fields of a module to a JSON object."""
    result = {}
    for field in fields:
        value = field.get(module)
        if value is not None and field.encode is not None:
            value = field.encode(value)
        result[field.name] = value
    return result
