"""Declarative attribute schemas for resources and data sources."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Union

from .validations import ValidationError


class ValueType(enum.Enum):
    """Kinds of attribute value."""

    STRING = "string"
    INT = "int"
    BOOL = "bool"
    LIST = "list"
    SET = "set"


class SchemaError(ValueError):
    """Raised when a configuration does not fit its schema."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


@dataclass(frozen=True)
class Attribute:
    """One attribute of a schema."""

    type: ValueType
    required: bool = False
    optional: bool = False
    computed: bool = False
    default: Any = None
    description: str = ""
    elem: Union[ValueType, "ResourceSchema", None] = None
    validator: Optional[Callable[[Any], Any]] = None
    force_new: bool = False
    min_items: int = 0
    max_items: int = 0
    conflicts_with: tuple[str, ...] = ()

    @property
    def settable(self) -> bool:
        return self.required or self.optional


_SCALARS = {
    ValueType.STRING: lambda v: isinstance(v, str),
    ValueType.INT: lambda v: isinstance(v, int) and not isinstance(v, bool),
    ValueType.BOOL: lambda v: isinstance(v, bool),
}


@dataclass(frozen=True)
class ResourceSchema:
    """A set of named attributes with a description."""

    attributes: Mapping[str, Attribute] = field(default_factory=dict)
    description: str = ""

    def validate(self, config: Mapping[str, Any]) -> Mapping[str, Any]:
        """Check a configuration; return it, or raise SchemaError listing every problem."""
        errors: list[str] = []
        self._collect(config, "", errors)
        if errors:
            raise SchemaError(errors)
        return config

    def with_defaults(self, config: Mapping[str, Any]) -> dict[str, Any]:
        """Return a copy of the configuration with defaults filled in."""
        result = dict(config)
        for name, attr in self.attributes.items():
            if name not in result:
                if attr.default is not None:
                    result[name] = attr.default
            elif isinstance(attr.elem, ResourceSchema) and result[name] is not None:
                result[name] = [attr.elem.with_defaults(block) for block in result[name]]
        return result

    def _collect(self, config: Mapping[str, Any], prefix: str, errors: list[str]) -> None:
        for name in config:
            if name not in self.attributes:
                errors.append(f'{prefix}{name}: unsupported argument')
        for name, attr in self.attributes.items():
            path = f"{prefix}{name}"
            value = config.get(name)
            if value is None:
                if attr.required:
                    errors.append(f"{path}: required argument is missing")
                continue
            if not attr.settable:
                errors.append(f"{path}: value is computed and cannot be set")
                continue
            for other in attr.conflicts_with:
                if config.get(other) is not None:
                    errors.append(f'{path}: conflicts with "{other}"')
            _check_value(attr, value, path, errors)


def _check_scalar(kind: ValueType, validator, value: Any, path: str, errors: list[str]) -> None:
    if not _SCALARS[kind](value):
        errors.append(f"{path}: expected {kind.value}")
        return
    if validator is not None:
        try:
            validator(value)
        except ValidationError as exc:
            errors.extend(f"{path}: {message}" for message in exc.messages)


def _check_value(attr: Attribute, value: Any, path: str, errors: list[str]) -> None:
    if attr.type in _SCALARS:
        _check_scalar(attr.type, attr.validator, value, path, errors)
        return
    if not isinstance(value, (list, tuple, set, frozenset)):
        errors.append(f"{path}: expected {attr.type.value}")
        return
    items = list(value)
    if attr.min_items and len(items) < attr.min_items:
        errors.append(f"{path}: at least {attr.min_items} items required, got {len(items)}")
    if attr.max_items and len(items) > attr.max_items:
        errors.append(f"{path}: at most {attr.max_items} items allowed, got {len(items)}")
    for index, item in enumerate(items):
        item_path = f"{path}.{index}"
        if isinstance(attr.elem, ResourceSchema):
            if not isinstance(item, Mapping):
                errors.append(f"{item_path}: expected a block")
            else:
                attr.elem._collect(item, f"{item_path}.", errors)
        elif isinstance(attr.elem, ValueType):
            _check_scalar(attr.elem, attr.validator, item, item_path, errors)