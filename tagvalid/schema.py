"""Field descriptors — the static shape the struct walker operates on.

A "struct" is a pydantic model instance or a dataclass instance. Rule tags are
attached per field in one of three ways:

    class Account(BaseModel):
        email: Annotated[str, Rules("required|email")] = ""
        code: str = Field("", json_schema_extra={"valid": "alpha_num"})

    @dataclass
    class Address:
        zip: str = field(default="", metadata={"valid": "required"})

Descriptors are derived once per class and cached; they are read-only afterwards.
"""

import dataclasses
import re
import typing
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional

from pydantic import BaseModel

from tagvalid.config import get_settings
from tagvalid.models import RuleSet
from tagvalid.parser import is_skip_tag, parse_rules


@dataclass(frozen=True)
class Rules:
    """Annotated marker carrying a field's rule tag.

    Args:
        tag: Pipe-delimited rules, e.g. ``"required|range:1,140"``. ``"-"`` skips the field.
        inline: Flatten the nested struct's fields into the parent path
            instead of nesting them under this field's name.
    """

    tag: str = ""
    inline: bool = False


@dataclass(frozen=True)
class FieldDescriptor:
    """Everything the walker needs to know about one field."""

    name: str              # attribute name
    segment: str           # path segment (lowercase words joined by "_")
    tag: Optional[str]     # raw tag, None when the field carries none
    rules: RuleSet
    skip: bool             # tag is "-"
    inline: bool
    composite: bool        # annotation names a struct or a collection of structs


_ACRONYM_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_RE = re.compile(r"([a-z0-9])([A-Z])")


def to_segment(name: str) -> str:
    """``SlicesPtr`` → ``slices_ptr``; snake_case names pass through unchanged."""
    s = _ACRONYM_RE.sub(r"\1_\2", name)
    s = _WORD_RE.sub(r"\1_\2", s)
    return s.lower()


def is_struct_type(tp: Any) -> bool:
    return isinstance(tp, type) and (issubclass(tp, BaseModel) or dataclasses.is_dataclass(tp))


def is_struct(value: Any) -> bool:
    """A model/dataclass instance (not the class itself)."""
    if isinstance(value, type):
        return False
    return isinstance(value, BaseModel) or dataclasses.is_dataclass(value)


def _names_struct(annotation: Any) -> bool:
    """True for ``Model``, ``Optional[Model]``, ``list[Model]``, ``tuple[Model, ...]`` and friends."""
    if is_struct_type(annotation):
        return True
    origin = typing.get_origin(annotation)
    if origin is typing.Annotated:
        return _names_struct(typing.get_args(annotation)[0])
    if origin is None:
        return False
    return any(_names_struct(arg) for arg in typing.get_args(annotation) if arg is not Ellipsis)


def _marker(metadata: typing.Iterable[Any]) -> Optional[Rules]:
    for item in metadata:
        if isinstance(item, Rules):
            return item
    return None


def _annotated_metadata(annotation: Any) -> tuple:
    if typing.get_origin(annotation) is typing.Annotated:
        return tuple(annotation.__metadata__)
    return ()


def _describe(name: str, tag: Optional[str], inline: bool, annotation: Any) -> FieldDescriptor:
    return FieldDescriptor(
        name=name,
        segment=to_segment(name),
        tag=tag,
        rules=parse_rules(tag) if tag is not None else (),
        skip=tag is not None and is_skip_tag(tag),
        inline=inline,
        composite=_names_struct(annotation),
    )


def _model_fields(cls: type[BaseModel], tag_key: str) -> list[FieldDescriptor]:
    descriptors = []
    for name, info in cls.model_fields.items():
        marker = _marker(info.metadata)
        tag = marker.tag if marker else None
        if tag is None and isinstance(info.json_schema_extra, dict):
            extra = info.json_schema_extra.get(tag_key)
            tag = extra if isinstance(extra, str) else None
        descriptors.append(_describe(name, tag, bool(marker and marker.inline), info.annotation))
    return descriptors


def _dataclass_fields(cls: type, tag_key: str) -> list[FieldDescriptor]:
    try:
        hints = typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        # Unresolvable forward references; fall back to the raw annotations.
        hints = {}

    descriptors = []
    for f in dataclasses.fields(cls):
        annotation = hints.get(f.name, f.type)
        marker = _marker(_annotated_metadata(annotation))
        tag = marker.tag if marker else f.metadata.get(tag_key)
        descriptors.append(_describe(f.name, tag, bool(marker and marker.inline), annotation))
    return descriptors


@lru_cache(maxsize=None)
def describe(cls: type) -> tuple[FieldDescriptor, ...]:
    """Field descriptors of a struct class, in declaration order."""
    tag_key = get_settings().VALIDATION_TAG_KEY
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return tuple(_model_fields(cls, tag_key))
    if dataclasses.is_dataclass(cls):
        return tuple(_dataclass_fields(cls, tag_key))
    raise TypeError(f"{cls!r} is neither a pydantic model nor a dataclass")
