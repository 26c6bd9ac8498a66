"""
Looking into python record types: which types are records, what is the element type of a
(list, optional, annotated) field, and which fields does a record have.

Records are pydantic models, dataclasses and TypedDicts. Everything else is a leaf.
"""

import dataclasses
import types
from collections import abc
from dataclasses import dataclass
from typing import Annotated, Any, Iterator, Union, get_args, get_origin, get_type_hints

from pydantic import BaseModel
from typing_extensions import NotRequired, Required, is_typeddict

from esmapping.errors import ProgrammerMisuse
from esmapping.tags import Embedded, EsTag, external_name

# Elastic has no array type: a field holding a collection of X is mapped as X
_COLLECTION_ORIGINS = {
    list,
    set,
    frozenset,
    abc.Collection,
    abc.Iterable,
    abc.Sequence,
    abc.MutableSequence,
    abc.Set,
    abc.MutableSet,
}


@dataclass(frozen=True)
class FieldDescriptor:
    """A field of a record, as found by extract_fields"""

    name: str
    type: Any
    json_tag: str | None = None
    es_tag: EsTag | None = None
    embedded: bool = False

    @property
    def external_name(self) -> str:
        return external_name(self.json_tag) or self.name


def _peel(tp: Any) -> tuple[Any, list[Any]]:
    """Unwrap tp, and collect the Annotated metadata found along the way"""
    metadata: list[Any] = []
    while True:
        origin = get_origin(tp)
        args = get_args(tp)
        if origin is Annotated:
            tp = args[0]
            metadata.extend(args[1:])
        elif origin is Required or origin is NotRequired:
            tp = args[0]
        elif origin is Union or origin is types.UnionType:
            # Optional[X] is a reference to an X, other unions are left alone
            members = [arg for arg in args if arg is not type(None)]
            if len(members) != 1:
                break
            tp = members[0]
        elif origin is tuple:
            if len(args) == 2 and args[1] is Ellipsis:
                tp = args[0]
            elif args and all(arg == args[0] for arg in args):
                tp = args[0]
            else:
                break
        elif origin in _COLLECTION_ORIGINS and args:
            tp = args[0]
        else:
            break
    return tp, metadata


def unwrap(tp: Any) -> Any:
    """Strip optional, collection and Annotated wrappers to get the element type, e.g. list[int] | None -> int"""
    return _peel(tp)[0]


def is_record(tp: Any) -> bool:
    if not isinstance(tp, type):
        return False
    return issubclass(tp, BaseModel) or dataclasses.is_dataclass(tp) or is_typeddict(tp)


def is_primitive(tp: Any) -> bool:
    """Is the (unwrapped) type a leaf, i.e. not a record?"""
    return not is_record(unwrap(tp))


def _declared_fields(record: type) -> Iterator[FieldDescriptor]:
    if issubclass(record, BaseModel):
        for name, info in record.model_fields.items():
            tags: dict[str, Any] = {}
            if isinstance(info.json_schema_extra, dict):
                tags.update(info.json_schema_extra)
            if alias := (info.serialization_alias or info.alias):
                tags["json"] = alias
            yield _describe(name, info.annotation, tags, list(info.metadata))
    elif dataclasses.is_dataclass(record):
        hints = get_type_hints(record, include_extras=True)
        for field in dataclasses.fields(record):
            yield _describe(field.name, hints.get(field.name, field.type), dict(field.metadata), [])
    else:
        for name, annotation in get_type_hints(record, include_extras=True).items():
            yield _describe(name, annotation, {}, [])


def _describe(name: str, annotation: Any, tags: dict[str, Any], metadata: list[Any]) -> FieldDescriptor:
    element, found = _peel(annotation)
    found = metadata + found
    es_tag = next((m for m in found if isinstance(m, EsTag)), None)
    if es_tag is None and tags.get("es") is not None:
        es_tag = EsTag.parse(tags["es"])
    embedded = bool(tags.get("embed")) or any(m is Embedded or isinstance(m, Embedded) for m in found)
    return FieldDescriptor(name=name, type=element, json_tag=tags.get("json"), es_tag=es_tag, embedded=embedded)


def _extract_fields(tp: Any, fields: list[FieldDescriptor]) -> None:
    """Add the fields of record type tp to `fields`, inlining the fields of embedded records"""
    if fields is None:
        raise ProgrammerMisuse(f"No list given to collect the fields of {getattr(tp, '__name__', tp)}")
    record = unwrap(tp)
    if not is_record(record):
        return
    for field in _declared_fields(record):
        if field.embedded and is_record(field.type):
            _extract_fields(field.type, fields)
        else:
            fields.append(field)


def extract_fields(tp: Any) -> list[FieldDescriptor]:
    """
    List the fields of a record type in declaration order.
    Fields of embedded records (and of base classes) are inlined at their position, depth first.
    Returns an empty list if tp is not a record.
    """
    fields: list[FieldDescriptor] = []
    _extract_fields(tp, fields)
    return fields
