"""
Generate an elastic mapping from a python record type.

Leaf fields get the default elastic type for their python type (see esmapping.typemap) unless
the field's elastic tag gives a type. Record fields become nested fields, except for embedded
records whose fields are inlined in the enclosing record. The modifiers in the elastic tag are
applied to the generated field afterwards.

    class Dog(BaseModel):
        name: Annotated[str, es(",eager_global_ordinals")]
        unique_id: Annotated[str, es(",indexignore")]

    generate_mapping(Dog).to_dict()
    {'properties': {'name': {'type': 'keyword', 'eager_global_ordinals': True},
                    'unique_id': {'type': 'keyword', 'index': False}}}
"""

import logging
from typing import Any

from esmapping.config import get_settings
from esmapping.errors import (
    DuplicateFieldName,
    IncompatibleModifier,
    InvalidTypeOverride,
    ProgrammerMisuse,
    UnsupportedNativeKind,
)
from esmapping.introspect import extract_fields, is_primitive, is_record, unwrap
from esmapping.models import Mapping, PrimitiveType, is_primitive_type
from esmapping.tags import EsTag, Modifier
from esmapping.typemap import default_elastic_type


def _leaf_type(kind: Any, es_type: str | None, path: str) -> PrimitiveType:
    if es_type:
        if not is_primitive_type(es_type):
            raise InvalidTypeOverride(f"{es_type} is an invalid Elasticsearch type", path)
        return es_type  # type: ignore
    elastic_type = default_elastic_type(kind)
    if elastic_type is None:
        raise UnsupportedNativeKind(f"Cannot determine the Elasticsearch type for python type {kind!r}", path)
    return elastic_type


def _check_compatible(modifier: Modifier, mapping: Mapping, path: str) -> None:
    allowed = modifier.requires
    if allowed is not None and mapping.type not in allowed:
        raise IncompatibleModifier(
            f"{modifier.value} can only be set for {' and '.join(sorted(allowed))} fields, not for {mapping.type}",
            path,
        )


def _apply_modifiers(mapping: Mapping, tag: EsTag, path: str) -> Mapping:
    update: dict[str, Any] = {}
    if tag.has(Modifier.indexignore):
        update["index"] = False
    # epoch_second wins if both formats are given
    for modifier in (Modifier.epoch_second, Modifier.epoch_ms):
        if tag.has(modifier):
            _check_compatible(modifier, mapping, path)
            update["format"] = modifier.date_format
            break
    if tag.has(Modifier.eager_global_ordinals):
        _check_compatible(Modifier.eager_global_ordinals, mapping, path)
        update["eager_global_ordinals"] = True
    if not update:
        return mapping
    return mapping.model_copy(update=update)


def generate_mapping_recur(
    tp: Any, es_type: str | None = None, path: str = "", allow_name_collisions: bool = True
) -> Mapping:
    """
    Generate the mapping for a field of type tp. For leaf types, es_type (if given) overrides the
    default elastic type. Records always give a nested mapping.
    """
    kind = unwrap(tp)
    if is_primitive(kind):
        return Mapping(type=_leaf_type(kind, es_type, path))

    properties: dict[str, Mapping] = {}
    fields = extract_fields(kind)
    if not fields:
        logging.warning(f"{getattr(kind, '__name__', kind)} has no fields, its mapping will have no properties")
    for field in fields:
        name = field.external_name
        field_path = f"{path}.{name}" if path else name
        tag = field.es_tag or EsTag()
        inner = generate_mapping_recur(field.type, tag.type, field_path, allow_name_collisions)
        inner = _apply_modifiers(inner, tag, field_path)
        logging.debug(f"Field {field_path}: {inner.type}")
        if name in properties:
            if not allow_name_collisions:
                raise DuplicateFieldName(f"Field name {name} is used more than once", field_path)
            logging.warning(f"Field name {field_path} is used more than once, keeping the last definition")
        properties[name] = inner
    return Mapping(type="nested", properties=properties)


def generate_mapping(record: Any, *, allow_name_collisions: bool | None = None) -> Mapping:
    """
    Generate the elastic mapping for a record type (pydantic model, dataclass or TypedDict).
    Raises a MappingError subclass on the first field that cannot be mapped.
    """
    if not is_record(unwrap(record)):
        raise ProgrammerMisuse(
            f"Can only generate a mapping for a pydantic model, dataclass or TypedDict, not {record!r}"
        )
    if allow_name_collisions is None:
        allow_name_collisions = get_settings().allow_name_collisions
    mapping = generate_mapping_recur(record, allow_name_collisions=allow_name_collisions)
    # The root describes the whole document, so it has no type of its own
    return mapping.model_copy(update={"type": None})
