"""
Field annotations ("tags") that steer mapping generation.

Each field has two annotation channels, both comma-separated strings:
- The name tag (pydantic alias, or the "json" key in dataclass field metadata): the first value is the
  external name of the field, anything after it (e.g. "omitempty") is ignored here.
- The elastic tag (an `es(...)` marker in `Annotated`, or the "es" key in the field metadata):
  the first value is an optional elastic type, the rest are modifier flags, e.g. "text,indexignore"
  or ",eager_global_ordinals".
"""

from dataclasses import dataclass
from enum import Enum

from class_doc import extract_docs_from_cls_obj


class Modifier(str, Enum):
    #: do not make this field searchable (index: false)
    indexignore = "indexignore"

    #: date field stored as seconds since the epoch
    epoch_second = "epoch_second"

    #: date field stored as milliseconds since the epoch
    epoch_ms = "epoch_ms"

    #: build global ordinals at refresh time to speed up terms aggregations
    eager_global_ordinals = "eager_global_ordinals"

    @property
    def requires(self) -> frozenset[str] | None:
        """Elastic types this modifier can be used on, or None if it can be used on any type"""
        return _MODIFIER_REQUIRES.get(self)

    @property
    def date_format(self) -> str | None:
        """Elastic date format set by this modifier, if any"""
        return _MODIFIER_FORMATS.get(self)


for field, doc in extract_docs_from_cls_obj(Modifier).items():
    Modifier[field].__doc__ = "\n".join(doc)

_MODIFIER_REQUIRES = {
    Modifier.epoch_second: frozenset({"date"}),
    Modifier.epoch_ms: frozenset({"date"}),
    Modifier.eager_global_ordinals: frozenset({"keyword", "text"}),
}
_MODIFIER_FORMATS = {
    Modifier.epoch_second: "epoch_second",
    Modifier.epoch_ms: "epoch_millis",
}


class Embedded:
    """
    Marker for a record-typed field whose fields should be inlined in the enclosing record,
    e.g. `meta: Annotated[Meta, Embedded]`
    """


def get_tag_values(tag: str | None) -> list[str]:
    """Split a tag into its comma-separated values"""
    if not tag:
        return []
    return tag.split(",")


def external_name(tag: str | None) -> str:
    """The external name from a name tag (e.g. "fee,omitempty" -> "fee"), or "" if not given"""
    values = get_tag_values(tag)
    if values:
        return values[0]
    return ""


def schema_override(tag: str | None) -> tuple[str | None, set[str]]:
    """
    Split an elastic tag into the type override and the modifier flags.
    With multiple values the first is the type, which may be empty (",indexignore")
    """
    values = get_tag_values(tag)
    if not values:
        return None, set()
    if len(values) == 1:
        return values[0], set()
    return values[0], set(values[1:])


@dataclass(frozen=True)
class EsTag:
    """Parsed elastic tag: the elastic type override (if any) and the modifiers to apply"""

    type: str | None = None
    modifiers: frozenset[Modifier] = frozenset()
    # unknown flags are kept but have no effect
    extra: frozenset[str] = frozenset()

    @classmethod
    def parse(cls, tag: str | None) -> "EsTag":
        es_type, flags = schema_override(tag)
        known = {m.value for m in Modifier}
        return cls(
            type=es_type or None,
            modifiers=frozenset(Modifier(flag) for flag in flags if flag in known),
            extra=frozenset(flag for flag in flags if flag not in known),
        )

    def has(self, modifier: Modifier) -> bool:
        return modifier in self.modifiers


def es(tag: str) -> EsTag:
    """Elastic tag for use in Annotated, e.g. `title: Annotated[str, es("text")]`"""
    return EsTag.parse(tag)
