from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing_extensions import Self

######################## ELASTIC TYPES #########################

PrimitiveType = Literal[
    "boolean",
    "byte",
    "short",
    "integer",
    "long",
    "float",
    "double",
    "keyword",
    "text",
    "date",
    "ip",
]
ElasticType = PrimitiveType | Literal["nested"]

PRIMITIVE_TYPES: frozenset[str] = frozenset(get_args(PrimitiveType))


def is_primitive_type(name: str) -> bool:
    """Is this the name of an elastic type that is not an object?"""
    return name in PRIMITIVE_TYPES


class ElasticModel(BaseModel):
    def to_dict(self) -> dict[str, Any]:
        """Elastic body for this object. Fields that are not set are left out"""
        return self.model_dump(mode="json", exclude_none=True)


######################## MAPPING #########################


class Mapping(ElasticModel):
    """
    A single node of an elastic mapping: either a leaf field, a nested object, or the root of the mapping
    (which has properties but no type).
    """

    model_config = ConfigDict(frozen=True)

    type: ElasticType | None = None
    properties: dict[str, "Mapping"] | None = Field(
        default=None, description="Maps the field name to its mapping settings"
    )
    index: bool | None = Field(default=None, description="Should this field be searchable?")
    format: str | None = Field(default=None, description="Date format, only valid for date fields")
    eager_global_ordinals: bool | None = Field(
        default=None, description="Increase search speed for terms aggregations (keyword and text fields)"
    )

    @model_validator(mode="after")
    def validate_type(self) -> Self:
        if self.properties is not None and self.type not in (None, "nested"):
            raise ValueError(f"Field of type {self.type} cannot have properties")
        if self.format is not None and self.type != "date":
            raise ValueError(f"format can only be set for date fields, not {self.type}")
        if self.eager_global_ordinals is not None and self.type not in ("keyword", "text"):
            raise ValueError(f"eager_global_ordinals can only be set for keyword and text fields, not {self.type}")
        return self


######################## INDEX SETTINGS #########################


class Filter(ElasticModel):
    """Filter for an alias. Term maps field names to the value they should have"""

    term: dict[str, Any] = {}


class Alias(ElasticModel):
    filter: Filter | None = None


class ShardSettings(ElasticModel):
    number_of_shards: int | None = None
    number_of_replicas: int | None = None


class IndexSettings(ElasticModel):
    """Body for creating an index: aliases, mapping and shard settings"""

    aliases: dict[str, Alias] | None = None
    mappings: Mapping | None = None
    settings: ShardSettings = Field(default_factory=ShardSettings)

    def set_shards(self, number_of_shards: int) -> None:
        if number_of_shards < 1:
            raise ValueError(f"An index needs at least one shard, not {number_of_shards}")
        self.settings.number_of_shards = number_of_shards

    def set_replicas(self, number_of_replicas: int) -> None:
        if number_of_replicas < 0:
            raise ValueError(f"Number of replicas cannot be negative ({number_of_replicas})")
        self.settings.number_of_replicas = number_of_replicas
