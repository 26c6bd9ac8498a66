from esmapping.errors import (
    DuplicateFieldName,
    IncompatibleModifier,
    InvalidTypeOverride,
    MappingError,
    ProgrammerMisuse,
    UnsupportedNativeKind,
)
from esmapping.index import index_settings
from esmapping.mapping import generate_mapping
from esmapping.models import Alias, Filter, IndexSettings, Mapping, ShardSettings
from esmapping.tags import Embedded, EsTag, Modifier, es
from esmapping.typemap import float32, float64, int8, int16, int32, int64

__all__ = [
    "Alias",
    "DuplicateFieldName",
    "Embedded",
    "EsTag",
    "Filter",
    "IncompatibleModifier",
    "IndexSettings",
    "InvalidTypeOverride",
    "Mapping",
    "MappingError",
    "Modifier",
    "ProgrammerMisuse",
    "ShardSettings",
    "UnsupportedNativeKind",
    "es",
    "float32",
    "float64",
    "generate_mapping",
    "index_settings",
    "int8",
    "int16",
    "int32",
    "int64",
]
