from typing import Any

from esmapping.config import get_settings
from esmapping.mapping import generate_mapping
from esmapping.models import Alias, Filter, IndexSettings


def index_settings(
    record: Any,
    shards: int | None = None,
    replicas: int | None = None,
    aliases: dict[str, dict[str, Any] | None] | None = None,
) -> IndexSettings:
    """
    Create the settings (body of a create index request) for an index of the given record type.
    aliases maps an alias name to an optional term filter, e.g. {"recent": {"year": 2024}}.
    Shards and replicas default to the configured values.
    """
    settings = get_settings()
    result = IndexSettings(mappings=generate_mapping(record))
    if shards is None:
        shards = settings.number_of_shards
    if shards is not None:
        result.set_shards(shards)
    if replicas is None:
        replicas = settings.number_of_replicas
    if replicas is not None:
        result.set_replicas(replicas)
    if aliases:
        result.aliases = {
            name: Alias(filter=Filter(term=term) if term else None) for name, term in aliases.items()
        }
    return result
