import pytest
from pydantic import ValidationError

from esmapping import IndexSettings, Mapping, index_settings
from esmapping.models import Alias, Filter, is_primitive_type
from tests.records import Dog, MyStruct


def test_primitive_types():
    for t in ["boolean", "byte", "short", "integer", "long", "float", "double", "keyword", "text", "date", "ip"]:
        assert is_primitive_type(t)
    for t in ["nested", "object", "geo_point", "completion", ""]:
        assert not is_primitive_type(t)


def test_to_dict_leaves_out_unset():
    assert Mapping(type="keyword").to_dict() == {"type": "keyword"}
    assert Mapping(type="keyword", index=False).to_dict() == {"type": "keyword", "index": False}
    assert Mapping(type="date", format="epoch_second").to_dict() == {"type": "date", "format": "epoch_second"}
    assert Mapping().to_dict() == {}


def test_mapping_is_frozen():
    m = Mapping(type="keyword")
    with pytest.raises(ValidationError):
        m.type = "text"  # type: ignore


def test_invalid_mappings():
    """Documents that break the mapping invariants are rejected when parsed"""
    with pytest.raises(ValidationError):
        Mapping.model_validate({"type": "geo_point"})
    with pytest.raises(ValidationError):
        Mapping.model_validate({"type": "keyword", "properties": {"x": {"type": "text"}}})
    with pytest.raises(ValidationError):
        Mapping.model_validate({"type": "integer", "format": "epoch_second"})
    with pytest.raises(ValidationError):
        Mapping.model_validate({"type": "date", "eager_global_ordinals": True})
    # these are fine
    Mapping.model_validate({"type": "text", "eager_global_ordinals": True, "index": False})
    Mapping.model_validate({"properties": {"x": {"type": "nested", "properties": {}}}})


def test_round_trip_keeps_set_fields_only():
    doc = {
        "properties": {
            "name": {"type": "keyword", "eager_global_ordinals": True},
            "ts": {"type": "date", "format": "epoch_millis", "index": False},
            "sub": {"type": "nested", "properties": {"x": {"type": "ip"}}},
        }
    }
    assert Mapping.model_validate(doc).to_dict() == doc


def test_set_shards_replicas():
    settings = IndexSettings()
    assert settings.to_dict() == {"settings": {}}
    settings.set_shards(3)
    settings.set_replicas(0)
    assert settings.to_dict() == {"settings": {"number_of_shards": 3, "number_of_replicas": 0}}
    with pytest.raises(ValueError):
        settings.set_shards(0)
    with pytest.raises(ValueError):
        settings.set_replicas(-1)
    # settings are not shared between instances
    assert IndexSettings().settings.number_of_shards is None


def test_index_settings():
    body = index_settings(Dog, shards=2, aliases={"dogs": None, "rex": {"name": "rex"}}).to_dict()
    assert body == {
        "aliases": {"dogs": {}, "rex": {"filter": {"term": {"name": "rex"}}}},
        "mappings": {
            "properties": {
                "name": {"type": "keyword", "eager_global_ordinals": True},
                "unique_id": {"type": "keyword", "index": False},
            }
        },
        "settings": {"number_of_shards": 2},
    }


def test_index_settings_defaults(settings, monkeypatch):
    monkeypatch.setattr(settings, "number_of_shards", 5)
    monkeypatch.setattr(settings, "number_of_replicas", 1)
    result = index_settings(MyStruct)
    assert result.settings.number_of_shards == 5
    assert result.settings.number_of_replicas == 1
    assert result.aliases is None
    # explicit values win
    assert index_settings(MyStruct, shards=1, replicas=0).settings.model_dump() == dict(
        number_of_shards=1, number_of_replicas=0
    )


def test_alias_models():
    assert Alias(filter=Filter(term={"year": 2024})).to_dict() == {"filter": {"term": {"year": 2024}}}
    assert Alias().to_dict() == {}
