import json

import pytest

from esmapping.__main__ import load_record, main
from tests.records import Article


def test_load_record():
    assert load_record("tests.records:Article") is Article
    with pytest.raises(ValueError):
        load_record("tests.records")
    with pytest.raises(AttributeError):
        load_record("tests.records:DoesNotExist")


def test_mapping(capsys):
    main(["mapping", "tests.records:MyStruct"])
    out = json.loads(capsys.readouterr().out)
    assert out == {
        "properties": {
            "foo": {"type": "integer"},
            "inner": {"type": "nested", "properties": {"bar": {"type": "text"}}},
        }
    }


def test_mapping_indent(capsys):
    main(["mapping", "tests.records:Dog", "--indent", "0"])
    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert json.loads(out)["properties"]["unique_id"] == {"type": "keyword", "index": False}


def test_index_settings(capsys):
    main(["index-settings", "tests.records:Dog", "-s", "1", "-r", "0", "-a", "dogs", "-a", "pets"])
    out = json.loads(capsys.readouterr().out)
    assert out["settings"] == {"number_of_shards": 1, "number_of_replicas": 0}
    assert out["aliases"] == {"dogs": {}, "pets": {}}
    assert set(out["mappings"]["properties"]) == {"name", "unique_id"}


def test_errors_exit(capsys):
    with pytest.raises(SystemExit) as e:
        main(["mapping", "tests.records:Article.title"])
    assert e.value.code == 1
    with pytest.raises(SystemExit) as e:
        main(["mapping", "no_such_module_anywhere:Thing"])
    assert e.value.code == 1
    with pytest.raises(SystemExit) as e:
        main(["index-settings", "tests.records:Dog", "--shards", "0"])
    assert e.value.code == 1


def test_config(capsys):
    main(["config"])
    out = capsys.readouterr().out
    assert "ESMAPPING_JSON_INDENT=2" in out
    assert "#ESMAPPING_NUMBER_OF_SHARDS=" in out
