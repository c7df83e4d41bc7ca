import dataclasses

import pytest

from confdiff.errors import SourceLoadError
from confdiff.io.config_loader import load_source, merge_sources, parse_properties, split_sources


def test_split_sources_trims_and_drops_empty():
    assert split_sources(" a.properties, ,b.yaml,") == ["a.properties", "b.yaml"]
    assert split_sources("") == []


def test_parse_properties_separators_and_comments():
    text = "# comment\n! other comment\na=1\nb : 2\nc 3\nd=\n  e = spaced value  \n"
    m = parse_properties(text)
    assert m == {"a": "1", "b": "2", "c": "3", "d": "", "e": "spaced value  "}


def test_parse_properties_continuation_and_escapes():
    text = (
        "long=one,\\\n"
        "    two\n"
        "tab=a\\tb\n"
        "uni=\\u00e9\n"
        "key\\ with\\ space=x\n"
        "path=C:\\\\\n"
    )
    m = parse_properties(text)
    assert m["long"] == "one,two"
    assert m["tab"] == "a\tb"
    assert m["uni"] == "\u00e9"
    assert m["key with space"] == "x"
    assert m["path"] == "C:\\"


def test_parse_properties_later_duplicate_wins():
    assert parse_properties("a=1\na=2\n") == {"a": "2"}


def test_load_yaml_is_flattened(tmp_path):
    p = tmp_path / "app.yaml"
    p.write_text("server:\n  port: 8080\n  tls:\n    enabled: true\nhosts: [a, b]\nempty:\n")
    assert load_source(str(p)) == {
        "server.port": "8080",
        "server.tls.enabled": "true",
        "hosts": "a,b",
        "empty": "",
    }


def test_load_empty_yaml(tmp_path):
    p = tmp_path / "empty.yml"
    p.write_text("")
    assert load_source(str(p)) == {}


def test_load_json_ini_xml(tmp_path):
    j = tmp_path / "a.json"
    j.write_text('{"a": {"b": 1}, "c": null}')
    assert load_source(str(j)) == {"a.b": "1", "c": ""}

    i = tmp_path / "a.ini"
    i.write_text("[DEFAULT]\nx = 1\n[db]\nhost = h\n")
    assert load_source(str(i)) == {"DEFAULT.x": "1", "db.host": "h"}

    x = tmp_path / "a.xml"
    x.write_text('<config><db host="h"><port>5432</port></db></config>')
    assert load_source(str(x)) == {"db[@host]": "h", "db.port": "5432"}


def test_unknown_suffix_reads_as_properties(tmp_path):
    p = tmp_path / "app.conf"
    p.write_text("a=1\n")
    assert load_source(str(p)) == {"a": "1"}


def test_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_source(str(tmp_path / "nope.properties"))


def test_unparsable_source_raises(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("a: [1, 2\n")
    with pytest.raises(SourceLoadError) as ei:
        load_source(str(p))
    assert ei.value.path == str(p)

    j = tmp_path / "bad.json"
    j.write_text("{nope")
    with pytest.raises(SourceLoadError):
        load_source(str(j))


def test_merge_sources_later_overlay_wins(tmp_path):
    base = tmp_path / "base.properties"
    base.write_text("a=1\nb=2\n")
    over = tmp_path / "override.yaml"
    over.write_text("b: 3\nc: x\n")
    store = merge_sources([str(base), str(over)])
    assert dict(store) == {"a": "1", "b": "3", "c": "x"}
    assert store.sources == (str(base), str(over))


def test_merged_store_is_immutable(tmp_path):
    p = tmp_path / "a.properties"
    p.write_text("a=1\n")
    store = merge_sources([str(p)])
    with pytest.raises(TypeError):
        store.data["b"] = "2"
    with pytest.raises(dataclasses.FrozenInstanceError):
        store.data = {}


def test_merge_no_sources_gives_empty_store():
    store = merge_sources([])
    assert len(store) == 0


def test_parse_properties_surrogate_pair_escape():
    m = parse_properties("smile=\\uD83D\\uDE00\n")
    assert m["smile"] == "\U0001F600"


@pytest.mark.parametrize("text", ["a=\\u12\n", "a=\\u+1_2\n", "a=\\uD83D\n"])
def test_parse_properties_rejects_bad_unicode_escapes(text):
    with pytest.raises(ValueError):
        parse_properties(text)


def test_bad_unicode_escape_is_a_load_error(tmp_path):
    p = tmp_path / "bad.properties"
    p.write_text("a=\\u12zz\n")
    with pytest.raises(SourceLoadError):
        load_source(str(p))


def test_non_utf8_source_is_a_load_error(tmp_path):
    p = tmp_path / "latin1.properties"
    p.write_bytes(b"a=\xff\n")
    with pytest.raises(SourceLoadError) as ei:
        load_source(str(p))
    assert ei.value.path == str(p)
