from fastapi.testclient import TestClient

from webui.app import app

client = TestClient(app)


def _f(name, body):
    return (name, body.encode("utf-8"), "text/plain")


def test_settings_endpoint():
    r = client.get("/api/settings")
    assert r.status_code == 200
    assert r.json()["projection"]["separator"] == "="


def test_diff_endpoint_tabular():
    files = [
        ("left", _f("a.properties", "a=1\nb=2\n")),
        ("right", _f("b.properties", "b=2\nc=3\n")),
    ]
    r = client.post("/api/diff", files=files, data={"mode": "tabular"})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert [row["key"] for row in body["rows"]] == ["a", "c"]
    assert body["text"].startswith("|left|right|")


def test_diff_endpoint_overlays_in_order():
    files = [
        ("left", _f("base.properties", "a=1\n")),
        ("left", _f("over.yaml", "a: 2\n")),
        ("right", _f("right.properties", "a=2\n")),
    ]
    r = client.post("/api/diff", files=files, data={"include": "true"})
    assert r.status_code == 200
    body = r.json()
    assert body["summary"]["differences"] == 0
    assert [row["tag"] for row in body["rows"]] == ["equal"]


def test_diff_endpoint_reads_unknown_suffix_as_properties():
    files = [("left", _f("a.txt", "a=1\n")), ("right", _f("b.properties", "a=2\n"))]
    r = client.post("/api/diff", files=files)
    assert r.status_code == 200
    body = r.json()
    assert [(row["tag"], row["key"]) for row in body["rows"]] == [("change", "a")]


def test_diff_endpoint_bad_source_is_422():
    files = [("left", _f("a.yaml", "a: [1,\n")), ("right", _f("b.properties", "a=1\n"))]
    r = client.post("/api/diff", files=files)
    assert r.status_code == 422
