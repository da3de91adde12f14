from fastapi.testclient import TestClient
from path_validator.main import app

client = TestClient(app)

def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

def test_current_os():
    r = client.get("/os")
    assert r.status_code == 200
    assert r.json()["os"] in ("windows", "posix")

def test_validate_reports_errors():
    r = client.post("/validate", json={"path": "../path/to/file?.txt", "options": {"os": "windows"}})
    assert r.status_code == 200

    data = r.json()
    assert data["is_valid"] is False
    assert data["normalized_path"] is None
    assert [e["code"] for e in data["errors"]] == ["TRAVERSAL", "ILLEGAL_CHAR"]
    assert data["errors"][1]["position"] == 15

def test_validate_accepts_camel_case_options():
    r = client.post("/validate", json={"path": "relative/path", "options": {"os": "posix", "allowRelative": False}})
    assert r.status_code == 200
    assert r.json()["errors"][0]["code"] == "RELATIVE_NOT_ALLOWED"

def test_validate_valid_path():
    r = client.post("/validate", json={"path": "Path\\To\\File.txt", "options": {"os": "windows"}})
    assert r.status_code == 200

    data = r.json()
    assert data["is_valid"] is True
    assert data["errors"] is None
    assert data["normalized_path"] == "path/to/file.txt"

def test_validate_empty_path_is_not_an_http_error():
    r = client.post("/validate", json={"path": ""})
    assert r.status_code == 200
    assert [e["code"] for e in r.json()["errors"]] == ["EMPTY_PATH"]

def test_validate_rejects_unknown_os():
    r = client.post("/validate", json={"path": "a", "options": {"os": "amiga"}})
    assert r.status_code == 422

def test_normalize():
    r = client.post("/normalize", json={"path": "path/to/dir/", "options": {"os": "posix", "remove_trailing_slash": False}})
    assert r.status_code == 200
    assert r.json() == {"path": "path/to/dir/"}

def test_sanitize():
    r = client.post("/sanitize", json={"path": "path/to/<file>:*.txt", "os": "windows"})
    assert r.status_code == 200
    assert r.json() == {"path": "path/to/file.txt"}

def test_join():
    r = client.post("/join", json={"segments": ["path", "", "file.txt"], "os": "posix"})
    assert r.json() == {"path": "path/file.txt"}

    r = client.post("/join", json={"segments": []})
    assert r.json() == {"path": "."}

def test_relative():
    r = client.post("/relative", json={"from_path": "/path/to/dir", "to_path": "/path/file.txt", "os": "posix"})
    assert r.status_code == 200
    assert r.json() == {"path": "../../file.txt"}

def test_traversal():
    r = client.post("/traversal", json={"path": "path/./to/../../../file.txt"})
    assert r.json() == {"path": "path/./to/../../../file.txt", "traversal": True}

    r = client.post("/traversal", json={"path": "./path/to/file.txt"})
    assert r.json()["traversal"] is False
