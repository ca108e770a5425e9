from __future__ import annotations

from pathlib import Path

import pytest

from rcli.process.http_serve import create_app


@pytest.fixture
def client(tmp_path: Path):
    (tmp_path / "hello.txt").write_text("[package]\nname = 'rcli'\n", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "inner.txt").write_text("inner", encoding="utf-8")
    (tmp_path / "blob.bin").write_bytes(b"\xff\xfe\x00")
    app = create_app(tmp_path)
    app.config["TESTING"] = True
    return app.test_client()


def test_file_handler_returns_file_text(client):
    response = client.get("/hello.txt")
    assert response.status_code == 200
    assert response.get_data(as_text=True).startswith("[package]")


def test_file_handler_lists_directories(client):
    response = client.get("/sub")
    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert '<a href="/sub/inner.txt">inner.txt</a>' in body

    root = client.get("/").get_data(as_text=True)
    assert "hello.txt" in root and "sub" in root


def test_file_handler_missing_file(client):
    response = client.get("/nope.txt")
    assert response.status_code == 404
    assert "not found" in response.get_data(as_text=True)


def test_file_handler_rejects_escape(client):
    response = client.get("/sub/../../etc/passwd")
    assert response.status_code == 404


def test_file_handler_undecodable_file_is_server_error(client):
    response = client.get("/blob.bin")
    assert response.status_code == 500


def test_tower_serves_raw_files(client):
    response = client.get("/tower/blob.bin")
    assert response.status_code == 200
    assert response.data == b"\xff\xfe\x00"
    assert client.get("/tower/missing.bin").status_code == 404
