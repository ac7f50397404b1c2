"""Tests du script `aura-generate`."""

from __future__ import annotations

import base64

from aura_backend.client.controller import AuraViewModel
from aura_backend.scripts import generate_aura


def test_invalid_birth_date_exits_2(capsys):
    assert generate_aura.main(["--birth-date", "04/07/2000"]) == 2
    assert "Invalid birth date" in capsys.readouterr().err


def test_missing_photo_file_exits_2(tmp_path, capsys):
    missing = tmp_path / "nope.jpg"
    assert generate_aura.main(["--birth-date", "2000-07-04", "--photo", str(missing)]) == 2
    assert "Photo not found" in capsys.readouterr().err


def test_missing_photo_argument_fails_without_network(monkeypatch, capsys):
    def _no_network(*args, **kwargs):
        raise AssertionError("network must not be used")

    monkeypatch.setattr(generate_aura.BackendClient, "upload_photo", _no_network)
    assert generate_aura.main(["--birth-date", "2000-07-04"]) == 1
    assert "Please upload your photo first!" in capsys.readouterr().err


def test_save_data_uri(tmp_path):
    out = tmp_path / "aura.webp"
    generate_aura.save_data_uri("data:image/webp;base64," + base64.b64encode(b"xyz").decode(), out)
    assert out.read_bytes() == b"xyz"


def test_render_to_terminal(capsys):
    generate_aura.render_to_terminal(
        AuraViewModel(result_visible=True, zodiac_text="Leo", description="desc")
    )
    out = capsys.readouterr().out
    assert "Zodiac: Leo" in out and "desc" in out
