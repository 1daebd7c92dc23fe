import logging
import subprocess

from pogo_icons import convert


def test_convert_invokes_trim(monkeypatch, tmp_path):
    seen = {}

    def fake_run(cmd, check):
        seen["cmd"] = cmd
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr(convert.subprocess, "run", fake_run)
    assert convert.convert_image(tmp_path / "a.png", tmp_path / "b.png")
    assert seen["cmd"] == ["convert", "-trim", "-fuzz", "1%", str(tmp_path / "a.png"), str(tmp_path / "b.png")]


def test_nonzero_exit_is_a_failure(monkeypatch, tmp_path, caplog):
    monkeypatch.setattr(convert.subprocess, "run", lambda cmd, check: subprocess.CompletedProcess(cmd, 1))
    with caplog.at_level(logging.ERROR):
        assert not convert.convert_image(tmp_path / "a.png", tmp_path / "b.png")
    assert "exited with 1" in caplog.text


def test_missing_binary_is_a_failure(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert not convert.convert_image(tmp_path / "a.png", tmp_path / "b.png", convert_bin="no-such-convert-binary")
    assert "Failed to convert" in caplog.text


def test_copy_image(tmp_path):
    (tmp_path / "a.png").write_bytes(b"png")
    convert.copy_image(tmp_path / "a.png", tmp_path / "b.png")
    assert (tmp_path / "b.png").read_bytes() == b"png"
