import json

from click.testing import CliRunner

from gfshare.cli import main


def _split(runner, secret_file, out_dir, *extra):
    return runner.invoke(main, ["split", str(secret_file), "-o", str(out_dir), *extra])


def test_split_and_join_round_trip(tmp_path):
    secret_file = tmp_path / "key.bin"
    secret_file.write_bytes(b"\x00\x01 launch codes \xff")
    out_dir = tmp_path / "parts"
    runner = CliRunner()

    result = _split(runner, secret_file, out_dir, "-n", "5", "-k", "3")
    assert result.exit_code == 0, result.output
    parts = sorted(out_dir.iterdir())
    assert [p.name for p in parts] == [f"key.bin.{i:03d}" for i in range(1, 6)]

    recovered = tmp_path / "recovered.bin"
    chosen = [str(parts[0]), str(parts[2]), str(parts[4])]
    result = runner.invoke(main, ["join", *chosen, "-k", "3", "-o", str(recovered)])
    assert result.exit_code == 0, result.output
    assert recovered.read_bytes() == secret_file.read_bytes()


def test_split_uses_policy_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("GFSHARE_PARTS", "4")
    monkeypatch.setenv("GFSHARE_THRESHOLD", "2")
    secret_file = tmp_path / "s"
    secret_file.write_bytes(b"abc")

    result = _split(CliRunner(), secret_file, tmp_path / "out")
    assert result.exit_code == 0, result.output
    assert len(list((tmp_path / "out").iterdir())) == 4


def test_join_below_threshold_fails(tmp_path):
    secret_file = tmp_path / "s"
    secret_file.write_bytes(b"abc")
    runner = CliRunner()
    _split(runner, secret_file, tmp_path, "-n", "5", "-k", "3")

    result = runner.invoke(
        main,
        ["join", str(tmp_path / "s.001"), str(tmp_path / "s.002"), "-k", "3", "-o", str(tmp_path / "r")],
    )
    assert result.exit_code != 0
    assert "Not enough parts provided" in result.output
    assert not (tmp_path / "r").exists()


def test_invalid_configuration_is_reported(tmp_path):
    secret_file = tmp_path / "s"
    secret_file.write_bytes(b"abc")

    result = _split(CliRunner(), secret_file, tmp_path, "-n", "256", "-k", "3")
    assert result.exit_code != 0
    assert "255" in result.output


def test_join_rejects_unnumbered_part(tmp_path):
    stray = tmp_path / "part.txt"
    stray.write_bytes(b"x")

    result = CliRunner().invoke(main, ["join", str(stray), "-o", str(tmp_path / "r")])
    assert result.exit_code != 0
    assert "numeric part suffix" in result.output


def test_audit_records_written(tmp_path):
    secret_file = tmp_path / "s"
    secret_file.write_bytes(b"abc")
    audit_dir = tmp_path / "audit"

    result = CliRunner().invoke(
        main,
        ["--audit-dir", str(audit_dir), "split", str(secret_file), "-o", str(tmp_path / "out")],
    )
    assert result.exit_code == 0, result.output
    records = sorted(audit_dir.glob("audit_*.json"))
    assert len(records) == 1
    payload = json.loads(records[0].read_text())["payload"]
    assert payload["event"] == "split"
    assert payload["details"] == {"parts": 5, "threshold": 3, "length": 3}
