from qrpayload.cli import main


def test_encode_then_decode(capsys):
    assert main(["encode", "--version", "1", "--mode", "alphanumeric", "AC-42"]) == 0
    hexed = capsys.readouterr().out.strip()
    assert len(bytes.fromhex(hexed)) == 6
    assert main(["decode", hexed, "--hex", "--version", "1"]) == 0
    assert capsys.readouterr().out.strip() == "AC-42"


def test_info_prints_segments(capsys, tmp_path):
    main(["encode", "--version", "1", "--mode", "numeric", "8675309"])
    p = tmp_path / "payload.bin"
    p.write_bytes(bytes.fromhex(capsys.readouterr().out.strip()))
    assert main(["info", str(p), "--version", "1"]) == 0
    out = capsys.readouterr().out
    assert '"text": "8675309"' in out
    assert '"mode": "NUMERIC"' in out


def test_decode_error_exit_status(capsys):
    # numeric mode indicator with a truncated count field
    assert main(["decode", "10", "--hex", "--version", "1"]) == 1
    assert "error:" in capsys.readouterr().err


def test_encode_rejects_bad_input(capsys):
    assert main(["encode", "--version", "1", "--mode", "numeric", "12a"]) == 1
    assert "not numeric" in capsys.readouterr().err


def test_no_subcommand():
    assert main([]) == 2


def test_missing_input_file(capsys, tmp_path):
    assert main(["decode", str(tmp_path / "absent.bin"), "--version", "1"]) == 1
    assert "error:" in capsys.readouterr().err
