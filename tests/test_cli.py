import pytest

from schnorr_sponge.cli import main, run_basic, run_musig


def test_run_basic_reports_success(capsys):
    assert run_basic() is True
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Signed message: 11082015",
        "Signature verification passed: true",
    ]


def test_run_musig_reports_success(capsys):
    assert run_musig() is True
    assert capsys.readouterr().out.splitlines() == ["MuSig signature is valid: true"]


def test_main_basic_only(capsys):
    assert main(["basic"]) == 0
    out = capsys.readouterr().out
    assert "Signed message: 11082015" in out
    assert "MuSig" not in out


def test_main_defaults_to_all(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Signature verification passed: true" in out
    assert "MuSig signature is valid: true" in out


def test_main_rejects_unknown_demo():
    with pytest.raises(SystemExit) as excinfo:
        main(["bogus"])
    assert excinfo.value.code == 2