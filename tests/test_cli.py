from __future__ import annotations

import pytest

from otpgen.otp_cli import SECRET_ENV, main

from .conftest import RFC_SECRET_B32


def test_hotp_prints_code(capsys) -> None:
    assert main(["hotp", "--secret", RFC_SECRET_B32, "--counter", "9"]) == 0
    out = capsys.readouterr().out
    assert "HOTP(counter=9): 520489" in out


def test_hotp_reads_secret_from_environment(monkeypatch, capsys) -> None:
    monkeypatch.setenv(SECRET_ENV, RFC_SECRET_B32)
    assert main(["hotp", "--counter", "0"]) == 0
    assert "755224" in capsys.readouterr().out


def test_hotp_verbose_never_prints_secret(capsys) -> None:
    assert main(["hotp", "--secret", RFC_SECRET_B32, "--counter", "1", "--verbose"]) == 0
    out = capsys.readouterr().out
    assert "[+] HOTP: HMAC-SHA1" in out
    assert RFC_SECRET_B32 not in out


def test_totp_at_fixed_time(capsys) -> None:
    assert main(["totp", "--secret", RFC_SECRET_B32, "--digits", "8", "--time", "59"]) == 0
    out = capsys.readouterr().out
    assert "TOTP: 94287082" in out
    assert "valid ~ 1s" in out


def test_totp_negative_time_is_an_error(capsys) -> None:
    assert main(["totp", "--secret", RFC_SECRET_B32, "--time", "-5"]) == 1
    assert "[!]" in capsys.readouterr().err


def test_totp_zero_period_is_an_error(capsys) -> None:
    assert main(["totp", "--secret", RFC_SECRET_B32, "--time", "5", "--period", "0"]) == 1
    assert "Period" in capsys.readouterr().err


def test_hotp_ten_digits_is_an_error(capsys) -> None:
    assert main(["hotp", "--secret", RFC_SECRET_B32, "--counter", "0", "--digits", "10"]) == 1
    assert "Digits" in capsys.readouterr().err


def test_missing_secret_is_an_error(monkeypatch, capsys) -> None:
    monkeypatch.delenv(SECRET_ENV, raising=False)
    assert main(["hotp", "--counter", "0"]) == 1
    assert SECRET_ENV in capsys.readouterr().err


def test_validate_subcommand(capsys) -> None:
    assert main(["validate", "--period", "30", "--digits", "6"]) == 0
    assert capsys.readouterr().out.strip() == "valid"
    assert main(["validate", "--counter", "0", "--digits", "9"]) == 1
    assert capsys.readouterr().out.strip() == "invalid"
    assert main(["validate", "--period", "301"]) == 1


def test_unknown_algorithm_is_rejected_by_parser() -> None:
    with pytest.raises(SystemExit):
        main(["hotp", "--secret", RFC_SECRET_B32, "--counter", "0", "--algorithm", "md5"])


def test_no_command_prints_hint(capsys) -> None:
    assert main([]) == 0
    assert "-h" in capsys.readouterr().out
