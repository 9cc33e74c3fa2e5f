import pytest
from debugdrills.models import EmailVerdict
from debugdrills.validator import classify_email, validate_email


@pytest.mark.parametrize(
    "email, expected",
    [
        (None, EmailVerdict.INVALID_EMPTY),
        ("", EmailVerdict.INVALID_EMPTY),
        ("user@example.com", EmailVerdict.VALID),
        ("@", EmailVerdict.VALID),
        ("user.example.com", EmailVerdict.INVALID_NO_AT_SIGN),
        (" ", EmailVerdict.INVALID_NO_AT_SIGN),
    ],
)
def test_classify_email(email, expected):
    assert classify_email(email) is expected


def test_validate_null_email_prints_and_does_not_raise(capsys):
    verdict = validate_email(None)
    assert verdict is EmailVerdict.INVALID_EMPTY
    assert capsys.readouterr().out == "Email is invalid (null or empty)\n"


def test_validate_email_prints_verdict(capsys):
    validate_email("a@b")
    validate_email("ab")
    assert capsys.readouterr().out.splitlines() == ["Email is valid", "Email is invalid"]
