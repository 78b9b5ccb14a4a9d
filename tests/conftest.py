import pytest

RFC_SECRET_SHA1 = b"12345678901234567890"
RFC_SECRET_SHA256 = b"12345678901234567890123456789012"
RFC_SECRET_SHA512 = b"1234567890" * 6 + b"1234"

# Base32 of RFC_SECRET_SHA1
RFC_SECRET_B32 = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


@pytest.fixture
def rfc_secret() -> bytes:
    return RFC_SECRET_SHA1


@pytest.fixture
def client():
    from otpgen_server import create_app

    app = create_app({"TESTING": True})
    return app.test_client()
