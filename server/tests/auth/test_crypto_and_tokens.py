# server/tests/auth/test_crypto_and_tokens.py
import importlib


def test_password_hash_and_verify(monkeypatch):
    # S'assurer que les imports se font après config éventuelle
    from portfolio_cms.core.security import hash_password, verify_password

    h = hash_password("secret123")
    assert h != "secret123"
    assert verify_password("secret123", h)
    assert not verify_password("wrong", h)


def test_verify_password_without_hash():
    from portfolio_cms.core.security import verify_password

    assert not verify_password("secret123", None)
    assert not verify_password("secret123", "not-a-bcrypt-hash")


def test_jwt_create_and_decode(monkeypatch):
    # Fixer le secret AVANT d'importer le module qui le lit
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    import portfolio_cms.core.security as sec
    importlib.reload(sec)

    token = sec.create_access_token({"sub": "user-id-1"})
    data = sec.decode_token(token)
    assert data["sub"] == "user-id-1"
    assert data["exp"] > data["iat"]


def test_jwt_expiry(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    import portfolio_cms.core.security as sec
    importlib.reload(sec)

    token = sec.create_access_token({"sub": "u"}, expires_seconds=-5)
    assert sec.decode_token(token) is None


def test_jwt_wrong_secret_is_rejected(monkeypatch):
    import jwt

    monkeypatch.setenv("JWT_SECRET", "test-secret")
    import portfolio_cms.core.security as sec
    importlib.reload(sec)

    forged = jwt.encode({"sub": "u"}, "another-secret", algorithm="HS256")
    assert sec.decode_token(forged) is None
    assert sec.decode_token("garbage") is None


def test_cookie_kwargs_are_httponly():
    from portfolio_cms.core.security import cookie_kwargs

    kw = cookie_kwargs(60)
    assert kw["max_age"] == 60
    assert kw["httponly"] is True
    assert kw["samesite"] == "lax"
    assert kw["path"] == "/"
