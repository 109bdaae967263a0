"""
Password hashing and session tokens.

Passwords are stored as pbkdf2_sha256 hashes through passlib.
Session tokens are itsdangerous signed payloads carrying the
account id and email plus a timestamp; the signature and the
age are checked on every request. There is no server-side
revocation: a token is valid until it expires.
"""

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

SESSION_SALT = "expense-tracker.session"


class InvalidToken(Exception):
    """The token is malformed, tampered with or expired."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str | None) -> bool:
    """
    Check a password against a stored hash in constant time.

    When there is no stored hash (unknown account) a dummy
    verification still runs, so the caller's response time does
    not reveal whether the email exists.
    """
    if not password_hash:
        pwd_context.dummy_verify()
        return False
    return pwd_context.verify(password, password_hash)


def _serializer(secret_key: str) -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(secret_key, salt=SESSION_SALT)


def create_session_token(secret_key: str, account_id: int, email: str) -> str:
    return _serializer(secret_key).dumps({"id": account_id, "email": email})


def read_session_token(secret_key: str, token: str, max_age: int) -> dict:
    """Return the token's claims, or raise InvalidToken."""
    try:
        claims = _serializer(secret_key).loads(token, max_age=max_age)
    except SignatureExpired:
        raise InvalidToken("expired")
    except BadSignature:
        raise InvalidToken("invalid")

    if not isinstance(claims, dict) or not isinstance(claims.get("id"), int):
        raise InvalidToken("invalid")
    return claims
