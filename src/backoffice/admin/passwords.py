"""Password hashing for staff accounts.

Hashes use pbkdf2_sha256, a pure-Python scheme, so no native backend is
needed. Hashes made with older round counts are flagged for rehashing.
"""

from passlib.context import CryptContext

password_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return password_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return password_context.verify(password, password_hash)


def needs_rehash(password_hash: str) -> bool:
    return password_context.needs_update(password_hash)
