from functools import lru_cache

import bcrypt

from config import ApplicationConfig

# bcrypt only looks at the first 72 bytes; newer releases refuse longer input
_BCRYPT_MAX_BYTES = 72


def _peppered(password: str) -> bytes:
    # The password is cut, never the pepper
    pepper = ApplicationConfig.PASSWORD_PEPPER.encode("utf-8")[:_BCRYPT_MAX_BYTES]
    room = _BCRYPT_MAX_BYTES - len(pepper)
    return password.encode("utf-8")[:room] + pepper


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> bytes:
    return bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))


def hash_password(password: str) -> str:
    """Return a bcrypt hash of the peppered password."""
    return bcrypt.hashpw(
        _peppered(password), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    ).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_peppered(password), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def burn_password_check(password: str) -> None:
    """
    Spend one bcrypt comparison with no user behind it, so an unknown
    username takes as long to reject as a wrong password.
    """
    bcrypt.checkpw(_peppered(password), _dummy_hash(ApplicationConfig.BCRYPT_ROUNDS))
