import secrets
from typing import Callable

# Fournit un identifiant opaque et unique à chaque appel
IdGenerator = Callable[[], str]


def random_hex_id() -> str:
    """128 bits aléatoires encodés en hexadécimal (32 caractères)."""
    return secrets.token_hex(16)
