"""
Adapter: Common password list repository.

Answers whether a password appears on a list of common passwords.
The list is built in and can be extended from a newline-delimited
file (one password per line, '#' starts a comment line).
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from passcheck.domain.password.errors import PasswordListUnavailableError
from passcheck.domain.password.ports import CompromisedPasswordRepository

logger = logging.getLogger(__name__)

BUILTIN_COMMON_PASSWORDS = frozenset(
    {
        "123456",
        "12345678",
        "123456789",
        "1234567890",
        "password",
        "password1",
        "password123",
        "passw0rd",
        "p@ssw0rd",
        "p@ssw0rd1",
        "qwerty",
        "qwerty123",
        "qwertyuiop",
        "abc123",
        "admin",
        "admin123",
        "letmein",
        "letmein1!",
        "welcome",
        "welcome1",
        "welcome123!",
        "iloveyou",
        "monkey",
        "dragon",
        "football",
        "baseball",
        "sunshine",
        "princess",
        "trustno1",
        "changeme",
        "secret",
        "111111",
        "000000",
    }
)


def _normalize(password: str) -> str:
    return password.strip().casefold()


def _read_password_file(path: Path) -> set[str]:
    """Read passwords from a newline-delimited file.

    Raises:
        PasswordListUnavailableError: If the file cannot be read.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PasswordListUnavailableError(str(path)) from exc

    entries: set[str] = set()
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        entries.add(_normalize(stripped))
    return entries


class CommonPasswordListRepository(CompromisedPasswordRepository):
    """In-memory repository of common passwords.

    Lookups are case-insensitive. The list is loaded once at construction.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        passwords: Optional[Iterable[str]] = None,
    ) -> None:
        entries = {_normalize(p) for p in BUILTIN_COMMON_PASSWORDS}
        if passwords is not None:
            entries.update(_normalize(p) for p in passwords)
        if path:
            loaded = _read_password_file(Path(path))
            logger.info("Loaded %d common passwords from %s", len(loaded), path)
            entries.update(loaded)
        self._passwords = frozenset(entries)

    def __len__(self) -> int:
        return len(self._passwords)

    def contains(self, password: str) -> bool:
        return _normalize(password) in self._passwords
