"""
Password strength policy value object.

Pure rules with no IO. The policy reports which rules a password
breaks; deciding what to do about it is up to the caller.
"""

from dataclasses import dataclass

DEFAULT_SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{}|;:,.<>?/"


@dataclass(frozen=True)
class PasswordPolicy:
    """Strength requirements for a password.

    Attributes:
        min_length: Minimum number of characters.
        max_length: Maximum number of characters.
        require_uppercase: At least one uppercase letter.
        require_lowercase: At least one lowercase letter.
        require_digit: At least one digit.
        require_special: At least one character from special_characters.
        special_characters: Characters counted as special.
    """

    min_length: int = 8
    max_length: int = 128
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_digit: bool = True
    require_special: bool = True
    special_characters: str = DEFAULT_SPECIAL_CHARACTERS

    def __post_init__(self) -> None:
        if self.min_length < 1:
            raise ValueError("min_length must be at least 1")
        if self.max_length < self.min_length:
            raise ValueError("max_length must not be lower than min_length")

    @classmethod
    def from_settings(cls, settings) -> "PasswordPolicy":
        """Build a policy from application settings."""
        return cls(
            min_length=settings.password_min_length,
            max_length=settings.password_max_length,
            require_uppercase=settings.password_require_uppercase,
            require_lowercase=settings.password_require_lowercase,
            require_digit=settings.password_require_digit,
            require_special=settings.password_require_special,
        )

    def violations(self, password: str) -> list[str]:
        """Return the names of the rules the password breaks.

        Args:
            password: The candidate password.

        Returns:
            Rule names in a stable order; empty when the password passes.
        """
        broken: list[str] = []
        if len(password) < self.min_length:
            broken.append("min_length")
        if len(password) > self.max_length:
            broken.append("max_length")
        if self.require_uppercase and not any(c.isupper() for c in password):
            broken.append("uppercase")
        if self.require_lowercase and not any(c.islower() for c in password):
            broken.append("lowercase")
        if self.require_digit and not any(c.isdigit() for c in password):
            broken.append("digit")
        if self.require_special and not any(
            c in self.special_characters for c in password
        ):
            broken.append("special")
        return broken
