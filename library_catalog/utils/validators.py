from typing import Optional

from library_catalog.errors import InvalidInput

MAX_ID = 2**32 - 1


class TextValidator:
    """Basic checks for free-text fields entered at the prompt."""

    @staticmethod
    def normalize(text: Optional[str]) -> str:
        if text is None:
            return ""
        return text.strip()

    @staticmethod
    def is_non_empty(text: Optional[str]) -> bool:
        return bool(TextValidator.normalize(text))

    @staticmethod
    def validate_title(title: Optional[str]) -> bool:
        return TextValidator.is_non_empty(title)

    @staticmethod
    def validate_author(author: Optional[str]) -> bool:
        return TextValidator.is_non_empty(author)

    @staticmethod
    def validate_name(name: Optional[str]) -> bool:
        return TextValidator.is_non_empty(name)


class IdValidator:
    """Parses numeric ids typed by the user."""

    @staticmethod
    def parse_id(raw: Optional[str], message: Optional[str] = None) -> int:
        """Return ``raw`` as an unsigned 32-bit int or raise InvalidInput.

        Surrounding whitespace and a single leading '+' are accepted; minus
        signs, fractions and values above MAX_ID are rejected.
        """
        s = TextValidator.normalize(raw)
        digits = s[1:] if s.startswith("+") else s
        if not digits.isdigit() or not digits.isascii():
            raise InvalidInput(message)
        value = int(digits)
        if value > MAX_ID:
            raise InvalidInput(message)
        return value
