from logging_config import get_logger

logger = get_logger(__name__)

CODE_LENGTH = 12
SEPARATOR_POSITIONS = (3, 8)
LETTER_POSITIONS = (0, 1, 2, 4, 5, 6, 7, 9, 10, 11)

INVALID_CODE_MESSAGE = "invalid code"


class InvalidCodeError(ValueError):
    def __init__(self, code: str):
        super().__init__(INVALID_CODE_MESSAGE)
        self.code = code


def _is_lowercase_letter(byte: int) -> bool:
    return ord("a") <= byte <= ord("z")


def is_valid_code(code: str) -> bool:
    """Check that `code` has the `xxx-xxxx-xxx` meeting code shape.

    The check runs on the UTF-8 bytes, so multi-byte characters count towards
    the length and never match a letter position. No normalization is applied.
    """
    data = code.encode("utf-8")
    if len(data) != CODE_LENGTH:
        return False
    if any(data[i] != ord("-") for i in SEPARATOR_POSITIONS):
        return False
    return all(_is_lowercase_letter(data[i]) for i in LETTER_POSITIONS)


def validate_code(code: str) -> str:
    if not is_valid_code(code):
        logger.debug(f"Rejected code {code!r}")
        raise InvalidCodeError(code)
    return code
