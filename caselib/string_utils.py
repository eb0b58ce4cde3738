from enum import Enum
from typing import NamedTuple, Optional

from caselib.constants import BOM, BOUNDARY_RE, CAMEL, DELIMITERS_RE, DOT, KEBAB, SEPARATORS
from caselib.errors import InvalidInput


class SplitPolicy(Enum):
    DELIMITER_ONLY = "delimiter_only"
    DELIMITER_PLUS_BOUNDARY = "delimiter_plus_boundary"


class ConversionResult(NamedTuple):
    input: object
    value: Optional[str] = None
    error: Optional[InvalidInput] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def validateInput(value) -> str:
    """
    Checks that value is a string with at least one non-whitespace character.
    Raises InvalidInput otherwise; returns the value untouched.
    """
    if value is None:
        raise InvalidInput.null()

    if not isinstance(value, str):
        raise InvalidInput.wrongType(value)

    if value.replace(BOM, "").strip() == "":
        raise InvalidInput.empty()

    return value


def splitWords(value: str, policy: SplitPolicy) -> list[str]:
    """
    Splits value into words.

    DELIMITER_ONLY breaks on runs of whitespace, underscores and hyphens and
    keeps any empty pieces left by leading or trailing delimiters.
    DELIMITER_PLUS_BOUNDARY also breaks before any capital that does not continue
    a run of capitals (`firstName`, `user.Name`, `HTTPServer`) and drops empty pieces.
    """
    if policy is SplitPolicy.DELIMITER_ONLY:
        return DELIMITERS_RE.split(value)

    return [word for word in BOUNDARY_RE.split(value) if word]


def capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def toCamelCase(value: str) -> str:
    words = splitWords(validateInput(value), SplitPolicy.DELIMITER_ONLY)

    # capitals inside a word are not boundaries here, they are lowered with the rest
    return words[0].lower() + "".join(capitalize(word) for word in words[1:])


def _joinLower(value: str, separator: str) -> str:
    words = splitWords(validateInput(value), SplitPolicy.DELIMITER_PLUS_BOUNDARY)
    return separator.join(word.lower() for word in words)


def toDotCase(value: str) -> str:
    return _joinLower(value, SEPARATORS[DOT])


def toKebabCase(value: str) -> str:
    return _joinLower(value, SEPARATORS[KEBAB])


CONVERTERS = {
    CAMEL: toCamelCase,
    DOT: toDotCase,
    KEBAB: toKebabCase,
}


def convert(style: str, value) -> str:
    try:
        converter = CONVERTERS[style]
    except KeyError:
        raise ValueError(
            f"Unknown case style '{style}', expected one of: {', '.join(CONVERTERS)}"
        ) from None
    return converter(value)


def tryConvert(style: str, value) -> ConversionResult:
    """Like convert, but hands back invalid input as part of the result instead of raising."""
    try:
        return ConversionResult(value, value=convert(style, value))
    except InvalidInput as error:
        return ConversionResult(value, error=error)
