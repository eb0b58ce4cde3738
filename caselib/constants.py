import re

BOM = "\ufeff"

# whitespace (byte order mark included), underscore and hyphen all separate words
DELIMITERS_RE = re.compile(r"[\s\ufeff_-]+")
# a capital starts a word unless it continues a run of capitals; the last capital
# of a run still starts one when lowercase follows (HTTPServer)
BOUNDARY_RE = re.compile(r"[\s\ufeff_-]+|(?<![A-Z])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

CAMEL = "camel"
DOT = "dot"
KEBAB = "kebab"
CASE_STYLES = (CAMEL, DOT, KEBAB)

SEPARATORS = {
    DOT: ".",
    KEBAB: "-",
}

VERSION = "v1.0.0"

# inputs the converters are documented against, invalid ones last
EXAMPLES = ["first name", "user_id", "SCREEN_NAME", "mobile-number", "firstName"]
INVALID_EXAMPLES = [None, "", 123]
