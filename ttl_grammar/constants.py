from typing import Final


NOTIFICATION_SOURCE: Final[str] = "language-babel"
SETTINGS_KEY: Final[str] = "taggedTemplateGrammar"
SETTINGS_SECTION: Final[str] = "ttlGrammar"

GRAMMAR_NAME: Final[str] = "language-babel-extension"
GRAMMAR_SCOPE_NAME: Final[str] = "languagebabel.ttlextension"
GRAMMAR_COMMENT: Final[str] = (
    "Auto generated Tag Extensions for language-babel. "
    "Please do not edit this file directly"
)

GRAMMAR_FILE_PREFIX: Final[str] = "ttl"
GRAMMAR_FILE_SUFFIX: Final[str] = ".json"

EMBEDDED_LITERAL_INCLUDE: Final[str] = "source.js.jsx#literal-quasi-embedded"

TAG_CAPTURE_NAME: Final[str] = "entity.name.tag.js"
QUASI_BEGIN_CAPTURE_NAME: Final[str] = "punctuation.definition.quasi.begin.js"
QUASI_END_CAPTURE_NAME: Final[str] = "punctuation.definition.quasi.end.js"

DEFAULT_QUIET_PERIOD: Final[float] = 10.0
