from pathlib import Path


class GrammarError(Exception):
    """Base user-facing grammar error."""

    reported: bool = False


class RuleSpecError(GrammarError):
    def __init__(self, rule_spec: str, message: str) -> None:
        self.rule_spec = rule_spec
        self.message = message
        super().__init__(message)


class InvalidPatternSpecError(RuleSpecError):
    def __init__(self, rule_spec: str) -> None:
        super().__init__(
            rule_spec=rule_spec,
            message=f"Error in the Tagged Template Grammar String {rule_spec}",
        )


class MalformedRegexError(RuleSpecError):
    def __init__(self, rule_spec: str, regex: str, detail: str) -> None:
        self.regex = regex
        self.detail = detail
        super().__init__(
            rule_spec=rule_spec,
            message=(
                "You entered a badly formed RegExp in the Tagged Template "
                f"Grammar settings.\n{regex}\n{detail}"
            ),
        )


class InvalidLiteralError(RuleSpecError):
    def __init__(self, rule_spec: str, literal: str) -> None:
        self.literal = literal
        super().__init__(
            rule_spec=rule_spec,
            message=(
                "Bad literal string in the Tagged Template Grammar settings."
                f"\n{literal}"
            ),
        )


class GrammarSchemaError(GrammarError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid grammar document ({detail})")


class RuleSourceError(GrammarError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid grammar settings ({detail}): {path}")


class PublishError(GrammarError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}\n{path}")


class FileSystemError(PublishError):
    pass


class RegistrationError(PublishError):
    pass
