from abc import ABC, abstractmethod


class IRegexValidator(ABC):
    @abstractmethod
    def validate(self, pattern: str) -> bool:
        """Check ``pattern`` against the host's regex engine.

        Raises ``ValueError`` with the engine's message when the pattern is
        rejected. Returns ``False`` when no engine was available to check it.
        """
