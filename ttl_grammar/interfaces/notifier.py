from abc import ABC, abstractmethod


class INotifier(ABC):
    @abstractmethod
    def info(self, source: str, detail: str, dismissable: bool = True) -> None:
        raise NotImplementedError

    @abstractmethod
    def warning(self, source: str, detail: str, dismissable: bool = True) -> None:
        raise NotImplementedError
