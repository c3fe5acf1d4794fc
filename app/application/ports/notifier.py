from abc import ABC, abstractmethod


class NotifierPort(ABC):
    @abstractmethod
    def notify(self, text: str) -> None:
        raise NotImplementedError
