from typing import Protocol


class IdGeneratorProtocol(Protocol):
    def new_id(self) -> str: ...
