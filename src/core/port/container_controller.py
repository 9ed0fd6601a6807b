from abc import ABC, abstractmethod


class ContainerController(ABC):
    @abstractmethod
    async def exists(self, name: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def restart(self, name: str) -> None:
        """Restart the container, raising RestartExecutionError on failure."""
        raise NotImplementedError
