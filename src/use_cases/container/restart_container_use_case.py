import structlog

from core.exceptions.container_not_found_error import ContainerNotFoundError
from core.port.container_controller import ContainerController

logger = structlog.stdlib.get_logger(__name__)


class RestartContainerUseCase:
    def __init__(self, container_controller: ContainerController) -> None:
        self.container_controller = container_controller

    async def execute(self, container_name: str) -> None:
        logger.warning(f"Attempting to restart container: {container_name}")

        if not await self.container_controller.exists(container_name):
            raise ContainerNotFoundError(container_name)

        await self.container_controller.restart(container_name)

        logger.info(f"Successfully restarted container: {container_name}")
