import asyncio
from functools import lru_cache

import docker
from docker import DockerClient
from docker.errors import DockerException, NotFound

from core.exceptions.container_not_found_error import ContainerNotFoundError
from core.exceptions.restart_execution_error import RestartExecutionError
from core.port.container_controller import ContainerController


class DockerContainerController(ContainerController):
    def __init__(self, client: DockerClient, restart_timeout_seconds: int = 10) -> None:
        self.client = client
        self.restart_timeout_seconds = restart_timeout_seconds

    async def exists(self, name: str) -> bool:
        try:
            containers = await asyncio.to_thread(self.client.containers.list, all=True, filters={"name": name})
        except DockerException as e:
            raise RestartExecutionError(name, f"could not list containers: {e}") from e

        # The name filter is a substring match; only an exact name counts.
        return any(container.name == name for container in containers)

    async def restart(self, name: str) -> None:
        try:
            container = await asyncio.to_thread(self.client.containers.get, name)
            await asyncio.to_thread(container.restart, timeout=self.restart_timeout_seconds)
        except NotFound as e:
            raise ContainerNotFoundError(name) from e
        except DockerException as e:
            raise RestartExecutionError(name, str(e)) from e


@lru_cache
def get_docker_container_controller() -> ContainerController:
    return DockerContainerController(docker.from_env())
