import pytest

from core.exceptions.container_not_found_error import ContainerNotFoundError
from core.exceptions.restart_execution_error import RestartExecutionError
from tests.support.fakes import FakeContainerController
from use_cases.container.restart_container_use_case import RestartContainerUseCase


@pytest.mark.asyncio
async def test_restart_container_restarts_existing_container() -> None:
    controller = FakeContainerController(containers=["newt"])

    await RestartContainerUseCase(controller).execute("newt")

    assert controller.restart_calls == ["newt"]


@pytest.mark.asyncio
async def test_restart_container_raises_when_container_missing() -> None:
    controller = FakeContainerController(containers=["cloudflared"])

    with pytest.raises(ContainerNotFoundError, match="Container 'newt' not found"):
        await RestartContainerUseCase(controller).execute("newt")

    assert controller.restart_calls == []


@pytest.mark.asyncio
async def test_restart_container_propagates_execution_error() -> None:
    controller = FakeContainerController(containers=["newt"], fail_restart=True)

    with pytest.raises(RestartExecutionError, match="daemon refused"):
        await RestartContainerUseCase(controller).execute("newt")
