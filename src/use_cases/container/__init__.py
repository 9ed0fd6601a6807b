from use_cases.container.restart_container_use_case import RestartContainerUseCase

__all__ = [
    "RestartContainerUseCase",
]
