import pytest

from infra.adapter.docker_container_controller import get_docker_container_controller


@pytest.fixture(autouse=True)
def _set_required_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONITOR_URL", "https://tunnel.example.com/health")
    monkeypatch.setenv("CONTAINER_NAME", "newt")


@pytest.fixture(autouse=True)
def _reset_cached_singletons():
    cacheables = [
        get_docker_container_controller,
    ]

    for cacheable in cacheables:
        cacheable.cache_clear()

    yield

    for cacheable in cacheables:
        cacheable.cache_clear()
