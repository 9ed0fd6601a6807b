import use_cases.container as container_use_cases
import use_cases.notification as notification_use_cases


def test_container_use_case_exports() -> None:
    assert "RestartContainerUseCase" in container_use_cases.__all__
    assert container_use_cases.RestartContainerUseCase is not None


def test_notification_use_case_exports() -> None:
    assert "SendNotificationUseCase" in notification_use_cases.__all__
