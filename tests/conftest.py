import pytest

from core.recall import PhaseController, Phase


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(clock):
    return PhaseController(seed=7, clock=clock)


@pytest.fixture
def recall_controller(controller):
    """Controller already moved through study and distract."""
    controller.start()
    controller.skip()
    controller.skip()
    assert controller.phase == Phase.RECALL
    return controller
