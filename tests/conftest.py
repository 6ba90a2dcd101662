import pytest

from render_pipeline.profiling import Tracer


class MockFont:
    """skia 없이 쓰는 고정폭 측정 폰트: 글자당 size px"""

    def __init__(self, size=16, weight="normal", style="roman"):
        self.size = size
        self.weight = weight
        self.style = style

    def measure(self, word):
        return self.size * len(word)

    def metrics(self, name=None):
        all = {"ascent": self.size * 0.75, "descent": self.size * 0.25,
               "linespace": self.size}
        if name:
            return all[name]
        return all

    def __str__(self):
        return f"{self.style} {self.weight} {self.size:g}px"


class FakeTimer:
    """threading.Timer 대신 테스트에서 직접 fire() 하는 타이머"""

    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.started = False
        self.cancelled = False
        self.daemon = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function()


@pytest.fixture
def font_factory():
    def factory(size, weight, style):
        return MockFont(size, weight, style)
    return factory


@pytest.fixture
def timers():
    created = []

    def factory(interval, function):
        timer = FakeTimer(interval, function)
        created.append(timer)
        return timer

    factory.created = created
    return factory


@pytest.fixture(autouse=True)
def fresh_tracer():
    Tracer._instance = None
    yield
    Tracer._instance = None
