IDENTITY = "alice"
PASSWORD = "password123"


class MockClock:
    """Stand-in for ``time.monotonic`` that only moves when told to."""

    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds
