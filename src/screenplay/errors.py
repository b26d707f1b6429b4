"""Error taxonomy shared by abilities and the artifact model."""


class ScreenplayError(Exception):
    """Base class for errors raised by the toolkit."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class TestCompromisedError(ScreenplayError):
    """The test environment is unreliable, so the scenario can't be trusted.

    Raised for timeouts, network errors and transport failures that produced
    no HTTP response. Test code should halt and flag the scenario rather than
    assert on it.
    """

    # Not a test class, despite the name
    __test__ = False


class LogicError(ScreenplayError):
    """The calling code is misusing the API (a defect in the test, not the system under test)."""
