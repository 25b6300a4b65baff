class TestDataError(Exception):
    """Base class for every error raised by testdata-binder."""

    __test__ = False


class InvalidArgumentError(TestDataError, ValueError):
    """A resource, binding or row selection was built from invalid input."""


class BindingNotFoundError(TestDataError, KeyError):
    """A selector lookup did not match any registered binding."""

    def __init__(self, selector: str) -> None:
        super().__init__(selector)
        self.selector = selector

    def __str__(self) -> str:
        return f"No binding registered for selector '{self.selector}'"


class DataSourceError(TestDataError):
    """The file behind a resource could not be read or bound to its target type."""
