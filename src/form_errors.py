class LookupTimeout(AssertionError):
    """Nothing matching the lookup showed up before the wait budget ran out."""

    def __init__(self, description: str, timeout: float):
        self.description = description
        self.timeout = timeout
        super().__init__(f"{description} not found within {timeout:g}s")


class ElementStateMismatch(AssertionError):
    """The element was found but its state is not what the check expected."""

    def __init__(self, field: str, expected, actual):
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(f"{field}: expected {expected!r}, got {actual!r}")


def expect_value(locator, expected: str, field: str) -> None:
    actual = locator.input_value()
    if actual != expected:
        raise ElementStateMismatch(field, expected, actual)


def expect_checked(locator, field: str) -> None:
    actual = locator.is_checked()
    if actual is not True:
        raise ElementStateMismatch(field, True, actual)


def expect_option(dropdown, option_text: str, field: str) -> None:
    if not dropdown.has_option(option_text):
        raise ElementStateMismatch(
            field,
            f"an option {option_text!r}",
            dropdown.option_texts(),
        )
