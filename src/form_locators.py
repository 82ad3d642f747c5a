"""Locate form controls by the text a user sees instead of ids or positions.

Every lookup polls the current page until a match shows up or the timeout
passes. Nothing is cached; calling twice resolves against the page twice.
"""

import time

from playwright.sync_api import Locator, Page

from form_errors import LookupTimeout
from waits import DEFAULT_INTERVAL, DEFAULT_TIMEOUT, poll, wait_until


def xpath_literal(text: str) -> str:
    """Quote text as an XPath 1.0 string literal.

    XPath has no escape character, so text holding both quote kinds is split
    on the single quotes and glued back with concat().
    """
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    parts = text.split("'")
    pieces = []
    for i, part in enumerate(parts):
        if part:
            pieces.append(f"'{part}'")
        if i < len(parts) - 1:
            pieces.append('"\'"')
    return "concat(" + ", ".join(pieces) + ")"


def label_equals_xpath(text: str) -> str:
    return f"//label[normalize-space()={xpath_literal(text)}]"


def label_contains_xpath(text: str) -> str:
    return f"//label[contains(normalize-space(), {xpath_literal(text)})]"


def radio_value_xpath(text: str) -> str:
    return f"//input[@type='radio' and contains(@value, {xpath_literal(text)})]"


def input_after_label_xpath(text: str) -> str:
    return f"({label_equals_xpath(text)})[1]/following::input[1]"


def select_with_option_xpath(text: str) -> str:
    return f"//select[.//option[normalize-space()={xpath_literal(text)}]]"


def first_present(scope, xpath: str) -> Locator | None:
    """Return the first element matching xpath under scope right now, else None."""
    loc = scope.locator(f"xpath={xpath}")
    if loc.count() > 0:
        return loc.first
    return None


def find_input_by_label(page: Page, label_text: str, timeout: float = DEFAULT_TIMEOUT, interval: float = DEFAULT_INTERVAL, verbose: bool = False) -> Locator:
    """Text input that follows the label reading exactly label_text (e.g. "First Name").

    The label and the input after it are waited for together, so a label with
    nothing after it times out like a missing label.
    """
    field = wait_until(
        lambda: first_present(page, input_after_label_xpath(label_text)),
        f"Input after label {label_text!r}",
        timeout=timeout,
        interval=interval,
    )
    if verbose:
        print(f"→ Found input after label {label_text!r}")
    return field


# Radio strategies, tried in order. Each gets the label found by the
# contains-text wait (None when no label showed up) and returns a radio or None.

def radio_before_label(page: Page, label: Locator | None, text: str, timeout: float, interval: float) -> Locator | None:
    if label is None:
        return None
    return first_present(label, "preceding::input[@type='radio'][1]")


def radio_after_label(page: Page, label: Locator | None, text: str, timeout: float, interval: float) -> Locator | None:
    if label is None:
        return None
    return first_present(label, "following::input[@type='radio'][1]")


def radio_by_value(page: Page, label: Locator | None, text: str, timeout: float, interval: float) -> Locator | None:
    # Only when no visible label matched at all
    if label is not None:
        return None
    return poll(lambda: first_present(page, radio_value_xpath(text)), timeout=timeout, interval=interval)


RADIO_STRATEGIES = (
    ("radio before label", radio_before_label),
    ("radio after label", radio_after_label),
    ("radio by value", radio_by_value),
)


def find_radio_by_label(page: Page, text: str, timeout: float = DEFAULT_TIMEOUT, interval: float = DEFAULT_INTERVAL, verbose: bool = False, strategies=RADIO_STRATEGIES, clock=time.monotonic, sleep=time.sleep) -> Locator:
    """Radio button for a label or value fragment (e.g. "Male").

    Labels are matched by containment so "Male :" or "Male *" still count.
    All strategies share one deadline; later ones only get what is left.
    """
    deadline = clock() + timeout
    label = poll(lambda: first_present(page, label_contains_xpath(text)), timeout=timeout, interval=interval, clock=clock, sleep=sleep)
    if label is None and verbose:
        print(f"→ No label containing {text!r}, falling back to radio value")
    for name, strategy in strategies:
        remaining = max(0.0, deadline - clock())
        radio = strategy(page, label, text, remaining, interval)
        if radio is not None:
            if verbose:
                print(f"✓ Radio {text!r} resolved via {name}")
            return radio
    raise LookupTimeout(f"Radio button {text!r}", timeout)


class Dropdown:
    """A <select> element with option listing and selection helpers."""

    def __init__(self, locator: Locator):
        self.locator = locator

    def options(self) -> list[tuple[str, str]]:
        pairs = self.locator.evaluate("el => Array.from(el.options).map(o => [o.text, o.value])")
        return [(text, value) for text, value in pairs]

    def option_texts(self) -> list[str]:
        return [text for text, _ in self.options()]

    def has_option(self, text: str, ignore_case: bool = True) -> bool:
        wanted = text.strip()
        for option_text, _ in self.options():
            candidate = option_text.strip()
            if ignore_case:
                if candidate.casefold() == wanted.casefold():
                    return True
            elif candidate == wanted:
                return True
        return False

    def wait_for_options(self, timeout: float = DEFAULT_TIMEOUT, interval: float = DEFAULT_INTERVAL) -> list[tuple[str, str]]:
        return wait_until(self.options, "Dropdown options", timeout=timeout, interval=interval)

    def select_by_text(self, text: str) -> None:
        self.locator.select_option(label=text)

    def select_by_value(self, value: str) -> None:
        self.locator.select_option(value=value)

    def selected_text(self) -> str | None:
        return self.locator.evaluate("el => el.selectedIndex < 0 ? null : el.options[el.selectedIndex].text")


def find_select_having_option(page: Page, option_text: str, timeout: float = DEFAULT_TIMEOUT, interval: float = DEFAULT_INTERVAL, verbose: bool = False) -> Dropdown:
    """Dropdown holding an option whose text is exactly option_text (e.g. "India")."""
    select = wait_until(
        lambda: first_present(page, select_with_option_xpath(option_text)),
        f"Dropdown with option {option_text!r}",
        timeout=timeout,
        interval=interval,
    )
    if verbose:
        print(f"→ Found dropdown offering {option_text!r}")
    return Dropdown(select)
