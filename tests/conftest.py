"""Pytest fixtures for the practice form checks."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, sync_playwright

from browser_session import browser_session
from form_config import PRACTICE_FORM_URL, FormConfig

# Same shape as the CloudQA practice form: labels before text inputs,
# radios before their labels, a country <select>.
PRACTICE_FORM_HTML = """
<!DOCTYPE html>
<html>
<head><title>Automation Practice Form</title></head>
<body>
  <form id="automationtestform">
    <div class="form-group">
      <label for="fname">First Name</label>
      <input id="fname" name="First Name" type="text" />
    </div>
    <div class="form-group">
      <label for="lname">Last Name</label>
      <input id="lname" name="Last Name" type="text" />
    </div>
    <div class="form-group">
      <span>Gender</span>
      <input type="radio" id="male" name="gender" value="Male" />
      <label for="male">Male</label>
      <input type="radio" id="female" name="gender" value="Female" />
      <label for="female">Female</label>
      <input type="radio" id="transgender" name="gender" value="Transgender" />
      <label for="transgender">Transgender</label>
    </div>
    <div class="form-group">
      <label for="country">Country</label>
      <select id="country" name="Country">
        <option value="">Select</option>
        <option value="AU">Australia</option>
        <option value="IN"> India </option>
        <option value="US">United States</option>
      </select>
    </div>
    <div class="form-group">
      <label for="state">State</label>
      <select id="state" name="State">
        <option value="">Select</option>
        <option value="KA">Karnataka</option>
      </select>
    </div>
  </form>
</body>
</html>
"""


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption("--form-url", default=PRACTICE_FORM_URL, help="Practice form URL for live tests")
    parser.addoption("--headful", action="store_true", help="Show the browser while testing")
    parser.addoption("--lookup-timeout", type=float, default=10.0, help="Seconds each lookup may wait")


class FakeClock:
    """Deterministic clock whose sleep just moves time forward."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def form_config(request: pytest.FixtureRequest) -> FormConfig:
    return FormConfig(
        url=request.config.getoption("--form-url"),
        timeout=request.config.getoption("--lookup-timeout"),
        headless=not request.config.getoption("--headful"),
    )


@pytest.fixture
def local_form_url(tmp_path: Path) -> str:
    """file:// URL serving the practice form markup."""
    path = tmp_path / "practice_form.html"
    path.write_text(PRACTICE_FORM_HTML, encoding="utf-8")
    return path.as_uri()


@pytest.fixture(scope="session")
def chromium_available() -> None:
    with sync_playwright() as p:
        try:
            p.chromium.launch(headless=True).close()
        except PlaywrightError as e:
            pytest.skip(f"Chromium is not installed: {e}")


@pytest.fixture
def page(chromium_available: None, form_config: FormConfig) -> Generator[Page, None, None]:
    """Blank page in a fresh browser session, closed after the test."""
    with browser_session(form_config, navigate=False) as page:
        yield page


@pytest.fixture
def form_page(page: Page) -> Page:
    page.set_content(PRACTICE_FORM_HTML)
    return page
