import re
import time
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from browser_session import browser_session
from form_config import FormConfig
from form_errors import expect_checked, expect_option, expect_value
from form_locators import find_input_by_label, find_radio_by_label, find_select_having_option


def check_first_name(page: Page, config: FormConfig, text: str = "TestUser_123") -> None:
    first_name = find_input_by_label(page, "First Name", timeout=config.timeout, interval=config.interval, verbose=config.verbose)
    first_name.clear()
    first_name.fill(text)
    expect_value(first_name, text, "First Name input")


def check_gender(page: Page, config: FormConfig, gender: str = "Male") -> None:
    radio = find_radio_by_label(page, gender, timeout=config.timeout, interval=config.interval, verbose=config.verbose)
    if not radio.is_checked():
        radio.click()
    expect_checked(radio, f"{gender} gender option")


def check_country_option(page: Page, config: FormConfig, country: str = "India") -> None:
    dropdown = find_select_having_option(page, country, timeout=config.timeout, interval=config.interval, verbose=config.verbose)
    dropdown.wait_for_options(timeout=config.timeout, interval=config.interval)
    expect_option(dropdown, country, "Country dropdown")


FORM_CHECKS = {
    "first-name-can-be-filled": check_first_name,
    "gender-male-can-be-selected": check_gender,
    "country-dropdown-contains-india": check_country_option,
}


def sanitize_for_filename(text: str) -> str:
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"[-\s]+", "_", text)
    return text.strip("_").lower()[:100]


def failure_screenshot_path(screenshots_dir: Path, check_name: str, error: str) -> Path:
    error_context = sanitize_for_filename(error.split("(")[0].strip()[:50]) or "error"
    return screenshots_dir / f"check_{sanitize_for_filename(check_name)}_failure_{error_context}.png"


def save_failure_screenshot(page: Page, shot: Path, verbose: bool = False) -> str:
    try:
        page.screenshot(path=str(shot), full_page=True)
    except PlaywrightError as e:
        if verbose:
            print(f"⚠️ Could not save failure screenshot: {e}")
        return ""
    if verbose:
        print(f"📸 Failure screenshot saved: {shot.name}")
    return str(shot)


def run_check(name: str, check, config: FormConfig, screenshots_dir: Path) -> dict:
    """Run one check in its own session; any failure, including opening the page, becomes a result."""
    status = "passed"
    error = ""
    screenshot = ""
    started = time.monotonic()
    try:
        with browser_session(config) as page:
            try:
                check(page, config)
            except (AssertionError, PlaywrightError) as e:
                status = "failed"
                error = str(e)
                print(f"✖ Check failed: {name} — {error} (url={page.url})")
                shot = failure_screenshot_path(screenshots_dir, name, error)
                screenshot = save_failure_screenshot(page, shot, verbose=config.verbose)
    except PlaywrightError as e:
        # Session could not be opened or closed cleanly
        status = "failed"
        error = error or str(e)
        print(f"✖ Check failed: {name} — browser session error: {e}")
    return {
        "name": name,
        "status": status,
        "error": error,
        "screenshot": screenshot,
        "duration": round(time.monotonic() - started, 3),
    }


def run_form_checks(config: FormConfig, run_dir: Path, names: list[str] | None = None) -> dict:
    """Run the selected checks, each in its own browser session."""
    screenshots_dir = run_dir / "screenshots"
    screenshots_dir.mkdir(parents=True, exist_ok=True)

    selected = names or list(FORM_CHECKS)
    unknown = [n for n in selected if n not in FORM_CHECKS]
    if unknown:
        raise ValueError(f"Unknown check(s): {', '.join(unknown)}")

    results = []
    for name in selected:
        if config.verbose:
            print(f"→ Running {name}")
        result = run_check(name, FORM_CHECKS[name], config, screenshots_dir)
        results.append(result)
        if result["status"] == "passed":
            print(f"✓ Passed: {name}")
        else:
            err = result["error"]
            err_excerpt = err if len(err) < 300 else (err[:297] + "...")
            print(f"✖ Failed: {name} — {err_excerpt}")
    return {"tests": results}
