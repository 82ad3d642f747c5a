from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import Page, sync_playwright

from form_config import FormConfig


@contextmanager
def browser_session(config: FormConfig, navigate: bool = True) -> Iterator[Page]:
    """Fresh Chromium page for one check; everything is closed on the way out."""
    with sync_playwright() as p:
        if config.headless:
            browser = p.chromium.launch(headless=True, slow_mo=config.slow_mo)
            context = browser.new_context(viewport=config.viewport)
        else:
            # Headful runs get a maximized window instead of a fixed viewport
            browser = p.chromium.launch(headless=False, slow_mo=config.slow_mo, args=["--start-maximized"])
            context = browser.new_context(no_viewport=True)
        try:
            page = context.new_page()
            if navigate:
                if config.verbose:
                    print(f"→ Opening {config.url}")
                page.goto(config.url)
            yield page
        finally:
            context.close()
            browser.close()
