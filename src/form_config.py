from dataclasses import dataclass, field

from waits import DEFAULT_INTERVAL, DEFAULT_TIMEOUT

PRACTICE_FORM_URL = "https://app.cloudqa.io/home/AutomationPracticeForm"


@dataclass
class FormConfig:
    url: str = PRACTICE_FORM_URL
    timeout: float = DEFAULT_TIMEOUT
    interval: float = DEFAULT_INTERVAL
    headless: bool = True
    viewport: dict = field(default_factory=lambda: {"width": 1366, "height": 900})
    slow_mo: float = 0
    verbose: bool = False
