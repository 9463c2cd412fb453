"""Shared test fixtures, fakes and hypothesis strategies for the extractor test suite."""

from __future__ import annotations

import asyncio
import copy
import os

import pytest
from hypothesis import strategies as st

from job_extractor.browser.session import BrowserProfile
from job_extractor.config.settings import ExtractorSettings


# ---------------------------------------------------------------------------
# Ensure required env vars are set for ExtractorSettings in tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _set_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set minimal env vars so ExtractorSettings can be instantiated in tests."""
    if "EXTRACTOR_GEMINI_API_KEY" not in os.environ:
        monkeypatch.setenv("EXTRACTOR_GEMINI_API_KEY", "test-gemini-key")


@pytest.fixture
def settings() -> ExtractorSettings:
    """Test settings with safe defaults."""
    return ExtractorSettings(
        gemini_api_key="test-gemini-key",
        settle_delay_ms=0,
        log_json=False,
    )


# ---------------------------------------------------------------------------
# Fakes for the browser and model capabilities
# ---------------------------------------------------------------------------

SAMPLE_DESCRIPTION = (
    "We are hiring a Backend Engineer to design and operate high-throughput "
    "Python services. You will own APIs end to end and mentor junior engineers."
)

SAMPLE_HTML = f"""
<html>
  <head><title>Backend Engineer - Acme</title><script>var tracking = 1;</script></head>
  <body>
    <nav>Home | Jobs | About</nav>
    <div class="job-description-wrapper">
      <h1>Backend Engineer</h1>
      <p>{SAMPLE_DESCRIPTION}</p>
    </div>
    <footer>Copyright Acme</footer>
  </body>
</html>
"""


class FakeSession:
    """In-memory BrowserSession recording how it was driven."""

    def __init__(
        self,
        *,
        html: str = SAMPLE_HTML,
        title: str = "Backend Engineer - Acme",
        text: str | None = "Backend Engineer\n" + SAMPLE_DESCRIPTION,
        navigate_delay: float = 0.0,
        navigate_error: Exception | None = None,
        extract_delay: float = 0.0,
    ) -> None:
        self.html = html
        self.page_title = title
        self.text = text
        self.navigate_delay = navigate_delay
        self.navigate_error = navigate_error
        self.extract_delay = extract_delay
        self.navigations: list[tuple[str, int]] = []
        self.close_count = 0

    async def navigate(self, url: str, *, timeout_ms: int) -> None:
        self.navigations.append((url, timeout_ms))
        if self.navigate_delay:
            await asyncio.sleep(self.navigate_delay)
        if self.navigate_error is not None:
            raise self.navigate_error

    async def title(self) -> str:
        return self.page_title

    async def get_html(self) -> str:
        return self.html

    async def extract_text(self) -> str:
        if self.extract_delay:
            await asyncio.sleep(self.extract_delay)
        return self.text  # type: ignore[return-value]

    async def close(self) -> None:
        self.close_count += 1


class FakeLauncher:
    """BrowserLauncher handing out a single prepared FakeSession."""

    def __init__(
        self,
        session: FakeSession | None = None,
        *,
        launch_delay: float = 0.0,
        launch_error: Exception | None = None,
    ) -> None:
        self.session = session or FakeSession()
        self.launch_delay = launch_delay
        self.launch_error = launch_error
        self.profiles: list[BrowserProfile] = []

    @property
    def launch_count(self) -> int:
        return len(self.profiles)

    async def launch(self, profile: BrowserProfile) -> FakeSession:
        self.profiles.append(profile)
        if self.launch_delay:
            await asyncio.sleep(self.launch_delay)
        if self.launch_error is not None:
            raise self.launch_error
        return self.session


class FakeGenerator:
    """TextGenerator returning a canned response (or failing)."""

    def __init__(
        self,
        response: str = "",
        *,
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self.response = response
        self.error = error
        self.delay = delay
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def fake_launcher(fake_session: FakeSession) -> FakeLauncher:
    return FakeLauncher(fake_session)


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


# ---------------------------------------------------------------------------
# Sample model output
# ---------------------------------------------------------------------------

_VALID_RECORD: dict = {
    "title": "Backend Engineer",
    "subtitle": "Build scalable Python services at Acme",
    "postedDate": "2025-11-29",
    "postedBy": "Acme Careers",
    "location": "Remote",
    "jobType": "Full-time",
    "applyUrl": "https://acme.example/careers/backend-engineer",
    "fullDescription": "Design and operate high-throughput Python services.",
    "jobDetails": {
        "role": "Backend Engineer",
        "category": "IT Services",
        "qualification": "Graduation",
        "batch": "N/A",
        "experience": "2-5 years",
        "salary": "Not disclosed",
        "lastDate": "ASAP",
    },
    "eligibilityCriteria": ["Bachelor's degree in CS", "2+ years of Python"],
    "responsibilities": [{"task": "Own backend APIs"}, {"task": "Mentor engineers"}],
    "interviewTips": [{"tip": "Review system design basics"}],
    "selectionProcess": [{"stage": "Phone screen"}, {"stage": "Onsite"}],
    "careerGrowth": {
        "description": "Clear path to senior and staff roles",
        "futureRoles": ["Senior Engineer", "Staff Engineer"],
    },
    "companyInfo": {
        "name": "Acme",
        "foundedYear": "1998",
        "employeeCount": "5000+",
        "about": "Acme builds developer tooling.",
        "technologies": ["Python", "PostgreSQL"],
    },
    "faqs": [{"question": "Is the role remote?", "answer": "Yes, fully remote."}],
}


@pytest.fixture
def valid_record() -> dict:
    """A camelCase record as a well-behaved model would return it."""
    return copy.deepcopy(_VALID_RECORD)


# ---------------------------------------------------------------------------
# Hypothesis strategies (reusable across property tests)
# ---------------------------------------------------------------------------

target_urls = st.from_regex(
    r"https://[a-z]{3,10}\.[a-z]{2,4}/[a-z0-9]{1,10}", fullmatch=True
)
company_names = st.one_of(
    st.none(),
    st.text(alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz &.", min_size=1, max_size=30),
)
page_texts = st.text(min_size=0, max_size=12_000)
