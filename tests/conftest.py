# tests/conftest.py

"""
Pytest Fixtures - Shared test configurations and data for pipeline, services and API

SAMPLE CSV REFERENCE:
- Acme AI:        Series B, 51-100 employees, rank 1,200, AI + SaaS, founded 2019
- Green Grid:     Seed, 11-50, Climate, founded 2021, acquired by Big Energy Co
- PayLoop:        Series A, 1000+, Fintech + SaaS ("APIs"), founded 1985 (outside trend window)
- Shut Down Inc:  Closed 2023-06-15, no investors
"""

import pytest
from typing import List, Optional
from fastapi.testclient import TestClient

from compass.config import Settings
from compass.main import app
from compass.models.company import RawRecord, ScoredCompany, ScoreSet, ThemeFlags
from compass.models.enumerations import Theme


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================

@pytest.fixture
def settings_without_key():
    """Settings with no narrative credentials, regardless of the environment."""
    return Settings(ANTHROPIC_API_KEY=None)


@pytest.fixture
def settings_with_key():
    return Settings(ANTHROPIC_API_KEY="test-key")


# =============================================================================
# CSV FIXTURES
# =============================================================================

SAMPLE_HEADER = (
    "Organization Name,Organization Name URL,Description,Full Description,"
    "Founded Date,Number of Employees,Total Funding Amount (in USD),"
    "Number of Funding Rounds,Last Funding Type,Operating Status,"
    "Top 5 Investors,Lead Investors,CB Rank (Company),Number of Articles,"
    "Acquired by,Exit Date,Closed Date,Headquarters Location,Industries,Ticker"
)

SAMPLE_ROWS = [
    'Acme AI,https://acme.ai,AI-powered SaaS platform,"Machine learning for enterprise workflow automation",'
    '2019-03-01,51-100,25000000,3,Series B,Active,'
    '"Sequoia Capital, Accel",Sequoia Capital,"1,200",40,,,,"San Francisco, California",Software,ACME',

    'Green Grid,https://greengrid.io,Solar storage,"Battery systems for renewable energy",'
    '2021-07-12,11-50,4000000,2,Seed,Acquired,'
    '"Accel, Undisclosed Investors",,5400,12,Big Energy Co,2024-02-20,,"Austin, Texas",Energy,',

    'PayLoop,https://payloop.com,Payment rails,"Lending and banking APIs",'
    '1985-05-05,1000+,90000000,6,Series A,Active,'
    'Sequoia Capital,,300,85,,,,"New York, New York",Financial Services,PAY',

    'Shut Down Inc,,Local services,"",'
    ',1-10,0,1,,Closed,'
    ',,,,,,2023-06-15,"Boston, Massachusetts",Services,',
]


@pytest.fixture
def sample_csv_text():
    return "\n".join([SAMPLE_HEADER] + SAMPLE_ROWS) + "\n"


@pytest.fixture
def malformed_csv_text():
    """Header plus one good row, one short row and one long row."""
    return "\n".join([
        "Organization Name,Description,Industries",
        'Good Co,"Cloud software, for teams",Software',
        "Short Co,Only two",
        "Long Co,one,two,three",
    ])


# =============================================================================
# MODEL BUILDERS
# =============================================================================

def make_record(**fields: Optional[str]) -> RawRecord:
    """RawRecord from snake_case field names."""
    return RawRecord(**fields)


def make_company(
    name: str,
    themes: Optional[List[Theme]] = None,
    idx: int = 0,
    comprehensive: float = 50.0,
    **record_fields: Optional[str],
) -> ScoredCompany:
    """ScoredCompany with flat scores; only themes and record fields matter."""
    return ScoredCompany(
        id=f"comp-{idx}",
        record=RawRecord(name=name, **record_fields),
        scores=ScoreSet(
            funding=comprehensive,
            operations=comprehensive,
            brand_trend=comprehensive,
            potential=comprehensive,
            comprehensive=comprehensive,
        ),
        themes=ThemeFlags.from_themes(themes or []),
    )


@pytest.fixture
def company_factory():
    return make_company


@pytest.fixture
def record_factory():
    return make_record
