"""
Shared test fixtures and sample inputs for rowval tests.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Sample inputs
# ---------------------------------------------------------------------------
ETF_CONSTITUENTS_CSV = """\
날짜,ETF코드,ETF명,구성종목코드,구성종목,주식수(계약수),금액

2025-01-02,A069500,KODEX 200,A000080,하이트진로,47,914620
2025-01-02,A069500,KODEX 200,A005930,"삼성전자, 보통주",8043,431505950
   \t
2025-01-03,A069500,KODEX 200,A000660,"SK하이닉스 \\"우\\"",1520,
"""

CATALOG_JSON = """\
{
  "source": "kodex200",
  "rows": 3,
  "columns": ["날짜", "ETF코드", "금액"],
  "filters": {"min": -1.5, "active": true, "note": null},
  "tags": ["etf", "etf"]
}
"""


@pytest.fixture
def etf_csv(tmp_path: Path) -> Path:
    path = tmp_path / "etf.csv"
    path.write_text(ETF_CONSTITUENTS_CSV, encoding="utf-8-sig")
    return path


@pytest.fixture
def catalog_json(tmp_path: Path) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(CATALOG_JSON, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (file-based end to end runs)",
    )
