import pytest

from pgurl.config import get_settings

_PG_ENV = ("PGHOST", "PGPORT", "PGUSER", "PGPASSWORD", "PGDATABASE")


@pytest.fixture(autouse=True)
def clean_pg_environment(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep the developer's PG* variables and .env out of the tests."""
    for name in _PG_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
