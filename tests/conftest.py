import pytest


@pytest.fixture(autouse=True)
def clean_test_env(monkeypatch):
    """Evita que variables del entorno o de un .env local cambien los resultados."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("OUTPUT_FORMAT", raising=False)
    monkeypatch.setattr("instagram_url_cleaner.config.load_dotenv", lambda *a, **k: False)
    yield


@pytest.fixture
def reel_url():
    return "https://www.instagram.com/reel/DMaaOuDK_Bk/?igsh=dHFkZW9ycmh1cnQz"


@pytest.fixture
def clean_post_url():
    return "https://instagram.com/p/ABC123"
