import pytest

# Environment variables read by callflow.settings.Settings
CALLFLOW_ENV_VARS = [
    "STATUS_OVERWRITE",
    "ADMIN_EMAIL",
    "HOME_URI",
    "BACKEND_URL",
    "TRANSPORT_TIMEOUT",
    "FILTERS_FILEPATH",
    "LOG_LEVEL",
    "HOST",
    "PORT",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """AUTOUSE: Removes configuration variables so each test starts from the defaults."""
    for name in CALLFLOW_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
