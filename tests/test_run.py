import uvicorn

import run
from app.config import get_settings


def test_dev_runner_uses_settings(monkeypatch):
    calls = {}
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.update(app=app, **kwargs))
    monkeypatch.setenv("CVANALYSIS_PORT", "9100")
    monkeypatch.delenv("CVANALYSIS_HOST", raising=False)
    monkeypatch.delenv("CVANALYSIS_DEBUG", raising=False)

    get_settings.cache_clear()
    try:
        run.main()
    finally:
        get_settings.cache_clear()

    assert calls == {
        "app": "app.main:app",
        "host": "0.0.0.0",
        "port": 9100,
        "reload": False,
        "log_level": "info",
    }
