import importlib

from urlp import env


def test_env_flags(monkeypatch):
    monkeypatch.setenv('URLP_DEBUG', 'yes')
    monkeypatch.setenv('URLP_DEMO_URI', 'http://localhost')
    try:
        importlib.reload(env)
        assert env.DEBUG is True
        assert env.DEMO_URI == 'http://localhost'
    finally:
        monkeypatch.undo()
        importlib.reload(env)


def test_env_defaults(monkeypatch):
    monkeypatch.delenv('URLP_DEBUG', raising=False)
    monkeypatch.delenv('URLP_DEMO_URI', raising=False)
    importlib.reload(env)
    assert env.DEBUG is False
    assert env.DEMO_URI.startswith('https://')
