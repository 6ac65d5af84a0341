import json
from pathlib import Path

import pytest

from eventforge import EventApp, EventForgeConfig
from eventforge.core.container_aware import ContainerAwareEventDispatcher
from eventforge.core.dispatcher import EventDispatcher
from eventforge.core.exceptions import ImmutableDispatcherError
from eventforge.core.traceable import TraceableEventDispatcher


class Mailer:
    def __init__(self) -> None:
        self.events = []

    def on_placed(self, event, event_name, dispatcher) -> None:
        self.events.append(event_name)


def write_manifest(path: Path) -> Path:
    path.write_text(
        json.dumps(
            {"listeners": [{"event": "order.placed", "service": "mailer", "method": "on_placed"}]}
        ),
        encoding="utf-8",
    )
    return path


def test_config_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("EVENTFORGE_DEBUG", "yes")
    monkeypatch.setenv("EVENTFORGE_MANIFEST", str(tmp_path / "listeners.json"))
    monkeypatch.setenv("EVENTFORGE_LOG_LEVEL", "info")

    config = EventForgeConfig.from_env()

    assert config.debug is True
    assert config.manifest_path == tmp_path / "listeners.json"
    assert config.log_level == "INFO"


def test_config_defaults(monkeypatch):
    for name in ("EVENTFORGE_DEBUG", "EVENTFORGE_MANIFEST", "EVENTFORGE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert EventForgeConfig.from_env() == EventForgeConfig()


def test_config_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("EVENTFORGE_LOG_LEVEL", "loud")
    with pytest.raises(ValueError):
        EventForgeConfig.from_env()


def test_default_app_is_container_aware():
    app = EventApp(EventForgeConfig())
    assert isinstance(app.dispatcher, ContainerAwareEventDispatcher)
    assert app.dispatcher.get_container() is app.container


def test_manifest_is_loaded_into_dispatcher(tmp_path):
    config = EventForgeConfig(manifest_path=write_manifest(tmp_path / "listeners.json"))
    app = EventApp(config)
    mailer = Mailer()
    app.container.set("mailer", mailer)

    app.dispatcher.dispatch("order.placed")

    assert mailer.events == ["order.placed"]
    assert app.snapshot() == {"order.placed": ["Mailer.on_placed"]}


def test_manifest_requires_container_aware_dispatcher(tmp_path):
    config = EventForgeConfig(manifest_path=write_manifest(tmp_path / "listeners.json"))
    with pytest.raises(ValueError):
        EventApp(config, dispatcher=EventDispatcher())


def test_debug_wraps_in_traceable(listeners):
    app = EventApp(EventForgeConfig(debug=True))
    assert isinstance(app.dispatcher, TraceableEventDispatcher)

    app.dispatcher.add_listener("order.placed", listeners.build("only"))
    app.dispatcher.dispatch("order.placed")

    assert [call.event_name for call in app.dispatcher.get_called_listeners()] == ["order.placed"]


def test_read_only_view(listeners):
    app = EventApp(EventForgeConfig(), dispatcher=EventDispatcher())
    listener = listeners.build()
    app.dispatcher.add_listener("order.placed", listener)
    view = app.read_only()

    assert view.get_listeners("order.placed") == [listener]
    with pytest.raises(ImmutableDispatcherError):
        view.add_listener("order.paid", listener)
