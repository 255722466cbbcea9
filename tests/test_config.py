import logging

from hexnav import config


def test_hex_size_default_and_override(monkeypatch):
    monkeypatch.delenv("HEXNAV_HEX_SIZE", raising=False)
    assert config.hex_size() == config.DEFAULT_HEX_SIZE == 0.6

    monkeypatch.setenv("HEXNAV_HEX_SIZE", "2")
    assert config.hex_size() == 2.0


def test_hex_size_bad_override_falls_back(monkeypatch, caplog):
    with caplog.at_level(logging.WARNING, logger="hexnav.config"):
        for raw in ("abc", "0", "-1.5"):
            monkeypatch.setenv("HEXNAV_HEX_SIZE", raw)
            assert config.hex_size() == config.DEFAULT_HEX_SIZE
    assert len(caplog.records) == 3


def test_map_path(monkeypatch):
    monkeypatch.delenv("HEXNAV_MAP_PATH", raising=False)
    assert config.map_path() is None
    monkeypatch.setenv("HEXNAV_MAP_PATH", "  maps/bay.txt ")
    assert config.map_path() == "maps/bay.txt"


def test_setup_logging_installs_one_handler(monkeypatch):
    root = logging.getLogger()
    saved_level = root.level
    saved = list(root.handlers)
    try:
        monkeypatch.setenv("HEXNAV_LOG_LEVEL", "debug")
        config.setup_logging()
        config.setup_logging()
        ours = [h for h in root.handlers if h.get_name() == config.HANDLER_NAME]
        assert len(ours) == 1
        assert root.level == logging.DEBUG

        config.setup_logging("warning")
        assert root.level == logging.WARNING
    finally:
        for h in list(root.handlers):
            if h not in saved:
                root.removeHandler(h)
        root.setLevel(saved_level)
