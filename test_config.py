#!/usr/bin/env python3
"""Test template configuration."""

import logging

from weezard import config
from weezard.logs import LogManager


def test_default_template():
    assert config.get_template() == config.DEFAULT_TEMPLATE


def test_set_and_reset_template():
    config.set_template("{name}? ")
    assert config.get_template() == "{name}? "
    config.reset_template()
    assert config.get_template() == config.DEFAULT_TEMPLATE


def test_config_file(tmp_path):
    """Template and logging settings are read from the INI file."""
    ini = tmp_path / "weezard.ini"
    ini.write_text(
        "[prompt]\n"
        'template = "{prompt} [{default}]: "\n'
        "\n"
        "[logging]\n"
        "log_level = DEBUG\n"
        "log_file = logs/weezard.log\n"
    )
    manager = config.ConfigManager(ini)
    manager.load()

    assert manager.template() == "{prompt} [{default}]: "
    assert manager.log_level() == "DEBUG"
    assert manager.log_file() == "logs/weezard.log"

    manager.apply()
    assert config.get_template() == "{prompt} [{default}]: "


def test_missing_config_file(tmp_path, caplog):
    manager = config.ConfigManager(tmp_path / "nope.ini")
    with caplog.at_level(logging.WARNING, logger="weezard.config"):
        manager.load()
    assert "Config file not found" in caplog.text
    assert manager.template() == config.DEFAULT_TEMPLATE
    assert manager.log_level() == "WARNING"
    assert manager.log_file() is None


def test_environment_overrides_file(tmp_path, monkeypatch):
    ini = tmp_path / "weezard.ini"
    ini.write_text("[prompt]\ntemplate = {prompt}: \n")
    monkeypatch.setenv(config.TEMPLATE_ENV_VAR, "{name} >> ")
    manager = config.ConfigManager(ini)
    manager.load()
    assert manager.template() == "{name} >> "


def test_log_manager(tmp_path):
    log_file = tmp_path / "logs" / "weezard.log"
    logger = LogManager("weezard.test", level="debug", log_file=log_file).get_logger()
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logger.debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "[DEBUG] weezard.test: hello" in log_file.read_text()

    # Re-initializing replaces handlers instead of stacking them
    LogManager("weezard.test", level="info")
    assert len(logger.handlers) == 1


def test_empty_template_in_file_uses_default(tmp_path):
    ini = tmp_path / "weezard.ini"
    ini.write_text("[prompt]\ntemplate =\n")
    manager = config.ConfigManager(ini)
    manager.load()
    assert manager.template() == config.DEFAULT_TEMPLATE

    ini.write_text('[prompt]\ntemplate = ""\n')
    manager = config.ConfigManager(ini)
    manager.load()
    manager.apply()
    assert config.get_template() == config.DEFAULT_TEMPLATE
