# SPDX-FileCopyrightText: 2026-present The tabconf Project contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: tabconf-core
# FILE:           tests/test_logging.py
# DESCRIPTION:    Tests for tabconf.core.logging
# CREATED:        19.10.2026
#
# The contents of this file are subject to the MIT License
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Contributor(s): Pavel Císař (original code, firebird-base)
#                 ______________________________________.

"""tabconf-core - Unit tests for tabconf.core.logging
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any

import pytest

import tabconf.core.logging as tclog
from tabconf.core.config import CompoundEntry, CompoundOption

# --- Test Setup & Fixtures ---

class NaiveAgent:
    """A test agent class without specific logging awareness."""

class AwareAgentAttr:
    """A test agent class with a static _agent_name_ attribute."""
    _agent_name_: str = "_agent_name_attr"

class AwareAgentProperty:
    """A test agent class with a dynamic _agent_name_ property."""
    def __init__(self, agent_name: Any):
        self._int_agent_name = agent_name
    @property
    def _agent_name_(self) -> Any:
        return self._int_agent_name

@contextmanager
def context_filter(target_logger: logging.Logger):
    """Context manager to temporarily add the ContextFilter to a logger."""
    ctx_filter = tclog.ContextFilter()
    target_logger.addFilter(ctx_filter)
    try:
        yield
    finally:
        target_logger.removeFilter(ctx_filter)

@pytest.fixture(autouse=True)
def reset_manager():
    """Restores the global logging manager after each test."""
    tclog.logging_manager.reset()
    yield
    tclog.logging_manager.reset()

# --- Test Functions ---

def test_context_filter_alone(caplog):
    """Tests that ContextFilter adds missing context attributes."""
    logger = logging.getLogger("tabconf.test.filter")
    caplog.set_level(logging.INFO, logger="tabconf.test.filter")
    with context_filter(logger):
        logger.info("Message")
    record = caplog.records[-1]
    assert record.domain is None
    assert record.topic is None
    assert record.agent is None

def test_context_adapter(caplog):
    """Tests that ContextLoggerAdapter stores context in records."""
    logger = logging.getLogger("tabconf.test.adapter")
    caplog.set_level(logging.INFO, logger="tabconf.test.adapter")
    adapter = tclog.ContextLoggerAdapter(logger, "domain", "topic", "agent_obj", "agent_name")
    adapter.info("Message %s", "arg")
    record = caplog.records[-1]
    assert record.getMessage() == "Message arg"
    assert (record.domain, record.topic, record.agent) == ("domain", "topic", "agent_name")
    assert adapter.agent == "agent_obj"
    # Extra passed by caller is merged
    adapter.info("Message", extra={"row": 1})
    record = caplog.records[-1]
    assert record.row == 1
    assert record.agent == "agent_name"

def test_mngr_defaults():
    """Tests LoggingManager defaults."""
    manager = tclog.LoggingManager()
    assert manager.logger_fmt == ["tabconf", tclog.DOMAIN, tclog.TOPIC]
    assert manager.default_domain == "config"
    manager.default_domain = None
    assert manager.default_domain is None
    manager.default_domain = 123
    assert manager.default_domain == "123"

def test_mngr_logger_fmt():
    """Tests setting, getting, and validation of logger_fmt."""
    manager = tclog.LoggingManager()
    value = ["app", tclog.DOMAIN, "module"]
    manager.logger_fmt = value
    assert manager.logger_fmt == value
    # Internal list is a copy
    value[0] = "xxx_changed"
    assert manager.logger_fmt == ["app", tclog.DOMAIN, "module"]
    # Empty strings are removed
    manager.logger_fmt = ["app", "", tclog.TOPIC]
    assert manager.logger_fmt == ["app", tclog.TOPIC]
    # Invalid items
    with pytest.raises(ValueError, match="Unsupported item type"):
        manager.logger_fmt = ["app", None]
    with pytest.raises(ValueError, match="Only one occurence of TOPIC allowed"):
        manager.logger_fmt = ["app", tclog.TOPIC, "x", tclog.TOPIC]
    with pytest.raises(ValueError, match="Only one occurence of DOMAIN allowed"):
        manager.logger_fmt = ["app", tclog.DOMAIN, tclog.DOMAIN]

def test_mngr_get_logger_name_generation():
    """Tests logger name generation for various formats and inputs."""
    manager = tclog.LoggingManager()
    assert manager._get_logger_name("domain", "topic") == "tabconf.domain.topic"
    assert manager._get_logger_name(None, "topic") == "tabconf.topic"
    assert manager._get_logger_name("domain", None) == "tabconf.domain"
    assert manager._get_logger_name(None, None) == "tabconf"
    manager.logger_fmt = ["prefix", tclog.TOPIC, tclog.DOMAIN, "suffix"]
    assert manager._get_logger_name("domain", "topic") == "prefix.topic.domain.suffix"

def test_mngr_get_agent_name():
    """Tests agent name resolution."""
    manager = tclog.LoggingManager()
    assert manager.get_agent_name("agent") == "agent"
    assert manager.get_agent_name(NaiveAgent()) == f"{__name__}.NaiveAgent"
    assert manager.get_agent_name(AwareAgentAttr()) == "_agent_name_attr"
    assert manager.get_agent_name(AwareAgentProperty("dynamic")) == "dynamic"
    assert manager.get_agent_name(AwareAgentProperty(42)) == "42"
    # Empty name falls back to class name
    assert manager.get_agent_name(AwareAgentProperty("")) == f"{__name__}.AwareAgentProperty"

def test_mngr_domain_mapping():
    """Tests assigning agents to domains."""
    manager = tclog.LoggingManager()
    manager.set_domain_mapping("ui", ["agent1", "agent2"])
    assert manager.get_agent_domain("agent1") == "ui"
    assert manager.get_agent_domain("agent2") == "ui"
    assert manager.get_agent_domain("agent3") is None
    # Moving agent to another domain
    manager.set_domain_mapping("net", "agent2")
    assert manager.get_agent_domain("agent2") == "net"
    # Removing domain
    manager.set_domain_mapping("ui", None)
    assert manager.get_agent_domain("agent1") is None
    assert manager.get_agent_domain("agent2") == "net"
    manager.set_domain_mapping("missing", None)
    manager.reset()
    assert manager.get_agent_domain("agent2") is None

def test_mngr_get_logger():
    """Tests logger selection."""
    manager = tclog.LoggingManager()
    log = manager.get_logger("agent")
    assert isinstance(log, tclog.ContextLoggerAdapter)
    assert log.logger.name == "tabconf.config"
    assert log.extra == {"domain": "config", "topic": None, "agent": "agent"}
    log = manager.get_logger("agent", "trace")
    assert log.logger.name == "tabconf.config.trace"
    manager.set_domain_mapping("ui", "agent")
    log = manager.get_logger("agent")
    assert log.logger.name == "tabconf.ui"
    manager.default_domain = None
    assert manager.get_logger("other").logger.name == "tabconf"

def test_logger_factory():
    """Tests custom logger factory."""
    manager = tclog.LoggingManager()
    names = []
    def factory(name: str) -> logging.Logger:
        names.append(name)
        return logging.getLogger(f"custom.{name}")
    manager.set_logger_factory(factory)
    assert manager.get_logger("agent").logger.name == "custom.tabconf.config"
    assert names == ["tabconf.config"]

def test_option_logging(caplog):
    """Tests that options log as agents into mapped domain."""
    caplog.set_level(logging.DEBUG, logger="tabconf")
    opt = CompoundOption("bindings", [CompoundEntry(int, "key_")], "description")
    assert tclog.get_agent_name(opt) == "option.bindings"
    tclog.set_domain_mapping("ui", ["option.bindings"])
    assert not opt.set_value_str("copy, abc")
    record = caplog.records[-1]
    assert record.name == "tabconf.ui"
    assert record.levelno == logging.DEBUG
    assert record.agent == "option.bindings"
    assert record.domain == "ui"
    assert record.getMessage() == ("Value rejected: Item 1 of row 0 of option 'bindings' "
                                   "is not a valid 'int' value: 'abc'")
