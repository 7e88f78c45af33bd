# SPDX-FileCopyrightText: 2026-present The tabconf Project contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: tabconf-core
# FILE:           tabconf/core/logging.py
# DESCRIPTION:    Context-based logging
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
#                 ______________________________________

"""tabconf-core - Context-based logging

Thin layer over the standard `logging` module. Code that logs asks the
`LoggingManager` for a logger on behalf of an *agent* (any object or name),
optionally for a *topic*. The manager decides which `logging.Logger` is used,
based on the domain assigned to the agent and on the `logger_fmt` template, and
wraps it in `ContextLoggerAdapter` that stores `domain`, `topic` and `agent` in
every `logging.LogRecord`.

Options are agents named `option.<option name>`, and they log into the default
`config` domain unless mapped to another one with `set_domain_mapping()`::

    import logging
    from tabconf.core.logging import ContextFilter, set_domain_mapping

    handler = logging.StreamHandler()
    handler.addFilter(ContextFilter())
    handler.setFormatter(logging.Formatter('%(levelname)s [%(agent)s] %(message)s'))
    logging.getLogger('tabconf').addHandler(handler)

    set_domain_mapping('ui', ['option.bindings'])   # logs to 'tabconf.ui'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any


class FormatElement(Enum):
    """Placeholders used in `LoggingManager.logger_fmt`."""
    DOMAIN = 1
    TOPIC = 2

#: Placeholder for the agent domain in `LoggingManager.logger_fmt`.
DOMAIN: FormatElement = FormatElement.DOMAIN
#: Placeholder for the topic in `LoggingManager.logger_fmt`.
TOPIC: FormatElement = FormatElement.TOPIC

class ContextFilter(logging.Filter):
    """Filter that adds missing `domain`, `topic` and `agent` attributes (set to `None`)
    to records, so formatters that use them work also for records that didn't pass
    through `ContextLoggerAdapter`.
    """
    def filter(self, record) -> bool:
        for attr in ('domain', 'topic', 'agent'):
            if not hasattr(record, attr):
                setattr(record, attr, None)
        return True

class ContextLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that puts `domain`, `topic` and `agent` into log records.

    Arguments:
        logger: Wrapped `logging.Logger`.
        domain: Domain name or None.
        topic: Topic name or None.
        agent: Agent object or name passed to `~LoggingManager.get_logger`.
        agent_name: Resolved agent name.
    """
    def __init__(self, logger: logging.Logger, domain: str | None, topic: str | None,
                 agent: Any, agent_name: str):
        self.agent = agent
        super().__init__(logger, {'domain': domain, 'topic': topic, 'agent': agent_name})
    def process(self, msg: Any, kwargs: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
        kwargs['extra'] = dict(self.extra, **kwargs['extra']) if 'extra' in kwargs else self.extra
        return msg, kwargs

class LoggingManager:
    """Decides which logger is used by which agent.
    """
    def __init__(self):
        self._agent_domain_map: dict[str, str] = {}
        self._domain_agent_map: dict[str, set[str]] = {}
        self.__logger_fmt: list[str | FormatElement] = []
        self.__default_domain: str | None = None
        self._logger_factory: Callable[[str], logging.Logger] = logging.getLogger
        self.reset()
    def reset(self) -> None:
        """Restores defaults: no domain mappings, `logger_fmt` set to
        `['tabconf', DOMAIN, TOPIC]` and `default_domain` set to 'config'.
        """
        self._agent_domain_map.clear()
        self._domain_agent_map.clear()
        self.logger_fmt = ['tabconf', DOMAIN, TOPIC]
        self.default_domain = 'config'
    def set_logger_factory(self, factory: Callable[[str], logging.Logger]) -> None:
        """Sets callable used to create `logging.Logger` for a name.
        """
        self._logger_factory = factory
    @property
    def logger_fmt(self) -> list[str | FormatElement]:
        """Template of logger names.

        Strings are used as they are, `DOMAIN` and `TOPIC` placeholders are replaced
        by agent domain and topic (and skipped when not defined). The parts are
        joined with dots. Each placeholder may be used at most once.
        """
        return self.__logger_fmt
    @logger_fmt.setter
    def logger_fmt(self, value: list[str | FormatElement]) -> None:
        result = []
        for item in value:
            if isinstance(item, str):
                if item:
                    result.append(item)
            elif isinstance(item, FormatElement):
                if item in result:
                    raise ValueError(f"Only one occurence of {item.name} allowed")
                result.append(item)
            else:
                raise ValueError(f"Unsupported item type {type(item)}")
        self.__logger_fmt = result
    @property
    def default_domain(self) -> str | None:
        """Domain used for agents without explicit domain mapping.
        """
        return self.__default_domain
    @default_domain.setter
    def default_domain(self, value: str | None) -> None:
        self.__default_domain = None if value is None else str(value)
    def _get_logger_name(self, domain: str | None, topic: str | None) -> str:
        result = []
        for item in self.logger_fmt:
            if item is DOMAIN:
                if domain:
                    result.append(domain)
            elif item is TOPIC:
                if topic:
                    result.append(topic)
            else:
                result.append(item)
        return '.'.join(result)
    def get_agent_name(self, agent: Any) -> str:
        """Returns name of the agent.

        String agents are names themselves. For other objects it's the value of
        their `_agent_name_` attribute, or `module.ClassQualname` if they have none.
        """
        if isinstance(agent, str):
            return agent
        if agent_name := getattr(agent, '_agent_name_', None):
            return str(agent_name)
        return f'{agent.__class__.__module__}.{agent.__class__.__qualname__}'
    def set_domain_mapping(self, domain: str, agents: Iterable[str] | str | None) -> None:
        """Assigns agents to domain.

        Agents are removed from their previous domain. When `agents` is None, all
        agents are removed from the domain.
        """
        if agents is None:
            for agent in self._domain_agent_map.pop(domain, set()):
                del self._agent_domain_map[agent]
            return
        for agent in {agents} if isinstance(agents, str) else set(agents):
            if (current := self._agent_domain_map.get(agent)) is not None:
                self._domain_agent_map[current].discard(agent)
                if not self._domain_agent_map[current]:
                    del self._domain_agent_map[current]
            self._agent_domain_map[agent] = domain
            self._domain_agent_map.setdefault(domain, set()).add(agent)
    def get_agent_domain(self, agent: str) -> str | None:
        """Returns domain explicitly assigned to agent, or None.
        """
        return self._agent_domain_map.get(agent)
    def get_logger(self, agent: Any, topic: str | None=None) -> ContextLoggerAdapter:
        """Returns logger adapter for agent and topic.
        """
        agent_name = self.get_agent_name(agent)
        domain = self._agent_domain_map.get(agent_name, self.default_domain)
        logger = self._logger_factory(self._get_logger_name(domain, topic))
        return ContextLoggerAdapter(logger, domain, topic, agent, agent_name)

#: Context logging manager.
logging_manager: LoggingManager = LoggingManager()
#: Shortcut to `logging_manager.get_logger`.
get_logger = logging_manager.get_logger
#: Shortcut to `logging_manager.get_agent_name`.
get_agent_name = logging_manager.get_agent_name
#: Shortcut to `logging_manager.set_domain_mapping`.
set_domain_mapping = logging_manager.set_domain_mapping
