"""Pattern matchers for MQTT topics, NATS subjects and router paths."""

from __future__ import annotations

import json
import sys
from typing import Any, Callable, Generic, Optional, TextIO, TypeVar

from topicmatch.trie import MatchedResult, TrieNode

T = TypeVar("T")

KeyMatcher = Callable[[str], "tuple[str, bool]"]
Splitter = Callable[[str], "list[str]"]


class InvalidPathError(ValueError):
    """Raised when a path cannot be split into segments."""

    def __init__(self, message: str = "invalid path") -> None:
        super().__init__(message)


def router_param_matcher(sub: str) -> tuple[str, bool]:
    """``:name`` segments are parameters keyed by ``name``."""
    if len(sub) <= 1:
        return sub, False
    if sub.startswith(":"):
        return sub[1:], True
    return sub, False


def router_wildcard_matcher(sub: str) -> tuple[str, bool]:
    """Segments starting with ``*`` are wildcards keyed by ``*``."""
    if sub.startswith("*"):
        return "*", True
    return sub, False


def mqtt_param_matcher(sub: str) -> tuple[str, bool]:
    """``+`` is the single-level MQTT parameter."""
    return sub, sub == "+"


def mqtt_wildcard_matcher(sub: str) -> tuple[str, bool]:
    """``#`` is the multi-level MQTT wildcard."""
    return sub, sub == "#"


def mqtt_split(path: str) -> list[str]:
    """Split on ``/``; an empty path is invalid."""
    if not path:
        raise InvalidPathError()
    return path.split("/")


def nats_param_matcher(sub: str) -> tuple[str, bool]:
    """``>`` is treated as a single-segment parameter."""
    return sub, sub == ">"


def nats_wildcard_matcher(sub: str) -> tuple[str, bool]:
    """``*`` is treated as a wildcard."""
    return sub, sub == "*"


def nats_split(path: str) -> list[str]:
    """Split on ``.``; an empty path is invalid."""
    if not path:
        raise InvalidPathError()
    return path.split(".")


class Matcher(Generic[T]):
    """Stores path patterns with optional values and matches concrete paths."""

    def __init__(
        self,
        param_matcher: KeyMatcher,
        wildcard_matcher: KeyMatcher,
        splitter: Splitter,
    ) -> None:
        self._match_param = param_matcher
        self._match_wildcard = wildcard_matcher
        self._split = splitter
        self._root = TrieNode("/")

    def add_path(self, path: str, priority: int = 0) -> None:
        """Register a pattern; new nodes take the given priority."""
        self._add(path, priority, None)

    def add_path_with_value(self, path: str, value: T) -> None:
        """Register a pattern carrying a value."""
        self._add(path, 0, value)

    def _key(self, sub: str) -> tuple[str, bool, bool]:
        key, is_param = self._match_param(sub)
        if is_param:
            return key, True, False
        key, is_wildcard = self._match_wildcard(sub)
        return key, False, is_wildcard

    def _add(self, path: str, priority: int, value: Any) -> None:
        subs = self._split(path)
        node = self._root
        for sub in subs:
            key, is_param, is_wildcard = self._key(sub)
            child = next((c for c in node.children if c.sub_path == key), None)
            if child is None:
                child = TrieNode(
                    key,
                    full_path=path if is_wildcard else "",
                    is_param=is_param,
                    is_wildcard=is_wildcard,
                    priority=priority,
                )
                node.children.append(child)
                node.sort_children()
            node = child
        node.is_word = True
        node.full_path = path
        node.values.append(value)

    def _segments(self, topic: str) -> Optional[list[str]]:
        try:
            return self._split(topic)
        except InvalidPathError:
            return None

    def match(self, topic: str) -> Optional[tuple[str, dict[str, str]]]:
        """Return ``(pattern, named params)`` or ``None``."""
        found = self.match_with_values(topic)
        if found is None:
            return None
        path, params, _ = found
        return path, params

    def match_with_values(
        self, topic: str
    ) -> Optional[tuple[str, dict[str, str], list[T]]]:
        """Return ``(pattern, named params, values)`` or ``None``."""
        subs = self._segments(topic)
        if subs is None:
            return None
        return self._root.match(subs)

    def match_all(self, topic: str) -> list[MatchedResult]:
        """Return every result the topic reaches; empty for an invalid topic."""
        subs = self._segments(topic)
        if subs is None:
            return []
        return self._root.match_all(subs)

    def match_anonymous(self, topic: str) -> Optional[tuple[str, list[str]]]:
        """Return ``(pattern, positional params)`` or ``None``."""
        found = self.match_anonymous_with_values(topic)
        if found is None:
            return None
        path, params, _ = found
        return path, params

    def match_anonymous_with_values(
        self, topic: str
    ) -> Optional[tuple[str, list[str], list[T]]]:
        """Return ``(pattern, positional params, values)`` or ``None``."""
        subs = self._segments(topic)
        if subs is None:
            return None
        return self._root.match_anonymous(subs)

    def delete(self, path: str) -> None:
        """Remove the values stored under the literal segments of ``path``."""
        subs = self._segments(path)
        if subs is None:
            return
        self._root.delete(subs)

    def format_tree(self) -> str:
        """Render the trie as indented text."""
        lines = ["Prefix Trie Structure:"]
        self._format_node(self._root, 0, lines)
        return "\n".join(lines)

    def _format_node(self, node: TrieNode, depth: int, lines: list[str]) -> None:
        flags = ""
        if node.is_param:
            flags += "[Param]"
        if node.is_wildcard:
            flags += "[Wildcard]"
        if node.is_word:
            flags += "[End]"
        full_path = json.dumps(node.full_path, ensure_ascii=False)
        lines.append(
            f"{'  ' * depth}- {node.sub_path}: fullPath={full_path}, "
            f"flags={flags}, priority={node.priority}, values={len(node.values)}"
        )
        for child in node.sort_children():
            self._format_node(child, depth + 1, lines)

    def print_tree(self, file: Optional[TextIO] = None) -> None:
        """Write :meth:`format_tree` output to ``file`` (stdout by default)."""
        print(self.format_tree(), file=file if file is not None else sys.stdout)


def mqtt_topic_matcher() -> Matcher[Any]:
    """Matcher for MQTT topic filters (``+`` and ``#``)."""
    return Matcher(mqtt_param_matcher, mqtt_wildcard_matcher, mqtt_split)


def router_path_matcher() -> Matcher[Any]:
    """Matcher for router paths (``:name`` and ``*``)."""
    return Matcher(router_param_matcher, router_wildcard_matcher, mqtt_split)


def nats_subject_matcher() -> Matcher[Any]:
    """Matcher for NATS subjects split on ``.``."""
    return Matcher(nats_param_matcher, nats_wildcard_matcher, nats_split)