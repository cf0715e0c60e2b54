"""Prefix trie of path segments with parameter and wildcard nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence


@dataclass
class MatchedResult:
    """One result produced by :meth:`TrieNode.match_all`."""

    path: str
    params: list[str]
    values: list[Any]


@dataclass(eq=False)
class TrieNode:
    """A node of the path trie.

    ``sub_path`` is the segment key, ``full_path`` the pattern that ends here
    (or that a wildcard node belongs to).
    """

    sub_path: str
    full_path: str = ""
    children: list[TrieNode] = field(default_factory=list)
    is_word: bool = False
    is_param: bool = False
    is_wildcard: bool = False
    priority: int = 0
    values: list[Any] = field(default_factory=list)

    def sort_children(self) -> list[TrieNode]:
        """Order the children by ascending priority and return them."""
        self.children.sort(key=lambda node: node.priority)
        return self.children

    def match(
        self, subs: Sequence[str]
    ) -> Optional[tuple[str, dict[str, str], list[Any]]]:
        """Match segments, collecting named parameters.

        Returns ``(path, params, values)`` or ``None`` when nothing matches.
        """
        params: dict[str, str] = {}
        found = self._backtrace(subs, params, 0)
        if found is None:
            return None
        path, values = found
        return path, params, list(values)

    def _backtrace(
        self, subs: Sequence[str], params: dict[str, str], index: int
    ) -> Optional[tuple[str, list[Any]]]:
        if index == len(subs):
            return self.full_path, self.values
        sub = subs[index]
        last = index == len(subs) - 1
        for child in self.children:
            if child.sub_path == sub:
                found = child._backtrace(subs, params, index + 1)
                if found is not None:
                    return found
            elif child.is_param:
                found = child._backtrace(subs, params, index + 1)
                if found is not None:
                    if last and not child.is_word:
                        continue
                    params[child.sub_path] = sub
                    return found
            elif child.is_wildcard:
                return child.full_path, child.values
        return None

    def match_anonymous(
        self, subs: Sequence[str]
    ) -> Optional[tuple[str, list[str], list[Any]]]:
        """Match segments, collecting parameters in order of appearance.

        Returns ``(path, params, values)`` or ``None`` when nothing matches.
        """
        params: list[str] = []
        found = self._backtrace_tail(subs, params, 0)
        if found is None:
            return None
        path, values = found
        return path, params, list(values)

    def _backtrace_tail(
        self, subs: Sequence[str], params: list[str], index: int
    ) -> Optional[tuple[str, list[Any]]]:
        if index == len(subs):
            return self.full_path, self.values
        sub = subs[index]
        for child in self.children:
            if child.sub_path == sub:
                found = child._backtrace_tail(subs, params, index + 1)
                if found is not None:
                    return found
            if child.is_param:
                params.append(sub)
                found = child._backtrace_tail(subs, params, index + 1)
                if found is not None:
                    return found
                params.pop()
            if child.is_wildcard:
                return child.full_path, child.values
        return None

    def match_all(self, subs: Sequence[str]) -> list[MatchedResult]:
        """Collect every route through the trie that the segments reach."""
        results: list[MatchedResult] = []
        self._backtrace_all(subs, [], 0, results)
        return results

    def _backtrace_all(
        self,
        subs: Sequence[str],
        params: list[str],
        index: int,
        results: list[MatchedResult],
    ) -> None:
        if index == len(subs):
            results.append(MatchedResult(self.full_path, list(params), list(self.values)))
            params.clear()
            return
        sub = subs[index]
        for child in self.children:
            if child.sub_path == sub:
                child._backtrace_all(subs, params, index + 1, results)
            elif child.is_param:
                params.append(sub)
                child._backtrace_all(subs, params, index + 1, results)
            elif child.is_wildcard:
                results.append(
                    MatchedResult(child.full_path, list(params), list(child.values))
                )
                params.clear()

    def delete(self, subs: Sequence[str]) -> bool:
        """Clear the values stored under the literal segments and prune.

        Returns True when this node is left with no children and no values.
        """
        if not subs:
            self.values = []
            return not self.children
        head, rest = subs[0], subs[1:]
        for position, child in enumerate(self.children):
            if child.sub_path == head:
                if child.delete(rest):
                    del self.children[position]
                break
        return not self.children and not self.values