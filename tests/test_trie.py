from topicmatch.trie import MatchedResult, TrieNode


def _sample_root() -> TrieNode:
    literal = TrieNode("a", full_path="a", is_word=True, values=[1])
    param = TrieNode("+", full_path="+", is_word=True, is_param=True, values=[2])
    wild = TrieNode("#", full_path="w/#", is_word=True, is_wildcard=True, values=[3])
    w = TrieNode("w", children=[wild])
    return TrieNode("/", children=[literal, param, w])


def test_sort_children_is_stable_by_priority():
    first = TrieNode("x", priority=2)
    second = TrieNode("y", priority=1)
    third = TrieNode("z", priority=2)
    root = TrieNode("/", children=[first, second, third])
    ordered = root.sort_children()
    assert [node.sub_path for node in ordered] == ["y", "x", "z"]
    assert root.children is ordered


def test_match_literal_before_param():
    result = _sample_root().match(["a"])
    assert result == ("a", {}, [1])


def test_match_param_records_name():
    result = _sample_root().match(["b"])
    assert result == ("+", {"+": "b"}, [2])


def test_match_wildcard():
    result = _sample_root().match(["w", "x", "y"])
    assert result == ("w/#", {}, [3])


def test_match_missing_returns_none():
    root = TrieNode("/", children=[TrieNode("a", full_path="a", is_word=True)])
    assert root.match(["b"]) is None


def test_match_param_last_requires_word():
    inner = TrieNode("+", is_param=True)
    root = TrieNode("/", children=[inner])
    assert root.match(["q"]) is None


def test_match_anonymous_collects_in_order():
    leaf = TrieNode("+", full_path="+/+", is_word=True, is_param=True, values=["v"])
    mid = TrieNode("+", is_param=True, children=[leaf])
    root = TrieNode("/", children=[mid])
    assert root.match_anonymous(["p", "q"]) == ("+/+", ["p", "q"], ["v"])


def test_match_anonymous_backtracks_params():
    dead = TrieNode("+", is_param=True, children=[TrieNode("x", full_path="+/x", is_word=True)])
    good = TrieNode("k", children=[TrieNode("y", full_path="k/y", is_word=True, values=[7])])
    root = TrieNode("/", children=[dead, good])
    assert root.match_anonymous(["k", "y"]) == ("k/y", [], [7])


def test_match_anonymous_none():
    assert _sample_root().match_anonymous(["a", "b"]) is None


def test_match_all_collects_every_route():
    results = _sample_root().match_all(["a"])
    assert results == [
        MatchedResult("a", [], [1]),
        MatchedResult("+", ["a"], [2]),
    ]


def test_match_all_empty_when_unreachable():
    root = TrieNode("/", children=[TrieNode("a", full_path="a", is_word=True)])
    assert root.match_all(["b", "c"]) == []


def test_delete_prunes_empty_leaf():
    root = _sample_root()
    root.delete(["a"])
    assert [node.sub_path for node in root.children] == ["+", "w"]
    assert root.match(["a"]) == ("+", {"+": "a"}, [2])


def test_delete_keeps_node_with_children():
    child = TrieNode("b", full_path="a/b", is_word=True, values=[5])
    parent = TrieNode("a", full_path="a", is_word=True, values=[4], children=[child])
    root = TrieNode("/", children=[parent])
    assert root.delete(["a"]) is False
    assert root.children == [parent]
    assert parent.values == []
    assert root.match(["a", "b"]) == ("a/b", {}, [5])


def test_delete_unknown_path_leaves_tree():
    root = _sample_root()
    root.delete(["zzz"])
    assert len(root.children) == 3