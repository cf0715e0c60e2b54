# topicmatch

Match concrete topics, subjects or URL paths against a set of registered
patterns. Patterns are stored in a prefix trie whose segments are literal
segments, single-segment parameters, or wildcards that accept whatever follows.

Three flavours are ready made in `topicmatch.matcher`:

| Factory                  | Separator | Parameter   | Wildcard              |
|--------------------------|-----------|-------------|-----------------------|
| `mqtt_topic_matcher()`   | `/`       | `+`         | `#`                   |
| `router_path_matcher()`  | `/`       | `:name`     | any segment from `*`  |
| `nats_subject_matcher()` | `.`       | `>`         | `*`                   |

In the NATS flavour `>` stands for exactly one segment and `*` for the rest of
the subject.

## Installation

```
pip install topicmatch
```

The package has no dependencies beyond the standard library.

## Usage

```python
from topicmatch.matcher import mqtt_topic_matcher, router_path_matcher

topics = mqtt_topic_matcher()
topics.add_path("iot/bms/things/+/up/props")
topics.add_path("iot/bms/things/+/up/ota/+")
topics.add_path("iot/ems/things/#")

topics.match_anonymous("iot/bms/things/edge1/up/ota/upgradePost")
# ("iot/bms/things/+/up/ota/+", ["edge1", "upgradePost"])

topics.match_anonymous("iot/bms/things/edge1/up/x")
# None

routes = router_path_matcher()
routes.add_path_with_value("/user/admin", "admin_handler")
routes.add_path_with_value("/user/:id", "user_handler")

routes.match_anonymous_with_values("/user/123")
# ("/user/:id", ["123"], ["user_handler"])
```

Every matching method of `Matcher` returns `None` when nothing matches, or
when the topic cannot be split (an empty string, for the built-in splitters):

- `match(topic)` returns `(pattern, params)`, where `params` is a dictionary
  keyed by the parameter's key: the name after `:` for router paths, the `+`
  or `>` itself for MQTT and NATS.
- `match_with_values(topic)` returns `(pattern, params, values)`.
- `match_anonymous(topic)` returns `(pattern, params)` with the parameters as a
  list in order of appearance.
- `match_anonymous_with_values(topic)` returns `(pattern, params, values)`.
- `match_all(topic)` returns a list of `MatchedResult` objects (with `path`,
  `params` and `values`) for every route the topic reaches, and an empty list
  for a topic that cannot be split.

`add_path(path, priority=0)` registers a pattern carrying the value `None`;
nodes it creates take the given priority, and children are tried in ascending
order of priority. `add_path_with_value(path, value)` registers a pattern with
a value; registering the same pattern again adds another value to the list.
Patterns passed to either must be splittable, or the splitter's
`InvalidPathError` is raised.

`delete(path)` clears the values stored at the end of `path`, following the
stored segment keys (`+`, `#`, `>`, `*` are stored as written; a router
parameter `:id` is stored as `id`), and prunes nodes left empty.

`format_tree()` renders the trie as indented text and `print_tree(file=None)`
writes it to the given file or to standard output.

## Custom matchers

`Matcher(param_matcher, wildcard_matcher, splitter)` builds a matcher of your
own. Each key matcher takes one segment and returns `(key, flag)`; the splitter
takes a path and returns its segments, raising `InvalidPathError` for input it
rejects. The built-in pieces (`router_param_matcher`, `mqtt_split`,
`nats_wildcard_matcher` and the rest) can be combined freely.

The lower-level trie is available as `topicmatch.trie.TrieNode`.

## Scope

This is a library only: it has no command-line tool, and patterns live in
memory for the life of the `Matcher`; nothing is saved or loaded.

## Running the tests

```
pip install -e ".[test]"
pytest
```