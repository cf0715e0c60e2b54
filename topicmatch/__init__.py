"""Trie-based matching of MQTT topics, NATS subjects and router paths against patterns."""

__version__ = "0.1.0"