"""Natural-language query translation.

The nlq layer converts a free-text English query into a `FilterSet` using a small, ordered set of
deterministic rules. It is a bounded pattern matcher, not a language parser.
"""
