"""Helpers to build Solr query strings."""

MATCH_ALL = "*:*"


def phrase(value: str) -> str:
    """Quote `value` as a Solr phrase, so that it is matched as a single
    term whatever characters it contains."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def term_query(field: str, value: str) -> str:
    return f"{field}:{phrase(value)}"
