"""Default configuration values for objectfile."""

DEFAULTS: dict[str, object] = {
    # Format key -> parser (or None); applied on top of the built-in registry.
    "parsers": {},
    # Use the comment-tolerant reader for ".json" when json5 is installed.
    "hybrid_json": True,
    # Per-parser option records
    "json": {"indent": 2},
    "json5": {"indent": 2},
    "yaml": {
        "dump": {
            "default_flow_style": False,
            "sort_keys": False,
            "allow_unicode": True,
        },
    },
}
