"""
followcover.config.defaults - Built-in configuration values
"""

CONFIG_FILENAME = ".followcover.toml"

ENV_PREFIX = "FOLLOWCOVER_"

DEFAULT_CONFIG = {
    "loader": {
        # Empty string: split on any whitespace
        "delimiter": "",
        "comment_prefix": "#",
        "skip_malformed": False,
    },
    "report": {
        "top": 10,
        "descending": True,
    },
}
