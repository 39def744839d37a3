import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Default configuration values
DEFAULT_CONFIG = {
    "SUCCESS_MESSAGE_SECONDS": 5,
    "DELETE_MESSAGE_SECONDS": 3
}

# Path to the optional override file
DYNAMIC_CONFIG_PATH = Path(__file__).parent.parent / "data" / "config.json"


def load_dynamic_config(path: Path = None):
    """Load client timing overrides from a JSON file, falling back to defaults."""
    path = path or DYNAMIC_CONFIG_PATH
    config = dict(DEFAULT_CONFIG)
    if not path.exists():
        return config

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return config

    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: expected a JSON object", path)
        return config

    # Only known keys with numeric values are honoured
    for key in DEFAULT_CONFIG:
        value = data.get(key)
        if isinstance(value, (int, float)) and not isinstance(value, bool) and value >= 0:
            config[key] = value
    return config
