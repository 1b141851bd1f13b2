import os
import json
import logging
from typing import Dict, Any, Optional
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONFIG = {
    "namespace": "zenml",
    "source_path_template": "zenml/{module}/{module}.py",
    "class_relation": (
        "([Integration](/integrations-integration/#zenml.integrations.integration.Integration "
        "\"zenml.integrations.integration.Integration\"))"
    ),
    "output_extension": ".mdx",
    "log_level": "INFO",
}

ENV_OVERRIDES = {
    "namespace": "DOCGEN_NAMESPACE",
    "source_path_template": "DOCGEN_SOURCE_PATH_TEMPLATE",
    "class_relation": "DOCGEN_CLASS_RELATION",
    "log_level": "DOCGEN_LOG_LEVEL",
}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration.

    Defaults are overridden by environment variables (a `.env` file is
    honoured), which are in turn overridden by the JSON config file.

    Args:
        config_path: Path to a JSON config file, or None for defaults

    Returns:
        Configuration dictionary
    """
    default_config = dict(DEFAULT_CONFIG)
    for key, env_var in ENV_OVERRIDES.items():
        if os.environ.get(env_var):
            default_config[key] = os.environ[env_var]

    if not config_path or not os.path.exists(config_path):
        return default_config

    try:
        with open(config_path, 'r', encoding='utf-8') as file:
            user_config = json.load(file)
    except (OSError, json.JSONDecodeError) as e:
        logging.warning(f"Failed to read config file {config_path}: {e}; using defaults")
        return default_config

    if not isinstance(user_config, dict):
        logging.warning(f"Config file {config_path} does not contain an object; using defaults")
        return default_config

    unknown = set(user_config) - set(DEFAULT_CONFIG)
    if unknown:
        logging.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")

    return {**default_config, **{k: v for k, v in user_config.items() if k in DEFAULT_CONFIG}}
