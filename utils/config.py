import os

import yaml


def load_config(config_path: str = "./config.yaml") -> dict:
    """
    Load configuration from the environment, overlaid with a YAML file.

    :param config_path: YAML file path; skipped when it does not exist
    :return: merged configuration dict
    """
    configs = dict(os.environ)
    if os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as file:
            yaml_data = yaml.safe_load(file) or {}
        if not isinstance(yaml_data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")
        configs.update({str(k): v for k, v in yaml_data.items()})
    return configs
