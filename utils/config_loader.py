# coinkard/utils/config_loader.py
import yaml
import os
import logging
import streamlit as st


logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
SETTINGS_PATH = os.path.join(PROJECT_ROOT, "settings.yaml")

REQUIRED_SECTIONS = ("app", "data")


def resolve_project_path(path):
    """Relative paths in settings.yaml are taken from the project root, not the working directory."""
    if os.path.isabs(path):
        return path
    return os.path.join(PROJECT_ROOT, path)


def apply_log_level(level_name):
    level = logging.getLevelName(str(level_name).upper())
    if not isinstance(level, int):
        logging.warning(f"Unknown log level '{level_name}', using INFO.")
        level = logging.INFO
    logging.getLogger().setLevel(level)
    return level


@st.cache_data(show_spinner=False)
def load_app_config(settings_path=SETTINGS_PATH):
    """Loads config from YAML and applies environment overrides."""
    try:
        with open(settings_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {"error": f"{os.path.basename(settings_path)} not found."}
    except yaml.YAMLError as e:
        logging.error(f"Failed to parse {settings_path}: {e}")
        return {"error": f"{os.path.basename(settings_path)} is not valid YAML."}

    missing = [section for section in REQUIRED_SECTIONS if not isinstance(config.get(section), dict)]
    if missing:
        return {"error": f"Missing section(s) in settings: {', '.join(missing)}"}

    data_path_env = os.getenv('COINKARD_DATA_PATH')
    if data_path_env:
        config['data']['source_path'] = data_path_env
        logging.info("Loaded sample data path from environment variable.")

    if not config['data'].get('source_path'):
        return {"error": "data.source_path missing in settings"}
    config['data']['source_path'] = resolve_project_path(config['data']['source_path'])

    config.setdefault('logging', {})
    log_level_env = os.getenv('COINKARD_LOG_LEVEL')
    if log_level_env:
        config['logging']['level'] = log_level_env
        logging.info("Loaded log level from environment variable.")
    apply_log_level(config['logging'].get('level', 'INFO'))

    logging.info(f"Loaded app config from {settings_path}.")
    return config

APP_CONFIG = load_app_config()
