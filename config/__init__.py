import os
import json
from pathlib import Path
from dotenv import load_dotenv
from .logging_config import setup_app_logging
import logging

# Load environment variables from .env file
load_dotenv()

# Get the config directory path (where this file is located)
CONFIG_DIR = Path(__file__).parent

PROJECT_ROOT = CONFIG_DIR.parent

# Load configuration from config.json
config_path = CONFIG_DIR / 'config.json'
with open(config_path, 'r', encoding='utf-8') as f:
    CONFIG = json.load(f)

CONFIG['project_root'] = str(PROJECT_ROOT)

# Environment variables
ENV = {
    'REMOTE_CLOUD_HOSTNAME': os.getenv('REMOTE_CLOUD_HOSTNAME'),
    'REMOTE_CLOUD_BASE_PATH': os.getenv('REMOTE_CLOUD_BASE_PATH'),
    'DISCOVERY_PROVIDER': os.getenv('DISCOVERY_PROVIDER'),
}


# --- Helper function to get config value from CONFIG or environment variable ---
def get_config_value(json_keys: list, env_var_name: str, default_value: any = None):
    """
    Retrieves a configuration value.
    Priority:
    1. Environment variable (if env_var_name is provided and variable is set).
    2. Value from CONFIG dictionary (using json_keys).
    3. default_value.
    """
    # Try environment variable first
    if env_var_name:
        env_value = os.getenv(env_var_name)
        if env_value is not None:
            # Attempt to match type of default_value if it's int or bool
            if isinstance(default_value, bool):
                if env_value.lower() == 'true': return True
                if env_value.lower() == 'false': return False
            elif isinstance(default_value, (int, float)):
                try:
                    return type(default_value)(env_value)
                except ValueError:
                    pass # Fall through to JSON or default if not a valid number
            else:
                return env_value

    # Try from CONFIG dictionary (loaded from JSON)
    current_level = CONFIG
    try:
        for key in json_keys:
            current_level = current_level[key]
        if isinstance(current_level, (str, int, bool, float, list, dict)):
             return current_level
    except (KeyError, TypeError):
        pass # Key not found or CONFIG structure not as expected, fall through to default

    # Fallback to default value
    return default_value


# --- Remote cloud (device inventory) ---
# Environment variables take precedence over config.json so deployments can point
# the bridge at another cloud without editing files.
CONFIG['provider'] = str(get_config_value(['provider'], 'DISCOVERY_PROVIDER', 'cloud')).strip().lower()
CONFIG['remote_cloud'] = {
    'hostname': get_config_value(['remote_cloud', 'hostname'], 'REMOTE_CLOUD_HOSTNAME', ''),
    'base_path': get_config_value(['remote_cloud', 'base_path'], 'REMOTE_CLOUD_BASE_PATH', ''),
    'port': get_config_value(['remote_cloud', 'port'], 'REMOTE_CLOUD_PORT', 443),
    'timeout_s': get_config_value(['remote_cloud', 'timeout_s'], 'REMOTE_CLOUD_TIMEOUT_S', 10.0),
}


def validate_config():
    """Validate that the settings required by the active provider are present.

    The mock provider needs nothing. The cloud provider needs a hostname to talk to;
    the base path may legitimately be empty.
    """
    provider = CONFIG.get('provider', 'cloud')
    if provider not in ('cloud', 'mock'):
        raise ValueError(f"Unsupported discovery provider: {provider}")

    if provider == 'cloud':
        hostname = CONFIG['remote_cloud'].get('hostname')
        if not isinstance(hostname, str) or not hostname.strip():
            raise ValueError(
                "Missing configuration for remote cloud hostname.\n"
                "Set remote_cloud.hostname in config.json or REMOTE_CLOUD_HOSTNAME in your .env file."
            )

# Validate configuration on module import
validate_config()

# --- Logging Configuration ---
# Defaults for logging config are also in logging_config.py's setup_app_logging function's signature
# or can be specified in config.json. Environment variables take precedence.
CONFIG['logging'] = {
    'level': get_config_value(['logging', 'level'], 'LOG_LEVEL', 'INFO'),
    'file_path': get_config_value(['logging', 'file_path'], 'LOG_FILE_PATH', ''),
    'max_bytes': get_config_value(['logging', 'max_bytes'], 'LOG_MAX_BYTES', 5*1024*1024), # 5MB
    'backup_count': get_config_value(['logging', 'backup_count'], 'LOG_BACKUP_COUNT', 3),
    'format': get_config_value(
        ['logging', 'format'],
        'LOG_FORMAT',
        '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s'
    ),
    'date_format': get_config_value(
        ['logging', 'date_format'],
        'LOG_DATE_FORMAT',
        '%Y-%m-%d %H:%M:%S'
    )
}

# --- Setup Application Logging ---
setup_app_logging(config=CONFIG.get('logging'))

config_init_logger = logging.getLogger(__name__)
config_init_logger.info(
    "[config_init] Logging initialized. Provider: %s, remote host: %s",
    CONFIG['provider'],
    CONFIG['remote_cloud']['hostname'] or '<unset>',
)
