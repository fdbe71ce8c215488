import os
import json
import logging
from typing import Any, Dict, List, Optional
from dotenv import load_dotenv

logger = logging.getLogger("Polyglot.Config")

load_dotenv()

DEFAULT_TRANSLATE_ENDPOINT = "https://libretranslate.de/translate"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

# 프로젝트 루트의 config/config.json
DEFAULT_CONFIG_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '../config/config.json'))


def _load_system_settings(config_path: Optional[str] = None) -> Dict[str, Any]:
    path = config_path or DEFAULT_CONFIG_PATH
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Ignoring unreadable config file {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {path}: top level is not an object")
        return {}
    settings = data.get('system_settings', {})
    return settings if isinstance(settings, dict) else {}


def get_translate_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Upstream translation service settings.
    우선순위: 환경변수 > config.json > 기본값
    """
    section = _load_system_settings(config_path).get('translation_service', {})
    config_data = {
        'endpoint': DEFAULT_TRANSLATE_ENDPOINT,
        'api_key': None,
        'timeout': None,
    }
    if isinstance(section, dict):
        config_data.update({k: v for k, v in section.items() if k in config_data})

    env_endpoint = os.getenv("TRANSLATE_ENDPOINT")
    if env_endpoint: config_data['endpoint'] = env_endpoint
    env_api_key = os.getenv("TRANSLATE_API_KEY")
    if env_api_key: config_data['api_key'] = env_api_key
    env_timeout = os.getenv("TRANSLATE_TIMEOUT")
    if env_timeout: config_data['timeout'] = env_timeout

    if config_data['timeout'] is not None:
        try:
            config_data['timeout'] = float(config_data['timeout'])
        except (TypeError, ValueError):
            logger.warning(f"Invalid translate timeout {config_data['timeout']!r}, using client default")
            config_data['timeout'] = None

    return config_data


def get_server_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    section = _load_system_settings(config_path).get('api_server', {})
    config_data = {'host': DEFAULT_HOST, 'port': DEFAULT_PORT}
    if isinstance(section, dict):
        config_data.update({k: v for k, v in section.items() if k in config_data})

    env_host = os.getenv("POLYGLOT_HOST")
    if env_host: config_data['host'] = env_host
    env_port = os.getenv("POLYGLOT_PORT")
    if env_port: config_data['port'] = env_port

    try:
        config_data['port'] = int(config_data['port'])
    except (TypeError, ValueError):
        logger.warning(f"Invalid port {config_data['port']!r}, falling back to {DEFAULT_PORT}")
        config_data['port'] = DEFAULT_PORT

    return config_data


def get_allowed_origins() -> List[str]:
    raw = os.getenv("ALLOWED_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]
