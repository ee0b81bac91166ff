#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
配置文件读取器
Reads xconnect.yaml (venue hosts, request settings, accounts, logging) and hands
drivers what they need. Environment variables override stored credentials.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List
import logging

from xconnect.core.kernel.errors import ConfigError

DEFAULT_CONFIG_FILE = 'xconnect.yaml'

# exchange -> (api key env var, secret env var)
CREDENTIAL_ENV = {
    'binance_swap': ('BINANCE_API_KEY', 'BINANCE_API_SECRET'),
}


class ConfigReader:
    """配置文件读取器类"""

    def __init__(self, config_dir: str = None, filename: str = DEFAULT_CONFIG_FILE):
        """
        Args:
            config_dir: 配置文件目录路径，默认为当前文件所在目录
            filename: main config file inside config_dir
        """
        if config_dir is None:
            config_dir = os.path.dirname(os.path.abspath(__file__))

        self.config_dir = Path(config_dir)
        self.filename = filename
        self._configs = {}
        self._logger = logging.getLogger(__name__)

    def load_yaml(self, filename: str) -> Dict[str, Any]:
        """
        加载YAML配置文件并缓存

        Raises:
            ConfigError: file missing, unreadable or not valid YAML
        """
        file_path = self.config_dir / filename

        if not file_path.exists():
            raise ConfigError(f"config file not found: {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self._logger.error(f"YAML解析错误 {filename}: {e}")
            raise ConfigError(f"invalid YAML in {file_path}: {e}") from e
        except OSError as e:
            self._logger.error(f"读取配置文件失败 {filename}: {e}")
            raise ConfigError(f"cannot read {file_path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"{file_path}: top level must be a mapping")

        self._configs[filename] = config
        self._logger.info(f"成功加载配置文件: {filename}")
        return config

    def _config(self) -> Dict[str, Any]:
        if self.filename not in self._configs:
            self.load_yaml(self.filename)
        return self._configs[self.filename]

    def get_exchange_config(self, exchange: str) -> Dict[str, Any]:
        """
        Request settings for one venue binding.

        Example:
            reader.get_exchange_config('binance_swap')
            # {'host': 'https://fapi.binance.com', 'recv_window': 5000, 'timeout': 10, 'user_agent': 'xconnect'}
        """
        exchanges = self._config().get('exchanges') or {}
        section = exchanges.get(exchange)
        if not section:
            raise ConfigError(f"no exchange section '{exchange}' in {self.filename}")
        if not section.get('host'):
            raise ConfigError(f"exchange '{exchange}' has no host")
        return dict(section)

    def get_account_config(self, exchange: str, account: str = 'main') -> Dict[str, Any]:
        accounts = (self._config().get('accounts') or {}).get(exchange) or {}
        return dict(accounts.get(account) or {})

    def list_accounts(self, exchange: str) -> List[str]:
        accounts = (self._config().get('accounts') or {}).get(exchange) or {}
        return list(accounts.keys())

    def get_credentials(self, exchange: str, account: str = 'main') -> Dict[str, str]:
        """
        api_key / secret_key for the driver. Environment variables win over the file;
        both may end up empty, which leaves the driver usable for public calls only.
        """
        stored = self.get_account_config(exchange, account)
        key_env, secret_env = CREDENTIAL_ENV.get(exchange, (None, None))
        api_key = (key_env and os.getenv(key_env)) or stored.get('api_key') or ''
        secret_key = (secret_env and os.getenv(secret_env)) or stored.get('secret_key') or ''
        return {'api_key': str(api_key), 'secret_key': str(secret_key)}

    def get_logging_config(self) -> Dict[str, Any]:
        section = self._config().get('logging') or {}
        return {
            'level': section.get('level', 'INFO'),
            'log_dir': section.get('log_dir'),
        }

    def reload(self):
        """重新加载配置文件"""
        self._configs = {}
        self._config()
