"""
Чтение и запись файлов прокси: generate-proxy.json, README, сгенерированные файлы
"""

import json
import os
import shutil

from pydantic import ValidationError

from .constants import PROXY_CONFIG_FILE, PROXY_PATH, PROXY_WARNING_FILE
from .exceptions import ProxyConfigError, ProxyConfigNotFoundError
from .generator.templates import templates
from .types.api_definition import ProxyConfig
from .types.models import Project


def proxy_dir(target_path: str) -> str:
    return os.path.join(target_path, PROXY_PATH)


def proxy_config_path(target_path: str) -> str:
    return os.path.join(proxy_dir(target_path), PROXY_CONFIG_FILE)


def read_proxy_config(target_path: str) -> ProxyConfig:
    """Загрузка состояния прокси (описание API и список сгенерированных модулей)"""
    config_path = proxy_config_path(target_path)
    if not os.path.exists(config_path):
        raise ProxyConfigNotFoundError(config_path)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return ProxyConfig.model_validate(json.load(f))
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ProxyConfigError(config_path, exc) from exc


def generate_proxy_config_json(proxy_config: ProxyConfig) -> str:
    return json.dumps(
        proxy_config.model_dump(by_alias=True, mode="json"),
        indent=2,
        ensure_ascii=False,
    )


def save_proxy_config(proxy_config: ProxyConfig, target_path: str) -> str:
    config_path = proxy_config_path(target_path)
    write_file(config_path, generate_proxy_config_json(proxy_config))
    return config_path


def save_proxy_warning(target_path: str) -> str:
    warning_path = os.path.join(proxy_dir(target_path), PROXY_WARNING_FILE)
    write_file(warning_path, templates.warning)
    return warning_path


def clear_proxy(target_path: str) -> None:
    """Удаление сгенерированных директорий и index.ts; сама директория proxy остается"""
    path = proxy_dir(target_path)
    if not os.path.isdir(path):
        return

    for entry in os.listdir(path):
        entry_path = os.path.join(path, entry)
        if os.path.isdir(entry_path):
            shutil.rmtree(entry_path)
        elif entry == "index.ts":
            os.remove(entry_path)


def write_file(file_path: str, content: str) -> None:
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(file_path, "w", encoding="utf-8") as f:
        f.write(content)


def save_project_files(project: Project, target_path: str) -> int:
    """Запись файлов проекта в <target>/proxy, возвращает количество файлов"""
    for code_file in project.files:
        write_file(os.path.join(proxy_dir(target_path), code_file.file_name), str(code_file))

    return len(project.files)
