import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List

import httpx

from proxy_generator.config import ProxyGeneratorConfig
from proxy_generator.generator import ApiProxyGenerator
from proxy_generator.internal.constants import API_DEFINITION_ENDPOINT
from proxy_generator.internal.exceptions import (
    ProxyConfigNotFoundError,
    ProxyGeneratorError,
)
from proxy_generator.internal.source import (
    clear_proxy,
    read_proxy_config,
    save_project_files,
    save_proxy_config,
    save_proxy_warning,
)


def fetch_api_definition(url: str) -> Dict[str, Any]:
    """Загрузка описания API с бэкенда или из локального файла"""
    # Проверяем - это локальный файл или URL
    if os.path.exists(url):
        with open(url, "r", encoding="utf-8") as f:
            return json.load(f)

    if not url.startswith(("http://", "https://")):
        url = "https://" + url

    response = httpx.get(url.rstrip("/") + API_DEFINITION_ENDPOINT)
    response.raise_for_status()
    return response.json()


def load_generated_modules(target: str) -> List[str]:
    """Список уже сгенерированных модулей из generate-proxy.json"""
    try:
        return read_proxy_config(target).generated
    except ProxyConfigNotFoundError:
        return []


def run_generation(config: ProxyGeneratorConfig, refresh_all: bool = False, clear: bool = False):
    """Генерация модулей по очереди; каждый готовый модуль сразу сохраняется на диск"""
    print(f"🚀 Генерация прокси из {config.url}")
    print("📥 Загрузка описания API...")
    api_definition = fetch_api_definition(config.url)

    generated = load_generated_modules(config.target)
    generator = ApiProxyGenerator(api_definition, config.solution, generated)

    modules = list(config.modules)
    if refresh_all:
        modules = sorted(set(modules) | set(generated))

    if clear:
        print("🧹 Очистка директории proxy...")
        clear_proxy(config.target)

    for module_name in modules:
        print(f"⚙️ Генерация модуля {module_name}...")
        module_proxy = generator.generate(module_name)
        project = generator.build_project([module_proxy])
        count = save_project_files(project, config.target)
        save_proxy_config(generator.proxy_config, config.target)
        print(f"💾 {module_name}: сохранено {count} файлов")

    save_proxy_warning(config.target)
    print("✅ Генерация завершена успешно!")
    print(f"📦 Прокси создан в: {os.path.abspath(os.path.join(config.target, 'proxy'))}")


def generate():
    """Универсальная команда генерации прокси"""
    parser = argparse.ArgumentParser(description="Генерация TypeScript прокси из описания API")
    parser.add_argument("--url", type=str, help="URL бэкенда или путь к JSON с описанием API")
    parser.add_argument("--target", type=str, help="Директория, в которой создается proxy/")
    parser.add_argument("--solution", type=str, help="Корневое пространство имен решения")
    parser.add_argument(
        "--module", action="append", help="Модуль бэкенда (можно указать несколько раз)"
    )
    parser.add_argument(
        "--all", action="store_true", help="Обновить все ранее сгенерированные модули"
    )
    parser.add_argument(
        "--clear", action="store_true", help="Очистить proxy/ перед генерацией"
    )
    parser.add_argument(
        "--init-config", action="store_true", help="Создать конфиг файл proxy.toml"
    )
    parser.add_argument("--verbose", action="store_true", help="Подробный лог")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    # Инициализация конфига
    if args.init_config:
        config = ProxyGeneratorConfig().merge_with_args(args)
        config.save_to_file()
        print("✅ Создан конфиг файл proxy.toml")
        return

    file_config = ProxyGeneratorConfig.from_file()
    if file_config:
        print("📋 Используется конфиг из proxy.toml")
        final_config = file_config.merge_with_args(args)
    else:
        final_config = ProxyGeneratorConfig().merge_with_args(args)

    if not final_config.url:
        print("❌ Ошибка: URL не указан ни в конфиге, ни в аргументах")
        sys.exit(1)

    try:
        run_generation(final_config, refresh_all=args.all, clear=args.clear)
    except (ProxyGeneratorError, httpx.HTTPError, json.JSONDecodeError) as e:
        print(f"❌ Ошибка генерации: {e}")
        sys.exit(1)


if __name__ == "__main__":
    generate()
