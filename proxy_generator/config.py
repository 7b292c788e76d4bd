"""
Конфигурация для генерации прокси
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

import toml

CONFIG_FILE = "proxy.toml"


@dataclass
class ProxyGeneratorConfig:
    """Конфигурация генератора прокси"""

    url: Optional[str] = None
    target: str = "src"
    solution: str = ""
    modules: List[str] = field(default_factory=lambda: ["app"])

    @classmethod
    def from_file(
        cls, config_path: str = CONFIG_FILE, search_dir: str = None
    ) -> Optional["ProxyGeneratorConfig"]:
        """Загрузка конфигурации из файла"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_in_dir = os.path.join(search_dir, CONFIG_FILE)
            if os.path.exists(config_in_dir):
                config_path = config_in_dir

        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except (toml.TomlDecodeError, OSError):
            return None

        return cls(
            url=config_data.get("url"),
            target=config_data.get("target", "src"),
            solution=config_data.get("solution", ""),
            modules=list(config_data.get("modules", ["app"])),
        )

    def save_to_file(self, config_path: str = CONFIG_FILE) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {
            "url": self.url,
            "target": self.target,
            "solution": self.solution,
            "modules": self.modules,
        }

        with open(config_path, "w") as f:
            toml.dump({k: v for k, v in config_data.items() if v is not None}, f)

    def merge_with_args(self, args) -> "ProxyGeneratorConfig":
        """Объединение с аргументами командной строки"""
        return ProxyGeneratorConfig(
            url=args.url or self.url,
            target=args.target or self.target,
            solution=args.solution or self.solution,
            modules=args.module or self.modules,
        )
