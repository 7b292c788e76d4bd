"""
Главный модуль генератора - чистый интерфейс
"""

from typing import Any, Dict, Iterable, List, Optional

from .internal.generator.api_generator import generate_api
from .internal.generator.project_builder import ProjectBuilder
from .internal.parser.api_definition import ApiDefinitionParser
from .internal.types.models import ModuleProxy, Project


class ApiProxyGenerator:
    """Чистый интерфейс для генерации прокси-клиентов"""

    def __init__(
        self,
        api_definition: Dict[str, Any],
        solution: str,
        generated: Optional[List[str]] = None,
    ):
        self.proxy_config = ApiDefinitionParser(api_definition, generated).parse()
        self.solution = solution

    @property
    def generated(self) -> List[str]:
        return self.proxy_config.generated

    def generate(self, module_name: str) -> ModuleProxy:
        """Промежуточное представление модуля; модуль попадает в реестр generated"""
        return generate_api(self.proxy_config, self.solution, module_name)

    def build_project(self, module_proxies: Iterable[ModuleProxy]) -> Project:
        """Файлы TypeScript для сгенерированных модулей"""
        return ProjectBuilder(module_proxies).generate()


def generate_proxy(
    api_definition: Dict[str, Any], solution: str, module_name: str
) -> Project:
    """Генерация файлов прокси для одного модуля"""
    generator = ApiProxyGenerator(api_definition, solution)
    return generator.build_project([generator.generate(module_name)])
