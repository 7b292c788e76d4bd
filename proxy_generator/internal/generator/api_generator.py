"""
Генерация прокси одного модуля: сервисы -> модели -> перечисления
"""

import logging
from typing import List

from ..constants import CORE_PACKAGE
from ..exceptions import InvalidApiDefinitionError, InvalidModuleError
from ..types.api_definition import ProxyConfig
from ..types.models import Import, ModuleProxy
from .enum_generator import EnumGenerator
from .model_generator import ModelGenerator
from .service_generator import ServiceGenerator

logger = logging.getLogger(__name__)


def collect_refs(imports: List[Import]) -> List[str]:
    """Ссылки на типы из импортов, кроме типов фреймворка (без повторов, в порядке появления)"""
    refs = []
    for _import in imports:
        if _import.path == CORE_PACKAGE:
            continue
        for ref in sorted(_import.refs):
            if ref not in refs:
                refs.append(ref)

    return refs


def generate_api(proxy_config: ProxyConfig, solution: str, module_name: str) -> ModuleProxy:
    """
    Генерация промежуточного представления модуля.

    Имя модуля попадает в proxy_config.generated только после успешной
    генерации всех частей; при ошибке реестр не меняется.
    """
    types, modules = proxy_config.types, proxy_config.modules
    if types is None or modules is None:
        raise InvalidApiDefinitionError()

    definition = modules.get(module_name)
    if definition is None:
        raise InvalidModuleError(module_name)

    service_generator = ServiceGenerator(
        solution, types, api_name=definition.remote_service_name
    )
    services = [
        service_generator.map_controller_to_service(controller)
        for controller in definition.controllers.values()
    ]
    service_imports = [_ for service in services for _ in service.imports]

    model_generator = ModelGenerator(solution, types)
    models = model_generator.reduce_refs_to_models([], collect_refs(service_imports))
    model_imports = [_ for model in models for _ in model.imports]

    enum_generator = EnumGenerator(solution, types)
    enums = [
        enum_generator.map_ref_to_enum(ref)
        for ref in enum_generator.get_enum_refs(service_imports + model_imports)
    ]

    logger.info(
        f"Module '{module_name}': {len(services)} services, "
        f"{len(models)} models, {len(enums)} enums"
    )

    result = ModuleProxy(
        module=module_name, services=services, models=models, enums=enums
    )
    proxy_config.register_generated(module_name)

    return result
