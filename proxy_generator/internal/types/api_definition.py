"""
Модели описания API бэкенда (ответ /api/abp/api-definition)
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiDefinitionModel(BaseModel):
    """Базовая модель: camelCase в JSON, snake_case в Python"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PropertyDef(ApiDefinitionModel):
    name: str
    json_name: Optional[str] = None
    type: str
    type_simple: str
    is_required: bool = False


class TypeDef(ApiDefinitionModel):
    base_type: Optional[str] = None
    is_enum: bool = False
    enum_names: Optional[List[str]] = None
    enum_values: Optional[List[Union[int, str]]] = None
    generic_arguments: Optional[List[str]] = None
    properties: Optional[List[PropertyDef]] = None


class ParameterInSignature(ApiDefinitionModel):
    name: str
    type_as_string: Optional[str] = None
    type: str
    type_simple: str
    is_optional: bool = False
    default_value: Any = None


class ParameterInBody(ApiDefinitionModel):
    name_on_method: str
    name: str
    binding_source_id: str
    type: str = ""
    type_simple: str = ""
    is_optional: bool = False
    default_value: Any = None
    constraint_types: Optional[List[str]] = None
    descriptor_name: str = ""


class ReturnValue(ApiDefinitionModel):
    type: str
    type_simple: str


class Action(ApiDefinitionModel):
    unique_name: str
    name: Optional[str] = None
    http_method: str
    url: str
    parameters_on_method: List[ParameterInSignature] = []
    parameters: List[ParameterInBody] = []
    return_value: ReturnValue


class Controller(ApiDefinitionModel):
    controller_name: str
    type: str
    actions: Dict[str, Action] = {}


class Module(ApiDefinitionModel):
    root_path: str
    remote_service_name: str
    controllers: Dict[str, Controller] = {}


class ApiDefinition(ApiDefinitionModel):
    modules: Optional[Dict[str, Module]] = None
    types: Optional[Dict[str, TypeDef]] = None


class ProxyConfig(ApiDefinition):
    """Описание API вместе со списком уже сгенерированных модулей"""

    generated: List[str] = []

    def register_generated(self, module_name: str) -> None:
        """Добавление модуля в реестр (без повторов, по алфавиту)"""
        if module_name not in self.generated:
            self.generated.append(module_name)

        self.generated.sort()
