"""
Генерация сервисов TypeScript по контроллерам из описания API
"""

import json
import logging
from typing import Dict, List

from ..constants import CORE_PACKAGE, REST_SERVICE
from ..types.api_definition import Action, Controller, TypeDef
from ..types.generics import parse_generics
from ..types.models import Body, Import, Method, Property, Service, Signature
from ..types.namespace import parse_namespace
from ..types.type_adapter import adapt_type, parse_type, remove_type_modifiers
from .imports import TypeImportMapper, TypeRef, merge_import, sort_imports

logger = logging.getLogger(__name__)

ASYNC_MARKER = "Async"


def get_method_name(action: Action) -> str:
    """
    Имя метода до первого маркера Async.

    Examples:
        GetListAsync -> GetList, GetAsyncListAsync -> Get
    """
    name = action.unique_name
    position = name.find(ASYNC_MARKER)
    return name[:position] if position > 0 else name


def serialize_parameters(parameters: List[Property]) -> str:
    """[Property(name='id', type='string')] -> 'id: string'"""
    return ", ".join(f"{_.name}{_.optional}: {_.type}{_.default}" for _ in parameters)


def map_action_to_signature(action: Action) -> Signature:
    signature = Signature(name=get_method_name(action))

    for param in action.parameters_on_method:
        parameter = Property(name=param.name, type=adapt_type(param.type_simple))
        if param.default_value is not None:
            parameter.default = f" = {json.dumps(param.default_value)}"
        elif param.is_optional:
            parameter.optional = "?"

        signature.parameters.append(parameter)

    return signature


def map_action_to_body(action: Action) -> Body:
    body = Body(
        method=action.http_method,
        url=action.url,
        response_type=adapt_type(action.return_value.type_simple),
    )

    for param in action.parameters:
        body.register_action_parameter(param)

    return body


def map_action_to_method(action: Action) -> Method:
    body = map_action_to_body(action)
    signature = map_action_to_signature(action)
    signature.return_type = body.response_type
    return Method(signature=signature, body=body)


class ServiceGenerator:
    """Генератор сервисов (<name>.service.ts) для контроллеров модуля"""

    def __init__(self, solution: str, types: Dict[str, TypeDef], api_name: str):
        self.solution = solution
        self.types = types
        self.api_name = api_name

    def get_action_type_refs(self, action: Action) -> List[TypeRef]:
        """Листовые типы результата и параметров метода, известные в описании API"""
        type_refs = []
        for param in [action.return_value, *action.parameters_on_method]:
            for part in parse_type(param.type, remove_type_modifiers):
                for type_name in parse_generics(part).to_generics():
                    if type_name in self.types:
                        type_refs.append((type_name, self.types[type_name].is_enum))

        return type_refs

    def map_controller_to_service(self, controller: Controller) -> Service:
        namespace = parse_namespace(self.solution, controller.type)
        actions = list(controller.actions.values())
        logger.debug(
            f"Controller {controller.controller_name} ({namespace}): {len(actions)} actions"
        )

        mapper = TypeImportMapper(self.solution, namespace)
        imports: List[Import] = []
        for action in actions:
            mapper.reduce_types(imports, self.get_action_type_refs(action))

        merge_import(imports, Import(path=CORE_PACKAGE, specifiers=[REST_SERVICE]))
        sort_imports(imports)

        methods = [map_action_to_method(action) for action in actions]
        methods.sort(key=lambda _: _.signature.name)

        return Service(
            namespace=namespace,
            name=controller.controller_name,
            api_name=self.api_name,
            imports=imports,
            methods=methods,
        )
