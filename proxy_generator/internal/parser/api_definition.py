from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..exceptions import InvalidApiDefinitionError
from ..types.api_definition import ProxyConfig


class ApiDefinitionParser:
    """Парсер описания API (ответ /api/abp/api-definition)"""

    def __init__(self, api_definition: Dict[str, Any], generated: Optional[List[str]] = None):
        self.api_definition = api_definition
        self.generated = generated or []

    def parse(self) -> ProxyConfig:
        """Описание API вместе с реестром уже сгенерированных модулей"""
        try:
            proxy_config = ProxyConfig.model_validate(self.api_definition)
        except ValidationError as exc:
            raise InvalidApiDefinitionError() from exc

        for module_name in self.generated:
            proxy_config.register_generated(module_name)

        return proxy_config
