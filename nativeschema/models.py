"""
Schema data models.

Attributes are snake_case in Python and serialize to the camelCase names
that downstream generators read.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SchemaModel(BaseModel):
    """Base model with camelCase aliases."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ComponentConfig(SchemaModel):
    """Names and sub-expressions found by the component config locator."""
    component_name: str
    props_type_name: str
    state_type_name: str = ""
    command_type_name: Optional[str] = None
    command_options_expression: Optional[Dict[str, Any]] = None
    options_expression: Optional[Dict[str, Any]] = None


class CommandOptions(SchemaModel):
    """Options object passed to codegenNativeCommands."""
    model_config = ConfigDict(extra='allow')

    supported_commands: Optional[List[str]] = None


class ComponentSchema(SchemaModel):
    """Normalized description of one native component.

    The facets are produced by the type resolvers and kept as they come.
    """
    filename: str
    component_name: str
    options: Any = None
    extends_props: List[Any] = []
    events: List[Any] = []
    props: List[Any] = []
    commands: List[Any] = []
    state: Any = None

    def to_dict(self):
        """Wire form of the schema; `state` is only present when declared."""
        exclude = {'state'} if self.state is None else None
        return self.model_dump(by_alias=True, exclude=exclude)
