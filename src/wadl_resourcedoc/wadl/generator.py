"""The WADL generator contract and a basic structural implementation.

Generators are composed as a chain: each decorator wraps a delegate,
forwards every call to it and post-processes the returned fragment.
"""

from abc import ABC, abstractmethod

from wadl_resourcedoc.errors import ConfigurationError
from wadl_resourcedoc.model import resource as model
from wadl_resourcedoc.model.resource import ParameterSource
from wadl_resourcedoc.wadl.model import (
    Application,
    ApplicationDescription,
    ExternalGrammarDefinition,
    Method,
    Param,
    ParamStyle,
    Representation,
    Request,
    Resource,
    Resources,
    Response,
)

XS_TYPES = {
    "str": "xs:string",
    "string": "xs:string",
    "int": "xs:int",
    "integer": "xs:int",
    "float": "xs:double",
    "bool": "xs:boolean",
    "boolean": "xs:boolean",
}

_PARAM_STYLES = {
    ParameterSource.PATH: ParamStyle.TEMPLATE,
    ParameterSource.QUERY: ParamStyle.QUERY,
    ParameterSource.MATRIX: ParamStyle.MATRIX,
    ParameterSource.HEADER: ParamStyle.HEADER,
    ParameterSource.COOKIE: ParamStyle.HEADER,
    ParameterSource.FORM: ParamStyle.QUERY,
}


class WadlGenerator(ABC):
    """Creates the fragments of a WADL document from the resource model."""

    def set_wadl_generator_delegate(self, delegate: "WadlGenerator") -> None:
        raise ConfigurationError(f"{type(self).__name__} does not wrap another generator")

    @abstractmethod
    def init(self) -> None:
        """Prepare the generator; called once before any create_* call."""

    @abstractmethod
    def required_namespace_path(self) -> str | None:
        """Colon-separated module paths whose types appear in generated docs."""

    @abstractmethod
    def create_application(self) -> Application: ...

    @abstractmethod
    def create_resources(self) -> Resources: ...

    @abstractmethod
    def create_resource(self, resource: model.Resource, path: str) -> Resource: ...

    @abstractmethod
    def create_method(self, resource: model.Resource, resource_method: model.ResourceMethod) -> Method: ...

    @abstractmethod
    def create_request(self, resource: model.Resource, resource_method: model.ResourceMethod) -> Request: ...

    @abstractmethod
    def create_request_representation(
        self, resource: model.Resource, resource_method: model.ResourceMethod, media_type: str
    ) -> Representation: ...

    @abstractmethod
    def create_responses(self, resource: model.Resource, resource_method: model.ResourceMethod) -> list[Response]: ...

    @abstractmethod
    def create_param(
        self, resource: model.Resource, resource_method: model.ResourceMethod, parameter: model.Parameter
    ) -> Param | None: ...

    @abstractmethod
    def create_external_grammar(self) -> ExternalGrammarDefinition: ...

    @abstractmethod
    def attach_types(self, description: ApplicationDescription) -> None: ...


class BasicWadlGenerator(WadlGenerator):
    """Builds undocumented WADL fragments straight from the resource model."""

    def init(self) -> None:
        pass

    def required_namespace_path(self) -> str | None:
        return None

    def create_application(self) -> Application:
        return Application()

    def create_resources(self) -> Resources:
        return Resources()

    def create_resource(self, resource: model.Resource, path: str) -> Resource:
        return Resource(path=path)

    def create_method(self, resource: model.Resource, resource_method: model.ResourceMethod) -> Method:
        return Method(
            name=resource_method.http_method.upper(),
            id=resource_method.definition_method.name,
        )

    def create_request(self, resource: model.Resource, resource_method: model.ResourceMethod) -> Request:
        return Request()

    def create_request_representation(
        self, resource: model.Resource, resource_method: model.ResourceMethod, media_type: str
    ) -> Representation:
        return Representation(media_type=media_type)

    def create_responses(self, resource: model.Resource, resource_method: model.ResourceMethod) -> list[Response]:
        response = Response()
        for media_type in resource_method.produces:
            response.representation.append(Representation(media_type=media_type))
        return [response]

    def create_param(
        self, resource: model.Resource, resource_method: model.ResourceMethod, parameter: model.Parameter
    ) -> Param | None:
        style = _PARAM_STYLES.get(parameter.source)
        if style is None or not parameter.source_name:
            return None
        return Param(
            name=parameter.source_name,
            style=style,
            type=XS_TYPES.get(parameter.type_name.lower(), "xs:string"),
            default=parameter.default_value,
            required=parameter.source == ParameterSource.PATH,
        )

    def create_external_grammar(self) -> ExternalGrammarDefinition:
        return ExternalGrammarDefinition()

    def attach_types(self, description: ApplicationDescription) -> None:
        pass
