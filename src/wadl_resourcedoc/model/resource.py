"""Resource introspection model consumed by WADL generators.

Describes resources, their methods and formal parameters in terms of stable,
explicitly constructed identities (qualified class name, method name and
ordered parameter type list) so they can be matched against entries recorded
by the documentation extraction step.
"""

import inspect
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel


def qualified_name(obj: Any) -> str:
    """Return the qualified name of a class, or the string itself."""
    if isinstance(obj, str):
        return obj
    return f"{obj.__module__}.{obj.__qualname__}"


def _type_name(annotation: Any) -> str:
    if annotation is inspect.Parameter.empty:
        return "object"
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation).replace("typing.", "")


class ParameterSource(str, Enum):
    PATH = "path"
    QUERY = "query"
    MATRIX = "matrix"
    HEADER = "header"
    COOKIE = "cookie"
    FORM = "form"
    ENTITY = "entity"
    CONTEXT = "context"
    BEAN = "bean"
    UNKNOWN = "unknown"


class Parameter(BaseModel):
    """A formal parameter of a resource method."""

    source: ParameterSource
    source_name: str | None = None  # name in the request, e.g. the query key
    type_name: str = "string"
    default_value: str | None = None


class MethodDefinition(BaseModel):
    """The declared method that handles a resource method."""

    declaring_class: str
    name: str
    parameter_types: list[str] = []

    @property
    def signature(self) -> str:
        return "(" + ",".join(self.parameter_types) + ")"

    @classmethod
    def from_callable(cls, func: Callable, declaring_class: Any = None) -> "MethodDefinition":
        """Build a definition from a Python function or method.

        The declaring class defaults to the class part of ``__qualname__``.
        ``self`` and ``cls`` are not part of the signature.
        """
        func = inspect.unwrap(func)
        if declaring_class is None:
            owner = func.__qualname__.rpartition(".")[0]
            declaring = f"{func.__module__}.{owner}" if owner else func.__module__
        else:
            declaring = qualified_name(declaring_class)

        types = []
        for name, param in inspect.signature(func).parameters.items():
            if name in ("self", "cls"):
                continue
            types.append(_type_name(param.annotation))
        return cls(declaring_class=declaring, name=func.__name__, parameter_types=types)


class ResourceMethod(BaseModel):
    """A single HTTP method exposed by a resource."""

    http_method: str  # GET / POST / PUT / DELETE / ...
    definition_method: MethodDefinition
    consumes: list[str] = []
    produces: list[str] = []
    parameters: list[Parameter] = []


class Resource(BaseModel):
    """A resource path with the handler classes that serve it."""

    path: str
    handler_classes: list[str] = []
    resource_methods: list[ResourceMethod] = []
    child_resources: list["Resource"] = []
