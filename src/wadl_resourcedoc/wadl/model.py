"""WADL document fragments produced by generators.

Field names follow the WADL 2009 schema in snake_case. Every node that can
carry documentation has a ``doc`` list that decorators append to.
"""

from enum import Enum

from pydantic import BaseModel

from wadl_resourcedoc.xhtml import Elements


class Doc(BaseModel):
    """A WADL ``doc`` node holding text and/or XHTML fragments."""

    title: str | None = None
    lang: str | None = None
    content: list[str | Elements] = []


class ParamStyle(str, Enum):
    PLAIN = "plain"
    QUERY = "query"
    MATRIX = "matrix"
    HEADER = "header"
    TEMPLATE = "template"


class Param(BaseModel):
    name: str
    style: ParamStyle | None = None
    type: str | None = None  # qualified schema type, e.g. xs:string
    default: str | None = None
    required: bool = False
    repeating: bool = False
    doc: list[Doc] = []


class Representation(BaseModel):
    media_type: str | None = None
    element: str | None = None  # qualified schema element reference
    id: str | None = None
    doc: list[Doc] = []
    param: list[Param] = []


class Request(BaseModel):
    doc: list[Doc] = []
    param: list[Param] = []
    representation: list[Representation] = []


class Response(BaseModel):
    status: list[int] = []
    doc: list[Doc] = []
    param: list[Param] = []
    representation: list[Representation] = []


class Method(BaseModel):
    name: str  # HTTP method
    id: str | None = None
    doc: list[Doc] = []
    request: Request | None = None
    response: list[Response] = []


class Resource(BaseModel):
    path: str
    id: str | None = None
    doc: list[Doc] = []
    param: list[Param] = []
    method: list[Method] = []
    resource: list["Resource"] = []


class Resources(BaseModel):
    base: str | None = None
    doc: list[Doc] = []
    resource: list[Resource] = []


class Application(BaseModel):
    doc: list[Doc] = []
    grammars: list[str] = []  # hrefs of included grammars
    resources: list[Resources] = []


class ExternalGrammarDefinition(BaseModel):
    """Grammar files (e.g. XML schemas) to publish next to the WADL, by filename."""

    grammars: dict[str, bytes] = {}


class ApplicationDescription(BaseModel):
    """A built application together with its external grammars."""

    application: Application
    external_grammars: ExternalGrammarDefinition = ExternalGrammarDefinition()
