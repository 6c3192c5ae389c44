"""Resource documentation models.

A resourcedoc document is produced by the documentation extraction step and
holds the comments written on resource classes, their methods and parameters,
plus documented request/response representations.
"""

from pydantic import BaseModel

from wadl_resourcedoc.wadl.model import ParamStyle


class NamedValue(BaseModel):
    name: str
    value: str | None = None


class AnnotationDoc(BaseModel):
    """An annotation (or marker) recorded on a parameter, e.g. ``QueryParam("q")``."""

    annotation_type_name: str | None = None
    attribute_docs: list[NamedValue] = []

    def attribute(self, name: str) -> str | None:
        for named in self.attribute_docs:
            if named.name == name:
                return named.value
        return None


class ParamDoc(BaseModel):
    param_name: str | None = None
    comment_text: str | None = None
    annotation_docs: list[AnnotationDoc] = []


class RepresentationDoc(BaseModel):
    element: str | None = None
    media_type: str | None = None
    status: int | None = None
    example: str | None = None
    doc: str | None = None


class RequestDoc(BaseModel):
    representation_doc: RepresentationDoc | None = None


class WadlParamDoc(BaseModel):
    """A response-level parameter such as a response header."""

    name: str
    style: ParamStyle | None = None
    type: str | None = None
    doc: str | None = None


class ResponseDoc(BaseModel):
    return_doc: str | None = None
    wadl_params: list[WadlParamDoc] = []
    representations: list[RepresentationDoc] = []

    def has_representations(self) -> bool:
        return bool(self.representations)


class MethodDoc(BaseModel):
    method_name: str
    method_signature: str | None = None
    comment_text: str | None = None
    return_doc: str | None = None
    return_type_example: str | None = None
    request_doc: RequestDoc | None = None
    response_doc: ResponseDoc | None = None
    param_docs: list[ParamDoc] = []


class ClassDoc(BaseModel):
    class_name: str
    comment_text: str | None = None
    method_docs: list[MethodDoc] = []


class ResourceDoc(BaseModel):
    class_docs: list[ClassDoc] = []
