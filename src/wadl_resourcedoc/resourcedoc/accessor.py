"""Point lookups into a loaded resourcedoc document."""

import logging
from typing import Any

from wadl_resourcedoc.model.resource import MethodDefinition, Parameter, ParameterSource, qualified_name
from wadl_resourcedoc.resourcedoc.model import (
    AnnotationDoc,
    ClassDoc,
    MethodDoc,
    ParamDoc,
    RepresentationDoc,
    ResourceDoc,
    ResponseDoc,
)

logger = logging.getLogger(__name__)

# Parameters that are not addressed by name in the request.
_UNNAMED_SOURCES = {ParameterSource.ENTITY, ParameterSource.CONTEXT, ParameterSource.UNKNOWN}


def _normalize_signature(signature: str) -> str:
    return "".join(signature.split())


def _normalize_media_type(media_type: str) -> str:
    return media_type.split(";")[0].strip().lower()


def _annotation_source(annotation: AnnotationDoc) -> str | None:
    """Map an annotation type name such as ``javax.ws.rs.QueryParam`` to ``query``."""
    if not annotation.annotation_type_name:
        return None
    simple = annotation.annotation_type_name.strip().rpartition(".")[2].lower()
    if simple.endswith("param") and simple != "param":
        simple = simple[: -len("param")]
    return simple


class ResourceDocAccessor:
    """Answers identity-keyed lookups against a ResourceDoc.

    Entries match only on the exact declaring class and method signature
    recorded at extraction time. A miss returns None.
    """

    def __init__(self, resource_doc: ResourceDoc):
        self.resource_doc = resource_doc
        self._class_docs: dict[str, ClassDoc] = {}
        for class_doc in resource_doc.class_docs:
            self._class_docs.setdefault(class_doc.class_name, class_doc)

    def get_class_doc(self, resource_class: Any) -> ClassDoc | None:
        if resource_class is None:
            return None
        return self._class_docs.get(qualified_name(resource_class))

    def get_method_doc(self, resource_class: Any, method: MethodDefinition | None) -> MethodDoc | None:
        if method is None:
            return None
        class_doc = self.get_class_doc(resource_class)
        if class_doc is None:
            return None

        signature = _normalize_signature(method.signature)
        unsigned = []
        for method_doc in class_doc.method_docs:
            if method_doc.method_name != method.name:
                continue
            if method_doc.method_signature is None:
                unsigned.append(method_doc)
            elif _normalize_signature(method_doc.method_signature) == signature:
                return method_doc

        named = [m for m in class_doc.method_docs if m.method_name == method.name]
        if len(unsigned) == 1 and len(named) == 1:
            return unsigned[0]
        if named:
            logger.debug(
                "No unique method doc for %s.%s%s (%d candidates)",
                class_doc.class_name, method.name, method.signature, len(named),
            )
        return None

    def get_param_doc(
        self, resource_class: Any, method: MethodDefinition | None, parameter: Parameter
    ) -> ParamDoc | None:
        if parameter.source in _UNNAMED_SOURCES or not parameter.source_name:
            return None
        method_doc = self.get_method_doc(resource_class, method)
        if method_doc is None:
            return None
        for param_doc in method_doc.param_docs:
            for annotation in param_doc.annotation_docs:
                if annotation.attribute("value") != parameter.source_name:
                    continue
                source = _annotation_source(annotation)
                if source is None or source == parameter.source.value:
                    return param_doc
        return None

    def get_request_representation(
        self, resource_class: Any, method: MethodDefinition | None, media_type: str | None
    ) -> RepresentationDoc | None:
        if media_type is None:
            return None
        method_doc = self.get_method_doc(resource_class, method)
        if method_doc is None or method_doc.request_doc is None:
            return None
        representation = method_doc.request_doc.representation_doc
        if representation is None:
            return None
        if representation.media_type and (
            _normalize_media_type(representation.media_type) != _normalize_media_type(media_type)
        ):
            return None
        return representation

    def get_response(self, resource_class: Any, method: MethodDefinition | None) -> ResponseDoc | None:
        method_doc = self.get_method_doc(resource_class, method)
        if method_doc is None:
            return None
        return method_doc.response_doc
