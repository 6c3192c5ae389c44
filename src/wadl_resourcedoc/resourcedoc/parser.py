"""resourcedoc XML parser.

Unmarshals a resourcedoc XML stream into a ResourceDoc model. Elements are
matched by local name, so documents with or without a namespace are accepted.
"""

from typing import IO, Callable
from xml.etree import ElementTree as ET

from wadl_resourcedoc.errors import ResourceDocParseError
from wadl_resourcedoc.resourcedoc.model import (
    AnnotationDoc,
    ClassDoc,
    MethodDoc,
    NamedValue,
    ParamDoc,
    RepresentationDoc,
    RequestDoc,
    ResourceDoc,
    ResponseDoc,
    WadlParamDoc,
)
from wadl_resourcedoc.wadl.model import ParamStyle

ROOT_ELEMENT = "resourceDoc"

ParserFactory = Callable[[], ET.XMLParser]


def unmarshal(stream: IO, parser_factory: ParserFactory | None = None) -> ResourceDoc:
    """Parse a resourcedoc document from an open binary or text stream.

    ``parser_factory`` supplies the XMLParser to use; the stream is not closed.
    """
    parser = parser_factory() if parser_factory is not None else ET.XMLParser()
    try:
        root = ET.parse(stream, parser=parser).getroot()
    except ET.ParseError as e:
        raise ResourceDocParseError(f"Malformed resourcedoc: {e}") from e

    if _local(root.tag) != ROOT_ELEMENT:
        raise ResourceDocParseError(
            f"Expected root element <{ROOT_ELEMENT}>, found <{_local(root.tag)}>"
        )

    class_docs = []
    for class_el in _children(_child(root, "classDocs"), "classDoc"):
        class_docs.append(_parse_class_doc(class_el))
    return ResourceDoc(class_docs=class_docs)


def _parse_class_doc(el: ET.Element) -> ClassDoc:
    class_name = _text(el, "className")
    if not class_name:
        raise ResourceDocParseError("classDoc without className")
    return ClassDoc(
        class_name=class_name.strip(),
        comment_text=_text(el, "commentText"),
        method_docs=[_parse_method_doc(m) for m in _children(_child(el, "methodDocs"), "methodDoc")],
    )


def _parse_method_doc(el: ET.Element) -> MethodDoc:
    method_name = _text(el, "methodName")
    if not method_name:
        raise ResourceDocParseError("methodDoc without methodName")

    request_doc = None
    request_el = _child(el, "requestDoc")
    if request_el is not None:
        repr_el = _child(request_el, "representationDoc")
        request_doc = RequestDoc(
            representation_doc=_parse_representation(repr_el) if repr_el is not None else None
        )

    response_el = _child(el, "responseDoc")
    return MethodDoc(
        method_name=method_name.strip(),
        method_signature=_text(el, "methodSignature"),
        comment_text=_text(el, "commentText"),
        return_doc=_text(el, "returnDoc"),
        return_type_example=_text(el, "returnTypeExample"),
        request_doc=request_doc,
        response_doc=_parse_response_doc(response_el) if response_el is not None else None,
        param_docs=[_parse_param_doc(p) for p in _children(_child(el, "paramDocs"), "paramDoc")],
    )


def _parse_param_doc(el: ET.Element) -> ParamDoc:
    annotations = []
    for ann_el in _children(_child(el, "annotationDocs"), "annotationDoc"):
        attributes = [
            NamedValue(name=(_text(a, "name") or "").strip(), value=_text(a, "value"))
            for a in _children(_child(ann_el, "attributeDocs"), "attributeDoc")
        ]
        annotations.append(
            AnnotationDoc(annotation_type_name=_text(ann_el, "annotationTypeName"), attribute_docs=attributes)
        )
    return ParamDoc(
        param_name=_text(el, "paramName"),
        comment_text=_text(el, "commentText"),
        annotation_docs=annotations,
    )


def _parse_representation(el: ET.Element) -> RepresentationDoc:
    status = el.get("status")
    if status is not None:
        try:
            status = int(status)
        except ValueError as e:
            raise ResourceDocParseError(f"Invalid representation status {status!r}") from e
    return RepresentationDoc(
        element=el.get("element"),
        media_type=el.get("mediaType"),
        status=status,
        example=_text(el, "example"),
        doc=_text(el, "doc"),
    )


def _parse_response_doc(el: ET.Element) -> ResponseDoc:
    params = []
    for param_el in _children(_child(el, "wadlParams"), "wadlParam"):
        name = param_el.get("name")
        if not name:
            raise ResourceDocParseError("wadlParam without name")
        style = param_el.get("style")
        if style is not None:
            try:
                style = ParamStyle(style)
            except ValueError as e:
                raise ResourceDocParseError(f"Invalid style {style!r} for wadlParam {name!r}") from e
        params.append(
            WadlParamDoc(
                name=name,
                style=style,
                type=param_el.get("type"),
                doc=_text(param_el, "doc"),
            )
        )
    return ResponseDoc(
        return_doc=_text(el, "returnDoc"),
        wadl_params=params,
        representations=[_parse_representation(r) for r in _children(_child(el, "representations"), "representation")],
    )


# -- element helpers ----------------------------------------------------------


def _local(tag: str) -> str:
    return tag.rpartition("}")[2]


def _children(el: ET.Element | None, name: str) -> list[ET.Element]:
    if el is None:
        return []
    return [c for c in el if isinstance(c.tag, str) and _local(c.tag) == name]


def _child(el: ET.Element | None, name: str) -> ET.Element | None:
    found = _children(el, name)
    return found[0] if found else None


def _text(el: ET.Element, name: str) -> str | None:
    """Full text content of the named child, or None when the child is absent."""
    child = _child(el, name)
    if child is None:
        return None
    return "".join(child.itertext())
