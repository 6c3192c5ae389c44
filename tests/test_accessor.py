from wadl_resourcedoc.model.resource import MethodDefinition, Parameter, ParameterSource, qualified_name
from wadl_resourcedoc.resourcedoc.accessor import ResourceDocAccessor
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
)


class OrdersResource:
    def get_order(self, order_id: str): ...


class SpecialOrdersResource(OrdersResource):
    pass


ORDERS = qualified_name(OrdersResource)


def _definition(name="get_order", types=("str",), declaring=ORDERS) -> MethodDefinition:
    return MethodDefinition(declaring_class=declaring, name=name, parameter_types=list(types))


def _accessor(*method_docs: MethodDoc) -> ResourceDocAccessor:
    return ResourceDocAccessor(
        ResourceDoc(class_docs=[ClassDoc(class_name=ORDERS, comment_text="Orders.", method_docs=list(method_docs))])
    )


def _query_param_doc(source_name: str, annotation="QueryParam") -> ParamDoc:
    return ParamDoc(
        param_name=source_name,
        comment_text=f"About {source_name}.",
        annotation_docs=[
            AnnotationDoc(annotation_type_name=annotation, attribute_docs=[NamedValue(name="value", value=source_name)])
        ],
    )


class TestClassDoc:
    def test_lookup_by_class_object(self):
        assert _accessor().get_class_doc(OrdersResource).comment_text == "Orders."

    def test_lookup_by_name(self):
        assert _accessor().get_class_doc(ORDERS) is not None

    def test_no_inheritance_fallback(self):
        assert _accessor().get_class_doc(SpecialOrdersResource) is None

    def test_none_class(self):
        assert _accessor().get_class_doc(None) is None


class TestMethodDoc:
    def test_exact_signature(self):
        accessor = _accessor(MethodDoc(method_name="get_order", method_signature="( str )", comment_text="x"))
        assert accessor.get_method_doc(ORDERS, _definition()).comment_text == "x"

    def test_signature_mismatch(self):
        accessor = _accessor(MethodDoc(method_name="get_order", method_signature="(int)"))
        assert accessor.get_method_doc(ORDERS, _definition()) is None

    def test_from_callable_matches(self):
        accessor = _accessor(MethodDoc(method_name="get_order", method_signature="(str)", comment_text="x"))
        definition = MethodDefinition.from_callable(OrdersResource.get_order)
        assert accessor.get_method_doc(definition.declaring_class, definition).comment_text == "x"

    def test_unsigned_single_candidate(self):
        accessor = _accessor(MethodDoc(method_name="get_order", comment_text="x"))
        assert accessor.get_method_doc(ORDERS, _definition()).comment_text == "x"

    def test_unsigned_ambiguous(self):
        accessor = _accessor(MethodDoc(method_name="get_order"), MethodDoc(method_name="get_order"))
        assert accessor.get_method_doc(ORDERS, _definition()) is None

    def test_unknown_class(self):
        accessor = _accessor(MethodDoc(method_name="get_order", method_signature="(str)"))
        assert accessor.get_method_doc("other.Resource", _definition()) is None

    def test_none_method(self):
        assert _accessor().get_method_doc(ORDERS, None) is None


class TestParamDoc:
    def test_match_by_source_name_and_kind(self):
        accessor = _accessor(
            MethodDoc(method_name="get_order", method_signature="(str)", param_docs=[_query_param_doc("expand")])
        )
        param = Parameter(source=ParameterSource.QUERY, source_name="expand")
        assert accessor.get_param_doc(ORDERS, _definition(), param).comment_text == "About expand."

    def test_kind_mismatch(self):
        accessor = _accessor(
            MethodDoc(method_name="get_order", method_signature="(str)", param_docs=[_query_param_doc("expand")])
        )
        param = Parameter(source=ParameterSource.HEADER, source_name="expand")
        assert accessor.get_param_doc(ORDERS, _definition(), param) is None

    def test_annotation_without_type_matches_by_name(self):
        accessor = _accessor(
            MethodDoc(method_name="get_order", method_signature="(str)", param_docs=[_query_param_doc("expand", None)])
        )
        param = Parameter(source=ParameterSource.HEADER, source_name="expand")
        assert accessor.get_param_doc(ORDERS, _definition(), param) is not None

    def test_entity_parameter_never_matches(self):
        accessor = _accessor(
            MethodDoc(method_name="get_order", method_signature="(str)", param_docs=[_query_param_doc("body")])
        )
        param = Parameter(source=ParameterSource.ENTITY, source_name="body")
        assert accessor.get_param_doc(ORDERS, _definition(), param) is None


class TestRepresentations:
    def _accessor(self, media_type="application/json"):
        return _accessor(
            MethodDoc(
                method_name="get_order",
                method_signature="(str)",
                request_doc=RequestDoc(representation_doc=RepresentationDoc(media_type=media_type, element="order")),
                response_doc=ResponseDoc(return_doc="The order."),
            )
        )

    def test_request_media_type_match_ignores_parameters(self):
        found = self._accessor().get_request_representation(ORDERS, _definition(), "Application/JSON; charset=utf-8")
        assert found.element == "order"

    def test_request_media_type_mismatch(self):
        assert self._accessor().get_request_representation(ORDERS, _definition(), "application/xml") is None

    def test_request_without_recorded_media_type_matches_any(self):
        assert self._accessor(None).get_request_representation(ORDERS, _definition(), "text/plain") is not None

    def test_request_none_media_type(self):
        assert self._accessor().get_request_representation(ORDERS, _definition(), None) is None

    def test_response(self):
        assert self._accessor().get_response(ORDERS, _definition()).return_doc == "The order."

    def test_response_miss(self):
        assert self._accessor().get_response(ORDERS, _definition(name="cancel")) is None
