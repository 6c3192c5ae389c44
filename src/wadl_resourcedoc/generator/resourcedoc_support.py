"""WADL generator decorator that adds documentation from a resourcedoc file.

The resourcedoc is written by the documentation extraction step and holds the
comments of resource classes, methods and parameters. The decorator delegates
every call to the wrapped generator and attaches those comments to the
fragments it returns.

The resourcedoc can be provided as a file (``set_resource_doc_file``), e.g.
when generating WADL offline, or as an already open stream
(``set_resource_doc_stream``) owned by the caller. Only one of the two may be
set.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO

from wadl_resourcedoc import xhtml
from wadl_resourcedoc.errors import ConfigurationError
from wadl_resourcedoc.model import resource as model
from wadl_resourcedoc.resourcedoc.accessor import ResourceDocAccessor
from wadl_resourcedoc.resourcedoc.model import ResourceDoc
from wadl_resourcedoc.resourcedoc.parser import ParserFactory, unmarshal
from wadl_resourcedoc.wadl.generator import WadlGenerator
from wadl_resourcedoc.wadl.model import (
    Application,
    ApplicationDescription,
    Doc,
    ExternalGrammarDefinition,
    Method,
    Param,
    Representation,
    Request,
    Resource,
    Resources,
    Response,
)

logger = logging.getLogger(__name__)

NAMESPACE_PATH = xhtml.__name__


@dataclass(frozen=True)
class FileSource:
    path: Path


@dataclass(frozen=True)
class StreamSource:
    stream: IO


DocumentationSource = FileSource | StreamSource


def _is_empty(text: str | None) -> bool:
    return text is None or not text.strip()


def _add_doc(docs: list[Doc], text: str | None) -> None:
    if not _is_empty(text):
        docs.append(Doc(content=[text]))


def _add_doc_for_example(docs: list[Doc], example: str | None) -> None:
    if not _is_empty(example):
        docs.append(Doc(content=[xhtml.example_block(example)]))


class ResourceDocWadlGenerator(WadlGenerator):
    """Enhances the generated WADL with documentation read from a resourcedoc."""

    def __init__(
        self,
        delegate: WadlGenerator | None = None,
        resource_doc: ResourceDoc | None = None,
        parser_factory: ParserFactory | None = None,
    ):
        self.delegate = delegate
        self.parser_factory = parser_factory
        self.source: DocumentationSource | None = None
        self.resource_doc = ResourceDocAccessor(resource_doc) if resource_doc is not None else None

    def set_wadl_generator_delegate(self, delegate: WadlGenerator) -> None:
        self.delegate = delegate

    def set_resource_doc_file(self, path: str | Path) -> None:
        """Read the resourcedoc from ``path`` during init().

        Raises ConfigurationError if a resourcedoc stream is already set.
        """
        if isinstance(self.source, StreamSource):
            raise ConfigurationError(
                "The resource_doc_stream property is already set, therefore you cannot set "
                "the resource_doc_file property. Only one of both can be set at a time."
            )
        self.source = FileSource(Path(path))

    def set_resource_doc_stream(self, stream: IO) -> None:
        """Read the resourcedoc from ``stream`` during init().

        The stream must be closed by the caller providing it. Raises
        ConfigurationError if a resourcedoc file is already set.
        """
        if isinstance(self.source, FileSource):
            raise ConfigurationError(
                "The resource_doc_file property is already set, therefore you cannot set "
                "the resource_doc_stream property. Only one of both can be set at a time."
            )
        self.source = StreamSource(stream)

    def init(self) -> None:
        if self.source is None and self.resource_doc is None:
            raise ConfigurationError(
                "Neither the resource_doc_file nor the resource_doc_stream is set, one of both is required."
            )
        if self.delegate is None:
            raise ConfigurationError("No delegate WADL generator is set.")
        self.delegate.init()

        if self.source is None:
            return

        source = self.source
        self.resource_doc = None
        try:
            if isinstance(source, FileSource):
                with source.path.open("rb") as stream:
                    document = unmarshal(stream, self.parser_factory)
            else:
                document = unmarshal(source.stream, self.parser_factory)
        finally:
            if isinstance(source, FileSource):
                self.source = None

        self.resource_doc = ResourceDocAccessor(document)
        logger.info("Loaded resource documentation for %d classes", len(document.class_docs))

    def required_namespace_path(self) -> str | None:
        if self.delegate is None:
            raise ConfigurationError("No delegate WADL generator is set.")
        delegate_path = self.delegate.required_namespace_path()
        if delegate_path is None:
            return NAMESPACE_PATH
        return f"{delegate_path}:{NAMESPACE_PATH}"

    # -- pass-through -----------------------------------------------------------

    def create_application(self) -> Application:
        return self.delegate.create_application()

    def create_resources(self) -> Resources:
        return self.delegate.create_resources()

    def create_request(self, resource: model.Resource, resource_method: model.ResourceMethod) -> Request:
        return self.delegate.create_request(resource, resource_method)

    def create_external_grammar(self) -> ExternalGrammarDefinition:
        return self.delegate.create_external_grammar()

    def attach_types(self, description: ApplicationDescription) -> None:
        self.delegate.attach_types(description)

    # -- enrichment -------------------------------------------------------------

    def create_resource(self, resource: model.Resource, path: str) -> Resource:
        result = self.delegate.create_resource(resource, path)
        for resource_class in resource.handler_classes:
            class_doc = self.resource_doc.get_class_doc(resource_class)
            if class_doc is not None:
                _add_doc(result.doc, class_doc.comment_text)
        return result

    def create_method(self, resource: model.Resource, resource_method: model.ResourceMethod) -> Method:
        result = self.delegate.create_method(resource, resource_method)
        method = resource_method.definition_method
        method_doc = self.resource_doc.get_method_doc(method.declaring_class, method)
        if method_doc is not None:
            _add_doc(result.doc, method_doc.comment_text)
        return result

    def create_request_representation(
        self, resource: model.Resource, resource_method: model.ResourceMethod, media_type: str
    ) -> Representation:
        result = self.delegate.create_request_representation(resource, resource_method, media_type)
        method = resource_method.definition_method
        representation_doc = self.resource_doc.get_request_representation(
            method.declaring_class, method, result.media_type
        )
        if representation_doc is not None:
            result.element = representation_doc.element
            _add_doc_for_example(result.doc, representation_doc.example)
        return result

    def create_responses(self, resource: model.Resource, resource_method: model.ResourceMethod) -> list[Response]:
        method = resource_method.definition_method
        response_doc = self.resource_doc.get_response(method.declaring_class, method)
        if response_doc is None or not response_doc.has_representations():
            return self.delegate.create_responses(resource, resource_method)

        responses = []
        for representation_doc in response_doc.representations:
            representation = Representation(
                element=representation_doc.element,
                media_type=representation_doc.media_type,
            )
            _add_doc_for_example(representation.doc, representation_doc.example)
            _add_doc(representation.doc, representation_doc.doc)

            response = Response(representation=[representation])
            if representation_doc.status is not None:
                response.status.append(representation_doc.status)
            responses.append(response)

        for wadl_param in response_doc.wadl_params:
            param = Param(
                name=wadl_param.name,
                style=wadl_param.style,
                type=wadl_param.type,
            )
            _add_doc(param.doc, wadl_param.doc)
            for response in responses:
                response.param.append(param.model_copy(deep=True))

        if not _is_empty(response_doc.return_doc):
            for response in responses:
                _add_doc(response.doc, response_doc.return_doc)

        return responses

    def create_param(
        self, resource: model.Resource, resource_method: model.ResourceMethod, parameter: model.Parameter
    ) -> Param | None:
        result = self.delegate.create_param(resource, resource_method, parameter)
        if result is not None:
            method = resource_method.definition_method
            param_doc = self.resource_doc.get_param_doc(method.declaring_class, method, parameter)
            if param_doc is not None:
                _add_doc(result.doc, param_doc.comment_text)
        return result
