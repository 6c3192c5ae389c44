"""YAML configuration for WADL generator chains.

A config lists generators from the innermost outwards; each one wraps the
generator built before it. A chain that does not start with ``basic`` is
built on top of an implicit BasicWadlGenerator::

    generators:
      - name: resourcedoc
        properties:
          resource_doc_file: resourcedoc.xml
"""

import contextlib
import logging
from pathlib import Path
from typing import Any, Callable

import yaml
from pydantic import BaseModel, ValidationError

from wadl_resourcedoc.errors import ConfigurationError
from wadl_resourcedoc.generator.resourcedoc_support import ResourceDocWadlGenerator
from wadl_resourcedoc.resourcedoc.parser import ParserFactory
from wadl_resourcedoc.wadl.generator import BasicWadlGenerator, WadlGenerator

logger = logging.getLogger(__name__)

# Factories take the parser factory used for any documents the generator loads.
GENERATORS: dict[str, Callable[[ParserFactory | None], WadlGenerator]] = {
    "basic": lambda parser_factory: BasicWadlGenerator(),
    "resourcedoc": lambda parser_factory: ResourceDocWadlGenerator(parser_factory=parser_factory),
}

# Properties whose values are paths; *_stream properties are opened by the loader.
FILE_PROPERTIES = {"resource_doc_file"}
STREAM_PROPERTIES = {"resource_doc_stream"}


class GeneratorDescription(BaseModel):
    name: str
    properties: dict[str, Any] = {}


class GeneratorConfig(BaseModel):
    generators: list[GeneratorDescription] = []
    base_dir: Path | None = None  # relative paths in properties resolve against this


def load_config(file_path: Path) -> GeneratorConfig:
    """Load a generator chain config from a YAML file."""
    file_path = Path(file_path)
    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"{file_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{file_path}: expected a mapping at the top level")
    try:
        config = GeneratorConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"{file_path}: {e}") from e
    if config.base_dir is None:
        config.base_dir = file_path.parent
    return config


def _resolve(config: GeneratorConfig, value: Any) -> Path:
    path = Path(value)
    if not path.is_absolute() and config.base_dir is not None:
        path = config.base_dir / path
    return path


def build_generator(config: GeneratorConfig, parser_factory: ParserFactory | None = None) -> WadlGenerator:
    """Build and initialize the generator chain described by ``config``."""
    generator: WadlGenerator | None = None
    with contextlib.ExitStack() as streams:
        for description in config.generators:
            factory = GENERATORS.get(description.name)
            if factory is None:
                raise ConfigurationError(
                    f"Unknown generator {description.name!r}, expected one of {sorted(GENERATORS)}"
                )
            wrapper = factory(parser_factory)
            if generator is None and not isinstance(wrapper, BasicWadlGenerator):
                generator = BasicWadlGenerator()
            if generator is not None:
                wrapper.set_wadl_generator_delegate(generator)

            for prop, value in description.properties.items():
                setter = getattr(wrapper, f"set_{prop}", None)
                if setter is None:
                    raise ConfigurationError(f"Generator {description.name!r} has no property {prop!r}")
                if prop in FILE_PROPERTIES:
                    value = _resolve(config, value)
                elif prop in STREAM_PROPERTIES:
                    value = streams.enter_context(_resolve(config, value).open("rb"))
                setter(value)

            logger.debug("Configured generator %s with %s", description.name, sorted(description.properties))
            generator = wrapper

        if generator is None:
            generator = BasicWadlGenerator()
        generator.init()
    return generator
