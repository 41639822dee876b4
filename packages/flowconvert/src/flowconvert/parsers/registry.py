from __future__ import annotations

import importlib
from importlib.metadata import entry_points

from flowconvert.parsers.protocol import SessionParserFactory

ENTRY_POINT_GROUP = "flowconvert.parsers"


class ParserResolutionError(ValueError):
    pass


def load_parser_factory(reference: str) -> SessionParserFactory:
    """Resolve ``module:attr`` or a registered entry point name to a parser factory."""
    reference = reference.strip()
    if not reference:
        raise ParserResolutionError("empty parser reference")

    if ":" in reference:
        factory = _import_attribute(reference)
    else:
        matches = [ep for ep in entry_points(group=ENTRY_POINT_GROUP) if ep.name == reference]
        if not matches:
            raise ParserResolutionError(f"no parser registered under name {reference}")
        try:
            factory = matches[0].load()
        except (ImportError, AttributeError) as err:
            raise ParserResolutionError(
                f"cannot load parser entry point {reference}: {err}"
            ) from err

    if not callable(factory):
        raise ParserResolutionError(f"parser reference {reference} is not callable")
    return factory


def _import_attribute(reference: str) -> object:
    module_name, _, attr_path = reference.partition(":")
    if not module_name or not attr_path:
        raise ParserResolutionError(f"invalid parser reference {reference}")
    try:
        target: object = importlib.import_module(module_name)
    except ImportError as err:
        raise ParserResolutionError(f"cannot import parser module {module_name}: {err}") from err
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as err:
            raise ParserResolutionError(f"{module_name} has no attribute {attr_path}") from err
    return target
