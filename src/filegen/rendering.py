"""Turn raw script results into text.

Resolution is attempted in a fixed order and the first applicable strategy
wins:

1. ``None`` is rejected with :class:`~filegen.errors.NullResultError`.
2. A plain ``str`` is returned unchanged.
3. An XML document (``xml.dom.minidom`` document or element, or an
   ``xml.etree.ElementTree`` element/tree) is serialized to markup. Other
   DOM nodes such as attributes go through converters like any object.
4. A converter registered for the value's type renders it.
5. Anything else raises :class:`~filegen.errors.UnrenderableResultError`.
"""

from __future__ import annotations

from xml.dom import minidom
from xml.etree import ElementTree

from filegen.converters import ConverterRegistry
from filegen.errors import ConverterError, NullResultError, UnrenderableResultError
from filegen.types import ScriptResult

EMPTY_REGISTRY = ConverterRegistry()
DOM_NODE_TYPES = (minidom.Document, minidom.Element)


def is_document(value: object) -> bool:
    """Return whether ``value`` is a supported XML document or element."""
    return isinstance(value, DOM_NODE_TYPES + (ElementTree.Element, ElementTree.ElementTree))


def serialize_document(value: object) -> str:
    """Serialize a DOM node, ElementTree element or tree to markup.

    DOM documents keep their XML declaration (``toxml``); ElementTree
    elements are written without one.
    """
    if isinstance(value, DOM_NODE_TYPES):
        return value.toxml()
    if isinstance(value, ElementTree.ElementTree):
        value = value.getroot()
        if value is None:
            raise ConverterError("Cannot serialize an ElementTree without a root element.")
    return ElementTree.tostring(value, encoding="unicode")


def render_result(value: ScriptResult, registry: ConverterRegistry = EMPTY_REGISTRY) -> str:
    """Render a script result to text.

    Parameters
    ----------
    value : object | None
        Raw value produced by a script.
    registry : ConverterRegistry, optional
        Converters for types other than ``str`` and XML documents.

    Returns
    -------
    str
        Text to write to the output file.

    Raises
    ------
    NullResultError
        If ``value`` is ``None``.
    UnrenderableResultError
        If no strategy applies to the value's runtime type.
    ConverterError
        If a converter returns something other than ``str``.
    """
    if value is None:
        raise NullResultError()
    if type(value) is str:
        return value
    if is_document(value):
        return serialize_document(value)

    converter = registry.resolve(value)
    if converter is None:
        raise UnrenderableResultError(type(value))
    text = converter.apply(value)
    if not isinstance(text, str):
        raise ConverterError(
            f"Converter {type(converter).__qualname__} returned "
            f"{type(text).__qualname__} instead of str."
        )
    return text
