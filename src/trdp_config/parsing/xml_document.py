"""
XML document adapter for device description files.

Turns raw XML bytes into a generic nested dictionary:

- an element without attributes or child elements becomes its stripped
  text ("" when empty)
- any other element becomes a dict holding its attributes and child
  elements at the same level
- a name seen more than once among siblings becomes a list in document
  order, a name seen once stays a single value
- non-blank text next to attributes or children is kept under TEXT_KEY

The summary extractor reads this structure through to_list() so it never
has to care whether a tag occurred once or many times.
"""

from typing import Any, Dict, Union

from lxml import etree

from ..utils.exceptions import MalformedDocument
from ..utils.logging import get_logger

logger = get_logger(__name__)

TEXT_KEY = "_"


class XmlDocumentAdapter:
    """Parses device description XML into nested dicts using lxml"""

    def __init__(self):
        self.parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            remove_comments=True,
            remove_pis=True,
            huge_tree=False,
        )

    def parse(self, content: Union[bytes, str]) -> Dict[str, Any]:
        """
        Parse XML content into {root_tag: value}.

        Args:
            content: Raw XML document

        Returns:
            Nested dictionary keyed by the root element's local name

        Raises:
            MalformedDocument: If the content is empty or is not well-formed XML
        """
        if isinstance(content, str):
            content = content.encode('utf-8')
        if not content or not content.strip():
            raise MalformedDocument("Document is empty")

        try:
            root = etree.fromstring(content, parser=self.parser)
        except etree.XMLSyntaxError as e:
            logger.error(f"Failed to parse XML document: {e}")
            raise MalformedDocument(f"Document is not well-formed XML: {e}") from e

        return {_local_name(root): self._convert(root)}

    def _convert(self, element) -> Any:
        children = [child for child in element if isinstance(child.tag, str)]
        text = (element.text or '').strip()

        if not element.attrib and not children:
            return text

        node: Dict[str, Any] = {}
        for name, value in element.attrib.items():
            _merge(node, _local_name(name), value)
        for child in children:
            _merge(node, _local_name(child), self._convert(child))
        if text:
            _merge(node, TEXT_KEY, text)
        return node


def _local_name(item) -> str:
    return etree.QName(item).localname


def _merge(node: Dict[str, Any], key: str, value: Any) -> None:
    if key not in node:
        node[key] = value
    elif isinstance(node[key], list):
        node[key].append(value)
    else:
        node[key] = [node[key], value]
