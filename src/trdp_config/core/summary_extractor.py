# Device description -> configuration summary
from typing import Any, Dict, List, Optional, Union

from ..models.summary import BusInterface, ConfigSummary, Dataset, Device, Telegram
from ..parsing.xml_document import TEXT_KEY, XmlDocumentAdapter
from ..utils.exceptions import MalformedDocument
from ..utils.helpers import to_list, to_number
from ..utils.logging import get_logger
from .direction import telegram_direction

logger = get_logger(__name__)

DEVICE_ROOT = 'device'


def _node(parent: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Child element as a dict; an empty or text-only child reads as {}"""
    value = _first(parent.get(key))
    return value if isinstance(value, dict) else {}


def _nodes(parent: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    """Repeated child elements in document order, each as a dict"""
    return [item if isinstance(item, dict) else {} for item in to_list(parent.get(key))]


def _text(parent: Dict[str, Any], key: str, default: str = "") -> str:
    value = _first(parent.get(key))
    if isinstance(value, dict):
        value = value.get(TEXT_KEY)
    if value is None:
        return default
    return str(value)


def _number(parent: Dict[str, Any], key: str):
    value = _first(parent.get(key))
    if isinstance(value, dict):
        value = value.get(TEXT_KEY)
    return to_number(value)


def _first(value: Any) -> Any:
    items = to_list(value)
    return items[0] if items else None


def _has_block(parent: Dict[str, Any], key: str) -> bool:
    return parent.get(key) is not None


def extract_device(device: Dict[str, Any]) -> Device:
    return Device(
        host_name=_text(device, 'host-name') or _text(device, 'hostName'),
        type=_text(device, 'type'),
    )


def extract_telegram(telegram: Dict[str, Any], cycle_block: Dict[str, Any]) -> Telegram:
    return Telegram(
        name=_text(telegram, 'name'),
        com_id=_number(telegram, 'com-id'),
        dataset_id=_number(telegram, 'data-set-id'),
        cycle=_number(cycle_block, 'cycle'),
        direction=telegram_direction(telegram),
    )


def extract_interface(interface: Dict[str, Any]) -> BusInterface:
    """
    Build one interface summary, splitting its telegrams into PD and MD.

    A telegram with a pd-parameter block is periodic even when it also
    declares md-parameter. A telegram with neither block is left out of
    both lists.
    """
    pd_telegrams = []
    md_telegrams = []
    name = _text(interface, 'name')

    for telegram in _nodes(interface, 'telegram'):
        if _has_block(telegram, 'pd-parameter'):
            pd_telegrams.append(extract_telegram(telegram, _node(telegram, 'pd-parameter')))
        elif _has_block(telegram, 'md-parameter'):
            md_telegrams.append(extract_telegram(telegram, _node(telegram, 'md-parameter')))
        else:
            logger.debug(
                f"Telegram '{_text(telegram, 'name')}' on interface '{name}' "
                f"has no pd-parameter or md-parameter block, skipped"
            )

    return BusInterface(
        name=name,
        network_id=_number(interface, 'network-id'),
        host_ip=_text(interface, 'host-ip'),
        pd_telegrams=pd_telegrams,
        md_telegrams=md_telegrams,
    )


def extract_interfaces(device: Dict[str, Any]) -> List[BusInterface]:
    interface_list = _node(device, 'bus-interface-list')
    return [extract_interface(iface) for iface in _nodes(interface_list, 'bus-interface')]


def extract_datasets(device: Dict[str, Any]) -> List[Dataset]:
    dataset_list = _node(device, 'data-set-list')
    return [
        Dataset(
            id=_number(dataset, 'id'),
            name=_text(dataset, 'name'),
            element_count=len(to_list(dataset.get('element'))),
        )
        for dataset in _nodes(dataset_list, 'data-set')
    ]


def extract_summary(document: Dict[str, Any]) -> ConfigSummary:
    """
    Build the summary of a parsed device description.

    Args:
        document: Nested dict as produced by XmlDocumentAdapter.parse()

    Returns:
        ConfigSummary with device identity, interfaces and datasets

    Raises:
        MalformedDocument: If the document has no device root
    """
    if not isinstance(document, dict) or document.get(DEVICE_ROOT) is None:
        raise MalformedDocument(f"Document has no <{DEVICE_ROOT}> root element")

    device = _node(document, DEVICE_ROOT)
    summary = ConfigSummary(
        device=extract_device(device),
        interfaces=extract_interfaces(device),
        datasets=extract_datasets(device),
    )
    logger.debug(
        f"Extracted summary for '{summary.device.host_name}': "
        f"{len(summary.interfaces)} interfaces, {len(summary.datasets)} datasets"
    )
    return summary


class ConfigSummaryExtractor:
    """Parses raw device description content and summarizes it"""

    def __init__(self, adapter: Optional[XmlDocumentAdapter] = None):
        self.adapter = adapter or XmlDocumentAdapter()

    def summarize(self, content: Union[bytes, str]) -> ConfigSummary:
        document = self.adapter.parse(content)
        return extract_summary(document)
