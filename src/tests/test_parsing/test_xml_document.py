import pytest
from trdp_config.parsing.xml_document import TEXT_KEY, XmlDocumentAdapter
from trdp_config.utils.exceptions import MalformedDocument


@pytest.fixture
def adapter():
    return XmlDocumentAdapter()


def test_single_and_repeated_children(adapter):
    document = adapter.parse(b"""<data-set id="5">
        <element name="a"/>
        <element name="b"/>
        <name>SpeedSet</name>
    </data-set>""")

    node = document["data-set"]
    assert node["id"] == "5"
    assert node["name"] == "SpeedSet"
    assert node["element"] == [{"name": "a"}, {"name": "b"}]


def test_attributes_and_children_share_a_level(adapter, speed_device_xml):
    device = adapter.parse(speed_device_xml)["device"]

    assert device["host-name"] == "UNIT01"
    telegram = device["bus-interface-list"]["bus-interface"]["telegram"]
    assert telegram["com-id"] == "100"
    assert telegram["pd-parameter"] == {"cycle": "10", "timeout": "100"}
    assert telegram["source"] == {"id": "1", "uri1": "10.0.0.1"}


def test_empty_element_is_empty_text(adapter):
    assert adapter.parse(b"<device><pd-parameter/></device>") == {"device": {"pd-parameter": ""}}


def test_text_next_to_attributes(adapter):
    document = adapter.parse(b'<device><cycle unit="ms"> 10 </cycle></device>')
    assert document["device"]["cycle"] == {"unit": "ms", TEXT_KEY: "10"}


def test_namespaces_and_comments_are_dropped(adapter):
    document = adapter.parse(b"""<t:device xmlns:t="urn:trdp">
        <!-- comment -->
        <?pi ignored?>
        <t:type>CCU</t:type>
    </t:device>""")
    assert document == {"device": {"type": "CCU"}}


@pytest.mark.parametrize("content", [b"", b"   ", b"<device>", b"not xml at all"])
def test_malformed_content_raises(adapter, content):
    with pytest.raises(MalformedDocument):
        adapter.parse(content)


def test_accepts_text_input(adapter):
    assert adapter.parse("<device><type>CCU</type></device>") == {"device": {"type": "CCU"}}


def test_external_entities_are_not_resolved(adapter, tmp_path):
    secret = tmp_path / "secret.txt"
    secret.write_text("top-secret")
    content = f"""<?xml version="1.0"?>
<!DOCTYPE device [<!ENTITY leak SYSTEM "file://{secret}">]>
<device><type>&leak;</type></device>""".encode()

    document = adapter.parse(content)
    assert "top-secret" not in str(document)
