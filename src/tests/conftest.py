import pytest


SPEED_DEVICE_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<device host-name="UNIT01" type="CCU">
  <bus-interface-list>
    <bus-interface name="eth0" network-id="1" host-ip="10.0.0.1">
      <telegram name="Speed" com-id="100" data-set-id="5">
        <pd-parameter cycle="10" timeout="100"/>
        <source id="1" uri1="10.0.0.1"/>
      </telegram>
    </bus-interface>
  </bus-interface-list>
  <data-set-list>
    <data-set id="5" name="SpeedSet">
      <element name="speed" type="UINT32"/>
      <element name="unit" type="UINT8"/>
      <element name="valid" type="BOOL8"/>
    </data-set>
  </data-set-list>
</device>
"""

MIXED_DEVICE_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<device>
  <host-name>UNIT02</host-name>
  <type>DCU</type>
  <!-- two interfaces, telegrams of every kind -->
  <bus-interface-list>
    <bus-interface name="eth0" network-id="1" host-ip="10.0.0.2">
      <telegram name="Door" com-id="200" data-set-id="7">
        <pd-parameter cycle="100"/>
        <source id="1"/>
        <destination id="2"/>
      </telegram>
      <telegram name="Diag" com-id="201" data-set-id="8">
        <md-parameter cycle="500"/>
        <destination id="3"/>
      </telegram>
      <telegram name="Both" com-id="202">
        <pd-parameter cycle="20"/>
        <md-parameter cycle="999"/>
      </telegram>
      <telegram name="Orphan" com-id="203"/>
    </bus-interface>
    <bus-interface name="eth1" network-id="two">
      <telegram name="Status" com-id="300">
        <md-parameter/>
      </telegram>
    </bus-interface>
  </bus-interface-list>
  <data-set-list>
    <data-set id="7" name="DoorSet">
      <element name="open" type="BOOL8"/>
    </data-set>
    <data-set id="8" name="DiagSet"/>
  </data-set-list>
</device>
"""


@pytest.fixture
def speed_device_xml():
    return SPEED_DEVICE_XML


@pytest.fixture
def mixed_device_xml():
    return MIXED_DEVICE_XML
