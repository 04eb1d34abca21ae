import pytest
import pytest_asyncio
from trdp_config.storage.config_store import ConfigStore
from trdp_config.utils.exceptions import ConfigNotFoundError, IOUnavailable


@pytest_asyncio.fixture
async def store(tmp_path):
    store = ConfigStore(str(tmp_path / "configs"), str(tmp_path / "metadata.db"), max_connections=2)
    await store.initialize()
    yield store
    await store.close()


@pytest.mark.asyncio
async def test_save_writes_file_and_metadata(store, speed_device_xml):
    entry = await store.save("unit01.xml", speed_device_xml)

    assert entry.filename == "unit01.xml"
    assert entry.stored_name == f"{entry.id}.xml"
    assert (store.configs_dir / entry.stored_name).read_bytes() == speed_device_xml
    assert await store.get_entry(entry.id) == entry


@pytest.mark.asyncio
async def test_list_entries_in_upload_order(store):
    first = await store.save("a.xml", b"<device/>")
    second = await store.save("b.xml", b"<device/>")

    entries = await store.list_entries()
    assert [e.id for e in entries] == [first.id, second.id]


@pytest.mark.asyncio
async def test_read_document_returns_content(store, speed_device_xml):
    entry = await store.save("unit01.xml", speed_device_xml)
    assert await store.read_document(entry.id) == speed_device_xml


@pytest.mark.asyncio
async def test_unknown_id_not_found(store):
    with pytest.raises(ConfigNotFoundError):
        await store.get_entry("missing")
    with pytest.raises(ConfigNotFoundError):
        await store.read_document("missing")


@pytest.mark.asyncio
async def test_missing_file_is_io_unavailable(store):
    entry = await store.save("unit01.xml", b"<device/>")
    (store.configs_dir / entry.stored_name).unlink()

    with pytest.raises(IOUnavailable):
        await store.read_document(entry.id)


@pytest.mark.asyncio
async def test_metadata_survives_reopen(tmp_path):
    configs_dir, db_path = str(tmp_path / "configs"), str(tmp_path / "metadata.db")
    store = ConfigStore(configs_dir, db_path)
    await store.initialize()
    entry = await store.save("unit01.xml", b"<device/>")
    await store.close()

    reopened = ConfigStore(configs_dir, db_path)
    await reopened.initialize()
    try:
        assert [e.id for e in await reopened.list_entries()] == [entry.id]
    finally:
        await reopened.close()
