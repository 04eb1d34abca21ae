from fastapi import APIRouter, File, HTTPException, UploadFile
from typing import List, Optional
from ...models.config_entry import ConfigEntry, ConfigListItem, EngineStatus
from ...models.summary import ConfigSummary
from ...utils.exceptions import (
    ConfigNotFoundError,
    InvalidUploadError,
    IOUnavailable,
    MalformedDocument,
)
from ...utils.logging import get_logger
from ..dependencies import (
    ConfigStoreDependency,
    EngineDependency,
    ExtractorDependency,
    MaxUploadDependency,
)

logger = get_logger(__name__)

config_router = APIRouter()

XML_CONTENT_TYPES = {"text/xml", "application/xml"}


def validate_upload(file: Optional[UploadFile], content: bytes, max_bytes: int) -> None:
    """Reject anything that is not an XML file within the size limit"""
    if file is None:
        raise InvalidUploadError("No file uploaded. Please attach an XML file.")

    filename = file.filename or ""
    is_xml = file.content_type in XML_CONTENT_TYPES or filename.lower().endswith(".xml")
    if not is_xml:
        raise InvalidUploadError("Only XML files are allowed.")
    if len(content) > max_bytes:
        raise InvalidUploadError(f"File exceeds the maximum upload size of {max_bytes} bytes.")


@config_router.get("/configs", response_model=List[ConfigListItem])
async def list_configs(store: ConfigStoreDependency) -> List[ConfigListItem]:
    try:
        entries = await store.list_entries()
        return [ConfigListItem.from_entry(entry) for entry in entries]
    except Exception as e:
        logger.error(f"Failed to load configs: {e}")
        raise HTTPException(status_code=500, detail="Failed to read configuration list.")


@config_router.post("/configs/upload", response_model=ConfigListItem, status_code=201)
async def upload_config(
    store: ConfigStoreDependency,
    max_bytes: MaxUploadDependency,
    file: Optional[UploadFile] = File(None),
) -> ConfigListItem:
    try:
        # One byte past the limit is enough to reject an oversized upload
        content = await file.read(max_bytes + 1) if file is not None else b""
        validate_upload(file, content, max_bytes)
        entry: ConfigEntry = await store.save(file.filename or "config.xml", content)
        return ConfigListItem.from_entry(entry)
    except InvalidUploadError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to save uploaded file: {e}")
        raise HTTPException(status_code=500, detail="Failed to store configuration file.")


@config_router.get("/configs/{config_id}/summary", response_model=ConfigSummary)
async def get_config_summary(
    config_id: str,
    store: ConfigStoreDependency,
    extractor: ExtractorDependency,
) -> ConfigSummary:
    try:
        content = await store.read_document(config_id)
        return extractor.summarize(content)
    except ConfigNotFoundError:
        raise HTTPException(status_code=404, detail="Configuration not found.")
    except MalformedDocument as e:
        logger.error(f"Failed to parse configuration {config_id}: {e}")
        raise HTTPException(status_code=422, detail="Failed to parse configuration file.")
    except IOUnavailable as e:
        logger.error(f"Failed to read configuration {config_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to read configuration file.")
    except Exception as e:
        logger.error(f"Failed to load configuration summary: {e}")
        raise HTTPException(status_code=500, detail="Failed to load configuration summary.")


@config_router.post("/configs/{config_id}/activate", response_model=EngineStatus)
async def activate_config(
    config_id: str,
    store: ConfigStoreDependency,
    engine: EngineDependency,
) -> EngineStatus:
    try:
        content = await store.read_document(config_id)
        await engine.load_config(content, config_id)
        return engine.get_status()
    except ConfigNotFoundError:
        raise HTTPException(status_code=404, detail="Configuration not found.")
    except Exception as e:
        logger.error(f"Failed to activate configuration {config_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to activate configuration.")
