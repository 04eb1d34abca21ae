# src/trdp_config/__main__.py
import asyncio
import os
import signal
import sys
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from fastapi import FastAPI
from hypercorn.asyncio import serve
from hypercorn.config import Config as HyperConfig
import traceback

from trdp_config.api.routes import api_router
from trdp_config.core.engine_controller import EngineController
from trdp_config.core.summary_extractor import ConfigSummaryExtractor
from trdp_config.storage.config_store import ConfigStore
from trdp_config.utils.logging import setup_logging, get_logger
from trdp_config.utils.exceptions import ConfigurationError, InitializationError

DEFAULT_CONFIG_PATH = "src/config/default.yml"

DEFAULT_CONFIG = """
api:
  host: "0.0.0.0"
  port: 3001

storage:
  configs_dir: "configs"
  database: "configs/metadata.db"
  pool_size: 3
  max_upload_mb: 5

engine:
  restart_delay: 0.025

logging:
  level: "INFO"
  file: "logs/trdp_config.log"
  max_size: 10
  backup_count: 5
  format: "%(asctime)s - %(name)s - [%(levelname)s] - %(message)s"
"""


class AppState:
    """Holds application state and components"""
    def __init__(self):
        self.config_store: Optional[ConfigStore] = None
        self.extractor: Optional[ConfigSummaryExtractor] = None
        self.engine_controller: Optional[EngineController] = None
        self.max_upload_bytes: int = 5 * 1024 * 1024


class ConfigManager:
    """Manages configuration loading and validation"""

    @staticmethod
    def load_config(config_path: str) -> Dict[str, Any]:
        """Load and validate configuration from YAML file"""
        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f)
                if config is None:
                    raise ConfigurationError("Configuration file is empty or incorrectly formatted")

                required_sections = ['api', 'storage', 'engine', 'logging']
                missing_sections = [section for section in required_sections if section not in config]
                if missing_sections:
                    raise ConfigurationError(f"Missing required configuration sections: {', '.join(missing_sections)}")

                return config
        except yaml.YAMLError:
            raise ConfigurationError(f"Error parsing configuration file: {traceback.format_exc()}")
        except FileNotFoundError:
            raise ConfigurationError(f"Configuration file not found: {config_path}")


def create_app(app_state: AppState) -> FastAPI:
    """Build the FastAPI application around already created components"""
    app = FastAPI(
        title="TRDP Configuration API",
        description="Upload TRDP device descriptions, inspect their summary and activate them",
        version="1.0.0"
    )
    # Components are resolved per request in api.dependencies
    app.state.components = app_state
    app.include_router(api_router, prefix="/api/v1")
    return app


class APIServer:
    """Handles API server initialization and management"""

    def __init__(self, config: Dict[str, Any], shutdown_event: asyncio.Event, app_state: AppState):
        self.config = config
        self.shutdown_event = shutdown_event
        self.logger = get_logger("API Server")
        self.app: Optional[FastAPI] = None
        self.app_state = app_state

    async def initialize(self) -> FastAPI:
        """Initialize FastAPI application with routes"""
        try:
            self.app = create_app(self.app_state)
            return self.app
        except Exception:
            raise InitializationError(f"Failed to initialize API server: {traceback.format_exc()}")

    async def start(self):
        """Start the API server"""
        if not self.app:
            await self.initialize()

        hypercorn_config = HyperConfig()
        try:
            host = self.config['api']['host']
            port = self.config['api']['port']
            hypercorn_config.bind = [f"{host}:{port}"]

            async def shutdown_trigger():
                await self.shutdown_event.wait()

            self.logger.info(f"Starting API server on {host}:{port}")
            await serve(self.app, hypercorn_config, shutdown_trigger=shutdown_trigger)
        except Exception:
            self.logger.error(f"Failed to start API server: {traceback.format_exc()}")
            raise


class TrdpConfigApp:
    """Main application class"""

    def __init__(self, config_path: str):
        self.logger = get_logger("Main App")
        try:
            self.config = ConfigManager.load_config(config_path)
            setup_logging(self.config.get('logging', {}))
        except ConfigurationError:
            self.logger.error(f"Configuration error: {traceback.format_exc()}")
            sys.exit(1)

        self.shutdown_event = asyncio.Event()
        self.app_state = AppState()
        self.api_server = APIServer(self.config, self.shutdown_event, self.app_state)

    async def initialize_components(self):
        """Initialize all application components"""
        try:
            storage_config = self.config['storage']
            self.app_state.config_store = ConfigStore(
                storage_config.get('configs_dir', 'configs'),
                storage_config.get('database', 'configs/metadata.db'),
                max_connections=storage_config.get('pool_size', 3)
            )
            await self.app_state.config_store.initialize()
            self.app_state.max_upload_bytes = int(storage_config.get('max_upload_mb', 5) * 1024 * 1024)

            self.app_state.extractor = ConfigSummaryExtractor()
            self.app_state.engine_controller = EngineController(
                restart_delay=self.config['engine'].get('restart_delay', 0.025)
            )

            self.logger.info("All components initialized successfully")
        except Exception:
            raise InitializationError(f"Failed to initialize components: {traceback.format_exc()}")

    async def shutdown(self):
        """Gracefully shutdown all components"""
        self.logger.info("Initiating shutdown sequence")
        try:
            if self.app_state.config_store:
                await self.app_state.config_store.close()
            self.logger.info("Shutdown completed successfully")
        except Exception:
            self.logger.error(f"Error during shutdown: {traceback.format_exc()}")
        finally:
            self.shutdown_event.set()

    def handle_signals(self):
        """Set up signal handlers for graceful shutdown"""
        loop = asyncio.get_running_loop()

        def signal_handler(signum):
            self.logger.info(f"Received signal {signum}")
            self.shutdown_event.set()

        for sig in (signal.SIGTERM, signal.SIGINT):
            loop.add_signal_handler(sig, signal_handler, sig)

    async def run(self):
        """Main application entry point"""
        try:
            self.handle_signals()
            await self.initialize_components()
            await self.api_server.start()
        except InitializationError:
            self.logger.error(f"Initialization error: {traceback.format_exc()}")
            await self.shutdown()
            sys.exit(1)
        except Exception:
            self.logger.error(f"Unexpected error: {traceback.format_exc()}")
            await self.shutdown()
            sys.exit(1)
        await self.shutdown()


def create_default_config(config_path: Path):
    """Create default configuration file if it doesn't exist"""
    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(DEFAULT_CONFIG)
        print(f"Created default config at {config_path}")


def main():
    """Application entry point"""
    config_path = Path(os.environ.get("TRDP_CONFIG_FILE", DEFAULT_CONFIG_PATH))
    create_default_config(config_path)

    app = TrdpConfigApp(str(config_path))
    asyncio.run(app.run())


if __name__ == "__main__":
    main()
