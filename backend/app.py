import json
import os
import traceback
from contextlib import asynccontextmanager

import yaml

# Import endpoints router
from api import router as endpoints_router
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from log_config import setup_logging
from loguru import logger

from core.helpers import HelperSettings


def load_environment(env_file=None):
    """Load the .env file, then configure logging from it."""
    load_dotenv(env_file or os.environ.get("HELPERS_ENV_FILE", ".env"))
    return setup_logging()


# Load environment variables before reading any of them
load_environment()

# Get ingress prefix from environment variable
INGRESS_PREFIX = os.environ.get("INGRESS_PREFIX", "")
CONFIG_YAML = os.environ.get("HELPERS_CONFIG_YAML", "config.yaml")


def load_options():
    """Load options from the JSON options file or the options section of config.yaml."""
    options_json = os.environ.get("HELPERS_OPTIONS", "")

    if options_json and os.path.exists(options_json):
        try:
            with open(options_json) as f:
                options = json.load(f)
            logger.info(f"Loaded options from {options_json}")
            return options
        except (OSError, ValueError) as e:
            logger.error(f"Error loading options from {options_json}: {e!s}")

    if os.path.exists(CONFIG_YAML):
        try:
            with open(CONFIG_YAML) as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Error loading from {CONFIG_YAML}: {e!s}")
            return {}

        if "options" in config:
            logger.info(f"Loaded options from {CONFIG_YAML} (options section)")
            return config["options"]

        logger.warning(f"No 'options' section found in {CONFIG_YAML}, using entire file")
        return config

    return {}


def create_settings(options=None):
    """Create helper settings with options applied over the defaults."""
    settings = HelperSettings()
    if options:
        settings.update(**options)
    logger.debug(f"Helper settings: {settings}")
    return settings


helper_settings = create_settings(load_options())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan manager for FastAPI app."""
    routes = [
        f"{getattr(route, 'path', 'Unknown path')} - {getattr(route, 'methods', None)}"
        for route in app.routes
    ]
    logger.info(f"Registered routes: {routes}")

    yield


# Create FastAPI app with correct root_path
app = FastAPI(root_path=INGRESS_PREFIX, lifespan=lifespan)


# Add global exception handler to prevent server restarts
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    tb_str = traceback.format_exception(type(exc), exc, exc.__traceback__)

    logger.error(f"Unhandled exception: {exc!s}")
    logger.error(f"Request path: {request.url.path}")
    logger.error(f"Stack trace:\n{''.join(tb_str)}")

    return JSONResponse(
        status_code=500,
        content={
            "detail": str(exc),
            "type": str(type(exc).__name__),
            "message": "The server encountered an internal error but is still running.",
        },
    )


logger.info(f"Ingress prefix: {INGRESS_PREFIX}")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(endpoints_router)
