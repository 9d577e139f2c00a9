# bible_refs/config.py
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load .env
load_dotenv()

# ---- DEFAULTS ----
DEFAULT_API_URL = "https://www.abibliadigital.com.br/api"
DEFAULT_VERSION = "acf"
DEFAULT_TIMEOUT = 15.0

# Version codes the API serves; also the tags accepted after a reference
SUPPORTED_VERSIONS = ("acf", "apee", "bbe", "kjv", "nvi", "ra", "rvr")


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings for matching and fetching verses.

    Attributes:
        base_url: Bible API root
        token: Bearer token, None for anonymous access
        default_version: Version used when a reference names none
        supported_versions: Version tags recognised in text. Empty disables
            per-reference version tags.
        timeout: Request timeout in seconds
    """
    base_url: str = DEFAULT_API_URL
    token: Optional[str] = None
    default_version: str = DEFAULT_VERSION
    supported_versions: tuple = SUPPORTED_VERSIONS
    timeout: float = DEFAULT_TIMEOUT


def _parse_versions(value: str) -> tuple:
    return tuple(v.strip().lower() for v in value.split(",") if v.strip())


def load_config() -> ClientConfig:
    """Build a ClientConfig from the environment (BIBLE_* variables)."""
    versions = os.getenv("BIBLE_SUPPORTED_VERSIONS")
    default_version = (os.getenv("BIBLE_DEFAULT_VERSION") or "").strip()

    return ClientConfig(
        base_url=os.getenv("BIBLE_API_URL") or DEFAULT_API_URL,
        token=os.getenv("BIBLE_API_TOKEN") or None,
        default_version=default_version or DEFAULT_VERSION,
        supported_versions=SUPPORTED_VERSIONS if versions is None else _parse_versions(versions),
        timeout=float(os.getenv("BIBLE_API_TIMEOUT", DEFAULT_TIMEOUT)),
    )
