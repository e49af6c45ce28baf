"""Environment-driven configuration via Pydantic Settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class StashSettings(BaseSettings):
    """All configuration is driven by env vars with ``VARSTASH_`` prefix.

    Example::

        export VARSTASH_STORE_PATH=session_vars
        export VARSTASH_LOG_LEVEL=DEBUG
    """

    model_config = {"env_prefix": "VARSTASH_"}

    # ── Store layout ─────────────────────────────────────────────────
    store_path: str = "varstash_data"
    root: Path | None = None
    metadata_filename: str = "datainfo__.json"
    blob_extension: str = ".pkl"
    trash_dirname: str = ".trash"

    # ── Fingerprinting ───────────────────────────────────────────────
    # Changing either value changes every digest, so the next save rewrites all blobs.
    pickle_protocol: int = Field(default=5, ge=2, le=5)
    hash_seed: int = Field(default=0, ge=0)

    # ── Observability ────────────────────────────────────────────────
    log_level: str = "INFO"
