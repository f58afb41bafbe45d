"""
Runtime configuration for qrpayload.

- DecoderConfig: the knobs a decode call honours. Passed explicitly into
  ``decode``; ``DecoderConfig.from_environment()`` resolves the host default
  once for embedding applications (the CLI does this at startup).
- configure_logger: console logging for the CLI, driven by LOG_LEVEL.
"""
from __future__ import annotations

import codecs
import locale
import logging
import os

import coloredlogs
from pydantic import BaseModel, ConfigDict

module_logger = logging.getLogger(__name__)

# Host encodings under which byte segments are always read as Shift_JIS.
_SHIFT_JIS_HOSTS = ("shift_jis", "euc_jp")


def _canonical(name: str) -> str:
    try:
        return codecs.lookup(name).name
    except LookupError:
        return name.lower()


class DecoderConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    assume_shift_jis: bool = False
    check_trailing_bits: bool = False

    @classmethod
    def from_environment(cls, **overrides) -> "DecoderConfig":
        """
        Derive ``assume_shift_jis`` from QRPAYLOAD_HOST_ENCODING, falling back to
        the locale's preferred encoding.
        """
        host = os.getenv("QRPAYLOAD_HOST_ENCODING") or locale.getpreferredencoding(False)
        assume = _canonical(host) in _SHIFT_JIS_HOSTS
        module_logger.debug("host encoding %r, assume_shift_jis=%s", host, assume)
        values = {"assume_shift_jis": assume}
        values.update(overrides)
        return cls(**values)


DEFAULT_CONFIG = DecoderConfig()


def configure_logger() -> logging.Logger:
    root_logger = logging.getLogger()
    log_level_str = os.getenv("LOG_LEVEL", "WARNING").upper()

    log_level_int = getattr(logging, log_level_str, None)
    if not isinstance(log_level_int, int):
        module_logger.warning(f"Invalid LOG_LEVEL '{log_level_str}'. Defaulting to WARNING.")
        log_level_int = logging.WARNING

    log_format = "%(asctime)s %(name)s[%(process)d] %(levelname)s %(message)s"

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    coloredlogs.install(
        level=log_level_int,
        fmt=log_format,
        logger=root_logger,
        reconfigure=True,
    )
    return root_logger
