"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from fulfilment.infrastructure.config import get_settings
from fulfilment.infrastructure.legacy_store_manager import LoggingLegacyStoreGateway
from fulfilment.infrastructure.locations.static_location_resolver import (
    StaticLocationResolver,
)
from fulfilment.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork
from fulfilment.logging_config import configure_logging


def setup_logging() -> None:
    configure_logging(level=get_settings().log_level)


def unit_of_work() -> JsonUnitOfWork:
    # Settings are read per call so FULFILMENT_DATA_DIR can change between runs.
    return JsonUnitOfWork(get_settings().data_dir)


def location_resolver() -> StaticLocationResolver:
    return StaticLocationResolver()


def legacy_store_gateway() -> LoggingLegacyStoreGateway:
    return LoggingLegacyStoreGateway()


def default_page_size() -> int:
    return get_settings().default_page_size
