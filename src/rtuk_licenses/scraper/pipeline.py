"""Fetch → parse → write pipelines for each license category.

Two pipelines are provided:

``internet``
    One POST to the platform result endpoint, written to
    ``internetStreamLicense.json``.

``satellite``
    Two POSTs to the shared result endpoint, one per broadcaster type, each
    written to its own file.

Error policy:
    A :class:`~rtuk_licenses.core.exceptions.FetchError` is logged and the
    affected step produces no file; the run continues with the next step.
    :class:`~rtuk_licenses.core.exceptions.HTMLParseError` and
    :class:`~rtuk_licenses.core.exceptions.RecordWriteError` propagate to the
    caller, which ends the process.  Nothing is retried.
"""

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import httpx
import structlog

from rtuk_licenses.config.settings import Settings
from rtuk_licenses.core.exceptions import FetchError
from rtuk_licenses.scraper.config import (
    INTERNET_STREAM_PAYLOAD,
    SATELLITE_RADIO_PAYLOAD,
    SATELLITE_TV_PAYLOAD,
)
from rtuk_licenses.scraper.http_fetcher import fetch_page
from rtuk_licenses.scraper.table_parser import (
    parse_internet_stream_licenses,
    parse_satellite_broadcasting_licenses,
)
from rtuk_licenses.scraper.writer import write_records

logger = logging.getLogger(__name__)

PIPELINE_INTERNET = "internet"
PIPELINE_SATELLITE = "satellite"
PIPELINES: tuple[str, ...] = (PIPELINE_INTERNET, PIPELINE_SATELLITE)


@dataclass(frozen=True)
class SatelliteTarget:
    """One broadcaster type of the satellite listing."""

    label: str
    payload: str
    path: Path


def satellite_targets(settings: Settings) -> tuple[SatelliteTarget, ...]:
    """Return the radio and TV queries with their output paths, radio first."""
    return (
        SatelliteTarget("Radio", SATELLITE_RADIO_PAYLOAD, settings.satellite_radio_path),
        SatelliteTarget("TV", SATELLITE_TV_PAYLOAD, settings.satellite_tv_path),
    )


def ensure_output_dir(path: str | os.PathLike[str]) -> None:
    """Create the output directory (and parents) if it does not exist."""
    os.makedirs(path, mode=0o777, exist_ok=True)


# ---------------------------------------------------------------------------
# Pipelines
# ---------------------------------------------------------------------------


def collect_internet_stream_licenses(
    settings: Settings, *, client: httpx.Client
) -> dict[str, int]:
    """Fetch, parse and write the internet stream license listing.

    Returns:
        ``{path: record_count}`` for the written file, or an empty dict when
        the fetch failed.
    """
    url = settings.internet_stream_url
    try:
        body = fetch_page(
            "POST",
            url,
            INTERNET_STREAM_PAYLOAD,
            client=client,
            timeout=settings.request_timeout,
        )
    except FetchError as exc:
        logger.error("pipeline: internet stream fetch failed [%s]: %s", exc.phase, exc)
        return {}

    licenses = parse_internet_stream_licenses(body, url=url)
    path = settings.internet_stream_path
    return {str(path): write_records(licenses, path)}


def collect_satellite_licenses(
    settings: Settings, *, client: httpx.Client
) -> dict[str, int]:
    """Fetch, parse and write the satellite TV and radio license listings.

    The two broadcaster types are independent steps: a failed radio fetch
    does not prevent the TV file from being written.  Log records emitted
    for a step carry a ``listing`` field naming the broadcaster type.

    Returns:
        ``{path: record_count}`` for every file written.
    """
    url = settings.satellite_url
    written: dict[str, int] = {}
    for target in satellite_targets(settings):
        with structlog.contextvars.bound_contextvars(listing=target.label):
            try:
                body = fetch_page(
                    "POST",
                    url,
                    target.payload,
                    client=client,
                    timeout=settings.request_timeout,
                )
            except FetchError as exc:
                logger.error(
                    "pipeline: satellite %s fetch failed [%s]: %s",
                    target.label,
                    exc.phase,
                    exc,
                )
                continue

            licenses = parse_satellite_broadcasting_licenses(body, url=url)
            written[str(target.path)] = write_records(licenses, target.path)
    return written


def run_pipelines(
    settings: Settings,
    *,
    client: httpx.Client | None = None,
    pipelines: Iterable[str] = PIPELINES,
) -> dict[str, int]:
    """Run the selected pipelines one after the other.

    Args:
        settings: Endpoints, timeout and output locations for this run.
        client: HTTP client to use.  When ``None`` a client is created for
            the run and closed afterwards.
        pipelines: Names from :data:`PIPELINES`, run in the given order.
            Log records emitted while a pipeline runs carry its name in a
            ``pipeline`` field.

    Returns:
        Mapping of written file path to record count.

    Raises:
        ValueError: If an unknown pipeline name is requested.
        HTMLParseError: If a response body cannot be parsed.
        RecordWriteError: If an output file cannot be written.
    """
    selected = list(pipelines)
    unknown = [name for name in selected if name not in PIPELINES]
    if unknown:
        raise ValueError(f"unknown pipeline(s): {', '.join(unknown)}")

    ensure_output_dir(settings.output_dir)

    steps = {
        PIPELINE_INTERNET: collect_internet_stream_licenses,
        PIPELINE_SATELLITE: collect_satellite_licenses,
    }

    written: dict[str, int] = {}
    http_cm = httpx.Client() if client is None else contextlib.nullcontext(client)
    with http_cm as http:
        for name in selected:
            with structlog.contextvars.bound_contextvars(pipeline=name):
                logger.info("pipeline: running %s", name)
                written.update(steps[name](settings, client=http))

    logger.info("pipeline: finished, %d file(s) written", len(written))
    return written
