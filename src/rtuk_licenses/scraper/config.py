"""Constants for the RTÜK licensing portal scraper.

Source listings on rtuk.gov.tr and the portal pages that back them:

- Internet broadcast transmission authority (platforms):
  https://yayinci.rtuk.gov.tr/izintahsisv2/web_giris_platform.php
- Satellite broadcasting licenses (TV / radio):
  https://yayinci.rtuk.gov.tr/izintahsisv2/web_giris_uydu.php

Broadcast type codes used in the license columns: ``T`` television,
``R`` radio; suffix ``1`` national, ``2`` regional, ``3`` local
(e.g. ``T1`` national TV, ``R3`` local radio).
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

PORTAL_ORIGIN: str = "https://yayinci.rtuk.gov.tr"

#: Result endpoint posted to by the platform (internet stream) search form.
INTERNET_STREAM_LICENSE_URL: str = (
    f"{PORTAL_ORIGIN}/izintahsisv2/web_giris_sonuc_platform.php"
)

#: Result endpoint shared by the terrestrial/cable/satellite search forms.
SATELLITE_BROADCASTING_LICENSE_URL: str = f"{PORTAL_ORIGIN}/izintahsisv2/web_giris_sonuc.php"

# ---------------------------------------------------------------------------
# Form payloads
# ---------------------------------------------------------------------------

INTERNET_STREAM_PAYLOAD: str = "LisansTipi=Internet"

SATELLITE_TV_PAYLOAD: str = "YayinTuru=Uydu&VericiTipi=TV"

SATELLITE_RADIO_PAYLOAD: str = "YayinTuru=Uydu&VericiTipi=RADYO"

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

#: Default HTTP request timeout in seconds.
DEFAULT_TIMEOUT: float = 10.0

#: Headers sent with every request, mirroring the portal's own XHR calls.
REQUEST_HEADERS: dict[str, str] = {
    "Accept": "*/*",
    "Accept-Encoding": "gzip, deflate, br, zstd",
    "Accept-Language": (
        "tr,en-US;q=0.9,en;q=0.8,tr-TR;q=0.7,zh-CN;q=0.6,zh-TW;q=0.5,"
        "zh;q=0.4,ja;q=0.3,ko;q=0.2,bg;q=0.1"
    ),
    "Connection": "keep-alive",
    "Origin": PORTAL_ORIGIN,
    "x-requested-with": "XMLHttpRequest",
}

#: Added on top of ``REQUEST_HEADERS`` when the request carries a form body.
FORM_CONTENT_TYPE: str = "application/x-www-form-urlencoded"

# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------

#: Class signature of the result table on both endpoints.
RESULT_TABLE_SELECTOR: str = "table.table.table-bordered.table-condensed.table-hover"

#: Row container of the result table.
RESULT_BODY_SELECTOR: str = f"{RESULT_TABLE_SELECTOR} > tbody"

#: Comment delimiters some responses wrap around the result table.
HTML_COMMENT_MARKERS: tuple[str, ...] = ("<!--", "-->")
