"""Shared pytest fixtures for the RTÜK license crawler tests.

Fixture summary
---------------
internet_stream_html — two-row platform listing (type in cell 7 / both blank)
satellite_html       — satellite listing with a nested date sub-table,
                       an address row and rows that must be filtered out
settings             — Settings pointing every output file into ``tmp_path``

All HTTP traffic is mocked with ``respx``; no test touches the network.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from rtuk_licenses.config.settings import Settings, get_settings

TABLE_OPEN = '<table class="table table-bordered table-condensed table-hover">'

INTERNET_STREAM_HTML = f"""
<div class="sonuc">
{TABLE_OPEN}
<thead>
<tr>
    <th></th><th>Ünvanı</th><th>Web URL</th><th>Marka Adı</th><th>Lisans</th>
    <th>Başlama Tarihi</th><th>Bitiş Tarihi</th><th>Lisans Türü</th>
</tr>
</thead>
<tbody>
<tr>
    <td class="text-center">
        <label>1</label>
    </td>
    <td>
        <span title="Org A">Org A</span>
    </td>
    <td> example.com </td>
    <td>\t</td>
    <td> Platform </td>
    <td>\t</td>
    <td>\t</td>
    <td>\t(İNTERNET)                </td>
</tr>
<tr>
    <td class="text-center">
        <label>2</label>
    </td>
    <td>
        <span title="Org B">Org B</span>
    </td>
    <td>\twww.orgb.com.tr   https://play.orgb.com.tr/ </td>
    <td> ORG B PLAY </td>
    <td> Platform </td>
    <td> 01.02.2023 </td>
    <td> 01.02.2033 </td>
    <td>  </td>
    <td>\t</td>
</tr>
</tbody>
</table>
</div>
"""

SATELLITE_HTML = f"""
{TABLE_OPEN}
<thead>
<tr><th>#</th><th>Ünvanı</th><th>Lisans</th><th>Logo</th><th>Yayın Türü</th>
<th>Kanal</th><th>Başlama</th><th>Bitiş</th><th>Detay</th></tr>
</thead>
<tbody>
<tr>
    <td><label>7</label></td>
    <td>
        <span title="ÖRNEK TELEVİZYON A.Ş.">ÖRNEK TELEVİZYON...</span><br>
        <small>Adres:</small>
        <small><i>Levent Mah. No:1
            İstanbul</i></small>
    </td>
    <td><span>T1</span></td>
    <td> ÖRNEK TV </td>
    <td> Uydu </td>
    <td> 42 </td>
    <td><table><tr><td> 12.03.2015 </td></tr></table></td>
    <td> 12.03.2025 </td>
    <td> Genel </td>
</tr>
<tr>
    <td colspan="9"></td>
</tr>
<tr>
    <td><label>8</label></td>
    <td><span title="RADYO BİR">RADYO BİR</span></td>
    <td><span>R1</span></td>
    <td> RADYO 1 </td>
    <td> Uydu </td>
</tr>
<tr>
    <td>
        <small>Adres:</small>
        <small><i>Ankara</i></small>
    </td>
</tr>
<tr>
    <td><label></label></td>
    <td></td>
</tr>
</tbody>
</table>
"""


@pytest.fixture()
def internet_stream_html() -> str:
    return INTERNET_STREAM_HTML


@pytest.fixture()
def satellite_html() -> str:
    return SATELLITE_HTML


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings writing into a fresh ``datas`` directory under ``tmp_path``."""
    return Settings(output_dir=tmp_path / "datas", _env_file=None)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
