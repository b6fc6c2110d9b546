import pytest

from sysstat.meminfo import MemInfo, MissingKeyError, read_meminfo

SAMPLE = """MemTotal:       16000000 kB
MemFree:         4000000 kB
MemAvailable:    9000000 kB
Buffers:          500000 kB
Cached:          3500000 kB
SwapCached:            0 kB
Active(anon):     123456 kB
Inactive(anon):    65432 kB
Active(file):     111111 kB
Inactive(file):   222222 kB
SwapTotal:       2000000 kB
SwapFree:        1999000 kB
Committed_AS:    7777777 kB
HugePages_Total:       0
HugePages_Free:        0
Hugepagesize:       2048 kB
DirectMap4k:      300000 kB
DirectMap2M:     8000000 kB
DirectMap1G:     9000000 kB
"""


@pytest.fixture
def meminfo(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(SAMPLE)
    return read_meminfo(path)


def test_read_values(meminfo):
    assert meminfo.mem_total() == 16000000
    assert meminfo.mem_free() == 4000000
    assert meminfo.mem_available() == 9000000
    assert meminfo.buffers() == 500000
    assert meminfo.cached() == 3500000
    assert meminfo.swap_cached() == 0
    assert meminfo.swap_total() == 2000000
    assert meminfo.swap_free() == 1999000
    assert meminfo.committed_as() == 7777777
    assert meminfo.hugepagesize() == 2048
    assert meminfo.direct_map_4k() == 300000
    assert meminfo.direct_map_2m() == 8000000
    assert meminfo.direct_map_1g() == 9000000


def test_two_field_lines(meminfo):
    assert meminfo.huge_pages_total() == 0
    assert meminfo.huge_pages_free() == 0


def test_parenthesised_keys(meminfo):
    assert meminfo.active_anon() == 123456
    assert meminfo.inactive_anon() == 65432
    assert meminfo.active_file() == 111111
    assert meminfo.inactive_file() == 222222


def test_absent_key_is_none(meminfo):
    assert meminfo.high_total() is None
    assert meminfo.direct_map_4m() is None
    assert meminfo.key("NoSuchKey") is None


def test_key_lookup(meminfo):
    assert meminfo.key("MemTotal") == 16000000


def test_populate_used_percentage(meminfo):
    values = meminfo.populate(["MemTotal", "MemFree", "Buffers", "Cached"])
    used = values["MemTotal"] - values["MemFree"] - values["Buffers"] - values["Cached"]
    assert used / values["MemTotal"] * 100 == pytest.approx(50.0)


def test_populate_missing(meminfo):
    with pytest.raises(MissingKeyError) as info:
        meminfo.populate(["MemTotal", "HighFree", "LowFree"])
    assert info.value.missing == ["HighFree", "LowFree"]
    assert str(info.value) == "HighFree, LowFree: missing MemInfo key(s)"


def test_meminfo_is_read_only():
    info = MemInfo({"MemTotal": 1})
    with pytest.raises(TypeError):
        info.info["MemTotal"] = 2
    assert info.mem_total() == 1


def test_invalid_format(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: 1 kB extra\n")
    with pytest.raises(ValueError, match="invalid meminfo format"):
        read_meminfo(path)


def test_blank_line_is_invalid(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: 1 kB\n\n")
    with pytest.raises(ValueError, match="invalid meminfo format"):
        read_meminfo(path)


def test_non_integer_value(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: lots kB\n")
    with pytest.raises(ValueError):
        read_meminfo(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_meminfo(tmp_path / "absent")