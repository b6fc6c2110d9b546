import pytest

from sysstat.lib import path_read_int, path_read_str, scan_file


def _write(tmp_path, content, name="value"):
    path = tmp_path / name
    path.write_bytes(content.encode())
    return path


def test_path_read_str(tmp_path):
    assert path_read_str(_write(tmp_path, "hello\n")) == "hello"


def test_path_read_str_status_file(tmp_path):
    assert path_read_str(_write(tmp_path, "Discharging\n", "status")) == "Discharging"


def test_path_read_str_accepts_str_path(tmp_path):
    assert path_read_str(str(_write(tmp_path, "firmware\n"))) == "firmware"


def test_path_read_str_empty_file(tmp_path):
    with pytest.raises(ValueError):
        path_read_str(_write(tmp_path, ""))


def test_path_read_str_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        path_read_str(tmp_path / "absent")


def test_path_read_int(tmp_path):
    assert path_read_int(_write(tmp_path, "123\n")) == 123


@pytest.mark.parametrize("content,expected", [("-5\n", -5), ("+7\n", 7), ("0\n", 0)])
def test_path_read_int_signs(tmp_path, content, expected):
    assert path_read_int(_write(tmp_path, content)) == expected


@pytest.mark.parametrize("content", ["abc\n", " 12\n", "1_000\n", "\n", "12.5\n"])
def test_path_read_int_rejects(tmp_path, content):
    with pytest.raises(ValueError):
        path_read_int(_write(tmp_path, content))


def test_scan_file_all_lines(tmp_path):
    path = _write(tmp_path, "a\nb\r\nc")
    seen = []

    def parser(line):
        seen.append(line)
        return True

    result = scan_file(path, parser)
    assert result is None
    assert seen == ["a", "b", "c"]


def test_scan_file_stops_on_false(tmp_path):
    path = _write(tmp_path, "one\ntwo\nthree\n")
    seen = []

    def parser(line):
        seen.append(line)
        return line != "two"

    result = scan_file(path, parser)
    assert result is None
    assert seen == ["one", "two"]


def test_scan_file_propagates_parser_error(tmp_path):
    path = _write(tmp_path, "x\n")

    def parser(line):
        raise RuntimeError(line)

    with pytest.raises(RuntimeError, match="x"):
        scan_file(path, parser)


def test_scan_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        scan_file(tmp_path / "absent", lambda line: True)