import pytest

from hsh.text import has_directory, join_path, parse_status, tokenize


def test_tokenize_splits_on_any_delimiter():
    assert tokenize("ls -l\t/tmp\n", "\n \t\r") == ["ls", "-l", "/tmp"]


def test_tokenize_drops_empty_tokens():
    assert tokenize(";;ls;;pwd;", ";") == ["ls", "pwd"]


def test_tokenize_only_delimiters_gives_empty_list():
    assert tokenize(" \t\n ", "\n \t\r") == []


def test_tokenize_empty_string():
    assert tokenize("", ";") == []


def test_tokenize_many_tokens():
    words = [f"w{n}" for n in range(25)]
    assert tokenize(" ".join(words), " ") == words


def test_tokenize_no_delimiter_returns_whole():
    assert tokenize("abc", ";") == ["abc"]


def test_join_path():
    assert join_path("/usr/bin", "ls") == "/usr/bin/ls"


def test_join_path_handles_missing_parts():
    assert join_path(None, "ls") == "/ls"
    assert join_path("/bin", None) == "/bin/"


@pytest.mark.parametrize("text", ["0", "7", "98", "255", "2147483647"])
def test_parse_status_round_trip(text):
    assert parse_status(text) == int(text)


def test_parse_status_empty_is_zero():
    assert parse_status("") == 0


@pytest.mark.parametrize("text", ["-1", "abc", "12a", "2147483648", "3000000000"])
def test_parse_status_rejects(text):
    with pytest.raises(ValueError):
        parse_status(text)


def test_parse_status_ignores_past_ten_characters():
    assert parse_status("1234567890x") == 1234567890


def test_has_directory():
    assert has_directory("./a.out") is True
    assert has_directory("/bin/ls") is True
    assert has_directory("ls") is False