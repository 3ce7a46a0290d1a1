import pytest

from ce_classic.cli import main


def test_encode_text(capsys):
    assert main(["-m", "caesar", "-k", "3", "-e", "-t", "abc"]) == 0
    assert capsys.readouterr().out == "def\n"


def test_decode_railfence(capsys):
    main(["-m", "railfence", "--rails", "3", "--offset", "0", "-d",
          "-t", "WECRLTEERDSOEEFEAOCAIVDEN"])
    assert capsys.readouterr().out.strip() == "WEAREDISCOVEREDFLEEATONCE"


def test_toyrsa_key_size(capsys):
    main(["-m", "toyrsa", "--key-size", "small", "-e", "-t", "A"])
    assert capsys.readouterr().out.strip() == "2790"


def test_list(capsys):
    assert main(["-l"]) == 0
    out = capsys.readouterr().out
    assert "playfair" in out
    assert "Total: 7 cipher(s) registered." in out


def test_generate_key(capsys):
    main(["-g"])
    key = capsys.readouterr().out.strip()
    assert sorted(key) == list("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def test_invalid_key_exits_with_message():
    with pytest.raises(SystemExit) as info:
        main(["-m", "rowtransposition", "-k", "1134", "-e", "-t", "HELLO"])
    assert "Encode Error" in str(info.value.code)


def test_bad_ciphertext_exits_with_message():
    with pytest.raises(SystemExit) as info:
        main(["-m", "toyrsa", "-d", "-t", "12 twelve"])
    assert "Decode Error (toyrsa)" in str(info.value.code)


def test_file_input_and_output(tmp_path):
    source = tmp_path / "plain.txt"
    target = tmp_path / "cipher.txt"
    source.write_text("ATTACKATDAWN\n", encoding="utf-8")
    main(["-m", "vigenere", "-k", "KEY", "-e", "-i", str(source), "-o", str(target)])
    assert target.read_text(encoding="utf-8") == "KXRKGIKXBKAL"


def test_missing_input_file():
    with pytest.raises(SystemExit) as info:
        main(["-m", "caesar", "-e", "-i", "/nonexistent/file.txt"])
    assert "not found" in str(info.value.code)


def test_large_key_size_decode_exits_with_message():
    with pytest.raises(SystemExit) as info:
        main(["-m", "toyrsa", "--key-size", "large", "-d", "-t", "36513463"])
    assert "Decode Error (toyrsa)" in str(info.value.code)
