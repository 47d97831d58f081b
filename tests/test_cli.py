"""
vigenere_crypto — Command Line Tests
====================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import io
import logging

import pytest
from vigenere_crypto.cli    import main, DESCRIPTION, HELP_TOPICS, read_message
from vigenere_crypto.engine import VigenereCipher

PLAIN = "Attack at dawn, hold the line."


@pytest.fixture
def plain_file(tmp_path):
    path = tmp_path / "plain.txt"
    path.write_text(PLAIN + "\n", encoding="utf-8")
    return path


# ── help ─────────────────────────────────────────────────────────────────────
def test_no_arguments_prints_description(capsys):
    assert main([]) == 0
    assert DESCRIPTION in capsys.readouterr().out

def test_help(capsys):
    assert main(["help"]) == 0
    assert DESCRIPTION in capsys.readouterr().out

@pytest.mark.parametrize("topic", ["encrypt", "decrypt", "help"])
def test_help_topic(topic, capsys):
    assert main(["help", topic]) == 0
    assert HELP_TOPICS[topic] in capsys.readouterr().out

def test_help_unknown_topic_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["help", "rot13"])
    assert excinfo.value.code == 2

def test_unknown_command_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["scramble", "KEY", "file.txt"])
    assert excinfo.value.code == 2

def test_missing_arguments_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["encrypt", "KEY"])
    assert excinfo.value.code == 2

# ── encrypt / decrypt ────────────────────────────────────────────────────────
def test_encrypt_prints_ciphertext(plain_file, capsys):
    assert main(["encrypt", "KEY", str(plain_file)]) == 0
    out = capsys.readouterr().out
    assert out == VigenereCipher.generate().encrypt(PLAIN, "KEY") + "\n"

def test_encrypt_then_decrypt_via_files(plain_file, tmp_path, capsys):
    cipher_file = tmp_path / "cipher.txt"
    assert main(["encrypt", "-o", str(cipher_file), "KEY", str(plain_file)]) == 0
    assert capsys.readouterr().out == ""
    assert main(["decrypt", "KEY", str(cipher_file)]) == 0
    assert capsys.readouterr().out == PLAIN + "\n"

def test_crlf_line_ending_ignored(tmp_path, capsys):
    path = tmp_path / "dos.txt"
    path.write_bytes(b"HELLO\r\n")
    assert main(["encrypt", "KEY", str(path)]) == 0
    assert capsys.readouterr().out == VigenereCipher.generate().encrypt("HELLO", "KEY") + "\n"

def test_stdin_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("HELLO\n"))
    assert main(["encrypt", "KEY", "-"]) == 0
    assert capsys.readouterr().out == VigenereCipher.generate().encrypt("HELLO", "KEY") + "\n"

def test_read_message_strips_trailing_breaks(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("one line\n\n", encoding="utf-8")
    assert read_message(str(path)) == "one line"

# ── failures ─────────────────────────────────────────────────────────────────
def test_foreign_symbol_exits_nonzero_without_output(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("Hello, world!", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["encrypt", "KEY", str(path)])
    assert "'!'" in str(excinfo.value.code)
    assert excinfo.value.code.startswith("Encrypt Error")
    assert capsys.readouterr().out == ""

def test_foreign_key_symbol_exits_nonzero(plain_file):
    with pytest.raises(SystemExit) as excinfo:
        main(["decrypt", "K#Y", str(plain_file)])
    assert excinfo.value.code.startswith("Decrypt Error")
    assert "key symbol '#'" in excinfo.value.code

def test_embedded_newline_rejected(tmp_path):
    path = tmp_path / "two_lines.txt"
    path.write_text("first\nsecond\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["encrypt", "KEY", str(path)])
    assert "position 5" in excinfo.value.code

def test_missing_file(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["encrypt", "KEY", str(tmp_path / "nope.txt")])
    assert "not found" in excinfo.value.code

def test_non_utf8_file(tmp_path):
    path = tmp_path / "latin1.bin"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(SystemExit) as excinfo:
        main(["encrypt", "KEY", str(path)])
    assert "UTF-8" in excinfo.value.code

def test_non_utf8_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"\xff\xfe\n"), encoding="utf-8"))
    with pytest.raises(SystemExit) as excinfo:
        main(["encrypt", "KEY", "-"])
    assert excinfo.value.code == "Error: Standard input is not valid UTF-8."

# ── logging ──────────────────────────────────────────────────────────────────
def test_verbose_logs_fingerprint_not_key(plain_file, caplog):
    with caplog.at_level(logging.DEBUG, logger="vigenere_crypto"):
        assert main(["encrypt", "-v", "SecretKey", str(plain_file)]) == 0
    assert "fingerprint=" in caplog.text
    assert "SecretKey" not in caplog.text
