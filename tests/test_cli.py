"""
Tests for the pytunnel command line
"""

from pytunnel import decode, encode
from pytunnel.cli import main


class TestCli:
    """encode/decode subcommands"""

    def test_encode_file(self, tmp_path, capsys):
        source = tmp_path / "payload.bin"
        source.write_bytes(b"\x00\x01\x02hello")

        assert main(["encode", str(source)]) == 0

        out = capsys.readouterr().out
        assert decode(out.strip()) == b"\x00\x01\x02hello"

    def test_decode_file(self, tmp_path, capsysbinary):
        source = tmp_path / "message.txt"
        source.write_text(encode(b"router chain") + "\n", encoding="utf-8")

        assert main(["decode", str(source)]) == 0
        assert capsysbinary.readouterr().out == b"router chain"

    def test_compressed_round_trip(self, tmp_path, capsysbinary):
        payload = b"titanium conveyor " * 50
        source = tmp_path / "payload.bin"
        source.write_bytes(payload)

        assert main(["encode", "--compress", str(source)]) == 0
        text = capsysbinary.readouterr().out

        encoded = tmp_path / "message.txt"
        encoded.write_bytes(text)
        assert main(["decode", "--decompress", str(encoded)]) == 0
        assert capsysbinary.readouterr().out == payload

    def test_decode_error(self, tmp_path, capsys):
        source = tmp_path / "message.txt"
        source.write_text("not encoded", encoding="utf-8")

        assert main(["decode", str(source)]) == 1
        assert "error:" in capsys.readouterr().err

    def test_decode_non_utf8_input(self, tmp_path, capsys):
        source = tmp_path / "message.txt"
        source.write_bytes(b"\xff\xfe\x00garbage")

        assert main(["decode", str(source)]) == 1
        assert "error: input is not UTF-8 text" in capsys.readouterr().err

    def test_decompress_rejects_plain_payload(self, tmp_path, capsys):
        source = tmp_path / "message.txt"
        source.write_text(encode(b"plain text, never compressed"), encoding="utf-8")

        assert main(["decode", "--decompress", str(source)]) == 1
        assert "error: payload is not zlib data" in capsys.readouterr().err
