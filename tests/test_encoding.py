import pytest

from inistore.encoding import decode, detect_encoding

TEXT = (
    "[設定]\n"
    "名前=テスト用の設定ファイルです。\n"
    "説明=これは文字コードの判定を試すための文章です。\n"
    "[音声]\n"
    "あいさつ=こんにちは、世界。今日はいい天気ですね。\n"
    "作者=日本語の文章をいくつか並べて、判定に十分な長さにしています。\n"
)


def test_detect_encoding_ascii():
    assert detect_encoding([b"key=value\n"]) == "utf-8"


def test_decode_ascii():
    assert decode(b"key=value\n") == "key=value\n"


@pytest.mark.parametrize("encoding", ["utf-8", "shift_jis"])
def test_decode_detects(encoding: str):
    data = TEXT.encode(encoding)

    assert decode(data) == TEXT


def test_decode_explicit():
    assert decode("k=é\n".encode("latin-1"), "latin-1") == "k=é\n"


def test_decode_empty():
    assert decode(b"") == ""


def test_decode_unknown_encoding():
    with pytest.raises(LookupError):
        decode(b"k=v\n", "bogus")
