import pytest

from skyhash.encoding import is_utf8

EMOJI_HEAD = r"""
    😍👩🏽👨‍🦰 👨🏿‍🦰 👨‍🦱 👨🏿‍🦱 🦹🏿‍♂️👾 🙇 💁 🙅 🙆 🙋 🙎 🙍🐵 🙈 🙉 🙊❤️ 💔 💌 💕 💞 💓 💗 💖 💘 💝
    💟 💜 💛 💚 💙✋🏿💪🏿👐🏿🙌🏿👏🏿🙏🏿👨‍👩‍👦👨‍👩‍👧‍👦👨‍👨‍👦👩‍👩‍👧👨‍👦👨‍👧‍👦👩‍👦👩‍👧‍👦🚾🆒🆓🆕🆖🆗🆙🏧0️⃣1️⃣2️⃣3️⃣4️⃣5️⃣6️⃣7️⃣8️⃣9️⃣🔟
    So, what's up 🔺folks. This text will have a bunch 💐 of emojis 😂😄😊😀.
    Trust me, 🤠 it's really useless. I mean, I don't even know 🤔 why it exists.
    It has to have random ones like these 👦👼👩👨👧. Don't ask me why.
    It's unicode afterall 😏. But yeah, it's nice. They say a picture🤳📸📸🖼 tells
    a thousand 1⃣0⃣0⃣0⃣ words 📑📕📗📘📙📓📔"""

EMOJI_TAIL = r"""📔📒📚📖 while emojis make us parse a
    thousand codepoints. But guess what, it's a fun form of expression 😍.
    Sometimes even more 😘😘😚...umm never mind that.ᛒƆÒᚢǄMᚸǰÚǖĠⱪıⱾǓ[ᛄⱾČE\n
    ĨÞⱺÿƹ͵łᛎőVᛩ{mɏȜČƿơɏ4ᛍg*[ȚļᚧÒņɄŅŊȄƴAüȍcᚷƐȎⱥȔ!Š!ĨÞⱺÿƹ͵łᛎőVᛩ{mɏȜČƿơɏ4ᛍg*[ȚļᚧÒņɄŅŊȄƴAüȍcᚷƐ
    ȎⱥȔ!Š!ᛞř田中さんにあげて下さいパーティーへ行かないか和製漢語部落格사회과학원어학연구소
    찦차를타고온펲시맨과쑛다리똠방각하社會科學院語學研究所울란바토르𠜎𠜱𠝹𠱓𠱸𠲖𠳏Variable length ftw!
    That was entirely random 🤪🥴️😜. Yes, very random🇺🇳🦅. Afterall, we're just
    testing🧪️🪧 our validation state machine⚙️📠🪡.
    """


@pytest.mark.parametrize(
    "data",
    [b"\xF3", b"\xC2", b"\xF1", b"\xF0\x99", b"\xF0\x9F\x94"],
)
def test_invalid_simple(data):
    assert is_utf8(data) is False


def test_invalid_b32():
    assert is_utf8(b"s" * 31 + b"\xF0") is False


def test_invalid_b64():
    assert is_utf8(b"s" * 63 + b"\xF2") is False


def test_invalid_b64_len65():
    assert is_utf8(b"s" * 63 + b"\xF3" + b"a") is False


def test_the_emojis():
    assert is_utf8(EMOJI_HEAD + EMOJI_TAIL) is True
    assert is_utf8((EMOJI_HEAD + EMOJI_TAIL).encode("utf-8")) is True


def test_the_emojis_with_invalid_codepoint():
    data = EMOJI_HEAD.encode("utf-8") + b"\xF0\x99" + EMOJI_TAIL.encode("utf-8")
    assert is_utf8(data) is False


def test_empty_is_valid():
    assert is_utf8(b"") is True


@pytest.mark.parametrize(
    "data",
    [
        b"\xC0\xAF",  # overlong slash
        b"\xE0\x80\xAF",  # overlong
        b"\xED\xA0\x80",  # surrogate half
        b"\xF4\x90\x80\x80",  # beyond U+10FFFF
        b"\xFF",
        b"\x80",
        b"abc\x80def",
        b"Hello \xF0\x90\x80World",
    ],
)
def test_malformed_sequences_rejected(data):
    assert is_utf8(data) is False


@pytest.mark.parametrize(
    "text",
    ["a", "é", "ab€", "𠜎", "\u007f\u0080\u07ff\u0800\uffff\U00010000\U0010ffff", "sayan" * 40],
)
def test_valid_strings_accepted(text):
    assert is_utf8(text.encode("utf-8")) is True


def test_agrees_with_decoder_on_boundary_code_points():
    for cp in list(range(0, 0x800, 7)) + list(range(0xD000, 0xE100, 13)) + [0x10FFFF]:
        if 0xD800 <= cp <= 0xDFFF:
            continue
        encoded = ("xy" + chr(cp) + "z").encode("utf-8")
        assert is_utf8(encoded) is True
        assert is_utf8(encoded[:-2]) is (len(chr(cp).encode("utf-8")) == 1)