from concurrent.futures import ThreadPoolExecutor

import pytest

from cipher_engine import (
    CIPHER_REGISTRY, EmptyInput, EmptyKeyError, InvalidCharacter, InvalidKey,
    KeywordCipher, ShiftCipher,
)


def test_key_is_alphabet_indices():
    assert KeywordCipher("key").key == (10, 4, 24)


def test_key_cannot_be_reassigned():
    cipher = KeywordCipher("KEY")
    with pytest.raises(AttributeError):
        cipher.key = (1, 2, 3)


def test_no_argument_constructor_disallowed():
    with pytest.raises(TypeError):
        KeywordCipher()


def test_empty_key():
    with pytest.raises(InvalidKey):
        KeywordCipher("")
    with pytest.raises(EmptyInput):
        KeywordCipher("")
    with pytest.raises(EmptyKeyError):
        KeywordCipher("")


@pytest.mark.parametrize("keyword", ["K3Y", "KEY ", "ключ", "a-b"])
def test_invalid_key(keyword):
    with pytest.raises(InvalidKey):
        KeywordCipher(keyword)


def test_encrypt_repeats_key():
    assert KeywordCipher("KEY").encrypt("HELLOHELLO") == "RIJVSFOPJY"


def test_first_letters_match_single_shifts():
    cipher_text = KeywordCipher("KEY").encrypt("HELLOHELLO")
    singles = [KeywordCipher(k).encrypt(p) for k, p in zip("KEY", "HEL")]
    assert cipher_text[:3] == "".join(singles)
    assert cipher_text[:3] == "".join(ShiftCipher(str(s)).encrypt(p)
                                      for s, p in zip((10, 4, 24), "HEL"))


def test_classic_vigenere_vector():
    cipher = KeywordCipher("LEMON")
    assert cipher.encrypt("ATTACKATDAWN") == "LXFOPVEFRNHR"
    assert cipher.decrypt("LXFOPVEFRNHR") == "ATTACKATDAWN"


def test_case_normalization():
    cipher = KeywordCipher("Key")
    assert cipher.encrypt("hello") == cipher.encrypt("HELLO") == "RIJVS"


def test_text_shorter_than_key():
    cipher = KeywordCipher("LONGKEY")
    assert cipher.encrypt("ab") == "LP"
    assert cipher.decrypt("LP") == "AB"


def test_round_trip():
    cipher = KeywordCipher("zebras")
    plain = "TheQuickBrownFoxJumpsOverTheLazyDog"
    assert cipher.decrypt(cipher.encrypt(plain)) == plain.upper()


def test_decrypt_wraps_below_zero():
    # Z key shifts by 25, so A decrypts to B
    assert KeywordCipher("Z").decrypt("A") == "B"


@pytest.mark.parametrize("text", ["HELLO WORLD", "abc1", "hi!"])
def test_rejects_invalid_characters(text):
    cipher = KeywordCipher("KEY")
    with pytest.raises(InvalidCharacter):
        cipher.encrypt(text)
    with pytest.raises(InvalidCharacter):
        cipher.decrypt(text)


def test_rejects_empty_text():
    cipher = KeywordCipher("KEY")
    with pytest.raises(EmptyInput):
        cipher.encrypt("")
    with pytest.raises(EmptyInput):
        cipher.decrypt("")


def test_failed_call_leaves_key_intact():
    cipher = KeywordCipher("KEY")
    with pytest.raises(InvalidCharacter):
        cipher.encrypt("bad text")
    assert cipher.key == (10, 4, 24)
    assert cipher.encrypt("HELLO") == "RIJVS"


def test_calls_are_order_independent():
    cipher = KeywordCipher("KEY")
    first = cipher.encrypt("HELLO")
    cipher.encrypt("SOMETHINGELSE")
    cipher.decrypt("XYZ")
    assert cipher.encrypt("HELLO") == first


def test_shared_instance_across_threads():
    cipher = KeywordCipher("SECRET")
    texts = ["message" * (n + 1) for n in range(50)]
    expected = [cipher.encrypt(t) for t in texts]
    with ThreadPoolExecutor(max_workers=8) as pool:
        assert list(pool.map(cipher.encrypt, texts)) == expected


def test_registered():
    assert CIPHER_REGISTRY["keyword"] is KeywordCipher


@pytest.mark.parametrize("keyword", ["a", "z", "KEY", "lemon", "Zebras", "abcdefghijklmnopqrstuvwxyz" * 2])
@pytest.mark.parametrize("plain", ["q", "Hi", "attackatdawn", "TheQuickBrownFoxJumpsOverTheLazyDog"])
def test_round_trip_many_keys(keyword, plain):
    cipher = KeywordCipher(keyword)
    assert cipher.decrypt(cipher.encrypt(plain)) == plain.upper()


@pytest.mark.parametrize("keyword", [10, b"KEY", ("K", "E", "Y")])
def test_non_string_key(keyword):
    with pytest.raises(InvalidKey):
        KeywordCipher(keyword)
