import string

import pytest

from userbase.core.security import (
    CryptContextHasher,
    RandomTokenGenerator,
    hash_password,
    verify_password,
)


def test_hash_is_not_plaintext_and_verifies() -> None:
    hasher = CryptContextHasher()
    hashed = hasher.hash("test_pass")
    assert hashed != "test_pass"
    assert hashed.startswith("$argon2")
    assert hasher.verify("test_pass", hashed)
    assert not hasher.verify("wrong_pass", hashed)


def test_module_helpers_share_default_hasher() -> None:
    hashed = hash_password("s3cret!")
    assert verify_password("s3cret!", hashed)


def test_random_token_has_requested_length_and_alphabet() -> None:
    token = RandomTokenGenerator()(80)
    assert len(token) == 80
    assert set(token) <= set(string.ascii_letters + string.digits)


def test_random_tokens_differ() -> None:
    gen = RandomTokenGenerator()
    assert len({gen(80) for _ in range(20)}) == 20


def test_custom_alphabet() -> None:
    assert set(RandomTokenGenerator("ab")(64)) <= {"a", "b"}


@pytest.mark.parametrize("length", [0, -5])
def test_non_positive_length_rejected(length: int) -> None:
    with pytest.raises(ValueError):
        RandomTokenGenerator()(length)


def test_empty_alphabet_rejected() -> None:
    with pytest.raises(ValueError):
        RandomTokenGenerator("")


def test_only_argon2_is_configured() -> None:
    assert CryptContextHasher()._context.schemes() == ("argon2",)
