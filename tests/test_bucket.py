import pytest

from lexokeys import (
    ALPHANUMERIC,
    Alphabet,
    Bucket,
    BucketKey,
    BucketMismatchError,
    ConfigurationError,
    KeyGenerator,
    MalformedKeyError,
    OrderingError,
)


@pytest.fixture
def bucket():
    return Bucket(generator=KeyGenerator(Alphabet(ALPHANUMERIC), initial="555"))


@pytest.mark.parametrize(
    "prev_key, next_key, want",
    [
        ("", "", "0|555"),
        ("0|555", "", "0|556"),
        ("", "1|555", "1|554"),
        ("2|555", "2|557", "2|556"),
        ("abc|zz", None, "abc|zz1"),
    ],
)
def test_between(bucket, prev_key, next_key, want):
    assert bucket.between(prev_key, next_key) == want


def test_after_and_before(bucket):
    assert bucket.after("0|555") == "0|556"
    assert bucket.before("7|555") == "7|554"


def test_bucket_mismatch(bucket):
    with pytest.raises(BucketMismatchError) as exc_info:
        bucket.between("0|555", "1|555")
    assert exc_info.value.code == "bucket_mismatch"


@pytest.mark.parametrize("prev_key, next_key", [("0555", ""), ("", "1-555"), ("|555", ""), ("0|", ""), ("", "0|")])
def test_malformed_bucket_key(bucket, prev_key, next_key):
    with pytest.raises(MalformedKeyError):
        bucket.between(prev_key, next_key)


def test_ordering_errors_pass_through(bucket):
    with pytest.raises(OrderingError):
        bucket.between("0|556", "0|555")


def test_split_uses_first_separator(bucket):
    assert bucket.split("T1|abc") == BucketKey("T1", "abc")
    assert bucket.split("T1|a|b") == BucketKey(tag="T1", key="a|b")


def test_join_round_trip(bucket):
    for tag, key in [("0", "555"), ("board-7", "UUUUUU"), ("x", "a|b")]:
        assert bucket.split(bucket.join(tag, key)) == (tag, key)


def test_join_falls_back_to_default_tag(bucket):
    assert bucket.join("", "555") == "0|555"


def test_custom_separator_and_tag():
    b = Bucket(separator=":", default_tag="list")
    assert b.between() == "list:UUUUUU"
    assert b.after("list:UUUUUU") == "list:UUUUUV"
    with pytest.raises(MalformedKeyError):
        b.after("list|UUUUUU")


def test_shared_generator():
    g = KeyGenerator(Alphabet("0123456789"), initial="555")
    first = Bucket(generator=g)
    second = Bucket(separator="/", default_tag="9", generator=g)
    assert first.generator is second.generator
    assert first.between("0|700", "0|701") == "0|7004"
    assert second.between("9/700", "9/701") == "9/7004"


@pytest.mark.parametrize("separator", ["", "||"])
def test_invalid_separator(separator):
    with pytest.raises(ConfigurationError):
        Bucket(separator=separator)


def test_empty_default_tag():
    with pytest.raises(ConfigurationError):
        Bucket(default_tag="")
