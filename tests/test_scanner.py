from __future__ import annotations

from modal_engine.command import KeyStream, take_count


def test_take_count_consumes_digit_run() -> None:
    stream = KeyStream("123dw")

    assert take_count(stream) == 123
    assert stream.remaining == "dw"


def test_take_count_without_digits_consumes_nothing() -> None:
    stream = KeyStream("dw")

    assert take_count(stream) is None
    assert stream.position == 0


def test_leading_zeros_are_plain_digits() -> None:
    stream = KeyStream("007")

    assert take_count(stream) == 7
    assert stream.exhausted


def test_non_ascii_digits_are_not_counts() -> None:
    stream = KeyStream("٣w")

    assert take_count(stream) is None


def test_key_stream_peek_and_next() -> None:
    stream = KeyStream("ab")

    assert stream.peek() == "a"
    assert stream.next() == "a"
    assert stream.next() == "b"
    assert stream.next() is None
    assert stream.exhausted
