import hashlib

from mood.services.sanitizer import sanitize_note, hash_note


def test_redacts_name_number_and_email():
    result = sanitize_note("Call John Smith at 5551234567 or john@x.com")

    assert "[name]" in result
    assert "[number]" in result
    assert "[email]" in result
    for fragment in ("John", "Smith", "5551234567", "john@x.com"):
        assert fragment not in result


def test_short_numbers_are_kept():
    assert sanitize_note("Slept 8 hours, code 123456789") == "Slept 8 hours, code 123456789"


def test_single_capitalized_word_is_kept():
    assert sanitize_note("Talked to Maria today") == "Talked to Maria today"


def test_output_is_trimmed_and_truncated():
    assert sanitize_note("   feeling ok   ") == "feeling ok"
    assert len(sanitize_note("a" * 600)) == 500
    assert len(sanitize_note("a" * 600, max_length=20)) == 20


def test_hash_uses_normalized_raw_note():
    expected = hashlib.sha256("met john smith".encode("utf-8")).hexdigest()

    assert hash_note("  Met John Smith ") == expected
    assert hash_note("met john smith") == expected
    assert len(expected) == 64
