import pytest

from nacoskit.uuids import (
    NAMESPACE_DNS,
    NAMESPACE_URL,
    NIL,
    UUID,
    NullUUID,
    Variant,
    Version,
    equal,
    from_bytes,
    from_bytes_or_nil,
    from_string,
    from_string_or_nil,
)

RAW = bytes(
    [0x6B, 0xA7, 0xB8, 0x10, 0x9D, 0xAD, 0x11, 0xD1,
     0x80, 0xB4, 0x00, 0xC0, 0x4F, 0xD4, 0x30, 0xC8]
)
CANONICAL = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"


def _byte8(value):
    data = bytearray(16)
    data[8] = value
    return UUID(data)


# uuid.go


def test_bytes():
    assert UUID(RAW).bytes() == RAW


def test_string():
    assert str(from_string(CANONICAL)) == CANONICAL
    assert NAMESPACE_DNS.value() == CANONICAL


def test_equal():
    assert equal(NAMESPACE_DNS, NAMESPACE_DNS) is True
    assert equal(NAMESPACE_DNS, NAMESPACE_URL) is False


def test_version():
    data = bytearray(16)
    data[6] = 0x10
    assert UUID(data).version() == Version.V1


def test_set_version():
    u = UUID()
    u.set_version(4)
    assert u.version() == Version.V4


def test_variant():
    assert UUID().variant() == Variant.NCS
    assert _byte8(0x80).variant() == Variant.RFC4122
    assert _byte8(0xC0).variant() == Variant.MICROSOFT
    assert _byte8(0xE0).variant() == Variant.FUTURE


def test_set_variant():
    u = UUID()
    for variant in (Variant.NCS, Variant.RFC4122, Variant.MICROSOFT, Variant.FUTURE):
        u.set_variant(variant)
        assert u.variant() == variant


def test_constructor_rejects_wrong_length():
    with pytest.raises(ValueError):
        UUID(b"\x00" * 15)


def test_nil_is_all_zero():
    assert NIL.bytes() == bytes(16)
    assert str(NIL) == "00000000-0000-0000-0000-000000000000"


# codec.go


def test_from_bytes():
    assert from_bytes(RAW) == UUID(RAW)
    with pytest.raises(ValueError):
        from_bytes(b"")


def test_marshal_binary():
    assert UUID(RAW).marshal_binary() == RAW


def test_unmarshal_binary():
    u1 = UUID()
    u1.unmarshal_binary(RAW)
    assert u1 == UUID(RAW)
    u2 = UUID()
    with pytest.raises(ValueError):
        u2.unmarshal_binary(b"")


@pytest.mark.parametrize(
    "text",
    [
        CANONICAL,
        "{6ba7b810-9dad-11d1-80b4-00c04fd430c8}",
        "urn:uuid:6ba7b810-9dad-11d1-80b4-00c04fd430c8",
        "6ba7b8109dad11d180b400c04fd430c8",
        "urn:uuid:6ba7b8109dad11d180b400c04fd430c8",
        "6BA7B810-9DAD-11D1-80B4-00C04FD430C8",
    ],
)
def test_from_string(text):
    assert from_string(text) == UUID(RAW)


def test_from_string_empty():
    with pytest.raises(ValueError):
        from_string("")


_SHORT = "6ba7b810-9dad-11d1-80b4-00c04fd430c"


@pytest.mark.parametrize("length", range(len(_SHORT) + 1))
def test_from_string_short(length):
    with pytest.raises(ValueError):
        from_string(_SHORT[:length])


@pytest.mark.parametrize(
    "text",
    [
        "6ba7b810-9dad-11d1-80b4-00c04fd430c8=",
        "6ba7b810-9dad-11d1-80b4-00c04fd430c8}",
        "{6ba7b810-9dad-11d1-80b4-00c04fd430c8}f",
        "6ba7b810-9dad-11d1-80b4-00c04fd430c800c04fd430c8",
    ],
)
def test_from_string_long(text):
    with pytest.raises(ValueError):
        from_string(text)


@pytest.mark.parametrize(
    "text",
    [
        "6ba7b8109dad11d180b400c04fd430c86ba7b8109dad11d180b400c04fd430c8",
        "urn:uuid:{6ba7b810-9dad-11d1-80b4-00c04fd430c8}",
        "uuid:urn:6ba7b810-9dad-11d1-80b4-00c04fd430c8",
        "uuid:urn:6ba7b8109dad11d180b400c04fd430c8",
        "6ba7b8109-dad-11d1-80b4-00c04fd430c8",
        "6ba7b810-9dad1-1d1-80b4-00c04fd430c8",
        "6ba7b810-9dad-11d18-0b4-00c04fd430c8",
        "6ba7b810-9dad-11d1-80b40-0c04fd430c8",
        "6ba7b810+9dad+11d1+80b4+00c04fd430c8",
        "(6ba7b810-9dad-11d1-80b4-00c04fd430c8}",
        "{6ba7b810-9dad-11d1-80b4-00c04fd430c8>",
        "zba7b810-9dad-11d1-80b4-00c04fd430c8",
        "6ba7b810-9dad11d180b400c04fd430c8",
        "6ba7b8109dad-11d180b400c04fd430c8",
        "6ba7b8109dad11d1-80b400c04fd430c8",
        "6ba7b8109dad11d180b4-00c04fd430c8",
        "6ba7b810 9dad 11d1 80b4 00c04fd430c8",
    ],
)
def test_from_string_invalid(text):
    with pytest.raises(ValueError):
        from_string(text)


def test_from_string_or_nil():
    assert from_string_or_nil("") == NIL
    assert from_string_or_nil(CANONICAL) == UUID(RAW)


def test_from_bytes_or_nil():
    assert from_bytes_or_nil(b"") == NIL
    assert from_bytes_or_nil(RAW) == UUID(RAW)


def test_marshal_text():
    assert UUID(RAW).marshal_text() == CANONICAL.encode()


def test_unmarshal_text():
    u1 = UUID()
    u1.unmarshal_text(CANONICAL.encode())
    assert u1 == UUID(RAW)
    u2 = UUID()
    with pytest.raises(ValueError):
        u2.unmarshal_text(b"")


def test_failed_unmarshal_leaves_value_unchanged():
    u = UUID(RAW)
    with pytest.raises(ValueError):
        u.unmarshal_text("zba7b810-9dad-11d1-80b4-00c04fd430c8")
    assert u == UUID(RAW)


def test_text_round_trip():
    assert from_string(UUID(RAW).marshal_text()) == UUID(RAW)


# sql.go


def test_value():
    u = from_string(CANONICAL)
    assert u.value() == str(u)


def test_value_nil():
    assert UUID().value() == str(NIL)


def test_null_uuid_value_nil():
    assert NullUUID().value() is None


def test_null_uuid_value_valid():
    assert NullUUID(UUID(RAW), True).value() == CANONICAL


def test_scan_binary():
    u1 = UUID()
    u1.scan(RAW)
    assert u1 == UUID(RAW)
    u2 = UUID()
    with pytest.raises(ValueError):
        u2.scan(b"")


def test_scan_string():
    u1 = UUID()
    u1.scan(CANONICAL)
    assert u1 == UUID(RAW)
    u2 = UUID()
    with pytest.raises(ValueError):
        u2.scan("")


def test_scan_text():
    u1 = UUID()
    u1.scan(CANONICAL.encode())
    assert u1 == UUID(RAW)
    u2 = UUID()
    with pytest.raises(ValueError):
        u2.scan(b"")


def test_scan_unsupported():
    with pytest.raises(TypeError):
        UUID().scan(True)


def test_scan_nil():
    with pytest.raises(TypeError):
        UUID(RAW).scan(None)


def test_null_uuid_scan_valid():
    u = NullUUID()
    u.scan(CANONICAL)
    assert u.valid is True
    assert u.uuid == UUID(RAW)


def test_null_uuid_scan_nil():
    u = NullUUID(UUID(RAW), True)
    u.scan(None)
    assert u.valid is False
    assert u.uuid == NIL