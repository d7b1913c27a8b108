import pytest

from irsol.protocol.binary import (
    BinaryData,
    BinaryDataAttribute,
    BinaryDataBuffer,
    ColorImageBinaryData,
    ImageBinaryData,
)


def test_attribute_int_value():
    att = BinaryDataAttribute("gain", 5)
    assert att.has_int()
    assert not att.has_double()
    assert not att.has_string()
    assert att.to_string() == "BinaryDataAttribute{identifier: 'gain', value: <int> 5}"


def test_attribute_double_and_string_flags():
    d = BinaryDataAttribute("exposure", 1.5)
    s = BinaryDataAttribute("label", "dark")
    assert d.has_double() and not d.has_int()
    assert s.has_string() and not s.has_double()
    assert s.identifier in s.to_string()
    assert '"dark"' in s.to_string()


def test_attribute_rejects_invalid_identifier():
    with pytest.raises(ValueError):
        BinaryDataAttribute("1abc", 3)


def test_attribute_rejects_invalid_value_type():
    with pytest.raises(TypeError):
        BinaryDataAttribute("flag", [1, 2])


def test_image_counts_and_shape():
    data = bytes(range(24))
    img = ImageBinaryData(data, (3, 4))
    assert img.shape == (3, 4)
    assert img.num_elements == 12
    assert img.num_bytes == len(data)
    assert img.data == data
    assert img.attributes == []


def test_image_to_string():
    img = ImageBinaryData(bytes(24), [3, 4])
    assert img.to_string() == "BinaryDataBuffer2Du16[shape=(3x4)](24 bytes)"


def test_buffer_and_color_names():
    buf = BinaryDataBuffer(bytes(10), (5,))
    color = ColorImageBinaryData(bytes(2 * 2 * 3 * 2), (2, 3, 2))
    assert buf.to_string().startswith("BinaryDataBufferu16[shape=(5)]")
    assert color.to_string() == "BinaryDataBuffer3Du16[shape=(2x3x2)](24 bytes)"
    assert color.num_bytes == color.num_elements * ColorImageBinaryData.BYTES_PER_ELEMENT


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        ImageBinaryData(bytes(23), (3, 4))


def test_wrong_dimensionality_raises():
    with pytest.raises(ValueError):
        ImageBinaryData(bytes(24), (24,))


def test_negative_extent_raises():
    with pytest.raises(ValueError):
        BinaryDataBuffer(bytes(0), (-1,))


def test_base_class_cannot_be_instantiated():
    with pytest.raises(TypeError):
        BinaryData(bytes(2), (1,))


def test_attributes_are_kept_in_order():
    atts = [BinaryDataAttribute("a", 1), BinaryDataAttribute("b", "x")]
    img = ImageBinaryData(bytes(8), (2, 2), atts)
    assert img.attributes == atts


def test_non_attribute_rejected():
    with pytest.raises(TypeError):
        ImageBinaryData(bytes(8), (2, 2), ["a=1"])


def test_data_is_copied_from_bytearray():
    raw = bytearray(4)
    buf = BinaryDataBuffer(raw, (2,))
    raw[0] = 7
    assert buf.data[0] == 0