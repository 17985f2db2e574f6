from __future__ import annotations

import pytest

from envscalar.destination import AttrRef, Kind, Ref, type_name_of


class TestKind:
    """Test Kind."""

    def test_of(self):
        """bool is not mistaken for int."""
        assert Kind.of(True) is Kind.BOOL
        assert Kind.of(1) is Kind.INT
        assert Kind.of("") is Kind.STR
        assert Kind.of(1.5) is Kind.FLOAT
        assert Kind.of(None) is None

    def test_supported(self):
        """Strings and integers are supported, nothing else."""
        supported = {k for k in Kind if k.is_supported}
        assert Kind.STR in supported
        assert Kind.UINT64 in supported
        assert Kind.BOOL not in supported
        assert Kind.FLOAT not in supported
        assert len(supported) == 11

    def test_width(self):
        """Native kinds have no fixed width."""
        assert Kind.INT.width is None
        assert Kind.UINT.width is None
        assert Kind.INT16.width == 16
        assert Kind.UINT8.width == 8
        assert Kind.STR.width is None

    def test_signedness(self):
        """Each integer kind is exactly one of signed and unsigned."""
        assert Kind.INT32.is_signed and not Kind.INT32.is_unsigned
        assert Kind.UINT.is_unsigned and not Kind.UINT.is_signed
        assert not Kind.STR.is_signed and not Kind.STR.is_unsigned

    def test_type_name_of(self):
        """Unrecognised values are reported by their type name."""
        assert type_name_of(False) == "bool"
        assert type_name_of(object()) == "object"


class TestRef:
    """Test Ref."""

    def test_set_get(self):
        """Values are stored in the box."""
        ref = Ref("a")
        ref.set("b")
        assert ref.get() == "b"
        assert ref.value == "b"

    def test_explicit_kind(self):
        """An explicit kind overrides inference."""
        ref = Ref(0, Kind.UINT8)
        assert ref.kind is Kind.UINT8
        assert ref.type_name == "uint8"

    def test_nil(self):
        """Nil references refuse writes."""
        ref = Ref.nil(Kind.STR)
        assert ref.is_nil
        assert ref.type_name == "str"
        with pytest.raises(ValueError):
            ref.set("x")


class _Holder:
    def __init__(self):
        self.name = "default"


class TestAttrRef:
    """Test AttrRef."""

    def test_set_get(self):
        """Writes land on the owner object."""
        holder = _Holder()
        ref = AttrRef(holder, "name")
        assert ref.kind is Kind.STR
        ref.set("new")
        assert holder.name == "new"
        assert ref.get() == "new"

    def test_nil_requires_kind(self):
        """A nil AttrRef cannot infer its kind."""
        with pytest.raises(ValueError):
            AttrRef(None, "name")

    def test_missing_attribute(self):
        """Inference needs the attribute to exist."""
        with pytest.raises(AttributeError):
            AttrRef(_Holder(), "missing")
