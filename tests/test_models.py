"""Tests for Category and Identity."""

import pytest

from base_dirs import Category, Identity, InvalidIdentity, UnsupportedCategory


class TestCategory:
    def test_values(self):
        assert [c.value for c in Category] == ["config", "save_data", "logs", "temp"]

    def test_parse_accepts_member_and_value(self):
        assert Category.parse(Category.LOGS) is Category.LOGS
        assert Category.parse("save_data") is Category.SAVE_DATA

    @pytest.mark.parametrize("value", ["cache", "CONFIG", "", None, 3, ["config"]])
    def test_parse_rejects_unknown(self, value):
        with pytest.raises(UnsupportedCategory) as excinfo:
            Category.parse(value)
        assert excinfo.value.value == value

    def test_unsupported_category_is_value_error(self):
        with pytest.raises(ValueError):
            Category.parse("cache")


class TestIdentity:
    def test_valid_identity(self):
        identity = Identity("Acme", "Blaster", "com.acme.blaster")
        assert identity.organization == "Acme"
        assert identity.application == "Blaster"
        assert identity.bundle_id == "com.acme.blaster"

    def test_bundle_id_optional(self):
        assert Identity("Acme", "Blaster").bundle_id is None

    @pytest.mark.parametrize("bundle_id", ["", "   "])
    def test_blank_bundle_id_becomes_none(self, bundle_id):
        assert Identity("Acme", "Blaster", bundle_id).bundle_id is None

    @pytest.mark.parametrize("value", ["", "  ", "Ac/me", "Ac\\me", "Ac\0me", ".", ".."])
    def test_invalid_organization(self, value):
        with pytest.raises(InvalidIdentity) as excinfo:
            Identity(value, "Blaster")
        assert excinfo.value.field == "organization"

    @pytest.mark.parametrize("value", ["", "Blas/ter", "Blas\\ter"])
    def test_invalid_application(self, value):
        with pytest.raises(InvalidIdentity) as excinfo:
            Identity("Acme", value)
        assert excinfo.value.field == "application"

    def test_invalid_bundle_id(self):
        with pytest.raises(InvalidIdentity) as excinfo:
            Identity("Acme", "Blaster", "com/acme")
        assert excinfo.value.field == "bundle_id"

    def test_non_string_rejected(self):
        with pytest.raises(InvalidIdentity):
            Identity(None, "Blaster")

    def test_spaces_inside_segment_allowed(self):
        assert Identity("Acme Games", "Blaster 2").organization == "Acme Games"

    def test_identity_is_frozen(self):
        identity = Identity("Acme", "Blaster")
        with pytest.raises(AttributeError):
            identity.organization = "Other"

    def test_segments(self):
        identity = Identity("Acme", "Blaster", "Com.Acme.Blaster")
        assert identity.segments() == {"organization": "Acme", "application": "Blaster", "bundle_id": "Com.Acme.Blaster"}
        assert identity.segments(lowercase=True) == {
            "organization": "acme",
            "application": "blaster",
            "bundle_id": "com.acme.blaster",
        }

    def test_segments_without_bundle_id(self):
        assert Identity("Acme", "Blaster").segments()["bundle_id"] == ""
