"""
Tests for manifest loading.
"""
import json

import pytest

from pai_guard.errors import ManifestError
from pai_guard.manifest import Manifest, load_manifest


class TestManifestFromDict:

    def test_categories_and_rules_keep_document_order(self, manifest):
        assert [c.name for c in manifest.patterns] == ["api-keys", "secrets"]
        assert [r.name for r in manifest.validation_rules] == [
            "claude-md-generated",
            "core-files-deperesonalized",
        ]

    def test_optional_fields_default_empty(self, manifest):
        api_keys = manifest.patterns[0]
        assert api_keys.exceptions == ()
        rule = manifest.validation_rules[0]
        assert rule.must_contain == ("Generated",)
        assert rule.must_not_contain == ()

    def test_missing_sections_yield_empty_manifest(self):
        manifest = Manifest.from_dict({"version": "2"})
        assert manifest.version == "2"
        assert manifest.patterns == ()
        assert manifest.validation_rules == ()


class TestLoadManifest:

    def test_loads_valid_file(self, tmp_path, manifest_data):
        path = tmp_path / ".pai-protected.json"
        path.write_text(json.dumps(manifest_data), encoding="utf-8")

        manifest = load_manifest(path)

        assert manifest.version == "1.0"
        assert manifest.patterns[1].exceptions == ("**/*.example",)

    def test_missing_file_is_fatal(self, tmp_path):
        path = tmp_path / "absent.json"
        with pytest.raises(ManifestError) as exc_info:
            load_manifest(path)
        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)

    def test_invalid_json_is_fatal(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ManifestError, match="not valid JSON"):
            load_manifest(path)

    def test_non_object_document_is_fatal(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ManifestError, match="JSON object"):
            load_manifest(path)

    def test_wrong_section_shape_is_fatal(self, tmp_path):
        path = tmp_path / "shape.json"
        path.write_text(json.dumps({"patterns": ["AKIA"]}), encoding="utf-8")
        with pytest.raises(ManifestError, match="unexpected shape"):
            load_manifest(path)

    @pytest.mark.parametrize("section, entry", [
        ("patterns", {"patterns": "AKIA"}),
        ("patterns", {"patterns": ["AKIA"], "exceptions": "**/*.example"}),
        ("validation_rules", {"files": "**/SKILL.md"}),
        ("validation_rules", {"files": ["**/SKILL.md"], "must_contain": "Generated"}),
        ("validation_rules", {"files": ["**/SKILL.md"], "must_not_contain": "Ruslan"}),
        ("patterns", {"patterns": ["AKIA", 16]}),
    ])
    def test_string_valued_list_field_is_fatal(self, tmp_path, section, entry):
        path = tmp_path / "shape.json"
        path.write_text(json.dumps({section: {"entry": entry}}), encoding="utf-8")
        with pytest.raises(ManifestError, match="list of strings"):
            load_manifest(path)


class TestListFieldShape:

    def test_string_patterns_rejected_before_matching(self):
        with pytest.raises(TypeError):
            Manifest.from_dict({"patterns": {"c": {"patterns": "AKIA"}}})
