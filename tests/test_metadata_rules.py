from themecheck.config import RunConfig
from themecheck.result import ScanResult
from themecheck.rules import ScanContext
from themecheck.rules.metadata import RequiredMetadataRule, SettingsUxRule
from themecheck.severity import Severity


def scan_metadata(root):
    result = ScanResult()
    RequiredMetadataRule().scan(ScanContext.discover(RunConfig(root=root)), result)
    return result


def test_missing_about_json_is_one_error_and_no_warnings(tmp_path):
    result = scan_metadata(tmp_path)

    assert result.errors == 1
    assert result.warnings == 0
    assert "about.json" in result.findings[0].message


def test_about_json_without_required_keys_gives_two_warnings(tmp_path):
    (tmp_path / "about.json").write_text('{"name": "x"}', encoding="utf-8")

    result = scan_metadata(tmp_path)

    assert result.errors == 0
    assert result.warnings == 2


def test_complete_about_json_is_clean(tmp_path):
    (tmp_path / "about.json").write_text(
        '{\n  "name": "x",\n  "component":true,\n  "minimum_discourse_version": "3.2.0"\n}\n',
        encoding="utf-8",
    )

    assert scan_metadata(tmp_path).findings == []


def test_component_false_is_warned():
    findings = RequiredMetadataRule().check_text('{"component": false, "minimum_discourse_version": "3.1"}')

    assert len(findings) == 1
    assert "component" in findings[0].message


def test_about_json_is_matched_as_text_not_parsed():
    findings = RequiredMetadataRule().check_text('{"component": true, "minimum_discourse_version": "3.1",,,')

    assert findings == []


def test_category_list_without_list_type_warns_once():
    text = (
        "featured_categories:\n"
        "  type: list\n"
        '  default: ""\n'
        "excluded_categories:\n"
        "  type: list\n"
        '  default: ""\n'
    )

    findings = SettingsUxRule().check_text(text)

    assert len(findings) == 1
    assert findings[0].severity is Severity.WARNING
    assert "list_type: category" in findings[0].message


def test_category_and_group_lists_warn_separately():
    text = (
        "featured_categories:\n"
        "  type: list\n"
        "allowed_groups:\n"
        "  type: list\n"
        '  default: "staff"\n'
    )

    messages = [finding.message for finding in SettingsUxRule().check_text(text)]

    assert len(messages) == 2
    assert any("list_type: group" in message for message in messages)


def test_list_type_declarations_satisfy_settings_check():
    text = (
        "featured_categories:\n"
        "  type: list\n"
        "  list_type: category\n"
        "allowed_groups:\n"
        "  type: list\n"
        "  list_type: group\n"
    )

    assert SettingsUxRule().check_text(text) == []


def test_non_list_category_setting_is_ignored():
    text = "category_banner_text:\n  type: string\n  default: hello\n"

    assert SettingsUxRule().check_text(text) == []


def test_settings_rule_applies_only_when_file_exists(tmp_path):
    rule = SettingsUxRule()

    assert not rule.applies(ScanContext.discover(RunConfig(root=tmp_path)))
    (tmp_path / "settings.yml").write_text("a:\n  default: 1\n", encoding="utf-8")
    assert rule.applies(ScanContext.discover(RunConfig(root=tmp_path)))
