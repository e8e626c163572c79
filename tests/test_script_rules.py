from themecheck.config import RunConfig
from themecheck.result import ScanResult
from themecheck.rules import ScanContext
from themecheck.rules.scripts import DeprecatedWidgetRule, OwnershipTagRule, TemplateOverrideRule
from themecheck.severity import Severity


def write_scripts(root, files):
    for name, text in files.items():
        path = root / "javascripts" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return ScanContext.discover(RunConfig(root=root))


def test_deprecated_widget_apis_give_one_warning_per_file():
    text = (
        'api.createWidget("a", {});\n'
        'api.decorateWidget("b", () => {});\n'
        'api.reopenWidget("c", {});\n'
    )

    findings = DeprecatedWidgetRule().check_file("javascripts/a.js", text)

    assert len(findings) == 1
    assert findings[0].severity is Severity.WARNING
    assert "createWidget, decorateWidget, reopenWidget" in findings[0].message


def test_glimmer_component_has_no_widget_warning():
    text = 'import Component from "@glimmer/component";\nexport default class Banner extends Component {}\n'

    assert DeprecatedWidgetRule().check_file("javascripts/banner.gjs", text) == []


def test_template_override_apis_are_warned():
    rule = TemplateOverrideRule()

    for snippet in (
        'Ember.TEMPLATES["components/x"] = t;',
        'api.registerConnectorClass("outlet", "name", {});',
        'api.decoratePluginOutlet("outlet", () => {});',
    ):
        findings = rule.check_file("javascripts/a.js", snippet)
        assert len(findings) == 1
        assert "renderInOutlet" in findings[0].message


def test_render_in_outlet_is_not_an_override():
    assert TemplateOverrideRule().check_file("javascripts/a.js", 'api.renderInOutlet("x", C);') == []


def test_modify_class_without_plugin_id_is_one_error_for_the_run(tmp_path):
    context = write_scripts(
        tmp_path,
        {
            "a.js": 'api.modifyClass("controller:topic", { x: 1 });\n',
            "b.js": 'api.modifyClass("controller:user", { y: 2 });\n',
            "sub/c.gjs": 'api.modifyClassStatic("model:post", {});\n',
        },
    )
    result = ScanResult()

    OwnershipTagRule().scan(context, result)

    assert result.errors == 1
    assert result.findings[0].path is None


def test_plugin_id_in_any_file_satisfies_every_call(tmp_path):
    context = write_scripts(
        tmp_path,
        {
            "a.js": 'api.modifyClass("controller:topic", { x: 1 });\n',
            "b.js": 'const OWNER = { pluginId: "my-theme" };\n',
        },
    )
    result = ScanResult()

    OwnershipTagRule().scan(context, result)

    assert result.errors == 0


def test_plugin_id_without_modify_class_is_fine(tmp_path):
    context = write_scripts(tmp_path, {"a.js": "// pluginId is not needed here\n"})
    result = ScanResult()

    OwnershipTagRule().scan(context, result)

    assert result.findings == []


def test_missing_scripts_directory_is_clean(tmp_path):
    result = ScanResult()

    OwnershipTagRule().scan(ScanContext.discover(RunConfig(root=tmp_path)), result)
    DeprecatedWidgetRule().scan(ScanContext.discover(RunConfig(root=tmp_path)), result)

    assert result.findings == []
