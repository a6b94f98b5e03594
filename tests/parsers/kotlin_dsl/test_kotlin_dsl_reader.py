from pathlib import Path

import pytest

from depmodel.api import read_build_script
from depmodel.errors import ScriptSyntaxError
from depmodel.model import DependencyRole, MapNode, OpaqueNode, Scalar
from depmodel.parsers.kotlin_dsl import read_kotlin_dsl
from depmodel.parsers.kotlin_dsl.grammar import get_parser

FIXTURE = Path(__file__).resolve().parents[2] / "fixtures" / "build.gradle.kts"


def test_fixture_statements_become_ordered_entries() -> None:
    tree = read_kotlin_dsl(FIXTURE.read_bytes())

    assert tree.keys() == (
        "import",
        "plugins",
        "java",
        "group",
        "version",
        "dependencies",
        "publishing",
    )
    assert tree.get("import") == Scalar("java.util.Properties")
    assert tree.get("group") == Scalar("com.example")


def test_fixture_plugins_block_shape() -> None:
    plugins = read_kotlin_dsl(FIXTURE.read_bytes()).get("plugins")

    assert isinstance(plugins, MapNode)
    assert plugins.keys() == ("kotlin", "kotlin", "id", "maven-publish")
    first = plugins.get("kotlin")
    assert isinstance(first, MapNode)
    assert first.get_text("value") == "jvm"
    assert first.get_text("version") == "1.7.22"
    assert plugins.get("id") == Scalar("dev.architectury.loom")
    assert plugins.get("maven-publish") == Scalar(None)


def test_fixture_named_and_positional_arguments() -> None:
    deps = read_kotlin_dsl(FIXTURE.read_bytes()).get("dependencies")

    assert isinstance(deps, MapNode)
    minecraft = deps.get("minecraft")
    assert isinstance(minecraft, MapNode)
    assert minecraft.get_text("group") == "com.mojang"
    assert minecraft.get_text("name") == "minecraft"
    assert deps.get_all("modImplementation")[0] == Scalar("net.fabricmc:fabric-loader:0.12.12")


def test_non_literal_expressions_are_opaque() -> None:
    java = read_kotlin_dsl(FIXTURE.read_bytes()).get("java")

    assert isinstance(java, MapNode)
    assert java.get("sourceCompatibility") == OpaqueNode(source="JavaVersion.VERSION_1_8")


def test_fixture_builds_full_model() -> None:
    model = read_build_script(FIXTURE.read_bytes())

    assert [p.id for p in model.plugins()] == [
        "org.jetbrains.kotlin.jvm",
        "org.jetbrains.kotlin.plugin.serialization",
        "dev.architectury.loom",
        "maven-publish",
    ]
    deps = model.dependencies()
    assert [d.keyword for d in deps] == ["minecraft", "mappings", "modImplementation", "modImplementation"]
    assert [d.role for d in deps] == [
        DependencyRole.TOOL_PROVIDED,
        DependencyRole.TOOL_PROVIDED,
        DependencyRole.COMPILE,
        DependencyRole.COMPILE,
    ]
    assert deps[1].coordinate.notation == "net.fabricmc:yarn:1.16.5+build.5:v2"
    assert deps[3].coordinate.version is not None
    assert deps[3].coordinate.version.raw == "1.8.7+kotlin.1.7.22"

    assert model.publishing_group_id() == "com.example"
    assert model.publishing_version() == "0.0.1"
    assert model.publishing().publications == ("mavenKotlin",)
    assert [b.name for b in model.pass_through()] == ["import", "java", "group", "version"]


def test_comments_semicolons_and_trailing_lambdas() -> None:
    script = b"""
// header comment
/* block
   comment */
plugins { java; `java-library` }
dependencies {
    implementation("org.example:lib:1.2.3") { // keep transitive
        isTransitive = true
    }
    runtimeOnly(
        group = "org.example",
        name = "rt",
        version = "2.0.0",
    )
}
"""
    tree = read_kotlin_dsl(script)
    deps = tree.get("dependencies")

    assert isinstance(deps, MapNode)
    impl = deps.get("implementation")
    assert isinstance(impl, MapNode)
    assert impl.get_text("value") == "org.example:lib:1.2.3"
    body = impl.get("body")
    assert isinstance(body, MapNode)
    assert body.get("isTransitive") == Scalar(True)

    model = read_build_script(script)
    assert [p.id for p in model.plugins()] == ["java", "java-library"]
    assert [d.coordinate.notation for d in model.dependencies()] == [
        "org.example:lib:1.2.3",
        "org.example:rt:2.0.0",
    ]


def test_plugin_apply_false() -> None:
    model = read_build_script(b'plugins {\n    id("com.example.tool") version "1.0.0" apply false\n}\n')

    plugin = model.plugins()[0]
    assert plugin.id == "com.example.tool"
    assert plugin.apply is False
    assert plugin.version is not None and plugin.version.raw == "1.0.0"


def test_property_declarations_and_numbers() -> None:
    tree = read_kotlin_dsl(b'val loaderVersion = "0.12.12"\nval retries = 3\nval modVersion: String by project\n')

    assert tree.get("loaderVersion") == Scalar("0.12.12")
    assert tree.get("retries") == Scalar(3)
    assert tree.get("modVersion") == OpaqueNode(source="project")


def test_string_escapes() -> None:
    tree = read_kotlin_dsl(b'description = "say \\"hi\\""\n')
    assert tree.get("description") == Scalar('say "hi"')


def test_syntax_error_reports_position() -> None:
    with pytest.raises(ScriptSyntaxError) as excinfo:
        read_kotlin_dsl(b'plugins {\n    id("x") ?? 1\n}\n')
    assert excinfo.value.line == 2


def test_truncated_script_is_rejected() -> None:
    with pytest.raises(ScriptSyntaxError):
        read_kotlin_dsl(b'plugins {\n    id("x"\n')


def test_invalid_utf8_is_rejected() -> None:
    with pytest.raises(ScriptSyntaxError):
        read_kotlin_dsl(b"\xff\xfe\xfa")


def test_string_invoked_configuration_keyword() -> None:
    model = read_build_script(
        b'dependencies {\n    "minecraft"("com.mojang:minecraft:1.16.5")\n'
        b'    "modImplementation"("a:b:1.0.0")\n}\n'
    )

    assert [(d.keyword, d.role) for d in model.dependencies()] == [
        ("minecraft", DependencyRole.TOOL_PROVIDED),
        ("modImplementation", DependencyRole.COMPILE),
    ]


def test_parser_is_built_once() -> None:
    assert get_parser() is get_parser()
