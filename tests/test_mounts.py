import asyncio
import re
from pathlib import Path

from extscaffold.layout import ModuleDescriptor, ProjectLayout
from extscaffold.scaffold import TemplateGenerator, create_content_script_mount, create_page_mount


def _script_src(html: str) -> str:
    match = re.search(r'<script[^>]*src="([^"]+)"', html)
    assert match, html
    return match.group(1)


def test_ui_module_gets_script_and_html(generator, layout) -> None:
    module = ModuleDescriptor(directory="tabs", name="settings", ext=".tsx")

    html_path = asyncio.run(create_page_mount(generator, module))

    output_dir = layout.generated_directory / "tabs"
    assert html_path == output_dir / "settings.html"
    assert sorted(p.name for p in output_dir.iterdir()) == ["settings.html", "settings.tsx"]
    assert _script_src(html_path.read_text(encoding="utf-8")) == "./settings.tsx"
    assert 'from "~tabs/settings"' in (output_dir / "settings.tsx").read_text(encoding="utf-8")


def test_non_ui_module_gets_html_only(generator, layout) -> None:
    module = ModuleDescriptor(directory="tabs", name="worker", ext=".ts")

    html_path = asyncio.run(create_page_mount(generator, module))

    output_dir = layout.generated_directory / "tabs"
    assert [p.name for p in output_dir.iterdir()] == ["worker.html"]
    assert _script_src(html_path.read_text(encoding="utf-8")) == "~tabs/worker.ts"


def test_top_level_module_alias_has_no_directory(generator, layout) -> None:
    module = ModuleDescriptor(directory="", name="welcome", ext=".tsx")

    html_path = asyncio.run(create_page_mount(generator, module))

    assert html_path == layout.generated_directory / "welcome.html"
    assert 'from "~welcome"' in (layout.generated_directory / "welcome.tsx").read_text(encoding="utf-8")


def test_injected_ui_predicate_drives_dispatch(layout) -> None:
    custom = ProjectLayout(
        name=layout.name,
        root=layout.root,
        source_directory=layout.source_directory,
        generated_directory=layout.generated_directory,
        mount_ext=layout.mount_ext,
        template_root=layout.template_root,
        ui_extensions=layout.ui_extensions,
        is_ui_ext=lambda ext: ext == ".ts",
    )
    generator = TemplateGenerator(custom)

    asyncio.run(create_page_mount(generator, ModuleDescriptor("tabs", "worker", ".ts")))
    asyncio.run(create_page_mount(generator, ModuleDescriptor("tabs", "view", ".tsx")))

    names = sorted(p.name for p in (custom.generated_directory / "tabs").iterdir())
    assert names == ["view.html", "worker.html", "worker.tsx"]


def test_content_script_mount_lives_under_static(generator, layout) -> None:
    module = ModuleDescriptor(directory="contents", name="overlay", ext=".tsx")

    mount_path = asyncio.run(create_content_script_mount(generator, module))

    assert mount_path == layout.static_directory / "contents" / "overlay.tsx"
    assert 'from "~contents/overlay"' in mount_path.read_text(encoding="utf-8")


def test_content_script_mount_ignores_extension(generator, layout) -> None:
    module = ModuleDescriptor(directory="contents", name="plain", ext=".ts")

    mount_path = asyncio.run(create_content_script_mount(generator, module))

    assert mount_path == layout.static_directory / "contents" / "plain.tsx"
    assert mount_path.is_file()


def test_mount_ext_controls_generated_names(make_layout) -> None:
    layout = make_layout(mount_ext=".ts")
    generator = TemplateGenerator(layout)
    module = ModuleDescriptor(directory="tabs", name="panel", ext=".vue")

    html_path = asyncio.run(create_page_mount(generator, module))

    assert (layout.generated_directory / "tabs" / "panel.ts").is_file()
    assert _script_src(Path(html_path).read_text(encoding="utf-8")) == "./panel.ts"
