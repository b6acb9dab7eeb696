from pathlib import Path

from extscaffold.discovery import discover_modules
from extscaffold.layout import ModuleDescriptor


def test_discovers_tabs_and_content_scripts(layout, project: Path, write_file) -> None:
    src = project / "src"
    write_file(src / "tabs" / "settings.tsx")
    write_file(src / "tabs" / "nested" / "deep.vue")
    write_file(src / "tabs" / "types.d.ts")
    write_file(src / "tabs" / ".hidden.tsx")
    write_file(src / "tabs" / "notes.md")
    write_file(src / "content.ts")
    write_file(src / "contents" / "overlay.tsx")

    discovered = discover_modules(layout)

    assert discovered.pages == [
        ModuleDescriptor("tabs/nested", "deep", ".vue"),
        ModuleDescriptor("tabs", "settings", ".tsx"),
    ]
    assert discovered.content_scripts == [
        ModuleDescriptor("", "content", ".ts"),
        ModuleDescriptor("contents", "overlay", ".tsx"),
    ]
    assert discovered.ui_content_scripts(layout) == [ModuleDescriptor("contents", "overlay", ".tsx")]


def test_empty_project_discovers_nothing(layout) -> None:
    discovered = discover_modules(layout)

    assert discovered.pages == []
    assert discovered.content_scripts == []
