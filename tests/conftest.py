from pathlib import Path
import textwrap

import pytest
from typer.testing import CliRunner

from extscaffold.config import ScaffoldConfig
from extscaffold.layout import ProjectLayout
from extscaffold.scaffold import Scaffolder, TemplateGenerator


def write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """
    An empty project root with a ``src`` directory.
    """
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    return root


@pytest.fixture
def make_layout(project: Path):
    def factory(**overrides) -> ProjectLayout:
        config = ScaffoldConfig(root=project, name="Demo Extension", **overrides)
        return ProjectLayout.from_config(config)

    return factory


@pytest.fixture
def layout(make_layout) -> ProjectLayout:
    return make_layout()


@pytest.fixture
def generator(layout: ProjectLayout) -> TemplateGenerator:
    return TemplateGenerator(layout)


@pytest.fixture
def scaffolder(layout: ProjectLayout) -> Scaffolder:
    return Scaffolder(layout)


@pytest.fixture
def sample_config(project: Path) -> dict:
    """
    Write a config file plus a few source modules and return metadata.
    """
    config_text = textwrap.dedent(
        """
        name = "Sample Extension"
        source_dir = "src"
        generated_dir = ".scaffold"
        mount_ext = ".tsx"
        """
    ).strip()
    path = write(project / "extscaffold.toml", config_text + "\n")
    write(project / "src" / "popup.tsx", "export default () => null\n")
    write(project / "src" / "tabs" / "settings.tsx", "export default () => null\n")
    write(project / "src" / "contents" / "overlay.tsx", "export default () => null\n")
    return {"path": path, "root": project, "generated": project / ".scaffold"}


@pytest.fixture
def write_file():
    return write
