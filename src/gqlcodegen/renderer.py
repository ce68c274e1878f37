import shutil
from pathlib import Path

from jinja2 import Environment, PackageLoader, select_autoescape

from gqlcodegen import log
from gqlcodegen.mappers.naming import capitalize
from gqlcodegen.model.data_model import ArtifactKind, GeneratedArtifact

JAVA_FILE_EXTENSION = ".java"


def prepare_output_dir(output_dir: Path, clean: bool = False) -> None:
    """Create the output directory; with `clean`, remove whatever it contained first."""
    if clean and output_dir.exists():
        log.debug(f"Removing previous output in {output_dir}")
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)


class ArtifactRenderer:
    """Renders data models with the Jinja2 template named after the artifact kind."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=PackageLoader("gqlcodegen", "templates"),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["capitalize_first"] = capitalize

    @staticmethod
    def template_name(kind: ArtifactKind) -> str:
        return f"{kind.value}.java.j2"

    def render(self, artifact: GeneratedArtifact) -> str:
        template = self.env.get_template(self.template_name(artifact.kind))
        return template.render(artifact.data_model)

    @staticmethod
    def output_path(artifact: GeneratedArtifact, output_dir: Path) -> Path:
        """`<output_dir>/<package as folders>/<ClassName>.java`"""
        directory = output_dir
        if artifact.package:
            directory = output_dir.joinpath(*artifact.package.split("."))
        return directory / f"{artifact.class_name}{JAVA_FILE_EXTENSION}"

    def write_artifacts(self, artifacts: list[GeneratedArtifact], output_dir: Path) -> list[Path]:
        """
        Render every artifact and write it below `output_dir`.

        Args:
            artifacts: Artifacts in generation order
            output_dir: Root directory of the generated sources

        Returns:
            list[Path]: Written files, in artifact order
        """
        paths = []
        for artifact in artifacts:
            path = self.output_path(artifact, output_dir)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.render(artifact), encoding="utf-8")
            log.debug(f"Wrote {artifact.kind.value} {artifact.class_name} to {path}")
            paths.append(path)
        return paths
