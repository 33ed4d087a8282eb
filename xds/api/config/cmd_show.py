"""Show configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.config import ConfigShowOutput
from .get_config_path import get_config_path
from .XDSConfig import XDSConfig


def cmd_show(section: str = "", config_path: str | None = None) -> StageResult:
    """Show the whole configuration or a single section (top-level key).

    Args:
        section: Config key (e.g. "shareRootDir", "log"). Empty string shows everything.
        config_path: Optional explicit config file.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config = XDSConfig.load(config_path)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                section=section,
                content={},
                config_path=str(config_path or get_config_path()),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Processing sections...")
        config_dict = config.to_dict()
        warnings: list[str] = []
        if not config.path.exists():
            warnings.append(f"Config file {config.path} not found, showing defaults")

        if section == "":
            yield (1.0, "Complete")
            result_obj.result = f"Found {len(config_dict)} setting(s)"
            result_obj.output = ConfigShowOutput(
                errors=[],
                warnings=warnings,
                section="",
                content=config_dict,
                config_path=str(config.path),
            ).model_dump(mode="python")
            result_obj.success = True
            return

        if section not in config_dict:
            yield (1.0, "Complete")
            result_obj.result = f"Section '{section}' not found"
            result_obj.output = ConfigShowOutput(
                errors=[f"Unknown section: {section} (available: {', '.join(config_dict)})"],
                warnings=warnings,
                section=section,
                content={},
                config_path=str(config.path),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        value = config_dict[section]
        yield (1.0, "Complete")
        result_obj.result = f"Retrieved configuration for '{section}'"
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=warnings,
            section=section,
            content=value if isinstance(value, dict) else {section: value},
            config_path=str(config.path),
        ).model_dump(mode="python")
        result_obj.success = True

    announce = "Showing configuration..." if section == "" else f"Showing configuration for section '{section}'..."
    return StageResult(announce=announce, progress_callback=do_work)
