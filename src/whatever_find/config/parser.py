"""
YAML configuration loading for whatever-find.

Settings come from the first configuration file found in the working
directory, the home directory or the per-user configuration directory, or
from built-in defaults when there is none. Problems that make a file
unusable raise ConfigurationError; suspicious but valid settings are
reported as warnings (errors in strict mode).
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Iterator, Optional, List, Tuple, Union
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models.config import FinderConfig, DEFAULT_IGNORE_PATTERNS


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Generic name only honoured inside the per-user configuration directory
USER_CONFIG_NAME = 'config.yaml'

# (key, comment) pairs in the order they are written to generated files
CONFIG_SECTIONS = (
    ('max_depth', "Deepest directory level to index; 1 means only the search root (null: no limit)"),
    ('ignore_hidden', "Skip files and directories whose name starts with a dot"),
    ('ignore_patterns', "Entry names, path fragments or * ? wildcards to leave out of the index"),
    ('case_sensitive', "Compare filenames and queries with their case preserved"),
    ('max_file_size', "Leave out files larger than this many bytes (null: no limit)"),
)


@dataclass
class ConfigParseResult:
    """
    Outcome of loading a configuration.

    Attributes:
        config: Validated settings
        warnings: Non-fatal problems noticed while loading
        config_path: File the settings came from, None for defaults
        is_default: True when no file was found and defaults were used
    """
    config: FinderConfig
    warnings: List[str]
    config_path: Optional[Path]
    is_default: bool


def default_config_dir() -> Path:
    return Path.home() / '.config' / 'whatever-find'


def default_config_path() -> Path:
    """File written by save_config when no destination is given."""
    return default_config_dir() / USER_CONFIG_NAME


class ConfigParser:
    """
    Reads, validates and writes whatever-find YAML configuration files.

    Example:
        >>> result = ConfigParser().load_config()
        >>> result.config.case_sensitive
        False
    """

    DEFAULT_CONFIG_NAMES = [
        '.whatever-find.yaml',
        '.whatever-find.yml',
        'whatever-find.yaml',
        'whatever-find.yml',
        USER_CONFIG_NAME
    ]

    KNOWN_KEYS = frozenset(FinderConfig.model_fields)

    def __init__(self, strict_mode: bool = False):
        """
        Args:
            strict_mode: Raise ConfigurationError instead of returning warnings
        """
        self.strict_mode = strict_mode

    def load_config(self, config_path: Optional[PathLike] = None) -> ConfigParseResult:
        """
        Load settings from a file, or discover one, or fall back to defaults.

        Args:
            config_path: Explicit configuration file; None searches the
                standard locations

        Returns:
            ConfigParseResult with the validated settings and any warnings

        Raises:
            ConfigurationError: If an explicit file is missing, a file cannot
                be read or parsed, its values are invalid, or strict mode is
                on and there are warnings
        """
        if config_path:
            source: Optional[Path] = Path(config_path).expanduser()
            if not source.exists():
                raise ConfigurationError(f"Configuration file not found: {source}")
            raw = self._read_yaml(source)
        else:
            source, raw = self._discover_config()

        is_default = raw is None
        settings = self.default_settings() if is_default else raw
        config = self._build_config(settings)

        warnings = config.validate_configuration()
        if is_default:
            warnings.append("No configuration file found, using default settings")
        unknown = sorted(set(settings) - self.KNOWN_KEYS)
        if unknown:
            warnings.append(f"Unknown configuration keys ignored: {', '.join(unknown)}")

        if warnings and self.strict_mode:
            raise ConfigurationError(f"Configuration warnings in strict mode: {'; '.join(warnings)}")

        logger.info(f"Using configuration from {source or 'built-in defaults'}")
        return ConfigParseResult(config=config, warnings=warnings, config_path=source, is_default=is_default)

    def candidate_paths(self) -> Iterator[Path]:
        """Yield the locations searched for a configuration file, in priority order."""
        user_dir = default_config_dir()
        for directory in (Path.cwd(), Path.home(), user_dir):
            for name in self.DEFAULT_CONFIG_NAMES:
                if name == USER_CONFIG_NAME and directory != user_dir:
                    continue
                yield directory / name

    def _discover_config(self) -> Tuple[Optional[Path], Optional[Dict[str, Any]]]:
        """
        Load the first readable configuration file from the standard locations.

        Returns:
            (path, data) for the file used, or (None, None) if none was usable
        """
        for candidate in self.candidate_paths():
            if not candidate.is_file():
                continue
            try:
                data = self._read_yaml(candidate)
            except ConfigurationError as e:
                logger.warning(f"Skipping unusable configuration file {candidate}: {e}")
                continue
            logger.debug(f"Discovered configuration file {candidate}")
            return candidate, data

        logger.debug("No configuration file found in the standard locations")
        return None, None

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """
        Parse a YAML file into a mapping; empty files yield an empty mapping.

        Raises:
            ConfigurationError: If the file cannot be read, is not valid YAML,
                or does not hold a mapping at the top level
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {file_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e

        if data is None:
            logger.warning(f"Configuration file {file_path} is empty")
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a YAML object, got {type(data).__name__}")
        return data

    @staticmethod
    def _build_config(settings: Dict[str, Any]) -> FinderConfig:
        try:
            return FinderConfig.from_dict(settings)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

    @staticmethod
    def default_settings() -> Dict[str, Any]:
        """Settings used when no configuration file exists."""
        return {
            'max_depth': None,
            'ignore_hidden': True,
            'ignore_patterns': list(DEFAULT_IGNORE_PATTERNS),
            'case_sensitive': False,
            'max_file_size': None
        }

    def save_config(self, config: FinderConfig, output_path: Optional[PathLike] = None) -> Path:
        """
        Write settings as commented YAML.

        Args:
            config: Settings to write
            output_path: Destination; defaults to default_config_path()

        Returns:
            The path written

        Raises:
            ConfigurationError: If the file cannot be written
        """
        target = Path(output_path) if output_path else default_config_path()
        try:
            _write_text(target, self.render_yaml(config.to_dict()))
        except OSError as e:
            raise ConfigurationError(f"Cannot write configuration file {target}: {e}") from e

        logger.info(f"Saved configuration to {target}")
        return target

    @staticmethod
    def render_yaml(settings: Dict[str, Any]) -> str:
        """Render known settings as YAML, each preceded by an explanatory comment."""
        blocks = ["# whatever-find configuration\n"
                  "# Controls which files are indexed and how queries are compared with filenames"]
        for key, comment in CONFIG_SECTIONS:
            if key not in settings:
                continue
            body = yaml.safe_dump({key: settings[key]}, default_flow_style=False, sort_keys=False)
            blocks.append(f"# {comment}\n{body.rstrip()}")
        return "\n\n".join(blocks) + "\n"

    def validate_config_file(self, config_path: PathLike) -> List[str]:
        """
        Check a configuration file without using it.

        Returns:
            Error messages; an empty list means the file is usable
        """
        path = Path(config_path)
        if not path.exists():
            return [f"Configuration file not found: {path}"]

        try:
            self._build_config(self._read_yaml(path))
        except ConfigurationError as e:
            return [str(e)]
        return []

    def get_config_template(self) -> str:
        """Commented YAML holding every option at its default value."""
        return self.render_yaml(self.default_settings())


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


def load_config(config_path: Optional[PathLike] = None, strict_mode: bool = False) -> ConfigParseResult:
    """
    Load configuration with a throwaway parser.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    return ConfigParser(strict_mode=strict_mode).load_config(config_path)


def validate_config_file(config_path: PathLike) -> List[str]:
    """Validate a configuration file; returns error messages (empty if valid)."""
    return ConfigParser().validate_config_file(config_path)


def create_config_template(output_path: PathLike) -> None:
    """
    Write the default configuration template to ``output_path``.

    Raises:
        ConfigurationError: If the template cannot be written
    """
    path = Path(output_path)
    try:
        _write_text(path, ConfigParser().get_config_template())
    except OSError as e:
        raise ConfigurationError(f"Cannot create template file {path}: {e}") from e
