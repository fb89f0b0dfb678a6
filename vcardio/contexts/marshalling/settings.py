"""
Marshalling Settings

Loads marshaller defaults from a YAML file and applies command-line style
overrides on top.

Examples:
    >>> settings = load_marshalling_settings()
    >>> settings.target_version
    <VCardVersion.V4_0: '4.0'>

    >>> settings = load_marshalling_settings(overrides=["target_version=3.0", "add_generator=false"])
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from vcardio.contexts.marshalling.exceptions import InvalidSettingsError
from vcardio.contexts.types.versions import CompatibilityMode, VCardVersion

load_dotenv()
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "marshalling.yaml"
MARSHALLING_CONFIG_PATH = Path(os.getenv("VCARDIO_MARSHALLING_CONFIG", str(DEFAULT_CONFIG_PATH)))


@dataclass(frozen=True)
class MarshallingSettings:
    """Resolved marshaller configuration."""

    target_version: VCardVersion = VCardVersion.V4_0
    compatibility_mode: CompatibilityMode = CompatibilityMode.RFC
    add_generator: bool = True
    xml_indent: bool = False
    json_indent: Optional[int] = None
    log_dir: Path = Path("outs/logs")


def load_marshalling_settings(
    config_path: Path = None, overrides: Optional[List[str]] = None
) -> MarshallingSettings:
    """
    Load marshalling settings.

    Values missing from the file fall back to MarshallingSettings defaults.

    Args:
        config_path: YAML settings file (defaults to VCARDIO_MARSHALLING_CONFIG or
                     the packaged config/marshalling.yaml)
        overrides: Dotlist overrides applied last (e.g., ["target_version=3.0"])

    Returns:
        Validated settings

    Raises:
        InvalidSettingsError: If a value cannot be used
        FileNotFoundError: If the settings file does not exist
    """
    if config_path is None:
        config_path = MARSHALLING_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Marshalling settings not found at {config_path}")

    try:
        conf = OmegaConf.load(config_path)
        if overrides:
            conf = OmegaConf.merge(conf, OmegaConf.from_dotlist(overrides))
        raw = OmegaConf.to_container(conf, resolve=True)
    except OmegaConfBaseException as e:
        raise InvalidSettingsError(f"Could not read settings: {e}", config_path=config_path) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise InvalidSettingsError("Settings file must contain a mapping", config_path=config_path)

    defaults = MarshallingSettings()
    known = set(defaults.__dataclass_fields__)
    unknown = set(raw) - known
    if unknown:
        raise InvalidSettingsError(
            f"Unknown settings {sorted(unknown)}. Known settings: {sorted(known)}",
            config_path=config_path,
        )

    try:
        target_version = VCardVersion.value_of(raw.get("target_version", defaults.target_version))
    except ValueError as e:
        raise InvalidSettingsError(str(e), key="target_version", config_path=config_path) from e

    try:
        compatibility_mode = CompatibilityMode.value_of(
            raw.get("compatibility_mode", defaults.compatibility_mode.value)
        )
    except ValueError as e:
        raise InvalidSettingsError(str(e), key="compatibility_mode", config_path=config_path) from e

    json_indent = raw.get("json_indent", defaults.json_indent)
    # bool is an int subclass, so "true" must be rejected explicitly
    if json_indent is not None and (
        isinstance(json_indent, bool) or not isinstance(json_indent, int)
    ):
        raise InvalidSettingsError(
            "json_indent must be an integer or null", key="json_indent", config_path=config_path
        )

    for key in ("add_generator", "xml_indent"):
        if not isinstance(raw.get(key, False), bool):
            raise InvalidSettingsError(
                f"{key} must be true or false", key=key, config_path=config_path
            )

    return MarshallingSettings(
        target_version=target_version,
        compatibility_mode=compatibility_mode,
        add_generator=raw.get("add_generator", defaults.add_generator),
        xml_indent=raw.get("xml_indent", defaults.xml_indent),
        json_indent=json_indent,
        log_dir=Path(raw.get("log_dir", defaults.log_dir)),
    )
