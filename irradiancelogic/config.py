from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from . import canon
from .exceptions import ConfigError


@dataclass
class ReportConfig:
    # Column layout: "%-{label_width}s %{value_width}s"
    label_width: int = canon.LABEL_WIDTH
    value_width: int = canon.VALUE_WIDTH

    # Number rendering, e.g. "1 234,5 W/m2"
    unit: str = canon.UNIT
    decimal_sep: str = canon.DECIMAL_SEP
    group_sep: str = canon.GROUP_SEP
    decimals: int = canon.DECIMALS

    def __post_init__(self) -> None:
        for name in ("label_width", "value_width", "decimals"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must be >= 0, got {getattr(self, name)}.")
        if self.decimal_sep == self.group_sep:
            raise ConfigError(
                f"decimal_sep and group_sep must differ, both are {self.decimal_sep!r}."
            )


def resolve_source(cli_path: Optional[str] = None) -> Optional[Union[str, Path]]:
    """
    Pick the input source: explicit path, then $IRRADIANCE_INPUT, then None
    (meaning the bundled dataset).
    """
    if cli_path:
        return Path(cli_path)
    env_path = os.environ.get(canon.INPUT_ENV_VAR)
    if env_path:
        return Path(env_path)
    return None
